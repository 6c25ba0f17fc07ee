"""Demonstration tasks for SparseBlade.

Each task inherits from :class:`BaseTask` and implements the lifecycle:
setup_signature, setup_algebra, run.
"""

from .base import BaseTask, build_signature
from .products import BasisProductTask

__all__ = [
    "BaseTask",
    "build_signature",
    "BasisProductTask",
]
