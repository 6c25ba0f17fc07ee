"""SparseBlade — sparse blade Geometric Algebra over configurable metric signatures."""

__version__ = "0.1.0"

from core.algebra import BladeAlgebra
from core.multivector import Multivector
from core.signature import EuclideanSignature, MinkowskiSignature

__all__ = [
    "__version__",
    "BladeAlgebra",
    "Multivector",
    "EuclideanSignature",
    "MinkowskiSignature",
]
