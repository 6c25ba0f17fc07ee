# SparseBlade: Sparse Blade Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

from abc import ABC, abstractmethod

from omegaconf import DictConfig

from core.algebra import BladeAlgebra
from core.signature import DeclaredSignature, EuclideanSignature, MinkowskiSignature, Signature
from log import get_logger

logger = get_logger(__name__)


def build_signature(cfg: DictConfig) -> Signature:
    """Maps a ``signature`` config node to a Signature.

    Supported kinds:
    - 'euclidean': ``dimension`` (default 64)
    - 'minkowski': optional ``values`` (4 declared squares)
    - 'declared': ``values``
    - 'pqr': ``p``, ``q``, ``r``

    Args:
        cfg (DictConfig): The ``signature`` node.

    Returns:
        Signature: The configured metric.
    """
    kind = cfg.get('kind', 'euclidean')
    # 'values' shadows the mapping method, so never read it as an attribute
    values = cfg.get('values', None)

    if kind == 'euclidean':
        return EuclideanSignature(cfg.get('dimension', 64))
    elif kind == 'minkowski':
        return MinkowskiSignature() if values is None else MinkowskiSignature(list(values))
    elif kind == 'declared':
        if values is None:
            raise ValueError("A 'declared' signature needs a 'values' list")
        return DeclaredSignature(list(values))
    elif kind == 'pqr':
        return DeclaredSignature.from_pqr(cfg.get('p', 0), cfg.get('q', 0), cfg.get('r', 0))

    raise ValueError(
        f"Unknown signature kind: {kind}. Available: ['euclidean', 'minkowski', 'declared', 'pqr']"
    )


class BaseTask(ABC):
    """Abstract base class for demonstration tasks.

    Lifecycle: setup_signature → setup_algebra → run.

    Attributes:
        cfg (DictConfig): Hydra configuration.
        signature (Signature): Metric signature.
        algebra (BladeAlgebra): Blade algebra kernel.
    """

    def __init__(self, cfg: DictConfig):
        """Sets up the task.

        Args:
            cfg (DictConfig): Hydra config.
        """
        self.cfg = cfg
        self.signature = self.setup_signature()
        self.algebra = self.setup_algebra()

    def setup_signature(self) -> Signature:
        return build_signature(self.cfg.signature)

    def setup_algebra(self) -> BladeAlgebra:
        return BladeAlgebra(self.signature)

    @abstractmethod
    def run(self, stream=None) -> None:
        """Executes the task, writing its report to *stream* (stdout by default)."""
