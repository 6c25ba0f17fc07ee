# SparseBlade: Sparse Blade Geometric Algebra (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Blade value type: a coefficient times a product of distinct basis vectors."""

from dataclasses import dataclass

from core.parity import grade


def format_coefficient(value: float) -> str:
    """Formats like a default C stream: ``1``, ``-1``, ``0.5``, ``1e+06``."""
    return f"{value:g}"


@dataclass(frozen=True)
class Blade:
    """Immutable ``(coefficient, mask)`` pair.

    Bit ``i`` of ``mask`` set means basis vector ``e_i`` participates.

    Attributes:
        coefficient (float): Scalar weight.
        mask (int): Basis bitmask.
    """

    coefficient: float
    mask: int

    @property
    def grade(self) -> int:
        """Number of basis vectors in the blade."""
        return grade(self.mask)

    def __str__(self):
        return f"{format_coefficient(self.coefficient)} * e({self.mask})"
