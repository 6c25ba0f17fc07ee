# SparseBlade: Sparse Blade Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Metric signatures.

A signature maps each basis index to the square of that basis vector.
Supports positive (+1), negative (-1) and degenerate (0) basis vectors,
as well as arbitrary declared real squares.
"""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

from core.validation import MASK_BITS, check_index, check_real


class Signature(ABC):
    """Metric policy: ``square_of(i)`` and ``max_dimension()``.

    Signatures are stateless. Two signatures are equal when they declare
    the same squares, whatever their concrete class.
    """

    @abstractmethod
    def max_dimension(self) -> int:
        """Number of basis vectors the signature supports."""

    @abstractmethod
    def _square(self, index: int):
        """Unchecked lookup of ``e_index ** 2``."""

    def square_of(self, index: int):
        """Returns the square of basis vector *index*.

        Raises:
            SignatureIndexError: If ``index >= max_dimension()``.
        """
        index = check_index(self, index, "square_of(index)")
        return self._square(index)

    def squares(self) -> Tuple:
        """All squares in index order."""
        return tuple(self._square(i) for i in range(self.max_dimension()))

    def __eq__(self, other):
        if not isinstance(other, Signature):
            return NotImplemented
        return self.squares() == other.squares()

    def __hash__(self):
        return hash(self.squares())


class EuclideanSignature(Signature):
    """Every basis vector squares to +1.

    Attributes:
        dimension (int): Number of basis vectors (1..64).
    """

    def __init__(self, dimension: int = MASK_BITS):
        if isinstance(dimension, bool) or not isinstance(dimension, int):
            raise TypeError(f"dimension must be an int, got {dimension!r}")
        if not 1 <= dimension <= MASK_BITS:
            raise ValueError(f"dimension must be in [1, {MASK_BITS}], got {dimension}")
        self.dimension = dimension

    def max_dimension(self) -> int:
        return self.dimension

    def _square(self, index: int):
        return 1

    def squares(self) -> Tuple:
        return (1,) * self.dimension

    def __repr__(self):
        return f"EuclideanSignature(dimension={self.dimension})"


class DeclaredSignature(Signature):
    """Signature with a caller-declared square for every basis index.

    The square is used as a metric factor: ``-1`` flips the sign of a
    product term, ``0`` annihilates it and any other real scales it.

    Attributes:
        values (tuple): Declared squares, one per basis vector.
    """

    def __init__(self, values: Sequence):
        values = tuple(values)
        if not 1 <= len(values) <= MASK_BITS:
            raise ValueError(
                f"a declared signature needs 1 to {MASK_BITS} values, got {len(values)}"
            )
        for i, value in enumerate(values):
            try:
                check_real(value, f"values[{i}]")
            except TypeError as exc:
                raise ValueError(str(exc)) from exc
        self.values = values

    @classmethod
    def from_pqr(cls, p: int, q: int = 0, r: int = 0) -> "DeclaredSignature":
        """Builds ``Cl(p, q, r)``: p positive, then q negative, then r null vectors."""
        if min(p, q, r) < 0:
            raise ValueError(f"p, q, r must be non-negative, got ({p}, {q}, {r})")
        return cls((1,) * p + (-1,) * q + (0,) * r)

    def max_dimension(self) -> int:
        return len(self.values)

    def _square(self, index: int):
        return self.values[index]

    def squares(self) -> Tuple:
        return self.values

    def __repr__(self):
        return f"{type(self).__name__}(values={self.values})"


class MinkowskiSignature(DeclaredSignature):
    """Fixed 4-index spacetime signature, ``(+, -, -, -)`` by default."""

    DIMENSION = 4

    def __init__(self, values: Sequence = (1, -1, -1, -1)):
        values = tuple(values)
        if len(values) != self.DIMENSION:
            raise ValueError(
                f"MinkowskiSignature declares exactly {self.DIMENSION} values, got {len(values)}"
            )
        super().__init__(values)
