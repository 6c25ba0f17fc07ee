# SparseBlade: Sparse Blade Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

from functools import lru_cache
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from core.parity import (
    conjugation_sign,
    grade,
    involution_sign,
    metric_factor,
    reordering_sign,
    reversion_sign,
)
from core.signature import Signature
from log import get_logger

logger = get_logger(__name__)

PRODUCT_CACHE_SIZE = 4096

BladeMap = Dict[int, float]


class BladeAlgebra:
    """Sparse blade kernel bound to a metric signature.

    Works on raw blade maps (``{mask: coefficient}``, insertion ordered).
    Every operation accumulates into a fresh map with :meth:`insert`, so
    operands are never mutated and no stored coefficient is ever zero.

    Handles geometric, outer and left-contraction products, per-blade sign
    maps (reversion, involution, conjugation) and grade projection.

    Attributes:
        signature (Signature): The metric.
        n (int): Number of basis vectors.
    """

    def __init__(self, signature: Signature, cache_size: int = PRODUCT_CACHE_SIZE):
        """Binds the kernel to *signature*.

        Args:
            signature (Signature): Metric policy for basis squares.
            cache_size (int, optional): Most recent blade-pair products kept.
                Defaults to PRODUCT_CACHE_SIZE.
        """
        if not isinstance(signature, Signature):
            raise TypeError(f"expected a Signature, got {type(signature).__name__}")
        self.signature = signature
        self.n = signature.max_dimension()

        # Bounded LRU over (a_mask, b_mask); 64-bit masks give too many pairs to keep
        self.blade_product = lru_cache(maxsize=cache_size)(self._blade_product)
        logger.debug("BladeAlgebra over %r (%d basis vectors)", signature, self.n)

    def __repr__(self):
        return f"BladeAlgebra({self.signature!r})"

    def __eq__(self, other):
        if not isinstance(other, BladeAlgebra):
            return NotImplemented
        return self.signature == other.signature

    def __hash__(self):
        return hash(self.signature)

    # ------------------------------------------------------------------
    # Accumulation
    # ------------------------------------------------------------------

    @staticmethod
    def insert(blades: BladeMap, mask: int, coefficient: float) -> None:
        """Merges one term into *blades* in place.

        An exact zero is never stored. A merge that cancels an entry to
        exactly zero removes it.
        """
        if coefficient == 0:
            return
        total = blades.get(mask, 0.0) + coefficient
        if total == 0:
            del blades[mask]
        else:
            blades[mask] = total

    def accumulate(self, terms: Iterable[Tuple[int, float]]) -> BladeMap:
        """Builds a blade map from ``(mask, coefficient)`` terms."""
        result: BladeMap = {}
        for mask, coefficient in terms:
            self.insert(result, mask, coefficient)
        return result

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def _blade_product(self, a: int, b: int) -> Tuple[int, float]:
        """Product of two unit basis blades.

        Returns:
            Tuple[int, float]: ``(a ^ b, sign * metric_factor)``.
        """
        return a ^ b, reordering_sign(a, b) * metric_factor(self.signature, a & b)

    def geometric_product(self, A: BladeMap, B: BladeMap) -> BladeMap:
        """Computes the geometric product AB over all blade pairs.

        Args:
            A (BladeMap): Left operand.
            B (BladeMap): Right operand.

        Returns:
            BladeMap: The product AB.
        """
        result: BladeMap = {}
        for a_mask, a_coeff in A.items():
            for b_mask, b_coeff in B.items():
                mask, factor = self.blade_product(a_mask, b_mask)
                self.insert(result, mask, a_coeff * b_coeff * factor)
        return result

    def outer_product(self, A: BladeMap, B: BladeMap) -> BladeMap:
        """Computes the wedge product A ^ B.

        Keeps only blade pairs with no basis vector in common, so the
        metric never enters.
        """
        result: BladeMap = {}
        for a_mask, a_coeff in A.items():
            for b_mask, b_coeff in B.items():
                if a_mask & b_mask:
                    continue
                self.insert(result, a_mask | b_mask,
                            a_coeff * b_coeff * reordering_sign(a_mask, b_mask))
        return result

    def left_contraction(self, A: BladeMap, B: BladeMap) -> BladeMap:
        """Computes the left contraction A _| B.

        A blade pair contributes only when every vector of ``a`` is also in
        ``b``; the result has grade ``grade(b) - grade(a)``.
        """
        result: BladeMap = {}
        for a_mask, a_coeff in A.items():
            for b_mask, b_coeff in B.items():
                if a_mask & ~b_mask:
                    continue
                mask, factor = self.blade_product(a_mask, b_mask)
                self.insert(result, mask, a_coeff * b_coeff * factor)
        return result

    # ------------------------------------------------------------------
    # Linear maps
    # ------------------------------------------------------------------

    def add(self, A: BladeMap, B: BladeMap) -> BladeMap:
        return self.accumulate(list(A.items()) + list(B.items()))

    def subtract(self, A: BladeMap, B: BladeMap) -> BladeMap:
        return self.accumulate(
            list(A.items()) + [(mask, -coeff) for mask, coeff in B.items()]
        )

    def scale(self, A: BladeMap, scalar: float) -> BladeMap:
        return self.accumulate((mask, scalar * coeff) for mask, coeff in A.items())

    def _apply_signs(self, A: BladeMap, sign: Callable[[int], int]) -> BladeMap:
        return self.accumulate((mask, coeff * sign(mask)) for mask, coeff in A.items())

    def reverse(self, A: BladeMap) -> BladeMap:
        """Computes the reversion: grade k picks up ``(-1)^(k(k-1)/2)``."""
        return self._apply_signs(A, reversion_sign)

    def involute(self, A: BladeMap) -> BladeMap:
        """Grade involution: odd grades negated."""
        return self._apply_signs(A, involution_sign)

    def conjugate(self, A: BladeMap) -> BladeMap:
        """Clifford conjugate (bar involution)."""
        return self._apply_signs(A, conjugation_sign)

    def grade_projection(self, A: BladeMap, k: int) -> BladeMap:
        """Isolates the grade-k blades of A."""
        return {mask: coeff for mask, coeff in A.items() if grade(mask) == k}

    # ------------------------------------------------------------------
    # Multivector constructors
    # ------------------------------------------------------------------

    def basis_vector(self, index: int):
        """Returns ``e_index`` as a Multivector."""
        from core.multivector import Multivector
        return Multivector.basis_vector(self, index)

    def basis_vectors(self, count: Optional[int] = None) -> List:
        """Returns the first *count* basis vectors (all of them by default)."""
        if count is None:
            count = self.n
        if not 0 <= count <= self.n:
            raise ValueError(f"count must be in [0, {self.n}], got {count}")
        return [self.basis_vector(i) for i in range(count)]

    def pseudoscalar(self):
        """Product of all basis vectors, in index order."""
        from core.multivector import Multivector
        result = Multivector.scalar(self, 1.0)
        for e in self.basis_vectors():
            result = result * e
        return result

    def scalar(self, value: float):
        from core.multivector import Multivector
        return Multivector.scalar(self, value)

    def zero(self):
        from core.multivector import Multivector
        return Multivector(self)
