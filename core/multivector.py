# SparseBlade: Sparse Blade Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Multivector Container Class.

Provides a high-level object-oriented wrapper around raw blade maps
to enable operator overloading (e.g., A * B for geometric product).
"""

import numbers
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from core.algebra import BladeAlgebra
from core.blade import Blade
from core.validation import check_index, check_mask, check_real, check_same_signature

BladeLike = Union[Blade, Tuple[float, int]]


class Multivector:
    """Immutable sparse multivector.

    Allows natural mathematical syntax like A * B, A + B, ~A, A ^ B.
    Stored blades have unique masks and non-zero coefficients, and keep
    the order in which their masks were first accumulated.

    Attributes:
        algebra (BladeAlgebra): The underlying algebra kernel.
    """

    def __init__(self, algebra: BladeAlgebra, blades: Optional[Mapping[int, float]] = None):
        """Builds a multivector from a ``{mask: coefficient}`` mapping.

        Masks are checked against the signature and zero coefficients
        are dropped.

        Args:
            algebra (BladeAlgebra): The algebra instance.
            blades (Mapping[int, float], optional): ``{mask: coefficient}``.

        Raises:
            SignatureIndexError: If a mask uses basis vectors outside the signature.
        """
        self.algebra = algebra
        self._blades: Dict[int, float] = algebra.accumulate(
            (check_mask(algebra.signature, mask, f"blades[{mask!r}]"),
             check_real(coefficient, f"blades[{mask!r}]"))
            for mask, coefficient in (blades or {}).items()
        )

    @classmethod
    def _wrap(cls, algebra: BladeAlgebra, blades: Dict[int, float]) -> "Multivector":
        """Wraps a blade map the kernel already accumulated; no checks, no copy."""
        mv = cls.__new__(cls)
        mv.algebra = algebra
        mv._blades = blades
        return mv

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def basis_vector(cls, algebra: BladeAlgebra, index: int) -> "Multivector":
        """Creates ``e_index``, the single blade ``{1, 1 << index}``.

        Raises:
            SignatureIndexError: If *index* is outside the signature.
        """
        index = check_index(algebra.signature, index, "basis_vector(index)")
        return cls._wrap(algebra, {1 << index: 1.0})

    @classmethod
    def from_blades(cls, algebra: BladeAlgebra, blades: Iterable[BladeLike]) -> "Multivector":
        """Accumulates *blades* with the merge-by-mask rule.

        Args:
            algebra (BladeAlgebra): The algebra instance.
            blades: :class:`Blade` values or ``(coefficient, mask)`` pairs.

        Returns:
            Multivector: Wrapper instance.
        """
        terms = []
        for i, blade in enumerate(blades):
            if isinstance(blade, Blade):
                coefficient, mask = blade.coefficient, blade.mask
            else:
                coefficient, mask = blade
            terms.append((
                check_mask(algebra.signature, mask, f"from_blades[{i}].mask"),
                check_real(coefficient, f"from_blades[{i}].coefficient"),
            ))
        return cls._wrap(algebra, algebra.accumulate(terms))

    @classmethod
    def scalar(cls, algebra: BladeAlgebra, value: float) -> "Multivector":
        value = check_real(value, "scalar(value)")
        return cls._wrap(algebra, algebra.accumulate([(0, value)]))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: "Multivector") -> "Multivector":
        check_same_signature(self, other, "add")
        return Multivector._wrap(self.algebra, self.algebra.add(self._blades, other._blades))

    def subtract(self, other: "Multivector") -> "Multivector":
        check_same_signature(self, other, "subtract")
        return Multivector._wrap(self.algebra, self.algebra.subtract(self._blades, other._blades))

    def scale(self, scalar: float) -> "Multivector":
        scalar = check_real(scalar, "scale(scalar)")
        return Multivector._wrap(self.algebra, self.algebra.scale(self._blades, scalar))

    def geometric_product(self, other: "Multivector") -> "Multivector":
        """Geometric product over every pair of stored blades."""
        check_same_signature(self, other, "geometric_product")
        return Multivector._wrap(self.algebra,
                                 self.algebra.geometric_product(self._blades, other._blades))

    def outer_product(self, other: "Multivector") -> "Multivector":
        check_same_signature(self, other, "outer_product")
        return Multivector._wrap(self.algebra,
                                 self.algebra.outer_product(self._blades, other._blades))

    def left_contraction(self, other: "Multivector") -> "Multivector":
        check_same_signature(self, other, "left_contraction")
        return Multivector._wrap(self.algebra,
                                 self.algebra.left_contraction(self._blades, other._blades))

    def reverse(self) -> "Multivector":
        """Reversion (~A)."""
        return Multivector._wrap(self.algebra, self.algebra.reverse(self._blades))

    def involute(self) -> "Multivector":
        return Multivector._wrap(self.algebra, self.algebra.involute(self._blades))

    def conjugate(self) -> "Multivector":
        return Multivector._wrap(self.algebra, self.algebra.conjugate(self._blades))

    @staticmethod
    def commutator(A: "Multivector", B: "Multivector") -> "Multivector":
        """AB - BA."""
        return A.geometric_product(B).subtract(B.geometric_product(A))

    @staticmethod
    def anticommutator(A: "Multivector", B: "Multivector") -> "Multivector":
        """AB + BA."""
        return A.geometric_product(B).add(B.geometric_product(A))

    # ------------------------------------------------------------------
    # Grades and coefficients
    # ------------------------------------------------------------------

    def grade(self, k: int) -> "Multivector":
        """Projects to grade k."""
        return Multivector._wrap(self.algebra, self.algebra.grade_projection(self._blades, k))

    def grades(self) -> List[int]:
        """Sorted grades present in the multivector."""
        return sorted({blade.grade for blade in self})

    def coefficient(self, mask: int) -> float:
        return self._blades.get(mask, 0.0)

    def scalar_part(self) -> float:
        return self.coefficient(0)

    @property
    def blades(self) -> Tuple[Blade, ...]:
        return tuple(self)

    def as_dict(self) -> Dict[int, float]:
        """Copy of the ``{mask: coefficient}`` mapping."""
        return dict(self._blades)

    def isclose(self, other: "Multivector", atol: float = 1e-9) -> bool:
        """Coefficient-wise comparison within *atol*; missing masks count as zero."""
        check_same_signature(self, other, "isclose")
        masks = set(self._blades) | set(other._blades)
        return all(abs(self.coefficient(m) - other.coefficient(m)) <= atol for m in masks)

    def to_string(self) -> str:
        """One ``"<coefficient> * e(<mask>)"`` line per blade, no trailing newline."""
        return "\n".join(str(blade) for blade in self)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Blade]:
        for mask, coefficient in self._blades.items():
            yield Blade(coefficient, mask)

    def __len__(self):
        return len(self._blades)

    def __eq__(self, other):
        if not isinstance(other, Multivector):
            return NotImplemented
        return (self.algebra.signature == other.algebra.signature
                and self._blades == other._blades)

    __hash__ = None

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Multivector(blades={len(self)}, signature={self.algebra.signature!r})"

    def __add__(self, other):
        """Blade-wise addition."""
        if isinstance(other, Multivector):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        """Blade-wise subtraction."""
        if isinstance(other, Multivector):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other):
        """Geometric Product (A * B) or scaling (A * s)."""
        if isinstance(other, Multivector):
            return self.geometric_product(other)
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __xor__(self, other):
        """Outer product (A ^ B)."""
        if isinstance(other, Multivector):
            return self.outer_product(other)
        return NotImplemented

    def __neg__(self):
        return self.scale(-1.0)

    def __invert__(self):
        """Reversion (~A)."""
        return self.reverse()
