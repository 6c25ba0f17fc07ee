# SparseBlade: Sparse Blade Geometric Algebra (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Precondition checks for SparseBlade operands.

Checks raise instead of using ``assert`` so that an out-of-range basis
index is reported even under ``python -O``.
"""

import numbers
import operator

MASK_BITS = 64


class SignatureIndexError(IndexError):
    """A basis index or blade mask lies outside the signature."""


class SignatureMismatchError(ValueError):
    """Two operands are bound to different signatures."""


def check_index(signature, index, name: str = "index") -> int:
    """Return *index* as an int if ``0 <= index < signature.max_dimension()``.

    Raises:
        TypeError: *index* is not an integer.
        SignatureIndexError: *index* is out of range.
    """
    if isinstance(index, bool):
        raise TypeError(f"{name}: expected an integer basis index, got {index!r}")
    index = operator.index(index)
    dim = signature.max_dimension()
    if index < 0 or index >= dim:
        raise SignatureIndexError(
            f"{name}: basis index {index} outside signature bounds [0, {dim})"
        )
    return index


def check_mask(signature, mask, name: str = "mask") -> int:
    """Return *mask* as an int if it only sets bits below the signature dimension."""
    if isinstance(mask, bool):
        raise TypeError(f"{name}: expected an integer blade mask, got {mask!r}")
    mask = operator.index(mask)
    dim = signature.max_dimension()
    if mask < 0 or mask >> dim:
        raise SignatureIndexError(
            f"{name}: blade mask {mask} uses basis vectors outside [0, {dim})"
        )
    return mask


def check_real(value, name: str = "value") -> float:
    """Return *value* as a float; reject non-real numbers."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name}: expected a real number, got {value!r}")
    return float(value)


def check_same_signature(a, b, name: str = "operands") -> None:
    """Raise if multivectors *a* and *b* live in different algebras."""
    if a.algebra.signature != b.algebra.signature:
        raise SignatureMismatchError(
            f"{name}: signatures must match, got "
            f"{a.algebra.signature!r} and {b.algebra.signature!r}"
        )
