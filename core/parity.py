# SparseBlade: Sparse Blade Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Sign and parity engine.

Pure integer functions on blade masks. The geometric product of two basis
blades ``e_A e_B`` is ``sign * factor * e_(A xor B)`` where ``sign`` comes
from reordering the basis vectors and ``factor`` is the product of the
squares of the vectors shared by ``A`` and ``B``.
"""

from typing import Iterator


def grade(mask: int) -> int:
    """Population count of *mask*."""
    return bin(mask).count('1')


def lowest_bit(mask: int) -> int:
    """Index of the least significant set bit. *mask* must be non-zero."""
    return (mask & -mask).bit_length() - 1


def iter_bits(mask: int) -> Iterator[int]:
    """Yields set bit indices from least to most significant."""
    while mask:
        yield lowest_bit(mask)
        mask &= mask - 1


def reordering_parity(a: int, b: int) -> int:
    """Transposition parity of interleaving blade *b* past blade *a*.

    For every set bit of *b*, counts the bits of *a* strictly below it and
    accumulates the parity of that count.

    Returns:
        int: 0 for an even number of transpositions, 1 for odd.
    """
    parity = 0
    for i in iter_bits(b):
        parity ^= grade(a & ((1 << i) - 1)) & 1
    return parity


def reordering_sign(a: int, b: int) -> int:
    """``+1`` for even reordering parity, ``-1`` for odd."""
    return 1 - 2 * reordering_parity(a, b)


def metric_factor(signature, common: int):
    """Product of the squares of the basis vectors set in *common*.

    Args:
        signature: The metric signature.
        common (int): ``a & b``, the vectors contracted by the product.

    Returns:
        The metric factor; ``0`` when a null vector is contracted.
    """
    factor = 1
    for i in iter_bits(common):
        factor *= signature.square_of(i)
        if factor == 0:
            break
    return factor


def reversion_sign(mask: int) -> int:
    """``(-1)^(k(k-1)/2)`` for a blade of grade k."""
    k = grade(mask)
    return 1 - 2 * ((k * (k - 1) // 2) & 1)


def involution_sign(mask: int) -> int:
    """``(-1)^k`` for a blade of grade k."""
    return 1 - 2 * (grade(mask) & 1)


def conjugation_sign(mask: int) -> int:
    """Clifford conjugation: reversion combined with grade involution."""
    return reversion_sign(mask) * involution_sign(mask)
