# SparseBlade: Sparse Blade Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Metric-induced scalar functions on multivectors."""

import math

from core.multivector import Multivector


def scalar_product(A: Multivector, B: Multivector) -> float:
    """Compute the scalar product via projection onto grade 0.

    Computes <A B>_0.

    Args:
        A (Multivector): First multivector.
        B (Multivector): Second multivector.

    Returns:
        float: Scalar part of AB.
    """
    return (A * B).scalar_part()


def norm_squared(A: Multivector) -> float:
    """Computes <A ~A>_0. Can be negative or zero in mixed signatures."""
    return scalar_product(A, ~A)


def induced_norm(A: Multivector) -> float:
    """Compute the induced norm respecting the metric signature.

    Computes ||A|| = sqrt(|<A ~A>_0|).

    Args:
        A (Multivector): The multivector.

    Returns:
        float: Norm.
    """
    # In mixed signatures, the squared norm can be negative.
    return math.sqrt(abs(norm_squared(A)))


def geometric_distance(A: Multivector, B: Multivector) -> float:
    """dist(A, B) = ||A - B||."""
    return induced_norm(A - B)
