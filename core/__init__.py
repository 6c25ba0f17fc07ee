# SparseBlade: Sparse Blade Geometric Algebra (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Core mathematical kernel for sparse blade Geometric Algebra.

Provides metric signatures, the blade value type, the sign/parity engine,
the blade algebra kernel, the multivector wrapper and metric functions.
"""

from .signature import Signature, EuclideanSignature, DeclaredSignature, MinkowskiSignature
from .blade import Blade
from .algebra import BladeAlgebra
from .multivector import Multivector
from .validation import SignatureIndexError, SignatureMismatchError

from .metric import (
    scalar_product,
    norm_squared,
    induced_norm,
    geometric_distance,
)

__all__ = [
    # signature
    "Signature",
    "EuclideanSignature",
    "DeclaredSignature",
    "MinkowskiSignature",
    # algebra
    "Blade",
    "BladeAlgebra",
    "Multivector",
    # validation
    "SignatureIndexError",
    "SignatureMismatchError",
    # metric
    "scalar_product",
    "norm_squared",
    "induced_norm",
    "geometric_distance",
]
