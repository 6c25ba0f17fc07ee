# SparseBlade: Sparse Blade Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Basis product tables.

Builds ``e1 .. en`` for the configured signature and prints every pairwise
and triple product (non-decreasing index order) and the pseudoscalar.
"""

import sys
from functools import reduce
from itertools import combinations_with_replacement

from omegaconf import DictConfig

from log import get_logger
from tasks.base import BaseTask

logger = get_logger(__name__)


def label(indices) -> str:
    """``(0, 2)`` -> ``'e1 * e3'``."""
    return " * ".join(f"e{i + 1}" for i in indices)


class BasisProductTask(BaseTask):
    """Prints worked basis-vector products under one signature.

    Config keys (under ``basis``):
        count (int): Number of basis vectors, at most the signature dimension.
        triples (bool): Print the triple products.
        pseudoscalar (bool): Print the product of all basis vectors.
    """

    def __init__(self, cfg: DictConfig):
        super().__init__(cfg)
        basis_cfg = cfg.get('basis', {})
        self.count = basis_cfg.get('count', self.algebra.n)
        self.show_triples = basis_cfg.get('triples', True)
        self.show_pseudoscalar = basis_cfg.get('pseudoscalar', True)

        if not 1 <= self.count <= self.algebra.n:
            raise ValueError(
                f"basis.count must be in [1, {self.algebra.n}] for {self.signature!r}, "
                f"got {self.count}"
            )
        self.basis = self.algebra.basis_vectors(self.count)

    def product(self, indices):
        return reduce(lambda acc, i: acc * self.basis[i], indices[1:], self.basis[indices[0]])

    def rows(self, order: int):
        """Yields ``(label, product)`` for every non-decreasing index tuple."""
        for indices in combinations_with_replacement(range(self.count), order):
            yield label(indices), self.product(indices)

    def run(self, stream=None) -> None:
        out = stream if stream is not None else sys.stdout
        logger.info("Basis products for %d vectors under %r", self.count, self.signature)

        print("Basis Vectors:", file=out)
        for i, e in enumerate(self.basis):
            print(f"e{i + 1}: {e}", file=out)

        print("\nBivectors:", file=out)
        for name, value in self.rows(2):
            print(f"{name} = {value}", file=out)

        if self.show_triples:
            print("\nTrivectors:", file=out)
            for name, value in self.rows(3):
                print(f"{name} = {value}", file=out)

        if self.show_pseudoscalar:
            indices = tuple(range(self.count))
            print(f"\nPseudoscalar ({label(indices)}):", file=out)
            print(self.product(indices), file=out)
