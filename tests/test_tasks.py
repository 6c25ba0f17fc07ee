"""Tests for the basis product demonstration task and its config."""

import io
from pathlib import Path

import pytest
from hydra import compose, initialize
from omegaconf import OmegaConf

from core.signature import DeclaredSignature, EuclideanSignature, MinkowskiSignature
from tasks.base import build_signature
from tasks.products import BasisProductTask, label


def _cfg(signature, count=3, triples=True, pseudoscalar=True):
    return OmegaConf.create({
        'name': 'basis_products',
        'signature': signature,
        'basis': {'count': count, 'triples': triples, 'pseudoscalar': pseudoscalar},
    })


class TestBuildSignature:

    def test_euclidean(self):
        sig = build_signature(OmegaConf.create({'kind': 'euclidean', 'dimension': 3}))
        assert sig == EuclideanSignature(3)

    def test_minkowski_default(self):
        assert build_signature(OmegaConf.create({'kind': 'minkowski'})) == MinkowskiSignature()

    def test_minkowski_values(self):
        sig = build_signature(OmegaConf.create({'kind': 'minkowski', 'values': [-1, 1, 1, 1]}))
        assert sig.squares() == (-1, 1, 1, 1)

    def test_declared(self):
        sig = build_signature(OmegaConf.create({'kind': 'declared', 'values': [1, 0]}))
        assert sig == DeclaredSignature((1, 0))

    def test_pqr(self):
        sig = build_signature(OmegaConf.create({'kind': 'pqr', 'p': 3, 'r': 1}))
        assert sig.squares() == (1, 1, 1, 0)

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown signature kind"):
            build_signature(OmegaConf.create({'kind': 'hyperbolic'}))


class TestBasisProductTask:

    def test_label(self):
        assert label((0, 2)) == "e1 * e3"

    def test_euclidean_tables(self):
        task = BasisProductTask(_cfg({'kind': 'euclidean', 'dimension': 3}))
        out = io.StringIO()
        task.run(out)
        lines = out.getvalue().splitlines()

        assert lines[:4] == ["Basis Vectors:", "e1: 1 * e(1)", "e2: 1 * e(2)", "e3: 1 * e(4)"]
        assert "e1 * e1 = 1 * e(0)" in lines
        assert "e1 * e2 = -1 * e(3)" in lines
        assert "e2 * e3 = -1 * e(6)" in lines
        assert "e1 * e2 * e3 = -1 * e(7)" in lines
        assert "e1 * e1 * e2 = 1 * e(2)" in lines
        assert lines[-2:] == ["Pseudoscalar (e1 * e2 * e3):", "-1 * e(7)"]

    def test_row_counts(self):
        task = BasisProductTask(_cfg({'kind': 'euclidean'}, count=4))
        assert len(list(task.rows(2))) == 10
        assert len(list(task.rows(3))) == 20

    def test_optional_sections(self, capsys):
        task = BasisProductTask(_cfg({'kind': 'euclidean'}, count=2, triples=False, pseudoscalar=False))
        task.run()
        out = capsys.readouterr().out
        assert "Bivectors:" in out
        assert "Trivectors:" not in out
        assert "Pseudoscalar" not in out

    def test_count_above_dimension(self):
        with pytest.raises(ValueError, match="basis.count"):
            BasisProductTask(_cfg({'kind': 'minkowski'}, count=5))


class TestShippedConfig:

    def test_default_demonstration(self, capsys):
        with initialize(version_base=None, config_path="../conf"):
            cfg = compose(config_name="config")
        assert cfg.name == 'basis_products'

        BasisProductTask(cfg).run()
        lines = capsys.readouterr().out.splitlines()
        assert lines[:5] == ["Basis Vectors:", "e1: 1 * e(1)", "e2: 1 * e(2)",
                             "e3: 1 * e(4)", "e4: 1 * e(8)"]
        assert "e1 * e1 = 1 * e(0)" in lines
        assert "e2 * e2 = -1 * e(0)" in lines
        assert "e4 * e4 = -1 * e(0)" in lines
        assert lines[-2:] == ["Pseudoscalar (e1 * e2 * e3 * e4):", "1 * e(15)"]

    def test_euclidean_override(self):
        with initialize(version_base=None, config_path="../conf"):
            cfg = compose(config_name="config",
                          overrides=["signature=euclidean", "basis.count=3"])
        task = BasisProductTask(cfg)
        assert task.signature == EuclideanSignature(64)
        assert task.count == 3

    def test_config_sits_beside_entry_point(self):
        import main
        conf_dir = Path(main.__file__).resolve().parent / "conf"
        assert (conf_dir / "config.yaml").is_file()
        for group in ("minkowski", "euclidean", "pqr"):
            assert (conf_dir / "signature" / f"{group}.yaml").is_file()
