import dataclasses

import pytest

from torchaberth.root_finding import AberthOptions


class TestAberthOptions:
    """Tests for Aberth option defaults and validation."""

    def test_defaults(self):
        options = AberthOptions()
        assert options.max_iters == 2000
        assert options.tol == 1e-12
        assert options.tol_ind == 1e-15
        assert options.num_workers is None

    def test_override(self):
        options = AberthOptions(max_iters=50, tol=1e-8)
        assert options.max_iters == 50
        assert options.tol == 1e-8

    def test_frozen(self):
        options = AberthOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.tol = 1.0

    def test_zero_tol_allowed(self):
        assert AberthOptions(tol=0.0).tol == 0.0

    @pytest.mark.parametrize("max_iters", [0, -1, 1.5, True])
    def test_invalid_max_iters(self, max_iters):
        with pytest.raises(ValueError, match="max_iters"):
            AberthOptions(max_iters=max_iters)

    @pytest.mark.parametrize("tol", [-1e-12, float("nan")])
    def test_invalid_tol(self, tol):
        with pytest.raises(ValueError, match="tol must"):
            AberthOptions(tol=tol)

    def test_invalid_tol_ind(self):
        with pytest.raises(ValueError, match="tol_ind"):
            AberthOptions(tol_ind=-1.0)

    def test_invalid_num_workers(self):
        with pytest.raises(ValueError, match="num_workers"):
            AberthOptions(num_workers=0)
