import math

import torch

from torchaberth.polynomial import derivative_coefficients
from torchaberth.root_finding import aberth_update


class TestAberthUpdate:
    """Tests for the single-root Aberth correction."""

    def test_linear_is_newton(self):
        """For 2x + 4 one step from any point lands on the root -2."""
        coeffs = torch.tensor([2.0, 4.0], dtype=torch.float64)
        zs = torch.tensor([1.0 + 1.0j], dtype=torch.complex128)
        z_new, residual = aberth_update(
            coeffs, derivative_coefficients(coeffs), zs, 0
        )
        assert residual == 8.0
        torch.testing.assert_close(
            z_new, torch.tensor(-2.0 + 0.0j, dtype=torch.complex128)
        )

    def test_residual_is_l1_norm(self):
        """p(z) = z^2 + 1 at z = 1 + i is 1 + 2i."""
        coeffs = torch.tensor([1.0, 0.0, 1.0], dtype=torch.float64)
        zs = torch.tensor([1.0 + 1.0j, -3.0 + 0.5j], dtype=torch.complex128)
        _, residual = aberth_update(
            coeffs, derivative_coefficients(coeffs), zs, 0
        )
        assert abs(residual - 3.0) < 1e-12

    def test_repulsion_term(self):
        coeffs = torch.tensor([1.0, 0.0, 1.0], dtype=torch.float64)
        deriv = derivative_coefficients(coeffs)
        zs = torch.tensor([1.0 + 1.0j, -3.0 + 0.5j], dtype=torch.complex128)
        z_new, _ = aberth_update(coeffs, deriv, zs, 0)

        zi, zj = zs[0], zs[1]
        pp = zi * zi + 1
        expected = zi - pp / (2 * zi - pp / (zi - zj))
        torch.testing.assert_close(z_new, expected)

    def test_does_not_mutate_estimates(self):
        coeffs = torch.tensor([1.0, 0.0, 1.0], dtype=torch.float64)
        zs = torch.tensor([1.0 + 1.0j, -3.0 + 0.5j], dtype=torch.complex128)
        original = zs.clone()
        aberth_update(coeffs, derivative_coefficients(coeffs), zs, 1)
        assert torch.equal(zs, original)

    def test_coincident_estimates_are_skipped(self):
        coeffs = torch.tensor([1.0, 0.0, -1.0], dtype=torch.float64)
        zs = torch.tensor([0.5 + 0.5j, 0.5 + 0.5j], dtype=torch.complex128)
        z_new, residual = aberth_update(
            coeffs, derivative_coefficients(coeffs), zs, 0
        )
        assert torch.equal(z_new, zs[0])
        assert residual > 0

    def test_overflowing_residual_is_infinite(self):
        coeffs = torch.tensor(
            [10.0, 34.0, 75.0, 94.0, 150.0, 94.0, 75.0, 34.0, 10.0],
            dtype=torch.float64,
        )
        zs = torch.tensor(
            [1e60 + 1e60j, 0.5 + 0.5j] + [-0.5 + 0.1j * k for k in range(6)],
            dtype=torch.complex128,
        )
        z_new, residual = aberth_update(
            coeffs, derivative_coefficients(coeffs), zs, 0
        )
        assert residual == math.inf
        assert torch.equal(z_new, zs[0])
