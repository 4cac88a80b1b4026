"""Initial root estimates for Aberth's method."""

import torch
from torch import Tensor

from torchaberth.polynomial import as_coefficients, horner_evaluate


def _principal_root(value: Tensor, n: int) -> Tensor:
    """Principal n-th root of a real scalar via polar decomposition.

    The argument of ``value`` is taken on the principal branch (-pi, pi],
    so a negative real maps to angle pi / n and a positive real to 0.

    Parameters
    ----------
    value : Tensor
        Real scalar tensor.
    n : int
        Root order, n >= 1.

    Returns
    -------
    Tensor
        Complex scalar with magnitude |value|^(1/n) and angle arg(value)/n.
    """
    magnitude = value.abs() ** (1.0 / n)
    angle = torch.atan2(torch.zeros_like(value), value) / n

    return torch.polar(magnitude, angle)


def initial_aberth(coeffs) -> Tensor:
    """Compute initial root guesses on a circle around the root centroid.

    The centroid of the roots of a_0 x^d + a_1 x^{d-1} + ... is
    ``c = -a_1 / (d a_0)``. The estimates are spread uniformly on a circle
    about ``c`` whose radius and rotation come from the principal d-th
    root of ``-p(c)``. A quarter-step angular offset keeps every estimate
    off the real axis, which breaks the symmetry of real polynomials.

    Parameters
    ----------
    coeffs : Tensor or sequence of float
        Real coefficients shape (N,), highest degree first, N >= 2.

    Returns
    -------
    Tensor
        Complex estimates shape (N - 1,). complex128 for float64
        coefficients, complex64 for float32.

    Raises
    ------
    DegreeError
        If the polynomial has degree < 1.

    Examples
    --------
    >>> coeffs = [10.0, 34.0, 75.0, 94.0, 150.0, 94.0, 75.0, 34.0, 10.0]
    >>> z0 = initial_aberth(coeffs)
    >>> z0.shape
    torch.Size([8])
    >>> round(z0[0].real.item(), 12), round(z0[0].imag.item(), 12)
    (0.611661024737, 0.692674751493)

    Notes
    -----
    If ``p(c) == 0`` the circle would collapse onto ``c``. The radius then
    falls back to the Cauchy bound ``1 + max |a_i / a_0|`` with no rotation.
    """
    coeffs = as_coefficients(coeffs, min_degree=1)
    degree = coeffs.shape[0] - 1

    center = -coeffs[1] / (coeffs[0] * degree)
    p_center = horner_evaluate(coeffs, center)

    if p_center == 0:
        bound = (coeffs[1:] / coeffs[0]).abs().max() + 1.0
        radius = torch.polar(bound, torch.zeros_like(bound))
    else:
        radius = _principal_root(-p_center, degree)

    angles = (
        2
        * torch.pi
        / degree
        * (
            0.25
            + torch.arange(degree, device=coeffs.device, dtype=coeffs.dtype)
        )
    )

    return center + radius * torch.polar(torch.ones_like(angles), angles)
