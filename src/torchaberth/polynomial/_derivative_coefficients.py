import torch
from torch import Tensor

from ._coefficients import as_coefficients


def derivative_coefficients(coeffs) -> Tensor:
    """Coefficients of p'(x) in the same descending layout as p.

    Parameters
    ----------
    coeffs : Tensor or sequence of float
        Coefficients shape (N,), highest degree first. Degree must be >= 1.

    Returns
    -------
    Tensor
        Coefficients shape (N - 1,) with ``out[i] = coeffs[i] * (N - 1 - i)``,
        ready for :func:`horner_evaluate`.

    Raises
    ------
    DegreeError
        If the polynomial is constant.

    Examples
    --------
    >>> derivative_coefficients([3.0, 2.0, 1.0])  # 3x^2 + 2x + 1
    tensor([6., 2.], dtype=torch.float64)
    """
    coeffs = as_coefficients(coeffs, min_degree=1)
    degree = coeffs.shape[0] - 1

    # d/dx (a_0 x^d + a_1 x^{d-1} + ... + a_d)
    # = d a_0 x^{d-1} + (d-1) a_1 x^{d-2} + ... + a_{d-1}
    powers = torch.arange(
        degree, 0, -1, device=coeffs.device, dtype=coeffs.dtype
    )

    return coeffs[:-1] * powers
