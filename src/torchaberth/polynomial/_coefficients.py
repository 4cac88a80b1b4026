import torch
from torch import Tensor

from ._degree_error import DegreeError


def as_coefficients(coeffs, *, min_degree: int = 0) -> Tensor:
    """Convert a coefficient sequence to a 1-D real tensor.

    Parameters
    ----------
    coeffs : Tensor or sequence of float
        Coefficients in descending order of powers, highest degree first.
    min_degree : int, default=0
        Smallest degree accepted. A polynomial with N coefficients has
        degree N - 1.

    Returns
    -------
    Tensor
        Coefficients shape (N,). Floating point tensors keep their dtype,
        sequences and integer tensors become float64.

    Raises
    ------
    ValueError
        If complex coefficients are given.
    DegreeError
        If the coefficients are not 1-D or the degree is below
        ``min_degree``.
    """
    if not isinstance(coeffs, Tensor):
        try:
            coeffs = torch.as_tensor(coeffs, dtype=torch.float64)
        except TypeError as error:
            raise ValueError("Coefficients must be real") from error
    elif coeffs.is_complex():
        raise ValueError("Coefficients must be real")
    elif not coeffs.is_floating_point():
        coeffs = coeffs.to(torch.float64)

    if coeffs.ndim != 1:
        raise DegreeError(
            f"Coefficients must be 1-D, got shape {tuple(coeffs.shape)}"
        )

    n = coeffs.shape[0]

    if n == 0:
        raise DegreeError("Coefficient sequence must not be empty")

    if n - 1 < min_degree:
        raise DegreeError(
            f"Polynomial must have degree >= {min_degree}, "
            f"got {n} coefficients"
        )

    return coeffs


def complex_dtype(dtype: torch.dtype) -> torch.dtype:
    """Complex dtype with the precision of a real (or complex) dtype."""
    if dtype in (torch.float64, torch.complex128):
        return torch.complex128
    return torch.complex64
