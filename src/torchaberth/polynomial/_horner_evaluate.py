import torch
from torch import Tensor

from ._coefficients import as_coefficients, complex_dtype


def horner_evaluate(coeffs, x) -> Tensor:
    """Evaluate a real polynomial using Horner's method.

    Parameters
    ----------
    coeffs : Tensor or sequence of float
        Coefficients shape (N,) in descending order of powers, so that
        ``coeffs[0]`` multiplies x^{N-1} and ``coeffs[-1]`` is the constant
        term.
    x : Tensor, float or complex
        Evaluation point(s), any shape. Evaluated elementwise.

    Returns
    -------
    Tensor
        Values p(x) with the shape of ``x``. Real when ``x`` is real,
        complex when ``x`` is complex (the real coefficients are lifted to
        the complex dtype).

    Raises
    ------
    DegreeError
        If the coefficient sequence is empty or not 1-D.

    Examples
    --------
    >>> coeffs = [10.0, 34.0, 75.0, 94.0, 150.0, 94.0, 75.0, 34.0, 10.0]
    >>> horner_evaluate(coeffs, 2.0)
    tensor(18250., dtype=torch.float64)
    >>> horner_evaluate(coeffs, 1.0 + 2.0j)
    tensor(6080.+9120.j, dtype=torch.complex128)
    """
    coeffs = as_coefficients(coeffs)

    if not isinstance(x, Tensor):
        if isinstance(x, complex):
            x = torch.as_tensor(x, dtype=complex_dtype(coeffs.dtype))
        else:
            x = torch.as_tensor(x, dtype=coeffs.dtype)

    dtype = torch.promote_types(coeffs.dtype, x.dtype)
    coeffs = coeffs.to(device=x.device, dtype=dtype)
    x = x.to(dtype)

    # Start with leading coefficient
    result = coeffs[0].expand_as(x).clone()

    for c in coeffs[1:]:
        result = result * x + c

    return result
