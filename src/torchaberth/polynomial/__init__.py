from ._coefficients import as_coefficients
from ._degree_error import DegreeError
from ._derivative_coefficients import derivative_coefficients
from ._horner_evaluate import horner_evaluate
from ._polynomial_error import PolynomialError

__all__ = [
    "DegreeError",
    "PolynomialError",
    "as_coefficients",
    "derivative_coefficients",
    "horner_evaluate",
]
