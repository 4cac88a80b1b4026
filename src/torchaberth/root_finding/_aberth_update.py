"""Single-root Aberth correction shared by the iteration drivers."""

import logging
import math
from typing import Tuple

import torch
from torch import Tensor

from torchaberth.polynomial import horner_evaluate

logger = logging.getLogger(__name__)


def aberth_update(
    coeffs: Tensor, deriv_coeffs: Tensor, zs: Tensor, i: int
) -> Tuple[Tensor, float]:
    """Compute the Aberth update of root ``i`` against the estimates ``zs``.

    The update is

    .. math::

        z_i \\leftarrow z_i - \\frac{p(z_i)}
            {p'(z_i) - \\sum_{j \\ne i} \\frac{p(z_i)}{z_i - z_j}}

    Parameters
    ----------
    coeffs : Tensor
        Real coefficients shape (N,), highest degree first.
    deriv_coeffs : Tensor
        Derivative coefficients shape (N - 1,) in the same layout.
    zs : Tensor
        Complex estimates shape (N - 1,). Only read.
    i : int
        Index of the root to update.

    Returns
    -------
    tuple[Tensor, float]
        - **z_new** -- Updated estimate (complex scalar tensor). Equal to
          ``zs[i]`` when the step is not finite.
        - **residual** -- |Re p(z_i)| + |Im p(z_i)| at the old estimate.
          ``inf`` when the evaluation overflows or is NaN.
    """
    zi = zs[i]
    pp = horner_evaluate(coeffs, zi)
    residual = (pp.real.abs() + pp.imag.abs()).item()

    # Overflowed or NaN evaluation never counts as converged
    if not math.isfinite(residual):
        residual = math.inf

    others = torch.cat((zs[:i], zs[i + 1 :]))
    pp1 = horner_evaluate(deriv_coeffs, zi) - (pp / (zi - others)).sum()

    step = pp / pp1

    # Zero denominator or coincident estimates
    if not torch.isfinite(step):
        logger.debug(
            "Skipping non-finite step for root %d at %s", i, zi.item()
        )
        return zi.clone(), residual

    return zi - step, residual
