"""Aberth's method, Gauss-Seidel variant."""

import logging
from typing import Optional, Tuple

import torch
from torch import Tensor

from torchaberth.polynomial import as_coefficients, derivative_coefficients

from ._aberth_update import aberth_update
from ._options import AberthOptions

logger = logging.getLogger(__name__)


def _check_roots(zs: Tensor, degree: int) -> None:
    if not isinstance(zs, Tensor):
        raise ValueError(
            f"Root estimates must be a tensor, got {type(zs).__name__}"
        )
    if not zs.is_complex():
        raise ValueError(
            f"Root estimates must be complex, got dtype {zs.dtype}"
        )
    if zs.shape != (degree,):
        raise ValueError(
            f"Expected {degree} root estimates for a degree {degree} "
            f"polynomial, got shape {tuple(zs.shape)}"
        )


def _prepare(
    coeffs, zs: Tensor, options: Optional[AberthOptions]
) -> Tuple[Tensor, Tensor, AberthOptions]:
    """Validate driver inputs; return coefficients on the roots' device."""
    coeffs = as_coefficients(coeffs, min_degree=1)
    _check_roots(zs, coeffs.shape[0] - 1)

    if options is None:
        options = AberthOptions()

    coeffs = coeffs.to(zs.device)

    return coeffs, derivative_coefficients(coeffs), options


def aberth(
    coeffs,
    zs: Tensor,
    options: Optional[AberthOptions] = None,
) -> Tuple[int, bool]:
    """Refine all roots of a polynomial in place with Aberth's method.

    Each pass visits the roots in index order and overwrites ``zs[i]`` as
    soon as its update is known, so later roots in the same pass already
    see the new values of earlier ones (Gauss-Seidel). This usually needs
    fewer passes than :func:`aberth_parallel`.

    .. code-block:: text

                          p(z_i)
        z_i <- z_i - ------------------------------------
                     p'(z_i) - sum_{j != i} p(z_i) / (z_i - z_j)

    Parameters
    ----------
    coeffs : Tensor or sequence of float
        Real coefficients shape (N,), highest degree first, N >= 2.
    zs : Tensor
        Complex initial estimates shape (N - 1,), e.g. from
        :func:`initial_aberth`. Updated in place.
    options : AberthOptions, optional
        Stopping criteria. Defaults to ``AberthOptions()``.

    Returns
    -------
    tuple[int, bool]
        - **iterations** -- Number of passes run.
        - **converged** -- True when every root fell below ``tol_ind`` or
          the largest residual of a pass fell below ``tol``. On False,
          ``zs`` holds the best estimates after ``max_iters`` passes.

    Raises
    ------
    DegreeError
        If the polynomial has degree < 1.
    ValueError
        If ``zs`` is not a complex tensor with one entry per root.

    Examples
    --------
    >>> import torch
    >>> from torchaberth.root_finding import aberth, initial_aberth
    >>> coeffs = [10.0, 34.0, 75.0, 94.0, 150.0, 94.0, 75.0, 34.0, 10.0]
    >>> zs = initial_aberth(coeffs)
    >>> niter, found = aberth(coeffs, zs)
    >>> found
    True

    Notes
    -----
    **Residuals**: the residual of a root is |Re p(z)| + |Im p(z)|. A root
    whose residual falls below ``tol_ind`` is frozen for the rest of the
    call; it is still updated in the pass where it freezes. The pass
    tolerance is the maximum over the residuals evaluated in that pass, so
    roots frozen in an earlier pass do not contribute.

    **Degenerate steps**: when the correction denominator vanishes (for
    example two coincident estimates) the step is not finite and the root
    is left unchanged for that pass.
    """
    coeffs, deriv_coeffs, options = _prepare(coeffs, zs, options)
    converged = [False] * zs.shape[0]

    with torch.no_grad():
        for niter in range(options.max_iters):
            tol = 0.0

            for i in range(zs.shape[0]):
                if converged[i]:
                    continue

                zi, residual = aberth_update(coeffs, deriv_coeffs, zs, i)
                zs[i] = zi
                converged[i] = residual < options.tol_ind
                tol = max(tol, residual)

            logger.debug(
                "aberth pass %d: max residual %.3e, %d of %d frozen",
                niter + 1,
                tol,
                sum(converged),
                len(converged),
            )

            if all(converged) or tol < options.tol:
                logger.info("aberth converged after %d passes", niter + 1)
                return niter + 1, True

    logger.info(
        "aberth did not converge in %d passes (max residual %.3e)",
        options.max_iters,
        tol,
    )

    return options.max_iters, False
