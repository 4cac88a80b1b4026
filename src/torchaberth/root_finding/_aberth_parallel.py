"""Aberth's method, Jacobi variant evaluated on a thread pool."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._aberth import _prepare
from ._aberth_update import aberth_update
from ._options import AberthOptions

logger = logging.getLogger(__name__)


def aberth_parallel(
    coeffs,
    zs: Tensor,
    options: Optional[AberthOptions] = None,
) -> Tuple[int, bool]:
    """Refine all roots of a polynomial in place with parallel Aberth passes.

    Every pass snapshots the estimates and computes the update of each
    active root from that snapshot alone (Jacobi). The per-root updates
    are independent, so they run as separate tasks on a thread pool and
    are written back to ``zs`` together once all tasks of the pass have
    finished.

    Parameters
    ----------
    coeffs : Tensor or sequence of float
        Real coefficients shape (N,), highest degree first, N >= 2.
    zs : Tensor
        Complex initial estimates shape (N - 1,), e.g. from
        :func:`initial_aberth`. Updated in place.
    options : AberthOptions, optional
        Stopping criteria and ``num_workers``. Defaults to
        ``AberthOptions()``.

    Returns
    -------
    tuple[int, bool]
        - **iterations** -- Number of passes run.
        - **converged** -- True when every root fell below ``tol_ind`` or
          the largest residual of a pass fell below ``tol``.

    Raises
    ------
    DegreeError
        If the polynomial has degree < 1.
    ValueError
        If ``zs`` is not a complex tensor with one entry per root.

    Examples
    --------
    >>> import torch
    >>> from torchaberth.root_finding import aberth_parallel, initial_aberth
    >>> coeffs = [10.0, 34.0, 75.0, 94.0, 150.0, 94.0, 75.0, 34.0, 10.0]
    >>> zs = initial_aberth(coeffs)
    >>> niter, found = aberth_parallel(coeffs, zs)
    >>> found
    True

    Notes
    -----
    Neighbouring estimates are one pass older than in :func:`aberth`, so
    this driver typically needs a few more passes to reach the same
    tolerance. For a given input the result does not depend on
    ``num_workers``: each task reads only the snapshot, and the pass
    tolerance is a plain maximum.

    Residuals, freezing and degenerate steps behave as in :func:`aberth`.
    """
    coeffs, deriv_coeffs, options = _prepare(coeffs, zs, options)
    converged = [False] * zs.shape[0]

    with torch.no_grad(), ThreadPoolExecutor(
        max_workers=options.num_workers
    ) as executor:
        for niter in range(options.max_iters):
            snapshot = zs.clone()
            active = [i for i, done in enumerate(converged) if not done]

            futures = [
                executor.submit(
                    aberth_update, coeffs, deriv_coeffs, snapshot, i
                )
                for i in active
            ]

            # Barrier: result() re-raises task exceptions
            updates = [future.result() for future in futures]

            index = torch.tensor(active, dtype=torch.long, device=zs.device)
            zs[index] = torch.stack([zi for zi, _ in updates]).to(zs.dtype)

            residuals = [residual for _, residual in updates]
            for i, residual in zip(active, residuals):
                converged[i] = residual < options.tol_ind
            tol = max(residuals, default=0.0)

            logger.debug(
                "aberth_parallel pass %d: max residual %.3e, %d of %d frozen",
                niter + 1,
                tol,
                sum(converged),
                len(converged),
            )

            if all(converged) or tol < options.tol:
                logger.info(
                    "aberth_parallel converged after %d passes", niter + 1
                )
                return niter + 1, True

    logger.info(
        "aberth_parallel did not converge in %d passes (max residual %.3e)",
        options.max_iters,
        tol,
    )

    return options.max_iters, False
