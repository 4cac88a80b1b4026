"""Options shared by the Aberth iteration drivers."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AberthOptions:
    """Stopping criteria and execution settings for Aberth's method.

    Attributes
    ----------
    max_iters : int
        Maximum number of passes over the root set. Default 2000.
    tol : float
        A pass stops the iteration when the largest residual evaluated in
        it is below ``tol``. Residuals are L1 norms |Re p(z)| + |Im p(z)|.
        Default 1e-12.
    tol_ind : float
        Per-root tolerance. A root whose residual falls below ``tol_ind`` is
        frozen and no longer evaluated. Default 1e-15.
    num_workers : int, optional
        Worker threads used by :func:`aberth_parallel`. None (default) lets
        :class:`concurrent.futures.ThreadPoolExecutor` choose.
    """

    max_iters: int = 2000
    tol: float = 1e-12
    tol_ind: float = 1e-15
    num_workers: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.max_iters, bool) or not isinstance(
            self.max_iters, int
        ):
            raise ValueError(
                f"max_iters must be an integer, got {self.max_iters!r}"
            )
        if self.max_iters < 1:
            raise ValueError(
                f"max_iters must be positive, got {self.max_iters}"
            )
        if not self.tol >= 0:
            raise ValueError(f"tol must be non-negative, got {self.tol}")
        if not self.tol_ind >= 0:
            raise ValueError(
                f"tol_ind must be non-negative, got {self.tol_ind}"
            )
        if self.num_workers is not None and self.num_workers < 1:
            raise ValueError(
                f"num_workers must be positive, got {self.num_workers}"
            )
