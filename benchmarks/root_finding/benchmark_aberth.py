"""Benchmark Aberth root finding.

Compares the Gauss-Seidel driver (one root at a time) with the Jacobi
driver (one thread-pool task per root) across polynomial degrees.
"""

import time

import torch

from torchaberth.root_finding import (
    AberthOptions,
    aberth,
    aberth_parallel,
    initial_aberth,
)


def benchmark_aberth(
    degree: int,
    n_iterations: int = 5,
    method: str = "sequential",
    num_workers: int | None = None,
) -> tuple[float, int]:
    """Benchmark root finding at given degree.

    Parameters
    ----------
    degree : int
        Degree of polynomial (number of roots to find).
    n_iterations : int
        Number of iterations for timing.
    method : str
        'sequential' or 'parallel'.
    num_workers : int, optional
        Worker threads for the parallel driver.

    Returns
    -------
    tuple[float, int]
        Average time per solve in milliseconds, and passes used.
    """
    torch.manual_seed(degree)
    coeffs = torch.randn(degree + 1, dtype=torch.float64)
    coeffs[0] = 1.0  # Monic (leading coeff = 1)

    driver = aberth if method == "sequential" else aberth_parallel
    options = AberthOptions(max_iters=500, num_workers=num_workers)

    # Warmup
    zs = initial_aberth(coeffs)
    niter, _ = driver(coeffs, zs, options)

    start = time.perf_counter()
    for _ in range(n_iterations):
        zs = initial_aberth(coeffs)
        driver(coeffs, zs, options)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000, niter  # ms


def main():
    """Run Aberth benchmarks across degrees."""
    degrees = [8, 16, 32, 64, 128]

    print("Aberth Root Finding Benchmark")
    print("=" * 70)
    print(
        f"{'Degree':>8} {'Sequential (ms)':>16} {'passes':>8}"
        f" {'Parallel (ms)':>16} {'passes':>8}"
    )
    print("-" * 70)

    for degree in degrees:
        ms_seq, n_seq = benchmark_aberth(degree, method="sequential")
        ms_par, n_par = benchmark_aberth(degree, method="parallel")

        print(
            f"{degree:>8} {ms_seq:>16.4f} {n_seq:>8}"
            f" {ms_par:>16.4f} {n_par:>8}"
        )

    print()
    print("Notes:")
    print("- Sequential: Gauss-Seidel, updated roots are reused within a pass")
    print("- Parallel: Jacobi, one task per root against a pass snapshot")
    print("- Parallel usually needs more passes for the same tolerance")


if __name__ == "__main__":
    main()
