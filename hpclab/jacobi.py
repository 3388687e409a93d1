"""Jacobi relaxation of the Laplace equation on a rectangular mesh."""

from __future__ import annotations

import time

import numpy as np

ITER_MAX = 1000
TOL = 1.0e-6
DEFAULT_SIZE = 4096


class Timer:
    """Wall-clock stopwatch reporting milliseconds."""

    def __init__(self):
        self._start = time.perf_counter()

    def start(self):
        """Start (or restart) timing."""
        self._start = time.perf_counter()

    def elapsed_ms(self):
        """Milliseconds since the last start."""
        return (time.perf_counter() - self._start) * 1000.0


def init_mesh(n, m):
    """Return an ``n`` x ``m`` mesh of zeros whose first column is held at 1."""
    if n < 1 or m < 1:
        raise ValueError("mesh dimensions must be positive")
    mesh = np.zeros((n, m), dtype=np.float32)
    mesh[:, 0] = 1.0
    return mesh


def relax(mesh, tol=TOL, iter_max=ITER_MAX, report=None):
    """Relax the interior until the largest change is at most ``tol``.

    ``report(iteration, error)`` is called every 100 iterations.
    Returns ``(mesh, iterations, error)``; the input mesh is left untouched.
    """
    a = np.array(mesh, dtype=np.float32)
    error = 1.0
    iteration = 0
    while error > tol and iteration < iter_max:
        new = np.float32(0.25) * (a[1:-1, 2:] + a[1:-1, :-2] + a[:-2, 1:-1] + a[2:, 1:-1])
        diff = np.abs(new - a[1:-1, 1:-1])
        error = float(diff.max()) if diff.size else 0.0
        a[1:-1, 1:-1] = new
        if report is not None and iteration % 100 == 0:
            report(iteration, error)
        iteration += 1
    return a, iteration, error


def main(argv=None):
    """Run the relaxation on an ``n`` x ``m`` mesh given as two arguments."""
    import sys

    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 2:
        n, m = int(args[0]), int(args[1])
    else:
        n = m = DEFAULT_SIZE

    mesh = init_mesh(n, m)
    print(f"Jacobi relaxation Calculation: {n} x {m} mesh")

    timer = Timer()
    timer.start()
    _, iterations, error = relax(
        mesh, report=lambda it, err: print(f"{it:5d}, {err:0.6f}")
    )
    runtime = timer.elapsed_ms()
    print(f"iter={iterations} error={error:f}")
    print(f" total: {runtime / 1000:f} s")
    return 0