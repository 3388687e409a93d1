"""Steady-state heat diffusion on a square plate with a fixed point source."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

import numpy as np
from PIL import Image

from hpclab.colormap import Colormap, table

N = 500
SOURCE_TEMP = 5000.0
BOUNDARY_TEMP = 1000.0
MIN_DELTA = 0.05
MAX_ITERATIONS = 20000


def _check_source(source_x, source_y, n):
    if not (0 <= source_x < n and 0 <= source_y < n):
        raise ValueError(f"source ({source_x}, {source_y}) lies outside a {n}x{n} grid")


def init_grid(source_x, source_y, n=N):
    """Return an ``n`` x ``n`` grid (indexed ``[y, x]``) with the source and hot borders."""
    _check_source(source_x, source_y, n)
    grid = np.zeros((n, n), dtype=np.float32)
    grid[source_y, source_x] = SOURCE_TEMP
    grid[0, :] = BOUNDARY_TEMP
    grid[-1, :] = BOUNDARY_TEMP
    grid[:, 0] = BOUNDARY_TEMP
    grid[:, -1] = BOUNDARY_TEMP
    return grid


def step(current, source_x, source_y):
    """Return the grid after one Jacobi sweep; borders and source stay fixed."""
    nxt = current.copy()
    nxt[1:-1, 1:-1] = (
        current[:-2, 1:-1] + current[1:-1, :-2] + current[1:-1, 2:] + current[2:, 1:-1]
    ) / np.float32(4.0)
    nxt[source_y, source_x] = current[source_y, source_x]
    return nxt


def max_diff(current, nxt):
    """Largest absolute change over the interior of the grid."""
    inner = np.abs(nxt[1:-1, 1:-1] - current[1:-1, 1:-1])
    return float(inner.max()) if inner.size else 0.0


def render(grid):
    """Colour the grid with magma over [0, max temperature] as an (n, n, 3) uint8 array."""
    data = np.asarray(table(Colormap.MAGMA), dtype=np.float64)
    maxval = max(SOURCE_TEMP, BOUNDARY_TEMP)
    values = np.asarray(grid, dtype=np.float64)
    values = np.where(np.isnan(values), maxval, np.clip(values, 0.0, maxval))
    scaled = values / (maxval / 255.0)
    slot = np.floor(scaled)
    pos = (scaled - slot)[..., None]
    p1 = np.clip(slot.astype(np.int64), 0, 255)
    p2 = np.minimum(p1 + 1, 255)
    colours = pos * data[p2] + (1.0 - pos) * data[p1]
    return np.rint(colours * 255.0).astype(np.uint8)


def write_png(grid, iteration, directory="."):
    """Write the rendered grid to ``heat<iteration>.png`` in ``directory``; return its path."""
    path = Path(directory) / f"heat{iteration}.png"
    Image.fromarray(render(grid), mode="RGB").save(path)
    return path


def simulate(
    source_x,
    source_y,
    n=N,
    max_iterations=MAX_ITERATIONS,
    min_delta=MIN_DELTA,
    report=None,
):
    """Iterate until the change drops to ``min_delta`` or the iteration cap is reached.

    ``report(iteration, diff)`` is called every tenth of ``max_iterations``.
    Returns ``(grid, iterations, last_diff)``.
    """
    current = init_grid(source_x, source_y, n)
    interval = max(max_iterations // 10, 1)
    t_diff = SOURCE_TEMP
    it = 0
    while it < max_iterations and t_diff > min_delta:
        nxt = step(current, source_x, source_y)
        t_diff = max_diff(current, nxt)
        if report is not None and it % interval == 0:
            report(it, t_diff)
        current = nxt
        it += 1
    return current, it, t_diff


def _glibc_rand(seed):
    """Yield the sequence of the C library's rand() after srand(seed)."""
    if seed == 0:
        seed = 1
    state = [seed]
    for i in range(1, 31):
        state.append((16807 * state[i - 1]) % 2147483647)
    for i in range(31, 34):
        state.append(state[i - 31])
    i = 34
    while True:
        state.append((state[i - 31] + state[i - 3]) & 0xFFFFFFFF)
        if i >= 344:
            yield state[i] >> 1
        i += 1
        if len(state) > 400:
            del state[:100]
            i -= 100


def main(argv=None):
    """Run the heat simulation and write the final plate as a PNG."""
    parser = argparse.ArgumentParser(description="2D heat diffusion with a point source.")
    parser.add_argument("--size", type=int, default=N)
    parser.add_argument("--max-iterations", type=int, default=MAX_ITERATIONS)
    parser.add_argument("--min-delta", type=float, default=MIN_DELTA)
    parser.add_argument("--output-dir", default=".")
    args = parser.parse_args(argv)
    if args.size < 3:
        parser.error("size must be at least 3")

    rand = _glibc_rand(0)
    source_x = next(rand) % (args.size - 2) + 1
    source_y = next(rand) % (args.size - 2) + 1
    print(f"Heat source at ({source_x}, {source_y})")

    start = time.perf_counter()
    grid, _, _ = simulate(
        source_x,
        source_y,
        args.size,
        args.max_iterations,
        args.min_delta,
        report=lambda it, d: print(f"{it}: {d:f}"),
    )
    stop = time.perf_counter()
    print(f"Computing time {stop - start:f} s.")

    write_png(grid, args.max_iterations, args.output_dir)
    return 0