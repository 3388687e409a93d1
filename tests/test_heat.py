import numpy as np
import pytest
from PIL import Image

from hpclab.colormap import Colormap, rgb
from hpclab.heat import (
    BOUNDARY_TEMP,
    SOURCE_TEMP,
    init_grid,
    main,
    max_diff,
    render,
    simulate,
    step,
    write_png,
)


def test_init_grid_layout():
    g = init_grid(3, 4, 10)
    assert g.shape == (10, 10)
    assert g[4, 3] == SOURCE_TEMP
    assert np.all(g[0, :] == BOUNDARY_TEMP)
    assert np.all(g[-1, :] == BOUNDARY_TEMP)
    assert np.all(g[:, 0] == BOUNDARY_TEMP)
    assert np.all(g[:, -1] == BOUNDARY_TEMP)
    interior = g[1:-1, 1:-1].copy()
    interior[3, 2] = 0.0
    assert np.all(interior == 0.0)


def test_init_grid_rejects_outside_source():
    with pytest.raises(ValueError):
        init_grid(10, 2, 10)


def test_step_keeps_source_and_borders():
    g = init_grid(5, 5, 12)
    nxt = step(g, 5, 5)
    assert nxt[5, 5] == SOURCE_TEMP
    assert np.array_equal(nxt[0, :], g[0, :])
    assert np.array_equal(nxt[:, -1], g[:, -1])
    assert nxt[5, 4] == pytest.approx(SOURCE_TEMP / 4)


def test_step_does_not_modify_input():
    g = init_grid(2, 2, 8)
    before = g.copy()
    step(g, 2, 2)
    assert np.array_equal(g, before)


def test_uniform_grid_is_fixed_point():
    g = np.full((7, 7), BOUNDARY_TEMP, dtype=np.float32)
    nxt = step(g, 3, 3)
    assert max_diff(g, nxt) == 0.0
    assert np.array_equal(g, nxt)


def test_max_diff_ignores_borders():
    a = np.zeros((5, 5), dtype=np.float32)
    b = a.copy()
    b[0, 0] = 100.0
    b[2, 2] = 3.0
    assert max_diff(a, b) == pytest.approx(3.0)


def test_render_uses_magma():
    g = init_grid(2, 2, 6)
    img = render(g)
    assert img.shape == (6, 6, 3)
    assert img.dtype == np.uint8
    top = max(SOURCE_TEMP, BOUNDARY_TEMP)
    assert tuple(img[0, 0]) == rgb(Colormap.MAGMA, BOUNDARY_TEMP, 0.0, top)
    assert tuple(img[2, 2]) == rgb(Colormap.MAGMA, SOURCE_TEMP, 0.0, top)
    assert tuple(img[3, 3]) == rgb(Colormap.MAGMA, 0.0, 0.0, top)


def test_write_png_round_trip(tmp_path):
    g = init_grid(2, 3, 8)
    path = write_png(g, 42, tmp_path)
    assert path.name == "heat42.png"
    with Image.open(path) as im:
        assert im.size == (8, 8)
        assert np.array_equal(np.asarray(im.convert("RGB")), render(g))


def test_simulate_converges_on_small_grid():
    calls = []
    grid, iterations, last = simulate(2, 2, 6, 5000, 0.05, report=lambda i, d: calls.append(i))
    assert last <= 0.05
    assert 0 < iterations < 5000
    assert calls[0] == 0
    assert all(i % 500 == 0 for i in calls)
    assert grid[2, 2] == SOURCE_TEMP
    assert np.all(grid[1:-1, 1:-1] >= BOUNDARY_TEMP * 0.99)


def test_simulate_stops_at_cap():
    _, iterations, last = simulate(5, 5, 20, 3, 0.0)
    assert iterations == 3
    assert last > 0.0


def test_main_writes_image(tmp_path, capsys):
    rc = main(["--size", "10", "--max-iterations", "20", "--output-dir", str(tmp_path)])
    out = capsys.readouterr().out
    assert rc == 0
    assert out.startswith("Heat source at (")
    assert "Computing time" in out
    assert (tmp_path / "heat20.png").exists()