import time

import numpy as np
import pytest

from hpclab.jacobi import Timer, init_mesh, main, relax


def test_init_mesh_left_column_hot():
    mesh = init_mesh(4, 5)
    assert mesh.shape == (4, 5)
    assert np.all(mesh[:, 0] == 1.0)
    assert np.all(mesh[:, 1:] == 0.0)


def test_init_mesh_rejects_empty():
    with pytest.raises(ValueError):
        init_mesh(0, 3)


def test_single_iteration_error():
    _, iterations, error = relax(init_mesh(5, 5), iter_max=1)
    assert iterations == 1
    assert error == pytest.approx(0.25)


def test_relax_leaves_input_and_boundary():
    mesh = init_mesh(6, 7)
    before = mesh.copy()
    out, _, _ = relax(mesh, iter_max=50)
    assert np.array_equal(mesh, before)
    assert np.array_equal(out[0, :], before[0, :])
    assert np.array_equal(out[-1, :], before[-1, :])
    assert np.array_equal(out[:, 0], before[:, 0])
    assert np.array_equal(out[:, -1], before[:, -1])


def test_relax_values_bounded_and_converge():
    out, iterations, error = relax(init_mesh(8, 8), tol=1e-6, iter_max=5000)
    assert error <= 1e-6
    assert iterations < 5000
    assert np.all(out >= 0.0)
    assert np.all(out <= 1.0)
    # Symmetric top/bottom boundaries give a symmetric solution.
    assert np.allclose(out, out[::-1, :], atol=1e-5)


def test_relax_reports_every_hundred():
    calls = []
    _, iterations, _ = relax(init_mesh(30, 30), tol=0.0, iter_max=250, report=lambda i, e: calls.append(i))
    assert iterations == 250
    assert calls == [0, 100, 200]


def test_tiny_mesh_has_no_interior():
    out, iterations, error = relax(init_mesh(2, 2))
    assert iterations == 1
    assert error == 0.0
    assert np.array_equal(out, init_mesh(2, 2))


def test_timer_measures_elapsed():
    timer = Timer()
    timer.start()
    time.sleep(0.01)
    assert timer.elapsed_ms() >= 5.0


def test_main_prints_summary(capsys):
    assert main(["6", "5"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "Jacobi relaxation Calculation: 6 x 5 mesh"
    assert "iter=" in out
    assert " total: " in out


def test_main_bad_argument():
    with pytest.raises(ValueError):
        main(["six", "5"])