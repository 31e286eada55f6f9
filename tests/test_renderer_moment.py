# path: tests/test_renderer_moment.py
import os
import tempfile

from matplotlib.figure import Figure

from clapeyron_beam.domain.loads import DistributedLoad, MomentLoad, PointLoad
from clapeyron_beam.engine.alphas import calculate_alphas
from clapeyron_beam.engine.moments import generate_moment_points
from clapeyron_beam.view.renderer_moment import render_loads, render_moment, save_figures


def test_save_figures_writes_both_pngs():
    loads = [
        PointLoad(id="p", position=3.0, magnitude=-10.0),
        DistributedLoad(id="q", start=1.0, end=5.0, w1=4.0, w2=4.0),
        MomentLoad(id="m", position=4.5, magnitude=6.0),
    ]
    points = generate_moment_points(loads, 6.0, 60)
    results = calculate_alphas(loads, 6.0, 200)

    with tempfile.TemporaryDirectory() as td:
        out_dir = os.path.join(td, "figs")
        paths = save_figures(out_dir, loads, 6.0, points, results, dpi=50)

        assert set(paths) == {"cargas", "m"}
        for p in paths.values():
            assert os.path.exists(p)
            assert os.path.getsize(p) > 0


def test_render_moment_title_shows_alphas():
    loads = [PointLoad(id="p", position=5.0, magnitude=100.0)]
    points = generate_moment_points(loads, 10.0, 50)
    results = calculate_alphas(loads, 10.0, 200)

    ax = Figure().add_subplot(111)
    render_moment(ax, points, results)
    assert "α1" in ax.get_title()
    assert ax.get_xlim() == (0.0, 10.0)


def test_render_moment_without_points():
    ax = Figure().add_subplot(111)
    render_moment(ax, [])
    assert ax.get_title() == "Diagrama de Momento Flector M(x)"


def test_render_loads_without_loads():
    ax = Figure().add_subplot(111)
    render_loads(ax, [], 8.0)
    assert "L = 8 m" in ax.get_title()
