# tests/test_landscape.py

import numpy as np
import pytest

from sfdrsine import SearchGrid, search_min_sine
from sfdrsine.diagnostics.landscape import row_minima

def test_row_minima_agree_with_search():
    grid = SearchGrid(gain_min=6000.0, gain_span=512.0, gain_steps=40, phase_steps=6)
    gains, best_metric, best_phase = row_minima(grid, chunk_rows=9)
    assert gains.shape == best_metric.shape == best_phase.shape == (grid.n_gains,)
    assert np.all(best_phase >= 0.0)
    assert np.all(best_phase < grid.phase_span)

    best = search_min_sine(grid, workers=1)
    k = int(np.argmin(best_metric))
    assert best_metric[k] == pytest.approx(best.metric, abs=1e-12)
    assert gains[k] == best.gain

def test_main_rejects_bad_grid(capsys):
    from sfdrsine.diagnostics.landscape import main

    assert main(["--gain-steps", "0"]) == 1
    assert capsys.readouterr().err.startswith("Error: ")
    assert main(["--phase-span", "nan"]) == 1

def test_main_writes_png(tmp_path, capsys):
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    from sfdrsine.diagnostics.landscape import main

    out = tmp_path / "landscape.png"
    rv = main(["--gain-min", "8000", "--gain-span", "128", "--gain-steps", "16",
               "--phase-steps", "4", "--out-png", str(out)])
    assert rv == 0
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
    printed = capsys.readouterr().out
    assert "Best:" in printed
    assert f"Saved {out}" in printed
