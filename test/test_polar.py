"""
Tests for the steady-state polar sweep, result writers and polar plot.
"""

import csv
import json

import matplotlib

matplotlib.use("Agg")

import pytest

from sailresponse.core.exceptions import ConfigError
from sailresponse.io.results import CsvRowWriter, JsonlRowWriter, MuxRowWriter, POLAR_COLUMNS, SummaryJsonWriter
from sailresponse.sim.polar import PolarSweep, SweepConfig, validate_sweep_config
from sailresponse.viz.polar import PolarPlotOptions, plot_polar


class TestSweepConfig:
    """Test sweep configuration checks."""

    def test_defaults(self):
        """Default angles cover 0..180 deg in 5 deg steps."""
        cfg = SweepConfig(wind_speed=5.0, sail_area=20.0)
        validate_sweep_config(cfg)
        assert len(cfg.angles) == 37
        assert cfg.angles[0] == 0.0 and cfg.angles[-1] == 180.0

    @pytest.mark.parametrize("kwargs", [
        {"wind_speed": -1.0},
        {"wind_speed": float("nan")},
        {"sail_area": -2.0},
        {"max_ticks": 0},
        {"tolerance": 0.0},
        {"angles": ()},
    ])
    def test_invalid(self, kwargs):
        """Out-of-range settings raise ConfigError."""
        base = {"wind_speed": 5.0, "sail_area": 20.0}
        base.update(kwargs)
        with pytest.raises(ConfigError):
            validate_sweep_config(SweepConfig(**base))


class TestPolarSweep:
    """Test settling to steady state."""

    def setup_method(self):
        self.sweep = PolarSweep()

    def test_head_to_wind_settles_astern(self):
        """Head to wind the boat is blown backwards and settles quickly."""
        res = self.sweep.run(SweepConfig(wind_speed=5.0, sail_area=20.0, angles=[0.0]))
        p = res.points[0]
        assert p.converged
        assert 1 <= p.ticks < 100
        assert p.boat_speed_ahead < 0.0
        assert p.boat_speed_abeam == pytest.approx(0.0, abs=1e-12)
        assert p.boat_speed == pytest.approx(-p.boat_speed_ahead)
        assert p.vmg == pytest.approx(p.boat_speed_ahead)
        assert p.heeling_angle == 0.0

    def test_steady_state_is_a_fixed_point(self):
        """At steady state a further update leaves the velocity unchanged."""
        cfg = SweepConfig(wind_speed=5.0, sail_area=20.0, angles=[0.0], tolerance=1e-10)
        p = self.sweep.run(cfg).points[0]
        again = self.sweep.settle(cfg, 0.0)
        assert again.boat_speed_ahead == pytest.approx(p.boat_speed_ahead, abs=1e-9)

    def test_tick_limit(self):
        """A one-tick limit cannot reach steady state from rest."""
        res = self.sweep.run(SweepConfig(wind_speed=5.0, sail_area=20.0, angles=[0.0], max_ticks=1))
        p = res.points[0]
        assert p.ticks == 1
        assert not p.converged

    def test_calm(self):
        """No wind: the boat stays at rest and converges at once."""
        res = self.sweep.run(SweepConfig(wind_speed=0.0, sail_area=20.0, angles=[0.0, 45.0, 90.0]))
        for p in res.points:
            assert p.converged
            assert p.ticks == 1
            assert p.boat_speed == pytest.approx(0.0, abs=1e-12)

    def test_unmodeled_boat(self):
        """Sweeping an unmodeled type is a configuration error."""
        with pytest.raises(ConfigError):
            self.sweep.run(SweepConfig(wind_speed=5.0, sail_area=20.0, angles=[0.0], boat_type=4))

    def test_arrays_and_summary(self):
        """Result columns line up with points and the summary reports them."""
        angles = [0.0, 60.0, 120.0, 180.0]
        res = self.sweep.run(SweepConfig(wind_speed=6.0, sail_area=15.0, angles=angles, max_ticks=50))
        arrays = res.as_arrays()
        assert arrays["wind_angle"].tolist() == angles
        assert arrays["boat_speed"].shape == (4,)
        s = res.summary()
        assert s["points"] == 4
        assert s["wind_speed"] == 6.0
        assert s["best_vmg_angle"] in angles
        assert s["max_boat_speed"] == pytest.approx(max(p.boat_speed for p in res.points))
        assert 0.0 <= s["max_heeling_angle"] < 90.0

    def test_writer_receives_rows(self, tmp_path):
        """Each settled point is written as one row."""
        csv_path = tmp_path / "polar.csv"
        jsonl_path = tmp_path / "polar.jsonl"
        writer = MuxRowWriter(CsvRowWriter(csv_path), JsonlRowWriter(jsonl_path))
        try:
            self.sweep.run(SweepConfig(wind_speed=4.0, sail_area=10.0, angles=[0.0, 90.0], max_ticks=20), writer=writer)
        finally:
            writer.close()

        with csv_path.open(newline="", encoding="utf-8") as fh:
            rows = list(csv.DictReader(fh))
        assert list(rows[0].keys()) == POLAR_COLUMNS
        assert [float(r["wind_angle"]) for r in rows] == [0.0, 90.0]

        lines = jsonl_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert json.loads(lines[1])["wind_angle"] == 90.0


class TestWriters:
    """Test standalone writers."""

    def test_csv_custom_header_fills_missing(self, tmp_path):
        """Missing keys are written as 0."""
        path = tmp_path / "x.csv"
        w = CsvRowWriter(path, header=["a", "b"])
        w.write_row({"a": 1.5})
        w.close()
        assert path.read_text(encoding="utf-8").splitlines() == ["a,b", "1.5,0"]

    def test_summary(self, tmp_path):
        """Summary is pretty-printed JSON."""
        path = tmp_path / "summary.json"
        SummaryJsonWriter(path).write_summary({"points": 3})
        assert json.loads(path.read_text(encoding="utf-8")) == {"points": 3}


class TestPlot:
    """Test the matplotlib polar chart."""

    def setup_method(self):
        self.result = PolarSweep().run(
            SweepConfig(wind_speed=5.0, sail_area=20.0, angles=[0.0, 45.0, 90.0, 135.0, 180.0], max_ticks=30)
        )

    def test_png_written(self, tmp_path):
        """Saving to a path writes a PNG and returns None."""
        out = tmp_path / "plots" / "polar.png"
        assert plot_polar(self.result, png_out=out, options=PolarPlotOptions(title="test")) is None
        assert out.is_file()
        assert out.stat().st_size > 0

    def test_figure_returned(self):
        """Without a path the figure is returned for further use."""
        import matplotlib.pyplot as plt

        fig = plot_polar(self.result, options=PolarPlotOptions(show_heel=False, mirror=False))
        assert fig is not None
        plt.close(fig)

    def test_empty_result(self):
        """Nothing to plot is an error."""
        from sailresponse.sim.polar import PolarResult

        with pytest.raises(ValueError):
            plot_polar(PolarResult(config=self.result.config, points=[]))
