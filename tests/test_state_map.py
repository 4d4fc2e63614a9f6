import logging

import plotly.graph_objects as go
import pytest

from fars.analysis.geography import InvalidStateError
from fars.data.reader import DatasetParseError, YearCoercionError
from fars.plotting.state_map import PlotlyPointRenderer
from fars.reports import generators
from fars.reports.generators import render_state_map

from conftest import write_accidents


class RecordingRenderer:
    """Stand-in renderer that records the calls it receives."""

    def __init__(self):
        self.calls = []
        self.figure = None

    def draw_base_map(self, lat_range, lon_range):
        self.calls.append(("base", lat_range, lon_range))
        self.figure = "figure"

    def draw_points(self, points):
        self.calls.append(("points", list(points)))


def test_rendered_outcome(fars_dir):
    renderer = RecordingRenderer()

    result = render_state_map(1, 2013, renderer=renderer)

    assert result == "figure"
    base, points = renderer.calls
    assert base == ("base", (32.0, 33.4), (-87.1, -85.9))
    assert points == ("points", [(-86.5, 32.6), (-87.1, 33.4)])


def test_sentinel_only_row_is_not_drawn(fars_dir):
    renderer = RecordingRenderer()

    render_state_map("6", "2013", renderer=renderer)

    _, points = renderer.calls
    assert points == ("points", [(-118.2, 34.0)])


def test_invalid_state(fars_dir):
    renderer = RecordingRenderer()
    with pytest.raises(InvalidStateError, match="999"):
        render_state_map(999, 2013, renderer=renderer)
    assert renderer.calls == []


def test_no_data_is_a_soft_exit(fars_dir, monkeypatch, caplog):
    caplog.set_level(logging.INFO, logger="fars")
    monkeypatch.setattr(generators, "select_state", lambda df, state: df.iloc[0:0])
    renderer = RecordingRenderer()

    result = render_state_map(1, 2013, renderer=renderer)

    assert result is None
    assert renderer.calls == []
    assert "no accidents to plot" in caplog.messages


def test_missing_year_file_propagates(fars_dir):
    with pytest.raises(FileNotFoundError, match="accident_2020.csv.bz2"):
        render_state_map(1, 2020)


def test_bad_year_propagates(fars_dir):
    with pytest.raises(YearCoercionError):
        render_state_map(1, "twenty")


def test_default_renderer_builds_plotly_figure(fars_dir):
    fig = render_state_map(1, 2013)

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    trace = fig.data[0]
    assert list(trace.lon) == [-86.5, -87.1]
    assert list(trace.lat) == [32.6, 33.4]
    assert fig.layout.geo.scope == "usa"
    assert list(fig.layout.geo.lataxis.range) == pytest.approx([31.5, 33.9])
    assert list(fig.layout.geo.lonaxis.range) == pytest.approx([-87.6, -85.4])


def test_writes_html(fars_dir):
    out = fars_dir / "maps" / "state_1.html"
    render_state_map(1, 2014, output_path=out)
    assert out.exists()
    assert "<html>" in out.read_text()


def test_renderer_requires_base_map_first():
    with pytest.raises(RuntimeError):
        PlotlyPointRenderer().draw_points([(-86.5, 32.6)])


def test_renderer_without_ranges_uses_auto_framing():
    renderer = PlotlyPointRenderer(title="empty")
    fig = renderer.draw_base_map(None, None)
    renderer.draw_points([])

    assert fig.layout.geo.lataxis.range is None
    assert fig.layout.title.text == "empty"
    assert len(fig.data) == 1


@pytest.mark.parametrize("missing", ["STATE", "LONGITUD", "LATITUDE"])
def test_missing_map_column_is_a_parse_error(tmp_path, monkeypatch, missing):
    row = {"STATE": 1, "MONTH": 1, "LONGITUD": -86.5, "LATITUDE": 32.6}
    del row[missing]
    write_accidents(tmp_path, 2013, [row])
    monkeypatch.chdir(tmp_path)

    with pytest.raises(DatasetParseError, match=f"has no {missing} column"):
        render_state_map(1, 2013, renderer=RecordingRenderer())
