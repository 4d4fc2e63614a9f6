"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: resolves years → dataset files, calls the data
package to load DataFrames, calls the functional core to aggregate or
filter them, and hands points to a renderer.

Package Location: src/fars/reports/generators.py

Usage::

    from fars.reports.generators import summarize_years, render_state_map

    summary = summarize_years([2013, 2014, 2015])
    fig = render_state_map(1, 2013, output_path=Path("al_2013.html"))

Map outcomes:
    ``render_state_map`` ends in exactly one of three ways:

    - **InvalidState** – the state number is not in the year's data;
      ``InvalidStateError`` is raised.
    - **NoData** – the state has no rows; ``no accidents to plot`` is
      logged and ``None`` returned.
    - **Rendered** – points are drawn; the renderer's figure is returned.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import pandas as pd

from ..analysis.geography import (
    coordinate_points,
    coordinate_range,
    sanitize_coordinates,
    select_state,
    validate_state,
)
from ..analysis.summary import summarize_frames
from ..config import LATITUDE_FIELD, LONGITUDE_FIELD, STATE_FIELD
from ..data.loader import load_years, loaded_frames
from ..data.reader import (
    coerce_year,
    make_filename,
    read_dataset,
    require_columns,
)
from ..plotting.state_map import PlotlyPointRenderer

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Monthly summary
# ---------------------------------------------------------------------------

def summarize_years(
    years: Union[Any, Iterable[Any]],
    data_dir: Optional[Union[str, Path]] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years that fail to load are skipped with a warning (see
    ``load_years``) and contribute no column.

    Args:
        years: Sequence of years, or a single year.
        data_dir: Optional directory holding the dataset files.

    Returns:
        Month x year count table from ``summarize_frames``; absent
        month/year combinations are ``<NA>``, not ``0``.
    """
    results = load_years(years, data_dir=data_dir)
    return summarize_frames(loaded_frames(results))


def write_summary_csv(summary: pd.DataFrame, output_path: Union[str, Path]) -> Path:
    """Write a monthly summary to CSV, leaving absent cells blank."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    summary.to_csv(output_path, index=False)
    return output_path


# ---------------------------------------------------------------------------
# State map
# ---------------------------------------------------------------------------

def render_state_map(
    state: Any,
    year: Any,
    renderer: Optional[Any] = None,
    data_dir: Optional[Union[str, Path]] = None,
    output_path: Optional[Union[str, Path]] = None,
):
    """
    Plot the accident locations of one state for one year.

    Args:
        state: FARS state number (int or numeric string).
        year: Dataset year (int or numeric string).
        renderer: Object implementing ``draw_base_map``/``draw_points``
            with a ``figure`` attribute.  Defaults to a new
            ``PlotlyPointRenderer``.
        data_dir: Optional directory holding the dataset files.
        output_path: When given and the renderer produced a plotly
            figure, the figure is written to this HTML file.

    Returns:
        The renderer's figure, or ``None`` if the state has no accidents.

    Raises:
        FileNotFoundError: If the year's dataset file does not exist.
        YearCoercionError: If *year* is not an integer.
        DatasetParseError: If the dataset cannot be parsed or has no
            STATE, LONGITUD or LATITUDE column.
        InvalidStateError: If *state* is not present in the dataset.
    """
    filename = make_filename(year)
    data = read_dataset(filename, data_dir=data_dir)
    require_columns(
        data, [STATE_FIELD, LONGITUDE_FIELD, LATITUDE_FIELD], filename
    )
    state_num = validate_state(data, state)

    data_sub = select_state(data, state_num)
    if data_sub.empty:
        logger.info("no accidents to plot", extra={"state": state_num})
        return None

    data_sub = sanitize_coordinates(data_sub)

    if renderer is None:
        renderer = PlotlyPointRenderer(
            title=f"FARS accidents – state {state_num}, {coerce_year(year)}"
        )
    renderer.draw_base_map(
        coordinate_range(data_sub[LATITUDE_FIELD]),
        coordinate_range(data_sub[LONGITUDE_FIELD]),
    )
    points = coordinate_points(data_sub)
    renderer.draw_points(points)
    logger.debug(
        f"Plotted {len(points)} of {len(data_sub)} accidents",
        extra={"state": state_num},
    )

    fig = renderer.figure
    if output_path is not None and fig is not None:
        write_figure_html(fig, output_path)
    return fig


def write_figure_html(fig, output_path: Union[str, Path]) -> Path:
    """Save a plotly figure as a standalone HTML file."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(output_path), include_plotlyjs='cdn')
    return output_path
