"""
FARS State Accident Map (Functional Core)

Pure plotting – no file I/O.  Builds a ``plotly.graph_objects.Figure``
showing accident locations on a US base map with state borders.

Package Location: src/fars/plotting/state_map.py

Renderer protocol:
    Orchestration code talks to a renderer through two calls, in order::

        renderer.draw_base_map(lat_range, lon_range)
        renderer.draw_points([(lon, lat), ...])

    and reads the result from ``renderer.figure``.  ``PlotlyPointRenderer``
    is the default implementation; any object with the same two methods
    and attribute can stand in (tests use a recording stub).

    A range is ``None`` when every value on that axis was missing; the map
    then keeps plotly's automatic framing for that axis.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import plotly.graph_objects as go

from ..config import MAP_SCOPE, MAP_SIZE, MARKER_COLOR, MARKER_SIZE

Range = Optional[Tuple[float, float]]

# Padding (degrees) around the data so edge points are not clipped.
_RANGE_PAD: float = 0.5


class PlotlyPointRenderer:
    """
    Draws accident points onto a plotly geo figure.

    Args:
        title: Figure title, e.g. ``"State 1 – 2013"``.
        marker_size: Point marker size in pixels.
    """

    def __init__(self, title: str = "", marker_size: int = MARKER_SIZE) -> None:
        self.title = title
        self.marker_size = marker_size
        self.figure: Optional[go.Figure] = None

    def draw_base_map(self, lat_range: Range, lon_range: Range) -> go.Figure:
        """Create the base map framed to the given coordinate ranges."""
        fig = go.Figure()
        fig.update_geos(
            scope=MAP_SCOPE,
            showsubunits=True,
            subunitcolor="gray",
            showland=True,
            landcolor="white",
        )
        if lat_range is not None:
            fig.update_geos(lataxis_range=_pad(lat_range))
        if lon_range is not None:
            fig.update_geos(lonaxis_range=_pad(lon_range))

        width, height = MAP_SIZE
        fig.update_layout(
            title=self.title,
            width=width,
            height=height,
            showlegend=False,
            margin=dict(l=10, r=10, t=50, b=10),
        )
        self.figure = fig
        return fig

    def draw_points(self, points: Sequence[Tuple[float, float]]) -> go.Figure:
        """Add one marker per ``(lon, lat)`` pair to the base map."""
        if self.figure is None:
            raise RuntimeError("draw_base_map() must be called before draw_points()")

        lons = [p[0] for p in points]
        lats = [p[1] for p in points]
        self.figure.add_trace(go.Scattergeo(
            lon=lons,
            lat=lats,
            mode='markers',
            marker=dict(size=self.marker_size, color=MARKER_COLOR),
            name='Accident',
            hovertemplate="Lon: %{lon:.4f}<br>Lat: %{lat:.4f}<extra></extra>",
        ))
        return self.figure


def _pad(bounds: Tuple[float, float]) -> Tuple[float, float]:
    lo, hi = bounds
    return lo - _RANGE_PAD, hi + _RANGE_PAD
