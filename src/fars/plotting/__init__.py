"""
FARS Plotting Package (Functional Core)

Plotting only – no file reads, no filtering logic.  Renderers build a
``plotly.graph_objects.Figure`` from coordinate ranges and points.

Modules:
    state_map: Accident location scatter map on a US state base map.
"""

from .state_map import PlotlyPointRenderer

__all__ = [
    'PlotlyPointRenderer',
]
