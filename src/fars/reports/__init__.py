"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, aggregation, map rendering and file output.
No analysis logic lives here: this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
package (src/fars/data/).

Modules:
    generators: summarize_years() and render_state_map() plus the CSV /
                HTML writers used by the command-line interface.
"""

from .generators import (
    summarize_years,
    render_state_map,
    write_summary_csv,
    write_figure_html,
)

__all__ = [
    'summarize_years',
    'render_state_map',
    'write_summary_csv',
    'write_figure_html',
]
