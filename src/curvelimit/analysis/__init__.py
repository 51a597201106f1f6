"""Reports, exports and plots for radius sweeps."""

from curvelimit.analysis.export import (
    export_sweep_csv,
    export_sweep_json,
    sweep_dataframe,
    sweep_rows,
)
from curvelimit.analysis.plots import plot_speed_vs_radius
from curvelimit.analysis.report import NO_SOLUTION_LABEL, format_speed_table, mps_to_kph

__all__ = [
    "NO_SOLUTION_LABEL",
    "export_sweep_csv",
    "export_sweep_json",
    "format_speed_table",
    "mps_to_kph",
    "plot_speed_vs_radius",
    "sweep_dataframe",
    "sweep_rows",
]
