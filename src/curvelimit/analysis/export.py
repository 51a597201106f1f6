"""Export helpers for radius sweep outputs."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any

from curvelimit.simulation.sweep import RadiusSweepResult
from curvelimit.utils.exceptions import ConfigurationError

SWEEP_COLUMNS = (
    "curve_radius_m",
    "max_speed_mps",
    "max_speed_kph",
    "feasible",
    "limiting_mode",
    "torque_utilization",
    "force_utilization",
)


def sweep_rows(sweep: RadiusSweepResult) -> list[dict[str, Any]]:
    """Flatten a radius sweep into one record per radius.

    Args:
        sweep: Radius sweep result.

    Returns:
        Records keyed by :data:`SWEEP_COLUMNS`. Speeds are ``None`` where no
        solution exists.
    """
    rows: list[dict[str, Any]] = []
    for result in sweep.results:
        report = result.limiting_report
        rows.append(
            {
                "curve_radius_m": result.curve_radius,
                "max_speed_mps": result.max_speed,
                "max_speed_kph": result.max_speed_kph,
                "feasible": result.is_feasible,
                "limiting_mode": result.limiting_mode,
                "torque_utilization": report.torque_utilization,
                "force_utilization": report.force_utilization,
            }
        )
    return rows


def export_sweep_json(sweep: RadiusSweepResult, path: str | Path) -> None:
    """Persist a radius sweep as JSON.

    Args:
        sweep: Radius sweep result.
        path: Output file path for the JSON document.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps({"results": sweep_rows(sweep)}, indent=2), encoding="utf-8")


def export_sweep_csv(sweep: RadiusSweepResult, path: str | Path) -> None:
    """Persist a radius sweep as CSV, leaving cells empty where no solution exists.

    Args:
        sweep: Radius sweep result.
        path: Output file path for the CSV table.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=SWEEP_COLUMNS)
        writer.writeheader()
        for row in sweep_rows(sweep):
            writer.writerow({key: "" if value is None else value for key, value in row.items()})


def sweep_dataframe(sweep: RadiusSweepResult) -> Any:
    """Return a pandas representation of a radius sweep.

    Args:
        sweep: Radius sweep result.

    Returns:
        Pandas DataFrame with one row per radius and :data:`SWEEP_COLUMNS`.

    Raises:
        curvelimit.utils.exceptions.ConfigurationError: If pandas is not
            installed in the active environment.
    """
    try:
        import pandas as pd  # type: ignore[import-untyped]
    except ModuleNotFoundError as exc:
        msg = "sweep_dataframe requires pandas. Install with `pip install -e '.[analysis]'`."
        raise ConfigurationError(msg) from exc

    return pd.DataFrame(sweep_rows(sweep), columns=list(SWEEP_COLUMNS))
