"""Plot generation for radius sweep results."""

from __future__ import annotations

from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from curvelimit.simulation.sweep import RadiusSweepResult
from curvelimit.utils.constants import MPS_TO_KPH

matplotlib.use("Agg")


def _save_dual_format(fig: Figure, out_base: Path) -> list[Path]:
    """Write a figure to PNG and PDF with a shared base path.

    Args:
        fig: Figure object to persist.
        out_base: Output path without suffix.

    Returns:
        Paths of the written files.
    """
    out_base.parent.mkdir(parents=True, exist_ok=True)
    png = out_base.with_suffix(".png")
    pdf = out_base.with_suffix(".pdf")
    fig.savefig(png, dpi=180, bbox_inches="tight")
    fig.savefig(pdf, bbox_inches="tight")
    return [png, pdf]


def plot_speed_vs_radius(sweep: RadiusSweepResult, out_base: str | Path) -> list[Path]:
    """Plot maximum safe speed against curve radius.

    Radii without a stable speed are marked on the horizontal axis.

    Args:
        sweep: Radius sweep result.
        out_base: Output path without suffix.

    Returns:
        Paths of the written PNG and PDF files.
    """
    radii = sweep.radii
    speeds_kph = sweep.max_speeds * MPS_TO_KPH
    infeasible = np.isnan(speeds_kph)

    fig, ax = plt.subplots(figsize=(8, 4.5))
    ax.plot(
        radii[~infeasible],
        speeds_kph[~infeasible],
        marker="o",
        lw=2.0,
        label="max safe speed",
    )
    if np.any(infeasible):
        ax.scatter(
            radii[infeasible],
            np.zeros(int(np.sum(infeasible))),
            marker="x",
            color="tab:red",
            label="no solution",
        )
    ax.set_xlabel("Curve radius [m]")
    ax.set_ylabel("Speed [km/h]")
    ax.set_title("Maximum Safe Curve Speed")
    ax.grid(True, alpha=0.3)
    ax.legend()
    paths = _save_dual_format(fig, Path(out_base))
    plt.close(fig)
    return paths
