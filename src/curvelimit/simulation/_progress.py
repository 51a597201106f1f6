"""Progress reporting for radius sweeps."""

from __future__ import annotations

import sys
from typing import TextIO

import numpy as np

DEFAULT_PROGRESS_BAR_WIDTH = 30


def format_progress_line(
    *,
    prefix: str,
    fraction: float,
    suffix: str,
    bar_width: int = DEFAULT_PROGRESS_BAR_WIDTH,
) -> str:
    """Build one carriage-return progress line.

    Args:
        prefix: Text shown before the bar.
        fraction: Completed fraction, clamped to ``[0, 1]``.
        suffix: Text shown after the percentage.
        bar_width: Number of bar characters.

    Returns:
        Line starting with ``\\r`` and without trailing newline.
    """
    clamped = float(np.clip(fraction, 0.0, 1.0))
    filled = int(clamped * bar_width)
    bar = "#" * filled + "-" * (bar_width - filled)
    return f"\r{prefix} [{bar}] {100.0 * clamped:5.1f}% {suffix}"


class SweepProgress:
    """In-place progress bar advanced once per solved curve radius.

    A ``None`` prefix turns every call into a no-op, so callers can hold one
    instance regardless of whether progress output was requested.
    """

    def __init__(
        self,
        prefix: str | None,
        total: int,
        *,
        stream: TextIO | None = None,
        bar_width: int = DEFAULT_PROGRESS_BAR_WIDTH,
    ) -> None:
        self.prefix = prefix
        self.total = total
        self.stream = stream
        self.bar_width = bar_width
        self.completed = 0

    @property
    def enabled(self) -> bool:
        return self.prefix is not None and self.total > 0

    def advance(self, curve_radius: float) -> None:
        """Record one solved radius and redraw the bar.

        Args:
            curve_radius: Radius that has just been solved [m].
        """
        self.completed += 1
        if not self.enabled:
            return
        line = format_progress_line(
            prefix=self.prefix,
            fraction=self.completed / self.total,
            suffix=f"radius {self.completed}/{self.total} (R={curve_radius:g} m)",
            bar_width=self.bar_width,
        )
        stream = self.stream if self.stream is not None else sys.stderr
        stream.write(line + ("\n" if self.completed >= self.total else ""))
        stream.flush()
