"""Utility helpers."""

from curvelimit.utils.constants import DRAG_COEFFICIENT, GAS_CONSTANT, GRAVITY
from curvelimit.utils.logging import configure_logging

__all__ = ["DRAG_COEFFICIENT", "GAS_CONSTANT", "GRAVITY", "configure_logging"]
