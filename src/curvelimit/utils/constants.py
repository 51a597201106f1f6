"""Physical constants used across the library."""

GRAVITY: float = 9.80665
GAS_CONSTANT: float = 287.05
DRAG_COEFFICIENT: float = 0.525
MPS_TO_KPH: float = 3.6
