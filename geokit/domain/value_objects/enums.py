"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class Units(str, Enum):
    MILES = "miles"
    KILOMETERS = "kilometers"


class Formula(str, Enum):
    FLAT = "flat"
    SPHERICAL = "spherical"


DEFAULT_UNITS = Units.MILES
DEFAULT_FORMULA = Formula.SPHERICAL
