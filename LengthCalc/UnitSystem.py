# UnitSystem.py
"""""
Unit tables for the length calculator.

Every unit is stored as a scale factor relative to the canonical base unit of the
active output system:

- Metric mode:   1.0 == one meter
- Imperial mode: 1.0 == one thousandth of an inch (thou)
- Generic mode:  no units at all, plain numbers

Units of the other system are still accepted, they are just expressed in the active
system's base so that mixed arithmetic (e.g. '5m + 3ft') adds like with like.
"""""

from enum import Enum
from types import MappingProxyType
from typing import NamedTuple

from . import error as E


class UnitType(Enum):
    GENERIC = "generic"
    METRIC = "metric"
    IMPERIAL = "imperial"


class Unit(NamedTuple):
    scale: float = 1.0
    unit_type: UnitType = UnitType.GENERIC


GENERIC_UNIT = Unit(1.0, UnitType.GENERIC)

# Marker returned by unit_name() for a scale with no display name
UNKNOWN_UNIT_NAME = "<error>"


class Solution:
    """Result of one evaluation: value in canonical base units plus the unit to display it in."""

    def __init__(self, value, units=GENERIC_UNIT):
        self.value = value
        self.units = units

    @property
    def normalized_value(self):
        """The value expressed in its display unit."""
        return self.value / self.units.scale

    def __eq__(self, other):
        if not isinstance(other, Solution):
            return NotImplemented
        return self.value == other.value and self.units == other.units

    def __repr__(self):
        return f"Solution({self.value!r}, {self.units!r})"


# -----------------------------
# Scale constants
# -----------------------------

# Imperial lengths in meters
METRIC_SCALE_INCH = 0.0254
METRIC_SCALE_FOOT = 0.3048
METRIC_SCALE_YARD = 0.9144
METRIC_SCALE_MILE = 1609.344

METRIC_SCALE_MILLIMETER = 0.001
METRIC_SCALE_CENTIMETER = 0.01
METRIC_SCALE_METER = 1.0
METRIC_SCALE_KILOMETER = 1000.0
METRIC_SCALE_MEGAMETER = 1000000.0

# Imperial lengths in thousandths of an inch
IMP_SCALE_THOU = 1.0
IMP_SCALE_INCH = 1000.0
IMP_SCALE_FOOT = 12 * IMP_SCALE_INCH
IMP_SCALE_YARD = 3 * IMP_SCALE_FOOT
IMP_SCALE_MILE = 5280 * IMP_SCALE_FOOT

# Metric lengths in thousandths of an inch
IMP_SCALE_MILLIMETER = 1.0 / METRIC_SCALE_INCH
IMP_SCALE_CENTIMETER = 10.0 / METRIC_SCALE_INCH
IMP_SCALE_METER = 1000.0 / METRIC_SCALE_INCH
IMP_SCALE_KILOMETER = 1000000.0 / METRIC_SCALE_INCH
IMP_SCALE_MEGAMETER = 1000000000.0 / METRIC_SCALE_INCH


# (names accepted in expressions, display name)
METRIC_NAMES = (
    (("mm",), "mm"),
    (("cm",), "cm"),
    (("m",), "m"),
    (("km", "Km"), "km"),
    (("Mm",), "Mm"),
)

IMPERIAL_NAMES = (
    (("th", "thou", "mil"), "th"),
    (("in", "inch", "inches", '"'), "in"),
    (("ft", "foot", "feet", "'"), "ft"),
    (("yd", "yard", "yds", "yards"), "yd"),
    (("mi", "mile", "miles"), "mi"),
)

# Scales per output system, in the same order as the name tables above.
# None marks a unit that is not offered in that system.
METRIC_SCALES = {
    UnitType.METRIC: (METRIC_SCALE_MILLIMETER, METRIC_SCALE_CENTIMETER, METRIC_SCALE_METER,
                      METRIC_SCALE_KILOMETER, METRIC_SCALE_MEGAMETER),
    UnitType.IMPERIAL: (IMP_SCALE_MILLIMETER, IMP_SCALE_CENTIMETER, IMP_SCALE_METER,
                        IMP_SCALE_KILOMETER, IMP_SCALE_MEGAMETER),
}

IMPERIAL_SCALES = {
    UnitType.METRIC: (None, METRIC_SCALE_INCH, METRIC_SCALE_FOOT,
                      METRIC_SCALE_YARD, METRIC_SCALE_MILE),
    UnitType.IMPERIAL: (IMP_SCALE_THOU, IMP_SCALE_INCH, IMP_SCALE_FOOT,
                        IMP_SCALE_YARD, IMP_SCALE_MILE),
}


def parse_unit_type(kind):
    """Accept a UnitType or its name ('metric', 'Imperial', ...)."""
    if isinstance(kind, UnitType):
        return kind
    try:
        return UnitType(str(kind).strip().lower())
    except ValueError:
        raise E.ConfigurationError(f"Unknown unit system: {kind}", code="3000")


class UnitSystem:
    """""

    Holds the unit tables for the selected output system.

    Both tables are rebuilt from scratch by set_output_system() and swapped in together,
    so a lookup never sees a half built state.

    """""

    def __init__(self, unit_type=UnitType.GENERIC):
        self.unit_type = UnitType.GENERIC
        self.units = MappingProxyType({})
        self.unit_lookup = MappingProxyType({})
        self.set_output_system(unit_type)

    def set_output_system(self, unit_type):
        unit_type = parse_unit_type(unit_type)
        units = {}
        unit_lookup = {}

        if unit_type != UnitType.GENERIC:
            tables = (
                (METRIC_NAMES, METRIC_SCALES[unit_type], UnitType.METRIC),
                (IMPERIAL_NAMES, IMPERIAL_SCALES[unit_type], UnitType.IMPERIAL),
            )
            for names, scales, family in tables:
                for (aliases, display_name), scale in zip(names, scales):
                    if scale is None:
                        continue
                    unit = Unit(scale, family)
                    for alias in aliases:
                        units[alias] = unit
                    unit_lookup[scale] = display_name

        self.units = MappingProxyType(units)
        self.unit_lookup = MappingProxyType(unit_lookup)
        self.unit_type = unit_type

    def default_unit(self):
        """Unit used when neither the expression nor a previous result names one."""
        if self.unit_type == UnitType.IMPERIAL:
            return Unit(IMP_SCALE_FOOT, UnitType.IMPERIAL)
        return Unit(1.0, self.unit_type)

    def lookup(self, name):
        return self.units.get(name)

    def unit_name(self, unit):
        if unit.unit_type == UnitType.GENERIC:
            return ""
        # Scales always come from the constant tables, so exact comparison is safe
        return self.unit_lookup.get(unit.scale, UNKNOWN_UNIT_NAME)

    def __repr__(self):
        return f"UnitSystem({self.unit_type.value}, {len(self.units)} units)"
