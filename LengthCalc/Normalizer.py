# Normalizer.py
"""""
Pick the friendliest display unit for a result.

The value itself is never touched, only the display scale moves up or down the ladder
of the active system until no rule applies anymore:

    Imperial: th -> in -> ft -> mi     (yd only if output_to_yards is set)
    Metric:   mm <-> m <-> km <-> Mm   (cm only if output_to_cm is set)
"""""

import math

from .UnitSystem import (
    Unit, UnitType, Solution,
    IMP_SCALE_THOU, IMP_SCALE_INCH, IMP_SCALE_FOOT, IMP_SCALE_YARD, IMP_SCALE_MILE,
    METRIC_SCALE_MILLIMETER, METRIC_SCALE_CENTIMETER, METRIC_SCALE_METER,
    METRIC_SCALE_KILOMETER, METRIC_SCALE_MEGAMETER,
)

EPSILON = 1e-14


def is_epsilon_integer(number):
    """True if number is within 1e-14 of the nearest integer."""
    if not math.isfinite(number):
        return False
    return abs(number - round(number)) <= EPSILON


class Normalizer:
    def __init__(self, unit_system, output_to_cm=False, output_to_yards=False):
        self.unit_system = unit_system
        self.output_to_cm = output_to_cm
        self.output_to_yards = output_to_yards

    def normalize(self, solution):
        unit_type = self.unit_system.unit_type

        if unit_type == UnitType.GENERIC:
            return solution

        if solution.value == 0:
            return Solution(solution.value, self.unit_system.default_unit())

        if unit_type == UnitType.IMPERIAL:
            step = self.imperial_step
        else:
            step = self.metric_step

        scale = solution.units.scale
        seen = {scale}
        while True:
            next_scale = step(solution.value, scale)
            # Rounding right at a threshold must not bounce between two rungs
            if next_scale is None or next_scale in seen:
                break
            seen.add(next_scale)
            scale = next_scale

        return Solution(solution.value, Unit(scale, unit_type))

    def imperial_step(self, value, scale):
        normalised = abs(value / scale)

        if normalised >= IMP_SCALE_INCH and scale == IMP_SCALE_THOU:
            return IMP_SCALE_INCH
        # Over 6ft fractions of a foot are fine
        if normalised > 72 and scale == IMP_SCALE_INCH:
            return IMP_SCALE_FOOT
        if normalised >= 12 and scale == IMP_SCALE_INCH and is_epsilon_integer(value / IMP_SCALE_FOOT):
            return IMP_SCALE_FOOT

        if self.output_to_yards:
            if normalised >= 12 and scale == IMP_SCALE_FOOT and is_epsilon_integer(value / IMP_SCALE_YARD):
                return IMP_SCALE_YARD
        elif scale == IMP_SCALE_YARD:
            return IMP_SCALE_FOOT

        if normalised >= 5280 and scale == IMP_SCALE_FOOT and is_epsilon_integer(value / IMP_SCALE_MILE):
            return IMP_SCALE_MILE
        if normalised >= 1760 and scale == IMP_SCALE_YARD and is_epsilon_integer(value / IMP_SCALE_MILE):
            return IMP_SCALE_MILE
        return None

    def metric_step(self, value, scale):
        normalised = abs(value / scale)

        # --- Up the ladder ---
        if normalised >= 1000 and scale == METRIC_SCALE_KILOMETER:
            return METRIC_SCALE_MEGAMETER
        if normalised >= 1000 and scale == METRIC_SCALE_METER:
            return METRIC_SCALE_KILOMETER
        if normalised >= 1000 and scale == METRIC_SCALE_MILLIMETER:
            return METRIC_SCALE_METER

        if self.output_to_cm:
            if normalised >= 100 and scale == METRIC_SCALE_MILLIMETER:
                return METRIC_SCALE_CENTIMETER
            if normalised >= 100 and scale == METRIC_SCALE_CENTIMETER:
                return METRIC_SCALE_METER
        elif scale == METRIC_SCALE_CENTIMETER:
            return METRIC_SCALE_METER

        # --- Down the ladder ---
        if normalised < 1 and scale == METRIC_SCALE_MEGAMETER:
            return METRIC_SCALE_KILOMETER
        if normalised < 1 and scale == METRIC_SCALE_KILOMETER:
            return METRIC_SCALE_METER

        if self.output_to_cm:
            if normalised < 1 and scale == METRIC_SCALE_METER:
                return METRIC_SCALE_CENTIMETER
            if normalised < 1 and scale == METRIC_SCALE_CENTIMETER:
                return METRIC_SCALE_MILLIMETER
        elif normalised < 1 and scale == METRIC_SCALE_METER:
            return METRIC_SCALE_MILLIMETER
        return None
