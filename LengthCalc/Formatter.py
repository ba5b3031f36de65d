# Formatter.py
"""""
Render a Solution as the text shown to the user.

- Whole numbers are printed without decimals:             '12ft'
- Imperial values may be printed as fractions:             '1+3/8in', '5/16in'
- Twelfths of a foot are printed as feet and inches:       '3ft5in'
- Everything else is rounded to 'decimal_places' digits:   '5.9144m'
"""""

import math
from decimal import Decimal, localcontext

from .Normalizer import is_epsilon_integer
from .UnitSystem import Unit, UnitType, IMP_SCALE_FOOT, IMP_SCALE_INCH

DENOMINATORS = (2, 3, 4, 5, 6, 7, 8, 10, 12, 16, 32, 64, 128, 1000)


class Formatter:
    def __init__(self, unit_system, imperial_fractions=True, decimal_places=6):
        self.unit_system = unit_system
        self.imperial_fractions = imperial_fractions
        self.decimal_places = decimal_places

    def format(self, solution):
        units = solution.units
        unit_name = self.unit_system.unit_name(units)
        normal_value = solution.normalized_value

        if not math.isfinite(normal_value):
            return f"{normal_value}{unit_name}"

        if is_epsilon_integer(normal_value):
            return f"{int(round(normal_value))}{unit_name}"

        if units.unit_type == UnitType.IMPERIAL and self.imperial_fractions:
            fraction = self.format_fraction(normal_value, units, unit_name)
            if fraction is not None:
                return fraction

        return self.format_decimal(normal_value) + unit_name

    def format_fraction(self, normal_value, units, unit_name):
        """Return the mixed fraction text, or None if no denominator fits."""
        whole = int(normal_value)  # truncates towards zero
        fraction = abs(normal_value) - abs(whole)

        for denominator in DENOMINATORS:
            if not is_epsilon_integer(fraction * denominator):
                continue

            numerator = int(round(fraction * denominator))
            feet_and_inches = denominator == 12 and units.scale == IMP_SCALE_FOOT

            out = ""
            if whole != 0:
                out += str(whole)
                if feet_and_inches:
                    out += unit_name
                else:
                    out += "-" if normal_value < 0 else "+"
            elif normal_value < 0:
                out += "-"

            if feet_and_inches:
                inch_name = self.unit_system.unit_name(Unit(IMP_SCALE_INCH, UnitType.IMPERIAL))
                return f"{out}{numerator}{inch_name}"

            return f"{out}{numerator}/{denominator}{unit_name}"

        return None

    def format_decimal(self, normal_value):
        # Temporary precision boost so quantize() never overflows on long values
        with localcontext() as context:
            context.prec = 128
            rounded = Decimal(repr(normal_value)).quantize(Decimal(1).scaleb(-self.decimal_places))

        if rounded == 0:
            return "0"
        return format(rounded.normalize(), "f")
