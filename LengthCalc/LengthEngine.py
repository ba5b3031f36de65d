# LengthEngine.py
"""""
Core engine of the length calculator.

Pipeline
--------
1) Tokenizer: converts a raw input string into a flat list of tokens (numbers, operators,
   parentheses, units).
2) Shunting-Yard: reorders the tokens into postfix (RPN), deciding unary vs. binary '+'/'-'.
3) Evaluator: runs the postfix list on a stack, keeping every value in the canonical base
   unit of the active system (meters or thousandths of an inch).
4) Normalizer: moves the result to the most readable unit (mm/m/km, in/ft/mi, ...).
5) Formatter: renders the result, using fractions for imperial units when enabled.

Usage
-----
    compiler = Compiler(UnitType.METRIC)
    result = compiler.eval("5m + 3ft")
    compiler.format(result)            # '5.9144m'
    result = compiler.eval("+5", result)   # no unit given -> continues in meters
"""""

import logging

from . import config_manager as config_manager
from . import error as E
from .Evaluator import Evaluator
from .Formatter import Formatter
from .Normalizer import Normalizer
from .Operators import OPERATORS
from .ShuntingYard import to_postfix
from .Tokenizer import Tokenizer
from .UnitSystem import UnitSystem, UnitType, parse_unit_type

logger = logging.getLogger(__name__)


class Compiler:
    """""

    Owns the unit tables and the user preferences, and runs the full pipeline for one
    expression at a time.

    Settings are read through config_manager unless given explicitly. The unit system is
    not a setting, the caller picks it with set_output_system().

    """""

    def __init__(self, unit_type=UnitType.GENERIC, settings=None):
        if settings is None:
            settings = config_manager.load_setting_value("all")
        self.settings = config_manager.validate_settings(settings)

        self.operators = OPERATORS
        self.unit_system = UnitSystem(unit_type)

        self.evaluator = Evaluator(
            self.unit_system,
            self.operators,
            legacy_unit_subtraction=self.settings["legacy_unit_subtraction"],
        )
        self.normalizer = Normalizer(
            self.unit_system,
            output_to_cm=self.settings["output_to_cm"],
            output_to_yards=self.settings["output_to_yards"],
        )
        self.formatter = Formatter(
            self.unit_system,
            imperial_fractions=self.settings["imperial_fractions"],
            decimal_places=self.settings["decimal_places"],
        )

    # -----------------------------
    # Configuration
    # -----------------------------

    @property
    def unit_type(self):
        return self.unit_system.unit_type

    def set_output_system(self, unit_type):
        self.unit_system.set_output_system(parse_unit_type(unit_type))

    def set_imperial_fractions(self, enable):
        self.formatter.imperial_fractions = bool(enable)

    def default_unit(self):
        return self.unit_system.default_unit()

    # -----------------------------
    # Low level access
    # -----------------------------

    def parse(self, expression):
        """Tokenize expression against the active unit tables."""
        return Tokenizer(expression, self.unit_system, self.operators).generate_tokens()

    def to_postfix(self, tokens):
        return to_postfix(tokens, self.operators)

    def solve(self, tokens, previous=None):
        """Evaluate a token list and normalize the result for display."""
        postfix = self.to_postfix(tokens)
        result = self.evaluator.evaluate(postfix, previous)
        return self.normalizer.normalize(result)

    # -----------------------------
    # General use
    # -----------------------------

    def eval(self, expression, previous=None):
        """Main API: parse -> solve. Raises CompilerError, the caller keeps its last result."""
        try:
            tokens = self.parse(expression)
            return self.solve(tokens, previous)

        # Attach the source expression to our own errors
        except E.CompilerError as e:
            e.expression = expression
            logger.debug("Evaluation of %r failed (%s): %s", expression, E.describe(e.code), e)
            raise

    def format(self, solution):
        return self.formatter.format(solution)

    def calculate(self, expression, previous=None):
        """Evaluate and render in one go, returning (text, solution)."""
        solution = self.eval(expression, previous)
        return self.format(solution), solution
