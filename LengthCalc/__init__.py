"""
Unit aware length calculator.

Evaluates short expressions such as '5m + 3ft' or '1/8in' and renders the result
in metric, imperial or generic units.
"""

from .LengthEngine import Compiler
from .UnitSystem import Unit, UnitType, Solution
from .error import CompilerError, ParseError, SolveError, ConfigurationError

__all__ = [
    'Compiler', 'Unit', 'UnitType', 'Solution',
    'CompilerError', 'ParseError', 'SolveError', 'ConfigurationError',
]
