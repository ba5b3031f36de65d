# Operators.py
from typing import NamedTuple


class Operator(NamedTuple):
    precedence: int
    arity: int


# Supported operators, keyed by their text. 'u+' and 'u-' never appear in the input,
# the parser produces them when '+' or '-' has no left operand.
OPERATORS = {
    "*": Operator(3, 2),
    "/": Operator(3, 2),
    "+": Operator(1, 2),
    "-": Operator(1, 2),

    "u+": Operator(100, 1),
    "u-": Operator(100, 1),
}

UNARY_FORMS = {
    "+": "u+",
    "-": "u-",
}
