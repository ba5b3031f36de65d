# Evaluator.py
"""""
Stack machine evaluating a postfix token list into a Solution.

All values on the stack are kept in the canonical base unit of the active system
(meters or thousandths of an inch). A Unit token scales the value below it and tags
it with that unit. Operators decide the unit of their result:

- '*'       -> plain number of the active system
- '/'       -> unit of the divisor, if it has one
- '+' / '-' -> unit of the operand that has one
"""""

import logging
import math

from . import error as E
from .Operators import OPERATORS
from .Tokenizer import TokenType
from .UnitSystem import Unit, UnitType, Solution, GENERIC_UNIT

logger = logging.getLogger(__name__)


def has_unit(solution):
    return solution.units.unit_type != UnitType.GENERIC


class Evaluator:
    def __init__(self, unit_system, operators=OPERATORS, legacy_unit_subtraction=True):
        self.unit_system = unit_system
        self.operators = operators
        # '-' between two values that both carry a unit used to add them; kept switchable
        self.legacy_unit_subtraction = legacy_unit_subtraction

    def evaluate(self, postfix, previous=None):
        """Run the postfix tokens and resolve the unit of the single remaining value."""
        stack = []
        explicit_units = False

        for token in postfix:

            if token.type == TokenType.NUMERIC_LITERAL:
                stack.append(Solution(token.value, GENERIC_UNIT))

            elif token.type == TokenType.UNIT:
                explicit_units = True
                if not stack:
                    raise E.SolveError("Expression is malformed", code="2000", position=token.position)
                operand = stack.pop()
                stack.append(Solution(operand.value * token.value, self.unit_system.lookup(token.text)))

            elif token.type == TokenType.OPERATOR:
                op = self.operators[token.text]
                if len(stack) < op.arity:
                    raise E.SolveError("Expression is malformed", code="2000", position=token.position)
                # Most recently pushed first
                operands = [stack.pop() for _ in range(op.arity)]
                stack.append(self.apply(token, operands))

            else:
                raise E.SolveError(f"Unexpected token: {token.text}", code="2004", position=token.position)

        if len(stack) != 1:
            logger.debug("Indeterminate expression, stack: %s", stack)
            raise E.SolveError("Indeterminate expression", code="2005")

        return self.resolve_units(stack[0], explicit_units, previous)

    def apply(self, token, operands):
        op_text = token.text

        if op_text == "u+":
            return Solution(operands[0].value, operands[0].units)
        if op_text == "u-":
            return Solution(-operands[0].value, operands[0].units)

        right, left = operands
        right_value = right.value / right.units.scale
        left_value = left.value / left.units.scale

        if op_text == "/":
            if right_value == 0:
                raise E.SolveError("Division by zero", code="2006", position=token.position)
            value = left_value / right_value
            # '1/8in' reads as one over eight inches, the divisor's unit wins
            if has_unit(right):
                return Solution(value * right.units.scale, right.units)
            return Solution(value, self.active_unit())

        if op_text == "*":
            return Solution(left.value * right.value, self.active_unit())

        if op_text in ("+", "-"):
            sign = 1 if op_text == "+" else -1

            if not has_unit(right):
                return Solution((left_value + sign * right_value) * left.units.scale, left.units)
            if not has_unit(left):
                return Solution((left_value + sign * right_value) * right.units.scale, right.units)

            # Both are already in the canonical base
            if self.legacy_unit_subtraction:
                sign = 1
            return Solution(left.value + sign * right.value, GENERIC_UNIT)

        raise E.SolveError(f"Unexpected token: {op_text}", code="2004", position=token.position)

    def active_unit(self):
        return Unit(1.0, self.unit_system.unit_type)

    def resolve_units(self, result, explicit_units, previous):
        value = result.value
        units = result.units

        if not explicit_units:
            if previous is None or previous.units.unit_type == UnitType.GENERIC:
                units = self.unit_system.default_unit()
            else:
                units = previous.units
            value *= units.scale

        if units.unit_type != self.unit_system.unit_type:
            units = self.active_unit()

        if not math.isfinite(value):
            raise E.SolveError("Number too big", code="2007")

        return Solution(value, units)
