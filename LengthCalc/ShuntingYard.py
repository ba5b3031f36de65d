# ShuntingYard.py
"""Convert an infix token list into postfix (RPN) order."""

import logging

from . import error as E
from .Operators import OPERATORS, UNARY_FORMS
from .Tokenizer import Token, TokenType

logger = logging.getLogger(__name__)

# A '+' or '-' following one of these is binary, otherwise it is unary
BINARY_CONTEXT = frozenset({
    TokenType.NUMERIC_LITERAL,
    TokenType.UNIT,
    TokenType.PARENTHESIS_CLOSE,
})


def operator_text(token, previous):
    """Return the operator key for token, upgrading '+'/'-' to 'u+'/'u-' where unary."""
    if token.text in UNARY_FORMS and (previous is None or previous.type not in BINARY_CONTEXT):
        return UNARY_FORMS[token.text]
    return token.text


def to_postfix(tokens, operators=OPERATORS):
    holding = []   # top of stack is the end of the list
    output = []
    previous = None

    for token in tokens:

        # Literals and units are already in order
        if token.type in (TokenType.NUMERIC_LITERAL, TokenType.UNIT):
            output.append(token)

        # '(' stops the back-flush of ')'
        elif token.type == TokenType.PARENTHESIS_OPEN:
            holding.append(token)

        elif token.type == TokenType.PARENTHESIS_CLOSE:
            if not holding:
                raise E.SolveError("Unexpected close parenthesis", code="2001", position=token.position)

            while holding and holding[-1].type != TokenType.PARENTHESIS_OPEN:
                output.append(holding.pop())

            if not holding:
                raise E.SolveError("Unexpected close parenthesis (no open parenthesis found)",
                                   code="2002", position=token.position)
            holding.pop()

        elif token.type == TokenType.OPERATOR:
            op_text = operator_text(token, previous)
            precedence = operators[op_text].precedence

            while holding and holding[-1].type == TokenType.OPERATOR:
                if operators[holding[-1].text].precedence >= precedence:
                    output.append(holding.pop())
                else:
                    break

            holding.append(Token(token.position, TokenType.OPERATOR, op_text))

        else:
            raise E.SolveError(f"Unsupported token: {token.text}", code="2003", position=token.position)

        previous = token

    # Drain the holding stack
    while holding:
        token = holding.pop()
        if token.type == TokenType.PARENTHESIS_OPEN:
            raise E.ParseError("Parenthesis '(' & ')' not balanced", code="1005", position=token.position)
        output.append(token)

    logger.debug("RPN: %s", output)
    return output
