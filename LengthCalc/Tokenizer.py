# Tokenizer.py
"""""
Finite state tokenizer for length expressions.

The scanner walks the input once, one character of lookahead, and switches between the
states of TokenizerState. Every state has its own transition method returning the next
state, so each state can be read (and tested) on its own.

    '12.5mm + 0x1F' -> [Literal 12.5] [Unit mm] [Operator +] [Literal 31]
"""""

import locale
import logging
from enum import Enum
from typing import NamedTuple

from . import error as E
from . import CharacterTables as C
from .Operators import OPERATORS

logger = logging.getLogger(__name__)


class TokenType(Enum):
    UNKNOWN = "unknown"
    NUMERIC_LITERAL = "numeric_literal"
    OPERATOR = "operator"
    PARENTHESIS_OPEN = "parenthesis_open"
    PARENTHESIS_CLOSE = "parenthesis_close"
    SYMBOL = "symbol"
    UNIT = "unit"


class Token(NamedTuple):
    position: int
    type: TokenType
    text: str
    value: float = 0.0

    def __repr__(self):
        if self.type == TokenType.UNIT:
            return f"Token({self.type.name} @ {self.position}: {self.text} [x{self.value}])"
        if self.type == TokenType.NUMERIC_LITERAL:
            return f"Token({self.type.name} @ {self.position}: {self.text} [{self.value}])"
        return f"Token({self.type.name} @ {self.position}: {self.text})"


class TokenizerState(Enum):
    NEW_TOKEN = "new_token"
    NUMERIC_LITERAL = "numeric_literal"
    PREFIXED_NUMERIC_LITERAL = "prefixed_numeric_literal"
    HEX_NUMERIC_LITERAL = "hex_numeric_literal"
    BIN_NUMERIC_LITERAL = "bin_numeric_literal"
    UNIT_OR_SYMBOL = "unit_or_symbol"
    PARENTHESIS_OPEN = "parenthesis_open"
    PARENTHESIS_CLOSE = "parenthesis_close"
    OPERATOR = "operator"
    COMPLETE_TOKEN = "complete_token"


def locale_decimal_point():
    """""

    Decimal separator of the current locale ('.' in the C locale).

    Python starts in the C locale, so an embedding program that wants the user's
    separator has to call locale.setlocale(locale.LC_NUMERIC, "") first.
    '.' and ',' are accepted either way.

    """""
    return locale.localeconv().get("decimal_point") or "."


class Tokenizer:
    def __init__(self, text, unit_system, operators=OPERATORS, decimal_point=None):
        self.text = text
        self.unit_system = unit_system
        self.operators = operators
        # Read on every tokenizer, a locale change between calls is picked up
        self.decimal_point = decimal_point or locale_decimal_point()

        self.pos = 0
        self.current = text[0] if text else None

        self.tokens = []
        self.token_start = 0
        self.buffer = ""
        self.digits = ""
        self.decimal_point_found = False
        self.parenthesis_balance = 0
        self.pending = None

        self.transitions = {
            TokenizerState.NEW_TOKEN: self.new_token,
            TokenizerState.NUMERIC_LITERAL: self.numeric_literal,
            TokenizerState.PREFIXED_NUMERIC_LITERAL: self.prefixed_numeric_literal,
            TokenizerState.HEX_NUMERIC_LITERAL: self.hex_numeric_literal,
            TokenizerState.BIN_NUMERIC_LITERAL: self.bin_numeric_literal,
            TokenizerState.UNIT_OR_SYMBOL: self.unit_or_symbol,
            TokenizerState.PARENTHESIS_OPEN: self.parenthesis_open,
            TokenizerState.PARENTHESIS_CLOSE: self.parenthesis_close,
            TokenizerState.OPERATOR: self.operator,
            TokenizerState.COMPLETE_TOKEN: self.complete_token,
        }

    def advance(self):
        self.pos += 1
        self.current = self.text[self.pos] if self.pos < len(self.text) else None

    def lexeme(self):
        return self.text[self.token_start:self.pos]

    def generate_tokens(self):
        if not self.text:
            raise E.ParseError("No input.", code="1000")

        state = TokenizerState.NEW_TOKEN
        while state is not None:
            state = self.transitions[state]()

        logger.debug("Tokens for %r: %s", self.text, self.tokens)
        return self.tokens

    # -----------------------------
    # States
    # -----------------------------

    def new_token(self):
        self.token_start = self.pos
        self.buffer = ""
        self.decimal_point_found = False
        self.pending = None
        char = self.current

        # --- End of input ---
        if char is None:
            if self.parenthesis_balance != 0:
                raise E.ParseError("Parenthesis '(' & ')' not balanced", code="1005", position=self.pos)
            return None

        if C.is_whitespace(char):
            self.advance()
            return TokenizerState.NEW_TOKEN

        # --- Numbers, a leading '0' may start 0x / 0b ---
        if C.is_digit(char):
            self.buffer = char
            self.advance()
            if char == "0":
                return TokenizerState.PREFIXED_NUMERIC_LITERAL
            return TokenizerState.NUMERIC_LITERAL

        # Operators and parentheses consume their own characters
        if C.is_operator(char):
            return TokenizerState.OPERATOR
        if char == "(":
            return TokenizerState.PARENTHESIS_OPEN
        if char == ")":
            return TokenizerState.PARENTHESIS_CLOSE

        if C.is_unit(char):
            self.buffer = char
            self.advance()
            return TokenizerState.UNIT_OR_SYMBOL

        raise E.ParseError(f"Unknown character '{char}'", code="1001", position=self.pos)

    def numeric_literal(self):
        char = self.current

        if char is not None and (C.is_numeric(char) or char == self.decimal_point):
            if not C.is_digit(char):
                if self.decimal_point_found:
                    raise E.ParseError("Bad numeric construction", code="1002", position=self.pos)
                self.decimal_point_found = True
                char = "."
            self.buffer += char
            self.advance()
            return TokenizerState.NUMERIC_LITERAL

        self.pending = Token(self.token_start, TokenType.NUMERIC_LITERAL, self.lexeme(), float(self.buffer))
        return TokenizerState.COMPLETE_TOKEN

    def prefixed_numeric_literal(self):
        if self.current in C.HEX_PREFIXES:
            self.digits = ""
            self.advance()
            return TokenizerState.HEX_NUMERIC_LITERAL

        if self.current in C.BINARY_PREFIXES:
            self.digits = ""
            self.advance()
            return TokenizerState.BIN_NUMERIC_LITERAL

        # Just a number starting with 0
        return TokenizerState.NUMERIC_LITERAL

    def hex_numeric_literal(self):
        return self.prefixed_digits(C.is_hex_digit, 16, TokenizerState.HEX_NUMERIC_LITERAL)

    def bin_numeric_literal(self):
        return self.prefixed_digits(C.is_binary_digit, 2, TokenizerState.BIN_NUMERIC_LITERAL)

    def prefixed_digits(self, accepts, base, state):
        if self.current is not None and accepts(self.current):
            self.digits += self.current
            self.advance()
            return state

        if not self.digits:
            raise E.ParseError("Invalid prefixed numeric literal", code="1003", position=self.token_start)

        try:
            value = float(int(self.digits, base))
        except OverflowError:
            raise E.ParseError(f"Number too big: {self.lexeme()}", code="1006", position=self.token_start)

        # The terminating character is left for the next token
        self.pending = Token(self.token_start, TokenType.NUMERIC_LITERAL, self.lexeme(), value)
        return TokenizerState.COMPLETE_TOKEN

    def operator(self):
        char = self.current

        # Operator matching is greedy
        if char is not None and C.is_operator(char):
            if (self.buffer + char) in self.operators:
                self.buffer += char
                self.advance()
                return TokenizerState.OPERATOR

            if self.buffer in self.operators:
                return self.bank_operator()

            # Not valid yet, but a longer operator might be
            self.buffer += char
            self.advance()
            return TokenizerState.OPERATOR

        if self.buffer in self.operators:
            return self.bank_operator()

        raise E.ParseError(f"Unknown operator: {self.buffer}", code="1004", position=self.token_start)

    def bank_operator(self):
        self.pending = Token(self.token_start, TokenType.OPERATOR, self.buffer)
        return TokenizerState.COMPLETE_TOKEN

    def unit_or_symbol(self):
        char = self.current

        # Digits extend a symbol ('z9') but end a known unit ('2ft6in')
        if char is not None and (C.is_unit(char) or
                                 (C.is_digit(char) and self.unit_system.lookup(self.buffer) is None)):
            self.buffer += char
            self.advance()
            return TokenizerState.UNIT_OR_SYMBOL

        unit = self.unit_system.lookup(self.buffer)
        if unit is not None:
            self.pending = Token(self.token_start, TokenType.UNIT, self.buffer, unit.scale)
        else:
            # Kept for diagnostics, the parser rejects it
            self.pending = Token(self.token_start, TokenType.SYMBOL, self.buffer)
        return TokenizerState.COMPLETE_TOKEN

    def parenthesis_open(self):
        self.advance()
        self.parenthesis_balance += 1
        self.pending = Token(self.token_start, TokenType.PARENTHESIS_OPEN, "(")
        return TokenizerState.COMPLETE_TOKEN

    def parenthesis_close(self):
        # A ')' without a matching '(' is left for the parser to report
        if self.parenthesis_balance > 0:
            self.parenthesis_balance -= 1
        self.advance()
        self.pending = Token(self.token_start, TokenType.PARENTHESIS_CLOSE, ")")
        return TokenizerState.COMPLETE_TOKEN

    def complete_token(self):
        self.tokens.append(self.pending)
        return TokenizerState.NEW_TOKEN


def tokenize(text, unit_system, decimal_point=None):
    """Shortcut: tokenize text against the given unit system."""
    return Tokenizer(text, unit_system, decimal_point=decimal_point).generate_tokens()
