# CharacterTables.py
"""Static character classes used by the tokenizer."""

import string


WHITESPACE_DIGITS = frozenset(" \t\n\r\v\f")
FIRST_NUMERIC_DIGITS = frozenset("0123456789")
# '.' and ',' are both read as a decimal point
ADDITIONAL_NUMERIC_DIGITS = frozenset(".,0123456789")
OPERATOR_DIGITS = frozenset("*+-/")
UNIT_DIGITS = frozenset(string.ascii_letters + "'\"")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
BINARY_DIGITS = frozenset("01")

HEX_PREFIXES = ("x", "X")
BINARY_PREFIXES = ("b", "B")


def is_whitespace(char):
    return char in WHITESPACE_DIGITS


def is_digit(char):
    return char in FIRST_NUMERIC_DIGITS


def is_numeric(char):
    """True for digits and the decimal point characters accepted inside a literal."""
    return char in ADDITIONAL_NUMERIC_DIGITS


def is_operator(char):
    return char in OPERATOR_DIGITS


def is_unit(char):
    return char in UNIT_DIGITS


def is_hex_digit(char):
    return char in HEX_DIGITS


def is_binary_digit(char):
    return char in BINARY_DIGITS
