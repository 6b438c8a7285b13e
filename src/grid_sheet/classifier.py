"""
Decide how a raw input string is stored.

A string is a number, a formula candidate, or plain text. Only ASCII
digits and uppercase letters count; formulas are case-sensitive, so
'=A1+b2' is text, not a formula.
"""

from enum import Enum

EQUALS_CHAR = '='
DIGITS = '0123456789'
UPPERCASE = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
FORMULA_CHARS = frozenset(UPPERCASE + DIGITS + '.+')


class CellInput(Enum):
    NUMERIC = "numeric"
    FORMULA = "formula"
    TEXT = "text"


def is_valid_num(text):
    if text is None:
        return False

    has_digit = False
    has_point = False
    for char in text.strip():
        if char in DIGITS:
            has_digit = True
        elif char == '.':
            if has_point:
                return False
            has_point = True
        else:
            return False
    return has_digit


def is_valid_formula(text):
    if text is None:
        return False

    text = text.lstrip()
    if not text.startswith(EQUALS_CHAR):
        return False

    for char in text[1:]:
        if char.isspace():
            continue
        if char not in FORMULA_CHARS:
            return False
    return True


def classify(text):
    """Classify raw input; the numeric test wins over the formula test."""
    if is_valid_num(text):
        return CellInput.NUMERIC
    if is_valid_formula(text):
        return CellInput.FORMULA
    return CellInput.TEXT
