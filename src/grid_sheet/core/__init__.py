from .token import Token
from .errors import (
    FormulaError, InvalidFormulaSyntax, OutOfRangeReference,
    InvalidToken, ArityMismatch
)

__all__ = [
    'Token',
    'FormulaError',
    'InvalidFormulaSyntax',
    'OutOfRangeReference',
    'InvalidToken',
    'ArityMismatch'
]
