"""
Grid Sheet

A fixed-size spreadsheet of strings, numbers and additive formulas that
recalculates every formula cell after each write.
"""

from .sheet import Sheet
from .store import Cell, CellKind, ValueStore
from .classifier import CellInput, classify, is_valid_num, is_valid_formula
from .evaluator import FormulaEvaluator
from .recalc import RecalcEngine
from .notifier import DisplayNotifier, NullNotifier, PrintNotifier
from .main import run_sheet
from .core.errors import (
    FormulaError, InvalidFormulaSyntax, OutOfRangeReference,
    InvalidToken, ArityMismatch
)

__version__ = "0.1.0"
__all__ = [
    "Sheet", "Cell", "CellKind", "ValueStore",
    "CellInput", "classify", "is_valid_num", "is_valid_formula",
    "FormulaEvaluator", "RecalcEngine",
    "DisplayNotifier", "NullNotifier", "PrintNotifier",
    "run_sheet",
    "FormulaError", "InvalidFormulaSyntax", "OutOfRangeReference",
    "InvalidToken", "ArityMismatch",
]
