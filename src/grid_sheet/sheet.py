import csv
import io
import logging

import pyarrow as pa

from .config import NUM_ROWS, NUM_COLS
from .store import ValueStore, CellKind
from .classifier import classify, CellInput
from .evaluator import FormulaEvaluator
from .recalc import RecalcEngine
from .notifier import NullNotifier
from .core.errors import FormulaError
from .utils import parse_address, index_to_col

logger = logging.getLogger(__name__)


class Sheet:
    """
    A spreadsheet of strings, numbers and additive formulas.

    Every write classifies the input, stores it, recalculates every other
    formula cell and reports each touched cell to the notifier, the written
    cell last. Formula failures never escape: the cell displays ERROR.
    """

    def __init__(self, rows=NUM_ROWS, cols=NUM_COLS, notifier=None):
        self.store = ValueStore(rows, cols)
        self.evaluator = FormulaEvaluator(self.store)
        self.notifier = notifier or NullNotifier()
        self.engine = RecalcEngine(self.store, self.evaluator, self.notifier)

    @property
    def rows(self):
        return self.store.rows

    @property
    def cols(self):
        return self.store.cols

    def set_cell_value(self, row, col, text):
        """
        Store raw input in a cell and recalculate the sheet.

        Args:
            row (int): Zero-based row
            col (int): Zero-based column
            text (str): Raw input; None or '' leaves the sheet untouched
        """
        if not text:
            return
        self.store.check(row, col)
        self.store.initialize_cell(row, col)

        kind = classify(text)
        if kind is CellInput.NUMERIC:
            self.store.set_num_value(row, col, text)
            display = text
        else:
            self.store.set_string_value(row, col, text)
            display = text
            if kind is CellInput.FORMULA:
                display = self._evaluate_new_formula(row, col, text)

        self.engine.on_cell_written(row, col)
        self.notifier.on_cell_changed(row, col, display)

    def _evaluate_new_formula(self, row, col, formula):
        self.store.set_formula_pending(row, col, formula)
        try:
            result = self.evaluator.evaluate(formula)
        except FormulaError as e:
            logger.debug("Formula %r in (%d, %d) failed: %s", formula, row, col, e)
            return self.store.set_formula_error(row, col)
        return self.store.set_formula_result(row, col, formula, result)

    def clear_cell(self, row, col):
        self.store.check(row, col)
        if self.store.clear(row, col):
            self.notifier.on_cell_changed(row, col, "")

    def get_display_text(self, row, col):
        self.store.check(row, col)
        return self.store.text(row, col) or ""

    def get_number(self, row, col):
        """Numeric value formula references see for this cell."""
        self.store.check(row, col)
        return self.store.number(row, col)

    def get_cell(self, row, col):
        return self.store.get(row, col)

    # A1-notation shortcuts
    def set_cell(self, address, text):
        self.set_cell_value(*parse_address(address), text)

    def clear(self, address):
        self.clear_cell(*parse_address(address))

    def get(self, address):
        return self.get_display_text(*parse_address(address))

    def get_grid_csv(self):
        """Returns the display text of the used region in CSV format.
        Does not include row or column headers.

        Returns:
            str: CSV representation of the grid, '' when every cell is empty
        """
        used = [(row, col) for row, col in self.store.coordinates()
                if self.store.kind(row, col) is not CellKind.EMPTY]
        if not used:
            return ""

        max_row = max(row for row, _ in used)
        max_col = max(col for _, col in used)

        output = io.StringIO()
        writer = csv.writer(output)
        for row in range(max_row + 1):
            writer.writerow([self.get_display_text(row, col) for col in range(max_col + 1)])
        return output.getvalue()

    def to_arrow(self):
        """Snapshot of the numeric values as a pyarrow Table.

        One float64 column per grid column, named by its letter; EMPTY and
        TEXT cells are null.
        """
        columns = {}
        for col in range(self.cols):
            values = []
            for row in range(self.rows):
                if self.store.kind(row, col) is CellKind.NUMERIC:
                    values.append(self.store.number(row, col))
                else:
                    values.append(None)
            columns[index_to_col(col)] = pa.array(values, type=pa.float64())
        return pa.table(columns)
