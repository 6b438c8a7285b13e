from enum import Enum

from .config import NUM_ROWS, NUM_COLS, MAX_COLS, ERROR_MARKER, RESULT_FORMAT


class CellKind(Enum):
    EMPTY = "empty"
    TEXT = "text"
    NUMERIC = "numeric"
    # Only seen while a freshly written formula is being evaluated
    FORMULA = "formula"


# Cell holds one grid entry: its kind, numeric value and display text
class Cell:
    def __init__(self, kind=CellKind.EMPTY, number=0.0, text=None, formula=None):
        self.kind = kind        # CellKind tag
        self.number = number    # Value seen by formula references
        self.text = text        # Display text, None only for EMPTY cells
        self.formula = formula  # Formula source of a live formula cell

    @property
    def is_formula(self):
        return self.kind is CellKind.NUMERIC and self.formula is not None

    def copy(self):
        return Cell(self.kind, self.number, self.text, self.formula)

    def __repr__(self):
        return (f"Cell({self.kind.name}, number={self.number!r}, "
                f"text={self.text!r}, formula={self.formula!r})")


class ValueStore:
    """
    Fixed-size grid of cells addressed by zero-based (row, col).

    The store owns every Cell. Readers get copies from get(); the write
    methods below are the only way cell state changes.
    """

    def __init__(self, rows=NUM_ROWS, cols=NUM_COLS):
        if rows < 1:
            raise ValueError(f"A sheet needs at least one row, got {rows}")
        if not 1 <= cols <= MAX_COLS:
            raise ValueError(f"Column count must be between 1 and {MAX_COLS}, got {cols}")
        self.rows = rows
        self.cols = cols
        self._cells = [[Cell() for _ in range(cols)] for _ in range(rows)]

    def in_bounds(self, row, col):
        return 0 <= row < self.rows and 0 <= col < self.cols

    def check(self, row, col):
        if not self.in_bounds(row, col):
            raise ValueError(
                f"Cell ({row}, {col}) is outside the {self.rows}x{self.cols} grid")

    def coordinates(self):
        """Yield every (row, col) in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def get(self, row, col):
        self.check(row, col)
        return self._cells[row][col].copy()

    def kind(self, row, col):
        return self._cells[row][col].kind

    def number(self, row, col):
        return self._cells[row][col].number

    def text(self, row, col):
        return self._cells[row][col].text

    def formula(self, row, col):
        return self._cells[row][col].formula

    def is_formula(self, row, col):
        return self._cells[row][col].is_formula

    def initialize_cell(self, row, col):
        """Give a never-written cell its default NUMERIC/0 state."""
        cell = self._cells[row][col]
        if cell.kind is CellKind.EMPTY:
            self._cells[row][col] = Cell(CellKind.NUMERIC, 0.0, "")

    def set_num_value(self, row, col, text):
        # Numeric literals keep the text the user typed for display
        self._cells[row][col] = Cell(CellKind.NUMERIC, float(text), text)

    def set_string_value(self, row, col, text):
        self._cells[row][col] = Cell(CellKind.TEXT, 0.0, text)

    def set_formula_pending(self, row, col, formula):
        self._cells[row][col] = Cell(CellKind.FORMULA, 0.0, formula, formula)

    def set_formula_result(self, row, col, formula, result):
        text = RESULT_FORMAT % result
        self._cells[row][col] = Cell(CellKind.NUMERIC, result, text, formula)
        return text

    def set_formula_error(self, row, col):
        """Show ERROR for a written formula that failed; the cell stays TEXT."""
        self._cells[row][col] = Cell(CellKind.TEXT, 0.0, ERROR_MARKER)
        return ERROR_MARKER

    def mark_recalc_error(self, row, col):
        """Show ERROR for a live formula that failed recalculation.

        The formula source and the last valid number are kept, so the cell
        recovers on the next successful recalculation.
        """
        self._cells[row][col].text = ERROR_MARKER
        return ERROR_MARKER

    def clear(self, row, col):
        """Reset a cell to EMPTY. Returns False if it was already empty."""
        if self._cells[row][col].kind is CellKind.EMPTY:
            return False
        self._cells[row][col] = Cell()
        return True
