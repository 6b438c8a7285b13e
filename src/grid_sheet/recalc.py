import logging

from .core.errors import FormulaError

logger = logging.getLogger(__name__)


class RecalcEngine:
    """
    Re-evaluates every live formula cell after a write.

    There is no dependency graph: each write rescans the whole grid in
    row-major order and recomputes every formula cell except the one that
    was just written, whether or not it references anything that changed.
    Notifications therefore fire in row-major order.
    """

    def __init__(self, store, evaluator, notifier):
        self.store = store
        self.evaluator = evaluator
        self.notifier = notifier

    def on_cell_written(self, row, col):
        """
        Recalculate all formula cells other than (row, col).
        :return: The coordinates recalculated, in the order they were visited.
        """
        updated = []
        for i, j in self.store.coordinates():
            if (i, j) == (row, col):
                continue
            if self.store.is_formula(i, j):
                self.update_cell_value(i, j)
                updated.append((i, j))
        return updated

    def update_cell_value(self, row, col):
        formula = self.store.formula(row, col)
        try:
            result = self.evaluator.evaluate(formula)
        except FormulaError as e:
            logger.debug("Recalculation of (%d, %d) failed: %s", row, col, e)
            text = self.store.mark_recalc_error(row, col)
        else:
            text = self.store.set_formula_result(row, col, formula, result)
        self.notifier.on_cell_changed(row, col, text)
