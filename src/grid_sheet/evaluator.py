from .lexer import FormulaLexer
from .classifier import is_valid_formula
from .core.errors import InvalidFormulaSyntax, OutOfRangeReference, ArityMismatch


class FormulaEvaluator:
    """
    Evaluates additive formulas against the numeric values of a ValueStore.

    Operands are pushed on a stack while '+' operators are counted; a formula
    with N operands must have exactly N - 1 operators. The result is the sum
    of the drained stack.
    """

    def __init__(self, store):
        """
        :param store: The ValueStore whose cells formula references read.
        """
        self.store = store

    def evaluate(self, formula):
        """
        Evaluate a formula such as '=A1+B2+0.5'.
        :param formula: Formula source including the leading '='.
        :return: The sum as a float.
        :raises FormulaError: One of its subclasses when the formula fails.
        """
        if not is_valid_formula(formula):
            raise InvalidFormulaSyntax("Not a valid formula", formula)

        stack = []
        op_count = 0
        for token in FormulaLexer(formula):
            if token.type == 'OPERATOR':
                op_count += 1
            elif token.type == 'CELL_ADDRESS':
                row, col = token.value
                if not self.store.in_bounds(row, col):
                    raise OutOfRangeReference(
                        f"Reference to row {row + 1}, column {col + 1} is outside "
                        f"the {self.store.rows}x{self.store.cols} grid",
                        formula, token.pos)
                stack.append(self.store.number(row, col))
            else:
                stack.append(token.value)

        if len(stack) != op_count + 1:
            raise ArityMismatch(
                f"Expected {op_count + 1} operand(s) for {op_count} '+' "
                f"operator(s), found {len(stack)}", formula)

        result = 0.0
        while stack:
            result += stack.pop()
        return result
