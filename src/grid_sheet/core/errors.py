"""
Formula failures raised by the lexer and evaluator.

Every subclass is absorbed by Sheet and RecalcEngine and shown to the
user as the ERROR display marker; the hierarchy exists so callers and
tests can still tell the failures apart.
"""


class FormulaError(ValueError):
    def __init__(self, message, formula=None, pos=None):
        self.formula = formula
        self.pos = pos
        if pos is not None:
            message = f"{message} at position {pos}"
        super().__init__(message)


# Grammar check failed before evaluation started (e.g. a lowercase letter)
class InvalidFormulaSyntax(FormulaError):
    pass


# Cell reference outside the grid (e.g. =Z99 on a 10x7 sheet)
class OutOfRangeReference(FormulaError):
    pass


# Character that cannot start an operand or operator
class InvalidToken(FormulaError):
    pass


# Operand count is not operator count + 1
class ArityMismatch(FormulaError):
    pass
