# Token class represents a single unit of a formula with its position
# Produced lazily by FormulaLexer and consumed by FormulaEvaluator
class Token:
    def __init__(self, type, value, pos=0):
        self.type = type      # Token type (NUMBER, CELL_ADDRESS, OPERATOR)
        self.value = value    # float for NUMBER, (row, col) for CELL_ADDRESS, '+' for OPERATOR
        self.pos = pos        # Offset of the first character in the formula

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value, self.pos) == (other.type, other.value, other.pos)

    def __repr__(self):
        return f"Token({self.type}, {self.value!r}, pos={self.pos})"

    __str__ = __repr__
