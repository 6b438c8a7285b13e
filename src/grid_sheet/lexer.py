from .core.token import Token
from .core.errors import InvalidToken
from .classifier import DIGITS, UPPERCASE, EQUALS_CHAR


# FormulaLexer breaks a formula like '=A1 + 2.5' into tokens
# Tokens are produced lazily so the evaluator sees failures in source order
class FormulaLexer:
    def __init__(self, text):
        self.text = text  # Formula source, including the leading '='
        self.pos = 0      # Current position in text

    def __iter__(self):
        return self.tokens()

    def tokens(self):
        while self.pos < len(self.text):
            char = self.text[self.pos]

            # Skip whitespace and the '=' marker
            if char.isspace() or char == EQUALS_CHAR:
                self.pos += 1
            elif char == '+':
                yield Token('OPERATOR', char, self.pos)
                self.pos += 1
            # Cell reference: one uppercase letter then the row digits
            elif char in UPPERCASE:
                yield self._cell_address()
            # Decimal literal
            elif char in DIGITS or char == '.':
                yield self._number()
            else:
                raise InvalidToken(f"Unexpected character {char!r}", self.text, self.pos)

    def tokenize(self):
        """Tokenize the whole formula at once."""
        return list(self.tokens())

    def _cell_address(self):
        start = self.pos
        col = ord(self.text[start]) - ord('A')
        self.pos += 1
        if self.pos >= len(self.text) or self.text[self.pos] not in DIGITS:
            raise InvalidToken("Column letter must be followed by a row number",
                               self.text, start)
        digits = self._read_digits()
        # Rows are 1-based in formulas
        return Token('CELL_ADDRESS', (int(digits) - 1, col), start)

    def _number(self):
        start = self.pos
        result = self._read_digits()
        if self.pos < len(self.text) and self.text[self.pos] == '.':
            self.pos += 1
            result += '.' + self._read_digits()
        if result == '.':
            raise InvalidToken("Decimal point without digits", self.text, start)
        return Token('NUMBER', float(result), start)

    def _read_digits(self):
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in DIGITS:
            self.pos += 1
        return self.text[start:self.pos]
