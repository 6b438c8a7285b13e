import pytest

from grid_sheet.core.token import Token
from grid_sheet.core.errors import (
    FormulaError, InvalidFormulaSyntax, OutOfRangeReference,
    InvalidToken, ArityMismatch
)
from grid_sheet.lexer import FormulaLexer
from grid_sheet.evaluator import FormulaEvaluator
from grid_sheet.store import ValueStore


@pytest.fixture
def store():
    store = ValueStore()
    store.set_num_value(0, 0, "3")   # A1
    store.set_num_value(1, 1, "4")   # B2
    store.set_string_value(2, 2, "hello")  # C3
    return store


def test_lexer_tokens():
    tokens = FormulaLexer("= B12 + 2.5").tokenize()
    assert tokens == [
        Token('CELL_ADDRESS', (11, 1), 2),
        Token('OPERATOR', '+', 6),
        Token('NUMBER', 2.5, 8),
    ]


def test_lexer_splits_second_decimal_point():
    tokens = FormulaLexer("=1.2.3").tokenize()
    assert [t.value for t in tokens] == [1.2, 0.3]


def test_lexer_rejects_letter_without_row():
    with pytest.raises(InvalidToken):
        FormulaLexer("=A+1").tokenize()


def test_lexer_rejects_lone_point():
    with pytest.raises(InvalidToken):
        FormulaLexer("=1+.").tokenize()


def test_sum_of_references(store):
    assert FormulaEvaluator(store).evaluate("=A1+B2") == 7


def test_literals_and_references(store):
    assert FormulaEvaluator(store).evaluate("=A1 + 0.5 + 10") == pytest.approx(13.5)


def test_text_and_empty_cells_count_as_zero(store):
    assert FormulaEvaluator(store).evaluate("=C3+D4+1") == 1


def test_lowercase_is_syntax_error(store):
    with pytest.raises(InvalidFormulaSyntax):
        FormulaEvaluator(store).evaluate("=A1+b2")


@pytest.mark.parametrize("formula", ["=A1+", "=A1 B2", "=+A1", "=A1++B2", "=", "=1.2.3"])
def test_arity_mismatch(store, formula):
    with pytest.raises(ArityMismatch):
        FormulaEvaluator(store).evaluate(formula)


@pytest.mark.parametrize("formula", ["=Z99", "=A11", "=H1", "=A0", "=A1+G11"])
def test_out_of_range(store, formula):
    with pytest.raises(OutOfRangeReference):
        FormulaEvaluator(store).evaluate(formula)


def test_first_failure_wins(store):
    # The bad reference comes before the bad token
    with pytest.raises(OutOfRangeReference):
        FormulaEvaluator(store).evaluate("=A99+B")


def test_all_failures_are_formula_errors(store):
    for formula in ["=a1", "=Z99", "=A+1", "=A1+"]:
        with pytest.raises(FormulaError):
            FormulaEvaluator(store).evaluate(formula)


def test_evaluation_is_idempotent(store):
    evaluator = FormulaEvaluator(store)
    first = evaluator.evaluate("=A1+B2+0.1")
    second = evaluator.evaluate("=A1+B2+0.1")
    assert first == second
