"""End-to-end tests for single-line and batch solving."""

import pandas as pd
import pytest

from conftest import SCENARIOS
from core import EvalError, ExpressionSolver, ParseError, PrecedenceMode, solve, solve_both


class TestSolve:
    @pytest.mark.parametrize("line,equal,_", SCENARIOS)
    def test_equal_precedence(self, line: str, equal: int, _: int) -> None:
        assert solve(line, addition_first=False) == equal

    @pytest.mark.parametrize("line,_,addition_first", SCENARIOS)
    def test_addition_first(self, line: str, _: int, addition_first: int) -> None:
        assert solve(line, addition_first=True) == addition_first

    def test_default_is_equal_precedence(self) -> None:
        assert solve("2 * 3 + 4") == 10

    def test_parse_error_propagates(self) -> None:
        with pytest.raises(ParseError):
            solve("2 * x", True)

    def test_unbalanced_open_paren_fails_in_evaluator(self) -> None:
        with pytest.raises(EvalError):
            solve("(1 + 2", False)


class TestExpressionSolver:
    def test_mode(self) -> None:
        assert ExpressionSolver(True).mode is PrecedenceMode.ADDITION_FIRST
        assert ExpressionSolver().addition_first is False

    def test_solve_all(self, scenario_lines: list[str]) -> None:
        results = ExpressionSolver(False).solve_all(scenario_lines + ["   "])

        assert isinstance(results, pd.Series)
        assert results.tolist() == [26, 437, 12240, 13632]
        assert results.index.name == "expression"
        assert results.name == "equal"

    def test_total(self, scenario_lines: list[str]) -> None:
        assert ExpressionSolver(False).total(scenario_lines) == 26335
        assert ExpressionSolver(True).total(scenario_lines) == 693891

    def test_total_of_nothing(self) -> None:
        assert ExpressionSolver(True).total([]) == 0

    def test_error_aborts_batch(self, scenario_lines: list[str]) -> None:
        with pytest.raises(ParseError, match="'%'"):
            ExpressionSolver(True).solve_all(scenario_lines + ["1 % 2"])


class TestSolveBoth:
    def test_columns_and_values(self, scenario_lines: list[str]) -> None:
        results = solve_both(scenario_lines)

        assert list(results.columns) == ["expression", "equal", "addition_first"]
        assert results["expression"].tolist() == scenario_lines
        assert results["equal"].tolist() == [26, 437, 12240, 13632]
        assert results["addition_first"].tolist() == [46, 1445, 669060, 23340]

    def test_accepts_generator(self, scenario_lines: list[str]) -> None:
        results = solve_both(line for line in scenario_lines)

        assert len(results) == 4
