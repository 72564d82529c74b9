"""Unit tests for the postfix stack machine."""

import pytest

from core.rpn_evaluator import EvalError, RPNEvaluator
from core.token_system import Token, TokenType, tokenize


class TestEvaluate:
    def test_postfix_input(self) -> None:
        """Already-postfix tokens bypass conversion."""
        assert RPNEvaluator.evaluate(tokenize("3 4 5 * +")) == 23

    def test_single_operand(self) -> None:
        assert RPNEvaluator.evaluate(tokenize("9")) == 9

    def test_returns_python_int(self) -> None:
        result = RPNEvaluator.evaluate(tokenize("2 3 *"))

        assert type(result) is int
        assert result == 6

    def test_custom_dtype(self) -> None:
        assert RPNEvaluator.evaluate(tokenize("9 9 * 9 +"), dtype="int32") == 90

    def test_large_intermediate_values(self) -> None:
        line = "9 9 * 9 * 9 * 9 * 9 * 9 * 9 * 9 * 9 *"
        assert RPNEvaluator.evaluate(tokenize(line)) == 9 ** 10


class TestEvaluateErrors:
    @pytest.mark.parametrize("token_type", [TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN])
    def test_paren_token_rejected(self, token_type: TokenType) -> None:
        paren = Token(token_type)
        with pytest.raises(EvalError, match="Unexpected parenthesis") as exc_info:
            RPNEvaluator.evaluate(tokenize("1 2 +") + [paren])

        assert exc_info.value.token == paren

    def test_insufficient_operands(self) -> None:
        with pytest.raises(EvalError, match=r"Insufficient operands for \+"):
            RPNEvaluator.evaluate(tokenize("1 +"))

    def test_leftover_operands(self) -> None:
        with pytest.raises(EvalError, match="Stack has 2 elements"):
            RPNEvaluator.evaluate(tokenize("1 2"))

    def test_empty_sequence(self) -> None:
        with pytest.raises(EvalError, match="Stack has 0 elements"):
            RPNEvaluator.evaluate([])
