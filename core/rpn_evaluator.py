"""RPN表达式求值器 - 定宽整数栈机"""
import numpy as np
import logging

from config.config import EVALUATOR_CONFIG
from core.token_system import TokenType, format_tokens

logger = logging.getLogger(__name__)


class EvalError(ValueError):
    """后缀序列无法求值（出现括号、操作数不足等）"""

    def __init__(self, message, token=None):
        super().__init__(message)
        self.token = token


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, dtype=None):
        """
        Args:
            token_sequence: 后缀 Token 序列
            dtype: 整数类型，默认取 EVALUATOR_CONFIG['dtype']
        Returns:
            int 结果
        """
        dtype = np.dtype(dtype or EVALUATOR_CONFIG['dtype'])
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(dtype.type(token.value))

            elif token.type in (TokenType.ADD, TokenType.MULTIPLY):
                if len(stack) < 2:
                    logger.error(f"Insufficient operands for {token.symbol}")
                    logger.error(f"RPN expression: {format_tokens(token_sequence)}")
                    raise EvalError(f"Insufficient operands for {token.symbol}", token=token)
                right = stack.pop()
                left = stack.pop()
                if token.type == TokenType.ADD:
                    stack.append(left + right)
                else:
                    stack.append(left * right)

            else:
                logger.error(f"Unexpected parenthesis token in RPN: {format_tokens(token_sequence)}")
                raise EvalError(f"Unexpected parenthesis token {token.symbol!r} in postfix expression",
                                token=token)

        if len(stack) != 1:
            logger.error(f"Stack has {len(stack)} elements after evaluation, expected 1")
            logger.error(f"RPN expression: {format_tokens(token_sequence)}")
            raise EvalError(f"Stack has {len(stack)} elements after evaluation, expected 1")

        return int(stack[0])
