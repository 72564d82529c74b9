"""核心模块 - Token系统、Shunting-Yard转换和RPN求值器"""
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, ParseError,
    tokenize, format_tokens, RPNValidator
)
from .shunting_yard import PrecedenceMode, to_postfix
from .rpn_evaluator import RPNEvaluator, EvalError
from .solver import solve, solve_both, ExpressionSolver

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'ParseError',
    'tokenize', 'format_tokens', 'RPNValidator',
    'PrecedenceMode', 'to_postfix',
    'RPNEvaluator', 'EvalError',
    'solve', 'solve_both', 'ExpressionSolver'
]
