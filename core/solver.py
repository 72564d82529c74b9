"""逐行求解 + 批量汇总"""
import logging
import numpy as np
import pandas as pd

from config.config import EVALUATOR_CONFIG
from core.token_system import tokenize
from core.shunting_yard import to_postfix, PrecedenceMode
from core.rpn_evaluator import RPNEvaluator

logger = logging.getLogger(__name__)


def solve(line, addition_first=False, dtype=None):
    """tokenize -> to_postfix -> evaluate，错误直接向上抛出"""
    tokens = tokenize(line)
    postfix = to_postfix(tokens, addition_first)
    return RPNEvaluator.evaluate(postfix, dtype=dtype)


class ExpressionSolver:

    def __init__(self, addition_first=None, dtype=None):
        if addition_first is None:
            addition_first = EVALUATOR_CONFIG['default_addition_first']
        self.mode = PrecedenceMode.resolve(addition_first)
        self.dtype = np.dtype(dtype or EVALUATOR_CONFIG['dtype'])

    @property
    def addition_first(self):
        return self.mode.value

    def solve(self, line):
        return solve(line, self.addition_first, dtype=self.dtype)

    def solve_all(self, lines):
        """
        对每一行求值，空行跳过
        任何一行出错都会中止整个批次（不做部分恢复）
        Returns:
            以表达式文本为 index 的结果 Series
        """
        expressions = [line.strip() for line in lines if line.strip()]
        logger.info(f"Solving {len(expressions)} expressions in {self.mode.name} mode")

        results = []
        for i, expression in enumerate(expressions):
            value = self.solve(expression)
            logger.debug(f"[{i}] {expression} = {value}")
            results.append(value)

        return pd.Series(results, index=pd.Index(expressions, name='expression'),
                         dtype=self.dtype, name=self.mode.name.lower())

    def total(self, lines):
        results = self.solve_all(lines)
        total = results.to_numpy().sum(dtype=self.dtype)
        logger.info(f"Total ({self.mode.name}): {total}")
        return int(total)


def solve_both(lines, dtype=None):
    """
    两种优先级模式都算一遍
    Returns:
        DataFrame，列为 expression / equal / addition_first
    """
    lines = list(lines)
    equal = ExpressionSolver(PrecedenceMode.EQUAL, dtype=dtype).solve_all(lines)
    addition_first = ExpressionSolver(PrecedenceMode.ADDITION_FIRST, dtype=dtype).solve_all(lines)
    return pd.DataFrame({
        'expression': equal.index,
        'equal': equal.to_numpy(),
        'addition_first': addition_first.to_numpy(),
    })
