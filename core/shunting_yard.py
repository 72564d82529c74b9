"""中缀 -> 后缀转换（Shunting-Yard），优先级策略可切换"""
from enum import Enum
import logging

from core.token_system import TokenType, ParseError

logger = logging.getLogger(__name__)


class PrecedenceMode(Enum):
    EQUAL = False           # + 和 * 同级，从左到右
    ADDITION_FIRST = True   # + 比 * 优先

    @classmethod
    def resolve(cls, mode):
        """接受 bool 或 PrecedenceMode"""
        if isinstance(mode, cls):
            return mode
        return cls(bool(mode))


def _should_pop(top, incoming, addition_first):
    if not addition_first:
        # 同级左结合：总是先弹出栈顶
        return True
    # 唯一的例外：栈顶是 *，新来的是 +
    return not (top.type == TokenType.MULTIPLY and incoming.type == TokenType.ADD)


def to_postfix(tokens, addition_first=False):
    """
    Shunting-Yard 算法，把中缀 Token 序列转换为后缀（RPN）序列
    Args:
        tokens: tokenize() 的结果
        addition_first: True 为加法优先模式，False 为同级模式（也可传 PrecedenceMode）
    Returns:
        后缀 Token 列表
    """
    addition_first = PrecedenceMode.resolve(addition_first).value
    operator_stack = []
    output_queue = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output_queue.append(token)

        elif token.type == TokenType.LEFT_PAREN:
            operator_stack.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            while operator_stack and operator_stack[-1].type != TokenType.LEFT_PAREN:
                output_queue.append(operator_stack.pop())
            if not operator_stack:
                logger.error("Unmatched closing parenthesis")
                raise ParseError("Unmatched closing parenthesis", char=')')
            operator_stack.pop()  # 丢弃左括号

        else:
            while operator_stack and operator_stack[-1].type != TokenType.LEFT_PAREN:
                if not _should_pop(operator_stack[-1], token, addition_first):
                    break
                output_queue.append(operator_stack.pop())
            operator_stack.append(token)

    # 剩余操作符按栈顶优先输出；残留的左括号交给求值器报错
    while operator_stack:
        output_queue.append(operator_stack.pop())

    return output_queue
