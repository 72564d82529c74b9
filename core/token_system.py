"""core/token_system.py"""
from enum import Enum
import logging

from config.config import TOKENIZER_CONFIG

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"            # 单个数字 0-9
    ADD = "add"                  # +
    MULTIPLY = "multiply"        # *
    LEFT_PAREN = "left_paren"    # (
    RIGHT_PAREN = "right_paren"  # )


class ParseError(ValueError):
    """表达式中出现无法识别的字符，或括号不匹配"""

    def __init__(self, message, char=None, position=None):
        super().__init__(message)
        self.char = char
        self.position = position


class Token:
    __slots__ = ('type', 'value')

    def __init__(self, token_type, value=None):
        self.type = token_type
        self.value = value

    @property
    def symbol(self):
        if self.type == TokenType.NUMBER:
            return str(self.value)
        return SYMBOLS[self.type]

    @property
    def is_operator(self):
        return self.type in (TokenType.ADD, TokenType.MULTIPLY)

    @property
    def is_paren(self):
        return self.type in (TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Number({self.value})"
        return self.type.name.title().replace('_', '')


SYMBOLS = {
    TokenType.ADD: '+',
    TokenType.MULTIPLY: '*',
    TokenType.LEFT_PAREN: '(',
    TokenType.RIGHT_PAREN: ')',
}

# 字符 -> Token 映射（数字 0-9 + 运算符 + 括号）
TOKEN_DEFINITIONS = {
    '+': Token(TokenType.ADD),
    '*': Token(TokenType.MULTIPLY),
    '(': Token(TokenType.LEFT_PAREN),
    ')': Token(TokenType.RIGHT_PAREN),
}
TOKEN_DEFINITIONS.update({str(d): Token(TokenType.NUMBER, d) for d in range(10)})


def tokenize(line):
    """
    把一行文本切分成 Token 序列
    注意：每个数字字符单独成为一个 Number，"42" -> [Number(4), Number(2)]
    Args:
        line: 原始表达式文本
    Returns:
        Token 列表（从左到右）
    Raises:
        ParseError: 遇到非法字符
    """
    ignored = TOKENIZER_CONFIG['ignored_characters']
    tokens = []
    for position, char in enumerate(line):
        if char in ignored:
            continue
        token = TOKEN_DEFINITIONS.get(char)
        if token is None:
            logger.error(f"Invalid character {char!r} at column {position} in: {line.strip()}")
            raise ParseError(f"Invalid character {char!r} at column {position}",
                             char=char, position=position)
        tokens.append(token)
    return tokens


def format_tokens(tokens):
    """Token 序列转回文本，用空格分隔"""
    return ' '.join(t.symbol for t in tokens)


class RPNValidator:
    @staticmethod
    def is_balanced(tokens):
        """括号是否配对，且不会提前闭合"""
        depth = 0
        for tk in tokens:
            if tk.type == TokenType.LEFT_PAREN:
                depth += 1
            elif tk.type == TokenType.RIGHT_PAREN:
                depth -= 1
                if depth < 0:
                    return False
        return depth == 0

    @staticmethod
    def is_valid_infix(tokens):
        """
        中缀表达式检查：括号平衡 + 操作数/操作符交替
        expect_operand 为 True 时下一个只能是数字或左括号
        """
        if not tokens or not RPNValidator.is_balanced(tokens):
            return False

        expect_operand = True
        for tk in tokens:
            if expect_operand:
                if tk.type == TokenType.NUMBER:
                    expect_operand = False
                elif tk.type != TokenType.LEFT_PAREN:
                    return False
            else:
                if tk.is_operator:
                    expect_operand = True
                elif tk.type != TokenType.RIGHT_PAREN:
                    return False
        return not expect_operand

    @staticmethod
    def calculate_stack_size(postfix):
        """计算后缀序列扫描完后栈中的元素数量（括号忽略）"""
        stack_size = 0
        for tk in postfix:
            if tk.type == TokenType.NUMBER:
                stack_size += 1
            elif tk.is_operator:
                stack_size -= 1
        return stack_size

    @staticmethod
    def is_valid_postfix(postfix):
        """后缀序列是否可以安全求值：无括号、不下溢、最终栈==1"""
        stack_size = 0
        for tk in postfix:
            if tk.is_paren:
                return False
            if tk.type == TokenType.NUMBER:
                stack_size += 1
            else:
                if stack_size < 2:
                    return False
                stack_size -= 1
        return stack_size == 1
