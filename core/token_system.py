"""core/token_system.py"""
from enum import Enum

import numpy as np

from config.config import EVALUATOR_CONFIG
from core.errors import ExpressionError


class OperationType(Enum):
    ADD = "add"
    SUB = "sub"
    MULT = "mult"
    DIV = "div"
    MOD = "mod"
    POW = "pow"
    OPEN_BRACKET = "open_bracket"
    CLOSE_BRACKET = "close_bracket"
    LN = "ln"
    LOG = "log"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    SQRT = "sqrt"
    UNARY_MINUS = "unary_minus"


class Token:
    def __init__(self, operation, symbol, priority, arity=0):
        self.operation = operation
        self.symbol = symbol  # 表达式中的拼写
        self.priority = priority  # 0=括号 1=加减 2=乘除模 3=乘方 4=函数 5=一元负号
        self.arity = arity

    @property
    def length(self):
        return len(self.symbol)

    def __repr__(self):
        return f"Token({self.operation.name}, priority={self.priority}, arity={self.arity})"


# Token定义字典
TOKEN_DEFINITIONS = {
    # 括号
    '(': Token(OperationType.OPEN_BRACKET, '(', 0),
    ')': Token(OperationType.CLOSE_BRACKET, ')', 0),

    # 二元操作符
    '+': Token(OperationType.ADD, '+', 1, arity=2),
    '-': Token(OperationType.SUB, '-', 1, arity=2),
    '*': Token(OperationType.MULT, '*', 2, arity=2),
    '/': Token(OperationType.DIV, '/', 2, arity=2),
    'mod': Token(OperationType.MOD, 'mod', 2, arity=2),
    '^': Token(OperationType.POW, '^', 3, arity=2),

    # 一元函数
    'ln': Token(OperationType.LN, 'ln', 4, arity=1),
    'log': Token(OperationType.LOG, 'log', 4, arity=1),
    'sin': Token(OperationType.SIN, 'sin', 4, arity=1),
    'cos': Token(OperationType.COS, 'cos', 4, arity=1),
    'tan': Token(OperationType.TAN, 'tan', 4, arity=1),
    'asin': Token(OperationType.ASIN, 'asin', 4, arity=1),
    'acos': Token(OperationType.ACOS, 'acos', 4, arity=1),
    'atan': Token(OperationType.ATAN, 'atan', 4, arity=1),
    'sqrt': Token(OperationType.SQRT, 'sqrt', 4, arity=1),

    # 一元负号（长度为1，拼写与减号相同）
    'neg': Token(OperationType.UNARY_MINUS, '-', 5, arity=1),
}

# 多字符名称：首字符 + 下一个字符 -> Token名
_LOOKAHEAD_NAMES = {
    ('l', 'n'): 'ln',
    ('l', 'o'): 'log',
    ('s', 'i'): 'sin',
    ('s', 'q'): 'sqrt',
    ('c', 'o'): 'cos',
    ('t', 'a'): 'tan',
    ('a', 's'): 'asin',
    ('a', 'c'): 'acos',
    ('a', 't'): 'atan',
    ('m', 'o'): 'mod',
}

SINGLE_CHAR_OPERATORS = '()+-*/^'
DIGITS = '0123456789'


class Tokenizer:
    @staticmethod
    def classify(expression, index, operand_expected=False):
        """
        识别 index 处的操作符/函数/括号
        Args:
            expression: 完整表达式
            index: 当前位置
            operand_expected: 下一个应当是操作数（开头、'('、二元操作符或函数之后）
        Returns:
            (Token, 字符长度)
        """
        char = expression[index]

        if char == '-' and operand_expected:
            token = TOKEN_DEFINITIONS['neg']
        elif char in SINGLE_CHAR_OPERATORS:
            token = TOKEN_DEFINITIONS[char]
        else:
            # 多字符函数名只看一个字符的前瞻
            following = expression[index + 1] if index + 1 < len(expression) else ''
            name = _LOOKAHEAD_NAMES.get((char, following))
            if name is None:
                raise ExpressionError(f"unknown symbol '{char}' at position {index}")
            token = TOKEN_DEFINITIONS[name]

        return token, token.length

    @staticmethod
    def is_prefix(token):
        """一元前缀操作符（函数或负号）"""
        return token.arity == 1


def read_number(expression, index, operands):
    """
    从数字起始位置读取最长的数字串（至多一个小数点）
    若数字串前两个字符是 'E' 和符号，则该值是指数：栈顶操作数原地乘以10的幂，
    否则作为新操作数入栈。
    Returns:
        除首字符外额外消耗的字符数
    """
    start = index
    seen_dot = False
    while index < len(expression):
        char = expression[index]
        if char == '.':
            if seen_dot:
                break
            seen_dot = True
        elif char not in DIGITS:
            break
        index += 1

    value = float(expression[start:index])
    exponent_marker = EVALUATOR_CONFIG["exponent_marker"]

    if start >= 2 and expression[start - 1] in '+-' and expression[start - 2] == exponent_marker:
        exponent = -value if expression[start - 1] == '-' else value
        base = operands.pop() if operands else float('nan')
        with np.errstate(over='ignore', invalid='ignore'):
            operands.append(float(base * np.power(10.0, exponent)))
    else:
        operands.append(value)

    return index - start - 1
