"""core/operators.py"""
import logging

import numpy as np

from core.errors import DomainError
from core.token_system import OperationType

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合"""

    # 二元操作符========================================
    @staticmethod
    def add(left, right):
        return left + right

    @staticmethod
    def sub(left, right):
        return left - right

    @staticmethod
    def mult(left, right):
        return left * right

    @staticmethod
    def div(left, right):
        """除法：除数为0时报 DomainError"""
        if right == 0:
            raise DomainError("can't divide by zero")
        return left / right

    @staticmethod
    def mod(left, right):
        """浮点取余，符号与被除数一致（C fmod 语义）"""
        with np.errstate(invalid='ignore', divide='ignore'):
            return float(np.fmod(left, right))

    @staticmethod
    def pow(left, right):
        """实数乘方；负底数配分数指数得到 nan，不报错"""
        with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
            return float(np.power(np.float64(left), np.float64(right)))

    # 一元操作符====================
    # ln/log/sin/cos/tan/atan 不做定义域检查，越界时返回非有限值

    @staticmethod
    def ln(value):
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.log(value))

    @staticmethod
    def log(value):
        """以10为底"""
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.log10(value))

    @staticmethod
    def sin(value):
        with np.errstate(invalid='ignore'):
            return float(np.sin(value))

    @staticmethod
    def cos(value):
        with np.errstate(invalid='ignore'):
            return float(np.cos(value))

    @staticmethod
    def tan(value):
        with np.errstate(invalid='ignore'):
            return float(np.tan(value))

    @staticmethod
    def asin(value):
        if value > 1 or value < -1:
            raise DomainError("value in asin or acos must be in range[-1; 1]")
        return float(np.arcsin(value))

    @staticmethod
    def acos(value):
        if value > 1 or value < -1:
            raise DomainError("value in asin or acos must be in range[-1; 1]")
        return float(np.arccos(value))

    @staticmethod
    def atan(value):
        return float(np.arctan(value))

    @staticmethod
    def sqrt(value):
        if value < 0:
            raise DomainError("negative in sqrt")
        return float(np.sqrt(value))

    @staticmethod
    def unary_minus(value):
        return -value


# 操作类型 -> 实现
BINARY_OPERATORS = {
    OperationType.ADD: Operators.add,
    OperationType.SUB: Operators.sub,
    OperationType.MULT: Operators.mult,
    OperationType.DIV: Operators.div,
    OperationType.MOD: Operators.mod,
    OperationType.POW: Operators.pow,
}

UNARY_OPERATORS = {
    OperationType.LN: Operators.ln,
    OperationType.LOG: Operators.log,
    OperationType.SIN: Operators.sin,
    OperationType.COS: Operators.cos,
    OperationType.TAN: Operators.tan,
    OperationType.ASIN: Operators.asin,
    OperationType.ACOS: Operators.acos,
    OperationType.ATAN: Operators.atan,
    OperationType.SQRT: Operators.sqrt,
    OperationType.UNARY_MINUS: Operators.unary_minus,
}


def apply_operator(token, operands):
    """
    归约一个操作符：按元数从操作数栈弹出、计算、结果入栈
    操作数不足时用 nan 补位（非法但通过校验的表达式不报错）
    """
    if token.arity == 2:
        right = operands.pop() if operands else float('nan')
        left = operands.pop() if operands else float('nan')
        operands.append(BINARY_OPERATORS[token.operation](left, right))
    elif token.arity == 1:
        value = operands.pop() if operands else float('nan')
        operands.append(UNARY_OPERATORS[token.operation](value))
    else:
        # 残留的括号直接丢弃
        logger.debug(f"Discarding unmatched {token.operation.name} during reduction")
