"""core/errors.py - 计算器异常层级"""


class CalculatorError(Exception):
    """所有计算器错误的基类"""


class DomainError(CalculatorError):
    """数学上无定义的运算：除零、负数开方、asin/acos 越界"""


class ExpressionError(CalculatorError):
    """表达式本身无法处理：未知字符、绘图时缺少变量等"""
