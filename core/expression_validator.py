"""core/expression_validator.py"""
from config.config import EVALUATOR_CONFIG
from core.token_system import DIGITS


class ExpressionValidator:
    """求值前的两项检查：括号配对、长度与结尾字符"""

    @staticmethod
    def is_correct_brackets(expression):
        """括号计数在扫描过程中不能为负，结束时必须为0"""
        counter = 0
        for char in expression:
            if char == '(':
                counter += 1
            elif char == ')':
                counter -= 1
            if counter < 0:
                return False
        return counter == 0

    @staticmethod
    def is_correct_expression(expression, max_length=None):
        """
        表达式可以交给求值器的条件：
        - 括号正确
        - 长度不超过 max_length（默认255）
        - 最后一个字符是数字或 ')'
        连续操作符、空括号等结构问题不在此检查
        """
        if max_length is None:
            max_length = EVALUATOR_CONFIG["max_expression_length"]

        if not expression or len(expression) > max_length:
            return False
        if not ExpressionValidator.is_correct_brackets(expression):
            return False
        return expression[-1] in DIGITS or expression[-1] == ')'
