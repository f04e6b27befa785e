"""controller/controller.py"""
import logging

from core import ExpressionValidator, InfixEvaluator
from plot import CoordinateSampler

logger = logging.getLogger(__name__)


class CalculatorController:

    def __init__(self, sampler=None):
        self.validator = ExpressionValidator
        self.evaluator = InfixEvaluator
        self.sampler = sampler or CoordinateSampler(evaluator=self.evaluator)

    def validate(self, expression):
        return self.validator.is_correct_expression(expression)

    def calculate(self, expression, x=0.0):
        """求值，DomainError 原样抛给调用方"""
        return self.evaluator.evaluate(expression, x)

    def try_calculate(self, expression, x=0.0):
        return self.evaluator.try_evaluate(expression, x)

    def get_coordinate_x(self, xmin, xmax):
        return self.sampler.get_x_coordinates(xmin, xmax)

    def get_coordinate_y(self, expression, xmin, xmax):
        return self.sampler.get_y_coordinates(expression, xmin, xmax)

    def plot_data(self, expression, xmin, xmax):
        """
        采样返回 x/y 两列的 DataFrame
        不经过 validate：以变量结尾的表达式（如 x*x）也可以绘图，只要求含有自由变量
        """
        frame = self.sampler.sample(expression, xmin, xmax)
        logger.debug(f"Plot data for {expression[:50]}: {len(frame)} rows")
        return frame
