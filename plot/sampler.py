"""plot/sampler.py"""
import logging
import math

import pandas as pd

from config.config import EVALUATOR_CONFIG, SAMPLER_CONFIG
from core.errors import ExpressionError
from core.infix_evaluator import InfixEvaluator

logger = logging.getLogger(__name__)


class CoordinateSampler:
    """在 [xmin, xmax) 上等步长采样，逐点调用求值器生成绘图数据"""

    def __init__(self, evaluator=InfixEvaluator, step_factor=None):
        self.evaluator = evaluator
        self.step_factor = step_factor if step_factor is not None else SAMPLER_CONFIG["step_factor"]

    def get_step(self, xmin, xmax):
        return self.step_factor * (abs(xmin) + abs(xmax))

    def _iterate_x(self, xmin, xmax):
        """xmin, xmin+step, ... 严格小于 xmax；步长为0或边界非有限时不产生任何点"""
        step = self.get_step(xmin, xmax)
        if step == 0 or not math.isfinite(step):
            logger.warning(f"Degenerate sample domain [{xmin}, {xmax}], step={step}")
            return

        x = xmin
        while x < xmax:
            yield x
            x += step

    def get_x_coordinates(self, xmin, xmax):
        xs = list(self._iterate_x(xmin, xmax))
        logger.debug(f"Sampled {len(xs)} x coordinates on [{xmin}, {xmax})")
        return xs

    def get_y_coordinates(self, expression, xmin, xmax):
        """每个采样点独立求值；DomainError 向上抛出"""
        return [self.evaluator.evaluate(expression, x) for x in self._iterate_x(xmin, xmax)]

    def sample(self, expression, xmin, xmax):
        """
        Returns:
            DataFrame，列为 x 和 y
        Raises:
            ExpressionError: 表达式里没有自由变量
        """
        if EVALUATOR_CONFIG["variable_marker"] not in expression:
            raise ExpressionError("Need X")

        xs = self.get_x_coordinates(xmin, xmax)
        ys = [self.evaluator.evaluate(expression, x) for x in xs]
        return pd.DataFrame({
            SAMPLER_CONFIG["x_column"]: xs,
            SAMPLER_CONFIG["y_column"]: ys,
        })
