"""utils/formatting.py"""
import math

from config.config import EVALUATOR_CONFIG


def format_result(value, precision=None):
    """定点格式显示结果，默认7位小数；非有限值原样显示 nan/inf"""
    if precision is None:
        precision = EVALUATOR_CONFIG["result_precision"]
    if not math.isfinite(value):
        return str(value)
    return f"{value:.{precision}f}"
