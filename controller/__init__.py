"""控制器模块 - 外层界面调用计算核心的唯一入口"""
from .controller import CalculatorController

__all__ = ['CalculatorController']
