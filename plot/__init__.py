"""绘图数据模块"""
from .sampler import CoordinateSampler

__all__ = ['CoordinateSampler']
