"""核心模块 - Token系统、中缀求值器和操作符"""
from .errors import CalculatorError, DomainError, ExpressionError
from .token_system import (
    OperationType, Token, TOKEN_DEFINITIONS, Tokenizer, read_number
)
from .operators import Operators, apply_operator
from .expression_validator import ExpressionValidator
from .infix_evaluator import InfixEvaluator, EvaluationResult

__all__ = [
    'CalculatorError', 'DomainError', 'ExpressionError',
    'OperationType', 'Token', 'TOKEN_DEFINITIONS', 'Tokenizer', 'read_number',
    'Operators', 'apply_operator', 'ExpressionValidator',
    'InfixEvaluator', 'EvaluationResult'
]
