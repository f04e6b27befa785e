"""中缀表达式求值器 - 双栈算符优先归约，调用统一的Operators"""
import logging

from config.config import EVALUATOR_CONFIG
from core.errors import DomainError
from core.operators import apply_operator
from core.token_system import DIGITS, OperationType, Tokenizer, read_number

logger = logging.getLogger(__name__)


class EvaluationResult:
    """求值结果：成功时带 value，失败时带 DomainError 实例"""

    def __init__(self, ok, value=None, error=None):
        self.ok = ok
        self.value = value
        self.error = error

    @classmethod
    def success(cls, value):
        return cls(True, value=value)

    @classmethod
    def failure(cls, error):
        return cls(False, error=error)

    @property
    def message(self):
        """供界面原样显示的错误消息"""
        return str(self.error) if self.error is not None else None

    def unwrap(self):
        if not self.ok:
            raise self.error
        return self.value

    def __repr__(self):
        if self.ok:
            return f"EvaluationResult(ok=True, value={self.value!r})"
        return f"EvaluationResult(ok=False, error={self.error!r})"


class InfixEvaluator:
    """评估单变量中缀表达式的值"""

    @staticmethod
    def evaluate(expression, x=0.0):
        """
        从左到右扫描，操作数栈与操作符栈仅在本次调用内存在
        Args:
            expression: 表达式字符串（应已通过 ExpressionValidator）
            x: 自由变量的值
        Returns:
            float 结果
        Raises:
            DomainError: 除零、负数开方、asin/acos 越界
        """
        if expression == "":
            return 0.0

        variable_marker = EVALUATOR_CONFIG["variable_marker"]
        exponent_marker = EVALUATOR_CONFIG["exponent_marker"]

        operands = []
        operators = []
        operand_expected = True  # 开头、'('、二元操作符、函数之后为真

        index = 0
        while index < len(expression):
            char = expression[index]

            if char in DIGITS:
                index += read_number(expression, index, operands) + 1
                operand_expected = False
            elif char == variable_marker:
                operands.append(float(x))
                index += 1
                operand_expected = False
            elif char == exponent_marker:
                # 'E' 和紧跟的符号由 read_number 回看处理
                if index + 1 < len(expression) and expression[index + 1] in '+-':
                    index += 2
                else:
                    index += 1
            else:
                token, length = Tokenizer.classify(expression, index, operand_expected)
                InfixEvaluator._add_operator(token, operands, operators, operand_expected)
                operand_expected = token.operation is not OperationType.CLOSE_BRACKET
                index += length

        return InfixEvaluator._calculate_result(operands, operators)

    @staticmethod
    def try_evaluate(expression, x=0.0):
        """evaluate 的不抛异常版本，DomainError 转为失败结果"""
        try:
            return EvaluationResult.success(InfixEvaluator.evaluate(expression, x))
        except DomainError as e:
            return EvaluationResult.failure(e)

    @staticmethod
    def _add_operator(token, operands, operators, operand_expected=False):
        """把操作符放入操作符栈，必要时先归约栈顶（循环而非递归）"""
        if token.operation is OperationType.CLOSE_BRACKET:
            while operators and operators[-1].operation is not OperationType.OPEN_BRACKET:
                apply_operator(operators.pop(), operands)
            if operators:
                operators.pop()
            return

        # 期待操作数时出现的前缀操作符还没有自己的操作数，不能触发归约
        if not (operand_expected and Tokenizer.is_prefix(token)):
            while (operators
                   and token.operation is not OperationType.OPEN_BRACKET
                   and token.priority <= operators[-1].priority):
                apply_operator(operators.pop(), operands)

        operators.append(token)

    @staticmethod
    def _calculate_result(operands, operators):
        while operators:
            apply_operator(operators.pop(), operands)

        if len(operands) != 1:
            logger.warning(f"Operand stack has {len(operands)} elements after evaluation, expected 1")
            return operands[-1] if operands else float('nan')
        return operands[0]
