"""配置文件"""
import logging

# 表达式求值参数
EVALUATOR_CONFIG = {
    "variable_marker": "x",  # 自由变量
    "exponent_marker": "E",  # 科学计数法标记，后接 +/- 和指数
    "max_expression_length": 255,
    "result_precision": 7,  # 结果显示的小数位数
}

# 坐标采样参数
SAMPLER_CONFIG = {
    "step_factor": 0.001,  # step = step_factor * (|xmin| + |xmax|)
    "x_column": "x",
    "y_column": "y",
}

# 日志配置
LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert len(EVALUATOR_CONFIG["variable_marker"]) == 1, "变量标记必须是单个字符"
    assert len(EVALUATOR_CONFIG["exponent_marker"]) == 1, "指数标记必须是单个字符"
    assert EVALUATOR_CONFIG["variable_marker"] != EVALUATOR_CONFIG["exponent_marker"]
    assert EVALUATOR_CONFIG["max_expression_length"] == 255, "表达式最长255个字符"
    assert EVALUATOR_CONFIG["result_precision"] >= 0
    assert 0 < SAMPLER_CONFIG["step_factor"] < 1, "步长系数必须在(0, 1)之间"
    return True
