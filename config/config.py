"""配置文件"""
import numpy as np

# 求值器参数
EVALUATOR_CONFIG = {
    "dtype": "int64",  # 定宽整数，溢出不做处理
    "default_addition_first": False,  # False: + 和 * 同级
}

# 分词参数
TOKENIZER_CONFIG = {
    "ignored_characters": " \t\r\n",
}

# 数据路径
DATA_CONFIG = {
    "default_data_path": "input.txt",
    "encoding": "utf-8",
    "skip_blank_lines": True,
}

# 输出
OUTPUT_CONFIG = {
    "results_path": "expression_results.csv",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    dtype = np.dtype(EVALUATOR_CONFIG["dtype"])
    assert np.issubdtype(dtype, np.signedinteger), "dtype 必须是有符号整数类型"
    assert isinstance(EVALUATOR_CONFIG["default_addition_first"], bool)
    assert not any(c.isdigit() or c in "+*()" for c in TOKENIZER_CONFIG["ignored_characters"]), \
        "ignored_characters 不能包含表达式字符"
    return True
