"""数据加载模块 - 读取表达式文件"""
import os
import logging
import pandas as pd

from config.config import DATA_CONFIG

logger = logging.getLogger(__name__)


def load_expressions(file_path=None, skip_blank_lines=None):
    """
    读取表达式文件，每行一个表达式

    Parameters:
    - file_path: 文件路径，默认为 DATA_CONFIG['default_data_path']
    - skip_blank_lines: 是否跳过空行

    Returns:
    - 表达式文本的 Series（去掉行尾换行）
    """
    file_path = file_path or DATA_CONFIG['default_data_path']
    if skip_blank_lines is None:
        skip_blank_lines = DATA_CONFIG['skip_blank_lines']

    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Expression file not found: {file_path}")

    logger.info(f"Loading expressions from {file_path}")
    with open(file_path, 'r', encoding=DATA_CONFIG['encoding']) as f:
        lines = [line.rstrip('\r\n') for line in f]

    expressions = pd.Series(lines, name='expression', dtype=object)
    if skip_blank_lines:
        expressions = expressions[expressions.str.strip() != ''].reset_index(drop=True)

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def save_results(results, output_path):
    """把逐行结果（DataFrame 或 Series）写成 CSV"""
    if isinstance(results, pd.Series):
        results = results.reset_index()
    logger.info(f"Saving results to {output_path}")
    results.to_csv(output_path, index=False)
    return output_path
