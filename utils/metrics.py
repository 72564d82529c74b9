"""utils/metrics.py"""
import numpy as np
import pandas as pd

MODE_COLUMNS = ('equal', 'addition_first')


def calculate_total(values, dtype='int64'):
    """定宽整数求和，返回 int"""
    arr = np.asarray(getattr(values, 'values', values), dtype=dtype).ravel()
    if arr.size == 0:
        return 0
    return int(arr.sum(dtype=dtype))


def summarize_results(results):
    """
    对 solve_both() 的结果按模式汇总
    Returns:
        DataFrame，index 为模式名，列为 count / total / min / max
    """
    rows = {}
    for col in MODE_COLUMNS:
        if col not in results.columns:
            continue
        series = results[col]
        rows[col] = {
            'count': int(len(series)),
            'total': calculate_total(series),
            'min': int(series.min()) if len(series) else 0,
            'max': int(series.max()) if len(series) else 0,
        }
    return pd.DataFrame.from_dict(rows, orient='index')


def count_mode_differences(results):
    """两种模式结果不同的行数"""
    if results.empty:
        return 0
    return int((results['equal'] != results['addition_first']).sum())
