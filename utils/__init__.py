"""工具模块"""
from .metrics import calculate_total, summarize_results, count_mode_differences

__all__ = ['calculate_total', 'summarize_results', 'count_mode_differences']
