"""主程序入口 - 逐行求解表达式文件并汇总"""
import argparse
import logging

from config.config import *
from data.data_loader import load_expressions, save_results
from core import tokenize, RPNValidator, ExpressionSolver, PrecedenceMode, solve_both
from utils.metrics import calculate_total, summarize_results, count_mode_differences

# 设置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

MODES = {
    'equal': PrecedenceMode.EQUAL,
    'addition_first': PrecedenceMode.ADDITION_FIRST,
}


def validate_expressions(expressions):
    """返回不合法的表达式列表（括号不平衡或操作数/操作符不交替）"""
    issues = []
    for i, expression in enumerate(expressions):
        if not RPNValidator.is_valid_infix(tokenize(expression)):
            issues.append(f"line {i + 1}: {expression}")
    return issues


def main(args):
    logging.getLogger().setLevel(args.log_level.upper())
    validate_config()
    logger.info("Starting expression evaluation")

    expressions = load_expressions(args.data_path)

    if args.validate:
        logger.info("Validating expressions...")
        issues = validate_expressions(expressions)
        if issues:
            logger.error("Expression validation failed! Issues found:")
            for issue in issues:
                logger.error(f"  - {issue}")
            if not args.force_continue:
                raise ValueError("Expression validation failed. Use --force_continue to proceed anyway.")
            logger.warning("Continuing despite invalid expressions (--force_continue flag set)")

    totals = {}
    if args.mode == 'both':
        results = solve_both(expressions, dtype=args.dtype)
        summary = summarize_results(results)
        logger.info(f"Summary:\n{summary}")
        logger.info(f"Expressions whose value depends on precedence: {count_mode_differences(results)}")
        for mode in MODES:
            totals[mode] = int(summary.loc[mode, 'total']) if mode in summary.index else 0
    else:
        solver = ExpressionSolver(MODES[args.mode], dtype=args.dtype)
        results = solver.solve_all(expressions)
        totals[args.mode] = calculate_total(results, dtype=solver.dtype)

    for mode, total in totals.items():
        print(f"{mode}: {total}")

    if args.save_results:
        save_results(results, args.results_path or OUTPUT_CONFIG['results_path'])

    logger.info("Expression evaluation completed successfully!")
    return totals


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Infix expression evaluator")

    parser.add_argument(
        "--data_path",
        type=str,
        default=DATA_CONFIG['default_data_path'],
        help="Path to the expression file (one expression per line)"
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=['equal', 'addition_first', 'both'],
        default='both',
        help="Operator precedence: equal, addition_first or both"
    )
    parser.add_argument(
        "--dtype",
        type=str,
        default=EVALUATOR_CONFIG['dtype'],
        help="Integer dtype used for evaluation (default: int64)"
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check parentheses and operator placement before evaluating"
    )
    parser.add_argument(
        "--force_continue",
        action="store_true",
        help="Force continue even if expression validation fails"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save per-line results to a CSV file"
    )
    parser.add_argument(
        "--results_path",
        type=str,
        default=OUTPUT_CONFIG['results_path'],
        help="Path to save the per-line results"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default="info",
        help="Logging level (debug, info, warning, error)"
    )
    args = parser.parse_args()
    main(args)
