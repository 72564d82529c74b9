"""Shared test fixtures for the expression evaluator."""

from pathlib import Path

import pytest

# (expression, equal-precedence result, addition-first result)
SCENARIOS = [
    ("2 * 3 + (4 * 5)", 26, 46),
    ("5 + (8 * 3 + 9 + 3 * 4 * 3)", 437, 1445),
    ("5 * 9 * (7 * 3 * 3 + 9 * 3 + (8 + 6 * 4))", 12240, 669060),
    ("((2 + 4 * 9) * (6 + 9 * 8 + 6) + 6) + 2 + 4 * 2", 13632, 23340),
]


@pytest.fixture
def scenario_lines() -> list[str]:
    """The four worked example expressions, one per line."""
    return [expression for expression, _, _ in SCENARIOS]


@pytest.fixture
def expression_file(tmp_path: Path, scenario_lines: list[str]) -> Path:
    """An input file holding the example expressions plus blank lines."""
    path = tmp_path / "input.txt"
    path.write_text("\n".join(scenario_lines[:2] + [""] + scenario_lines[2:]) + "\n\n")
    return path
