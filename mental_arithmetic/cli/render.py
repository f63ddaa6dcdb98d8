"""
Rich renderables for the terminal front-end.

Soroban palette: wood browns for frames, bead red for emphasis.
"""

from __future__ import annotations

from typing import Iterable

from rich import box
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from mental_arithmetic.core.formulas import Formula
from mental_arithmetic.engine.models import CalculationResult
from mental_arithmetic.engine.primitives import place_name
from mental_arithmetic.generation.models import Problem, SequenceProblem

# =============================================================================
# SOROBAN COLOR THEME
# =============================================================================

SOROBAN_THEME = {
    "primary": "#D2691E",  # Chocolate - frame
    "secondary": "#DEB887",  # Burlywood - rods
    "accent": "#E34234",  # Vermilion - beads
    "success": "#00C853",  # Green - results
    "warning": "#FFB300",  # Amber - carries and borrows
    "error": "#FF3366",  # Red - contract errors
    "dim": "#8D7B68",  # Muted brown - secondary text
    "white": "#FFF8E7",  # Cosmic latte - primary text
}

STYLES = {
    "primary": Style(color=SOROBAN_THEME["primary"], bold=True),
    "secondary": Style(color=SOROBAN_THEME["secondary"]),
    "accent": Style(color=SOROBAN_THEME["accent"], bold=True),
    "success": Style(color=SOROBAN_THEME["success"], bold=True),
    "warning": Style(color=SOROBAN_THEME["warning"]),
    "error": Style(color=SOROBAN_THEME["error"], bold=True),
    "dim": Style(color=SOROBAN_THEME["dim"]),
    "white": Style(color=SOROBAN_THEME["white"]),
}


def steps_table(result: CalculationResult) -> Table:
    """One row per trace step."""
    table = Table(
        title=f"{result.formula_used}",
        box=box.ROUNDED,
        border_style=STYLES["primary"],
        title_style=STYLES["primary"],
    )
    table.add_column("#", style=STYLES["dim"], justify="right")
    table.add_column("Step", style=STYLES["secondary"])
    table.add_column("Operation", style=STYLES["accent"])
    table.add_column("Value", style=STYLES["success"], justify="right")
    table.add_column("Rod", style=STYLES["dim"])
    table.add_column("Carry", style=STYLES["warning"], justify="right")
    table.add_column("Why", style=STYLES["dim"])

    for step in result.steps:
        table.add_row(
            str(step.step_number),
            step.description,
            step.operation,
            str(step.current_value),
            place_name(step.working_digit) if step.working_digit is not None else "",
            str(step.carry) if step.carry is not None else "",
            step.explanation,
        )
    return table


def result_panel(result: CalculationResult, operator: str) -> Panel:
    """Summary of a traced calculation."""
    content = Text()
    expression = f"{result.operand1} {operator} {result.operand2}"
    content.append(f"{expression} = ", style=STYLES["secondary"])
    content.append(str(result.result), style=STYLES["success"])
    if result.remainder:
        content.append(f"  remainder {result.remainder}", style=STYLES["warning"])
    content.append(f"\n\n{len(result.steps)} steps", style=STYLES["dim"])

    return Panel(
        content,
        title=result.formula_used,
        border_style=STYLES["primary"],
        box=box.HEAVY,
        padding=(1, 2),
    )


def error_panel(message: str) -> Panel:
    return Panel(
        Text(f"✗ {message}", style=STYLES["error"]),
        border_style=Style(color=SOROBAN_THEME["error"]),
        box=box.HEAVY,
    )


def formulas_table(formulas: Iterable[Formula], title: str = "Formula Catalog") -> Table:
    table = Table(title=title, box=box.ROUNDED, border_style=STYLES["primary"])
    table.add_column("Formula", style=STYLES["accent"])
    table.add_column("Name", style=STYLES["white"])
    table.add_column("Level", style=STYLES["secondary"])
    table.add_column("Digits", style=STYLES["dim"], justify="center")
    table.add_column("Operand 2", style=STYLES["dim"])
    table.add_column("Technique", style=STYLES["dim"])

    for formula in formulas:
        table.add_row(
            formula.id.value,
            formula.name,
            formula.difficulty.display_name,
            f"{formula.min_digits}-{formula.max_digits}",
            formula.contract_text(),
            formula.description,
        )
    return table


def problems_table(problems: Iterable[Problem], title: str, show_answers: bool = False) -> Table:
    """Drill sheet; answers and hints only when asked for."""
    table = Table(title=title, box=box.ROUNDED, border_style=STYLES["primary"])
    table.add_column("#", style=STYLES["dim"], justify="right")
    table.add_column("Question", style=STYLES["secondary"])
    table.add_column("Formula", style=STYLES["dim"])
    if show_answers:
        table.add_column("Answer", style=STYLES["success"], justify="right")
        table.add_column("Hint", style=STYLES["dim"])

    for index, problem in enumerate(problems, start=1):
        row = [str(index), problem.question, problem.formula.value]
        if show_answers:
            row += [str(problem.expected_result), problem.hint or ""]
        table.add_row(*row)
    return table


def sequences_table(problems: Iterable[SequenceProblem], title: str, show_answers: bool = False) -> Table:
    """Practice sheet of chained sequences, one row per sequence."""
    table = Table(title=title, box=box.ROUNDED, border_style=STYLES["primary"])
    table.add_column("#", style=STYLES["dim"], justify="right")
    table.add_column("Numbers", style=STYLES["secondary"])
    if show_answers:
        table.add_column("Answer", style=STYLES["success"], justify="right")

    for index, problem in enumerate(problems, start=1):
        numbers = " ".join([str(problem.start), *(f"{term:+d}" for term in problem.terms[1:])])
        row = [str(index), numbers]
        if show_answers:
            row.append(str(problem.answer))
        table.add_row(*row)
    return table
