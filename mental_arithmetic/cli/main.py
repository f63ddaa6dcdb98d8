"""
mental-arith - Soroban formula tracer and drill generator.

Usage:
    mental-arith formulas                     # Full formula catalog
    mental-arith formulas --level beginner    # Formulas eligible at a tier
    mental-arith calc add_6_to_9 45 8         # Step-by-step trace
    mental-arith calc multiply_9 12           # Unary formulas take one operand
    mental-arith drill --level intermediate   # Mixed drill for a tier
    mental-arith drill -f divide_4 -n 10 --seed 7 --answers
    mental-arith examples --level expert      # Curated worked examples
    mental-arith sequence --digits 2 --methods mix   # Chained add/subtract sheet
"""

from __future__ import annotations

import random
import sys
from typing import Annotated

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console

from mental_arithmetic.config import get_settings
from mental_arithmetic.core.errors import FormulaContractError
from mental_arithmetic.core.formulas import (
    FORMULAS,
    DifficultyLevel,
    formulas_for_level,
    get_formula,
)
from mental_arithmetic.engine.dispatcher import calculate_by_formula
from mental_arithmetic.generation.examples import get_examples_by_formula, get_examples_by_level
from mental_arithmetic.generation.models import SequenceConfig
from mental_arithmetic.generation.problem_generator import (
    generate_problems,
    generate_problems_by_level,
)
from mental_arithmetic.generation.sequence import generate_sequences, methods_for
from mental_arithmetic.cli.render import (
    error_panel,
    formulas_table,
    problems_table,
    result_panel,
    sequences_table,
    steps_table,
)

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="mental-arith",
    help="🧮 Soroban mental arithmetic: formula traces and drills",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


def configure_logging() -> None:
    """Route loguru to stderr at the configured level and unmute the package."""
    settings = get_settings()
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level, format=settings.log_format)
    logger.enable("mental_arithmetic")


def _parse_level(level: str | None) -> DifficultyLevel | None:
    if level is None:
        return None
    try:
        return DifficultyLevel(level.lower())
    except ValueError:
        choices = ", ".join(tier.value for tier in DifficultyLevel)
        console.print(error_panel(f"Unknown level {level!r}; choose one of {choices}"))
        raise typer.Exit(1) from None


def _require_formula(formula: str):
    try:
        return get_formula(formula)
    except KeyError:
        console.print(error_panel(f"Unknown formula {formula!r}; see 'mental-arith formulas'"))
        raise typer.Exit(1) from None


# =============================================================================
# Commands
# =============================================================================


@app.command()
def formulas(
    level: Annotated[
        str | None, typer.Option("--level", "-l", help="Only formulas eligible at this tier")
    ] = None,
) -> None:
    """List the formula catalog."""
    tier = _parse_level(level)
    if tier is None:
        console.print(formulas_table(FORMULAS.values()))
        return
    console.print(formulas_table(formulas_for_level(tier), title=f"Formulas up to {tier.display_name}"))


@app.command()
def calc(
    formula: Annotated[str, typer.Argument(help="Formula id, e.g. add_6_to_9")],
    operand1: Annotated[int, typer.Argument(help="The number being worked on")],
    operand2: Annotated[
        int | None, typer.Argument(help="Second operand (binary formulas only)")
    ] = None,
) -> None:
    """
    Trace one calculation step by step.

    Contract violations print the broken rule and exit with status 1.
    """
    try:
        result = calculate_by_formula(formula, operand1, operand2)
    except FormulaContractError as e:
        console.print(error_panel(str(e)))
        raise typer.Exit(1) from None

    console.print(steps_table(result))
    console.print(result_panel(result, get_formula(result.formula).operator))


@app.command()
def drill(
    level: Annotated[
        str | None, typer.Option("--level", "-l", help="Difficulty tier")
    ] = None,
    formula: Annotated[
        str | None, typer.Option("--formula", "-f", help="Drill a single formula")
    ] = None,
    count: Annotated[
        int | None, typer.Option("--count", "-n", help="Problems per formula")
    ] = None,
    seed: Annotated[
        int | None, typer.Option("--seed", "-s", help="Seed for a reproducible drill")
    ] = None,
    answers: Annotated[
        bool, typer.Option("--answers", "-a", help="Show answers and hints")
    ] = False,
) -> None:
    """Generate a practice sheet for a tier or a single formula."""
    settings = get_settings()
    tier = _parse_level(level) or DifficultyLevel(settings.default_difficulty)
    rng = random.Random(seed) if seed is not None else None

    if formula:
        entry = _require_formula(formula)
        problems = generate_problems(
            entry.id, count or settings.default_problems_per_formula, tier, rng
        )
        title = f"{entry.name} - {tier.display_name}"
    else:
        problems = generate_problems_by_level(tier, count, rng)
        title = f"{tier.display_name} drill"

    if not problems:
        console.print(f"[yellow]No problems available for this selection at {tier.display_name}.[/]")
        return
    console.print(problems_table(problems, title, show_answers=answers))


@app.command()
def examples(
    level: Annotated[
        str | None, typer.Option("--level", "-l", help="Curated examples for a tier")
    ] = None,
    formula: Annotated[
        str | None, typer.Option("--formula", "-f", help="Curated examples for a formula")
    ] = None,
) -> None:
    """Show curated worked examples with answers."""
    tier = _parse_level(level)
    if formula:
        selected = get_examples_by_formula(_require_formula(formula).id)
        if tier is not None:
            selected = tuple(example for example in selected if example.difficulty is tier)
    else:
        selected = get_examples_by_level(tier)

    if not selected:
        console.print("[yellow]No curated examples match.[/]")
        return
    console.print(problems_table(selected, "Worked examples", show_answers=True))


@app.command()
def sequence(
    digits: Annotated[
        int, typer.Option("--digits", "-d", help="Digits in the starting number (1-4)")
    ] = 1,
    terms: Annotated[
        int, typer.Option("--terms", "-t", help="Numbers per sequence (2-25)")
    ] = 8,
    methods: Annotated[
        str, typer.Option("--methods", "-m", help="direct, small_friend, big_friend or mix")
    ] = "direct",
    count: Annotated[
        int, typer.Option("--count", "-n", help="Sequences on the sheet")
    ] = 10,
    seed: Annotated[
        int | None, typer.Option("--seed", "-s", help="Seed for a reproducible sheet")
    ] = None,
    answers: Annotated[
        bool, typer.Option("--answers", "-a", help="Show answers")
    ] = False,
) -> None:
    """Generate a sheet of chained add/subtract sequences."""
    try:
        config = SequenceConfig(digits=digits, terms=terms, methods=methods_for(methods))
    except ValidationError as e:
        console.print(error_panel(f"Invalid sequence settings: {e.errors()[0]['msg']}"))
        raise typer.Exit(1) from None

    rng = random.Random(seed) if seed is not None else None
    sheet = generate_sequences(config, count, rng)
    labels = ", ".join(method.display_name for method in config.methods)
    console.print(sequences_table(sheet, f"{digits}-digit sequences - {labels}", show_answers=answers))


def run() -> None:
    """Entry point for the CLI."""
    configure_logging()
    app()


if __name__ == "__main__":
    run()
