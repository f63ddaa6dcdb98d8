"""
Problem Generator.

One generator per formula, registered with @register. Every generator:

- samples operand magnitudes from the tier's digit range, clipped to the
  formula's catalog range
- draws operand2 from exactly the range the dispatcher accepts
- rejects and resamples pairs that break the formula's teaching constraint
  (a carry for complement addition, a non-negative result for subtraction)

Division generators work backwards from the quotient so operand1 always
divides exactly.
"""

from __future__ import annotations

import random
import uuid
from typing import Callable

from loguru import logger

from mental_arithmetic.config import get_settings
from mental_arithmetic.core.digits import has_borrow, has_carry
from mental_arithmetic.core.formulas import (
    DifficultyLevel,
    Formula,
    FormulaType,
    formulas_for_level,
    get_formula,
)
from mental_arithmetic.generation.models import Problem
from mental_arithmetic.generation.sampling import digit_range_for, number_with_digits

# (operand1, operand2) or None when the draw should be rejected
Sampler = Callable[[Formula, tuple[int, int], random.Random], "tuple[int, int] | None"]
HintFn = Callable[[int, int], str]


# Handler registry - populated by @register decorator
GENERATORS: dict[FormulaType, "ProblemGenerator"] = {}


class ProblemGenerator:
    """Builds problems for one formula from a sampler and a hint template."""

    def __init__(self, formula: FormulaType, sampler: Sampler, hint: HintFn):
        self.formula = get_formula(formula)
        self.sampler = sampler
        self.hint = hint

    def generate(
        self,
        count: int,
        difficulty: DifficultyLevel | str,
        rng: random.Random | None = None,
    ) -> list[Problem]:
        """
        Generate up to `count` problems.

        Returns fewer when rejection sampling runs out of budget, and an
        empty list when the tier and formula share no digit range.
        """
        difficulty = DifficultyLevel.coerce(difficulty)
        rng = rng or random  # module-level source
        digit_range = digit_range_for(difficulty, self.formula)
        if digit_range is None or count <= 0:
            logger.debug(f"No problems for {self.formula.id.value} at {difficulty.value}")
            return []

        budget = count * get_settings().max_sampling_attempts
        problems: list[Problem] = []
        attempts = 0
        while len(problems) < count and attempts < budget:
            attempts += 1
            pair = self.sampler(self.formula, digit_range, rng)
            if pair is None:
                continue
            problems.append(self._build(len(problems), pair[0], pair[1], difficulty))

        if len(problems) < count:
            logger.warning(
                f"Generated {len(problems)}/{count} {self.formula.id.value} problems "
                f"after {attempts} attempts"
            )
        return problems

    def _build(self, index: int, operand1: int, operand2: int, difficulty: DifficultyLevel) -> Problem:
        operator = self.formula.operator
        return Problem(
            id=f"{self.formula.id.value}_{index}_{uuid.uuid4().hex[:8]}",
            formula=self.formula.id,
            operand1=operand1,
            operand2=operand2,
            operator=operator,
            expected_result=evaluate(operator, operand1, operand2),
            difficulty=difficulty,
            question=f"{operand1} {operator} {operand2} = ?",
            hint=self.hint(operand1, operand2),
        )


def evaluate(operator: str, a: int, b: int) -> int:
    """Direct evaluation used as the answer key (floor for division)."""
    if operator == "+":
        return a + b
    if operator == "-":
        return a - b
    if operator == "×":
        return a * b
    if operator == "÷":
        return a // b
    raise ValueError(f"Unknown operator: {operator}")


def register(formula: FormulaType, hint: HintFn):
    """Decorator to register a sampler as the generator for a formula."""
    def decorator(sampler: Sampler) -> Sampler:
        GENERATORS[formula] = ProblemGenerator(formula, sampler, hint)
        return sampler
    return decorator


# ============================================================================
# SAMPLERS
# ============================================================================


def _number(digit_range: tuple[int, int], rng: random.Random) -> int:
    return number_with_digits(digit_range[0], digit_range[1], rng)


def _fixed(formula: Formula, digit_range: tuple[int, int], rng: random.Random) -> tuple[int, int]:
    """Unary formulas: random operand1, the formula's own constant as operand2."""
    return _number(digit_range, rng), formula.fixed_operand


def _ranged(formula: Formula, digit_range: tuple[int, int], rng: random.Random) -> tuple[int, int]:
    """Binary formulas with a closed operand2 range."""
    low, high = formula.operand2_range
    return _number(digit_range, rng), rng.randint(low, high)


def _non_negative(formula: Formula, digit_range: tuple[int, int], rng: random.Random) -> tuple[int, int] | None:
    operand1, operand2 = (
        _fixed(formula, digit_range, rng)
        if formula.is_unary
        else _ranged(formula, digit_range, rng)
    )
    if operand1 < operand2:
        return None
    return operand1, operand2


def _quotient_first(formula: Formula, digit_range: tuple[int, int], rng: random.Random) -> tuple[int, int]:
    """Pick the answer, then multiply up so the division is exact."""
    quotient = _number(digit_range, rng)
    return quotient * formula.fixed_operand, formula.fixed_operand


# Addition

register(FormulaType.ADD_SIMPLE, lambda a, b: f"Add {b} to {a} with the lower beads")(_ranged)
register(FormulaType.ADD_5, lambda a, b: "Use the upper bead (5)")(_fixed)
register(FormulaType.ADD_6_TO_9, lambda a, b: f"{a} + {b} = {a} + 5 + {b - 5}")(_ranged)
register(FormulaType.ADD_10, lambda a, b: "Adding 10 moves one bead on the tens rod")(_fixed)


@register(
    FormulaType.ADD_COMPLEMENT,
    lambda a, b: "Add column by column and carry to the next rod",
)
def _carrying_pair(formula: Formula, digit_range: tuple[int, int], rng: random.Random) -> tuple[int, int] | None:
    operand1 = _number(digit_range, rng)
    operand2 = _number(digit_range, rng)
    if not has_carry(operand1, operand2):
        return None
    return operand1, operand2


# Subtraction

register(FormulaType.SUBTRACT_SIMPLE, lambda a, b: f"Take {b} from {a} with the lower beads")(_non_negative)
register(FormulaType.SUBTRACT_5, lambda a, b: "Take away the upper bead (5)")(_non_negative)
register(FormulaType.SUBTRACT_6_TO_9, lambda a, b: f"{a} - {b} = {a} - 5 - {b - 5}")(_non_negative)
register(FormulaType.SUBTRACT_10, lambda a, b: "Take one bead from the tens rod")(_non_negative)


@register(
    FormulaType.SUBTRACT_COMPLEMENT,
    lambda a, b: "Subtract column by column and borrow from the next rod",
)
def _borrowing_pair(formula: Formula, digit_range: tuple[int, int], rng: random.Random) -> tuple[int, int] | None:
    operand1 = _number(digit_range, rng)
    operand2 = _number(digit_range, rng)
    if operand1 < operand2 or not has_borrow(operand1, operand2):
        return None
    return operand1, operand2


# Multiplication

register(FormulaType.MULTIPLY_2, lambda a, b: f"{a} × 2 = {a} + {a}")(_fixed)
register(FormulaType.MULTIPLY_5, lambda a, b: f"{a} × 5 = ({a} × 10) ÷ 2")(_fixed)
register(FormulaType.MULTIPLY_9, lambda a, b: f"{a} × 9 = ({a} × 10) - {a}")(_fixed)
register(FormulaType.MULTIPLY_10, lambda a, b: "Append a 0")(_fixed)
register(FormulaType.MULTIPLY_11, lambda a, b: f"{a} × 11 = ({a} × 10) + {a}")(_fixed)
register(FormulaType.MULTIPLY_25, lambda a, b: f"{a} × 25 = ({a} × 100) ÷ 4")(_fixed)
register(FormulaType.MULTIPLY_125, lambda a, b: f"{a} × 125 = ({a} × 1000) ÷ 8")(_fixed)

# Division

register(FormulaType.DIVIDE_2, lambda a, b: "Halve each digit, passing remainders to the right")(_quotient_first)
register(FormulaType.DIVIDE_4, lambda a, b: f"{a} ÷ 4 = ({a} ÷ 2) ÷ 2")(_quotient_first)
register(FormulaType.DIVIDE_8, lambda a, b: f"{a} ÷ 8 = (({a} ÷ 2) ÷ 2) ÷ 2")(_quotient_first)
register(FormulaType.DIVIDE_5, lambda a, b: f"{a} ÷ 5 = ({a} ÷ 10) × 2")(_quotient_first)
register(FormulaType.DIVIDE_10, lambda a, b: "Drop the trailing 0")(_quotient_first)


# ============================================================================
# PUBLIC API
# ============================================================================


def generate_problems(
    formula: FormulaType | str,
    count: int,
    difficulty: DifficultyLevel | str,
    rng: random.Random | None = None,
) -> list[Problem]:
    """
    Generate problems for one formula.

    Unknown formulas and non-positive counts yield an empty list.
    """
    try:
        formula = get_formula(formula).id
    except KeyError:
        logger.warning(f"No generator for unknown formula {formula!r}")
        return []
    return GENERATORS[formula].generate(count, DifficultyLevel.coerce(difficulty), rng)


def generate_problems_by_level(
    difficulty: DifficultyLevel | str,
    per_formula: int | None = None,
    rng: random.Random | None = None,
) -> list[Problem]:
    """
    Mixed drill: every formula eligible at this tier, shuffled together.

    Args:
        difficulty: Highest tier whose formulas are included (or its string value)
        per_formula: Problems per formula (defaults to settings)
        rng: Optional seeded source for reproducible drills
    """
    difficulty = DifficultyLevel.coerce(difficulty)
    rng = rng or random
    if per_formula is None:
        per_formula = get_settings().default_problems_per_formula

    problems: list[Problem] = []
    for formula in formulas_for_level(difficulty):
        problems.extend(generate_problems(formula.id, per_formula, difficulty, rng))

    rng.shuffle(problems)
    logger.debug(f"Generated {len(problems)} problems for level {difficulty.value}")
    return problems
