"""
Curated example bank.

Hand-picked worked problems per tier, for demos and first lessons before
random drills. Answers and question text are derived from the catalog so
they cannot drift from the engine.
"""

from __future__ import annotations

from mental_arithmetic.core.formulas import DifficultyLevel, FormulaType, get_formula
from mental_arithmetic.generation.models import Problem
from mental_arithmetic.generation.problem_generator import evaluate

_F = FormulaType

_CARRY_HINT = "Add column by column and carry to the next rod"


def _example(
    number: int,
    formula: FormulaType,
    operand1: int,
    operand2: int | None,
    difficulty: DifficultyLevel,
    hint: str,
) -> Problem:
    entry = get_formula(formula)
    if operand2 is None:
        operand2 = entry.fixed_operand
    operator = entry.operator
    return Problem(
        id=f"example_{number}",
        formula=formula,
        operand1=operand1,
        operand2=operand2,
        operator=operator,
        expected_result=evaluate(operator, operand1, operand2),
        difficulty=difficulty,
        question=f"{operand1} {operator} {operand2} = ?",
        hint=hint,
    )


def _bank(difficulty: DifficultyLevel, start: int, rows: list[tuple]) -> tuple[Problem, ...]:
    return tuple(
        _example(start + offset, formula, a, b, difficulty, hint)
        for offset, (formula, a, b, hint) in enumerate(rows)
    )


BEGINNER_EXAMPLES = _bank(DifficultyLevel.BEGINNER, 1, [
    (_F.ADD_SIMPLE, 15, 3, "Add 3 to 15 with the lower beads"),
    (_F.ADD_SIMPLE, 28, 4, "Add 4 to 28 with the lower beads"),
    (_F.ADD_5, 12, None, "Use the upper bead (5)"),
    (_F.ADD_5, 34, None, "Use the upper bead (5)"),
    (_F.MULTIPLY_2, 7, None, "7 × 2 = 7 + 7"),
    (_F.MULTIPLY_2, 15, None, "15 × 2 = 15 + 15"),
    (_F.MULTIPLY_10, 5, None, "Append a 0"),
    (_F.MULTIPLY_10, 23, None, "Append a 0"),
    (_F.DIVIDE_2, 16, None, "Halve each digit, passing remainders to the right"),
    (_F.DIVIDE_2, 24, None, "Halve each digit, passing remainders to the right"),
    (_F.SUBTRACT_SIMPLE, 18, 3, "Take 3 from 18 with the lower beads"),
    (_F.SUBTRACT_SIMPLE, 25, 4, "Take 4 from 25 with the lower beads"),
])

INTERMEDIATE_EXAMPLES = _bank(DifficultyLevel.INTERMEDIATE, 13, [
    (_F.ADD_6_TO_9, 23, 7, "23 + 7 = 23 + 5 + 2"),
    (_F.ADD_6_TO_9, 45, 8, "45 + 8 = 45 + 5 + 3"),
    (_F.ADD_10, 37, None, "Adding 10 moves one bead on the tens rod"),
    (_F.ADD_10, 89, None, "Adding 10 moves one bead on the tens rod"),
    (_F.MULTIPLY_5, 14, None, "14 × 5 = (14 × 10) ÷ 2"),
    (_F.MULTIPLY_5, 28, None, "28 × 5 = (28 × 10) ÷ 2"),
    (_F.MULTIPLY_9, 12, None, "12 × 9 = (12 × 10) - 12"),
    (_F.MULTIPLY_9, 35, None, "35 × 9 = (35 × 10) - 35"),
    (_F.SUBTRACT_5, 27, None, "Take away the upper bead (5)"),
    (_F.SUBTRACT_5, 48, None, "Take away the upper bead (5)"),
    (_F.SUBTRACT_6_TO_9, 34, 7, "34 - 7 = 34 - 5 - 2"),
    (_F.SUBTRACT_6_TO_9, 56, 8, "56 - 8 = 56 - 5 - 3"),
])

ADVANCED_EXAMPLES = _bank(DifficultyLevel.ADVANCED, 25, [
    (_F.ADD_COMPLEMENT, 234, 567, _CARRY_HINT),
    (_F.ADD_COMPLEMENT, 1456, 2789, _CARRY_HINT),
    (_F.MULTIPLY_11, 23, None, "23 × 11 = (23 × 10) + 23"),
    (_F.MULTIPLY_11, 47, None, "47 × 11 = (47 × 10) + 47"),
    (_F.DIVIDE_4, 48, None, "48 ÷ 4 = (48 ÷ 2) ÷ 2"),
    (_F.DIVIDE_4, 100, None, "100 ÷ 4 = (100 ÷ 2) ÷ 2"),
    (_F.DIVIDE_5, 150, None, "150 ÷ 5 = (150 ÷ 10) × 2"),
    (_F.DIVIDE_5, 250, None, "250 ÷ 5 = (250 ÷ 10) × 2"),
])

EXPERT_EXAMPLES = _bank(DifficultyLevel.EXPERT, 33, [
    (_F.MULTIPLY_25, 16, None, "16 × 25 = (16 × 100) ÷ 4"),
    (_F.MULTIPLY_25, 48, None, "48 × 25 = (48 × 100) ÷ 4"),
    (_F.MULTIPLY_125, 8, None, "8 × 125 = (8 × 1000) ÷ 8"),
    (_F.MULTIPLY_125, 24, None, "24 × 125 = (24 × 1000) ÷ 8"),
    (_F.DIVIDE_8, 64, None, "64 ÷ 8 = ((64 ÷ 2) ÷ 2) ÷ 2"),
    (_F.DIVIDE_8, 200, None, "200 ÷ 8 = ((200 ÷ 2) ÷ 2) ÷ 2"),
    (_F.ADD_COMPLEMENT, 1234, 5678, _CARRY_HINT),
    (_F.ADD_COMPLEMENT, 9876, 5432, _CARRY_HINT),
])

ALL_EXAMPLES: tuple[Problem, ...] = (
    BEGINNER_EXAMPLES + INTERMEDIATE_EXAMPLES + ADVANCED_EXAMPLES + EXPERT_EXAMPLES
)

_BY_LEVEL = {
    DifficultyLevel.BEGINNER: BEGINNER_EXAMPLES,
    DifficultyLevel.INTERMEDIATE: INTERMEDIATE_EXAMPLES,
    DifficultyLevel.ADVANCED: ADVANCED_EXAMPLES,
    DifficultyLevel.EXPERT: EXPERT_EXAMPLES,
}


def get_examples_by_level(level: DifficultyLevel | None) -> tuple[Problem, ...]:
    """Examples curated for one tier; None returns the whole bank."""
    if level is None:
        return ALL_EXAMPLES
    return _BY_LEVEL.get(level, ALL_EXAMPLES)


def get_examples_by_formula(formula: FormulaType | str) -> tuple[Problem, ...]:
    formula = get_formula(formula).id
    return tuple(example for example in ALL_EXAMPLES if example.formula is formula)
