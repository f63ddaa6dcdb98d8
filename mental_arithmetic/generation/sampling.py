"""
Operand sampling by difficulty tier.

Each tier maps to a digit-count range. Generators intersect that range with
the formula's catalog range; an empty intersection means the formula cannot
be drilled at that tier and yields None.
"""

from __future__ import annotations

import random

from mental_arithmetic.core.formulas import DifficultyLevel, Formula

LEVEL_DIGIT_RANGES: dict[DifficultyLevel, tuple[int, int]] = {
    DifficultyLevel.BEGINNER: (2, 2),  # 10-99
    DifficultyLevel.INTERMEDIATE: (2, 3),
    DifficultyLevel.ADVANCED: (3, 4),
    DifficultyLevel.EXPERT: (4, 6),
}


def digit_range_for(level: DifficultyLevel | str, formula: Formula | None = None) -> tuple[int, int] | None:
    """
    Digit-count range to sample from.

    Returns:
        (min_digits, max_digits), or None if the tier and the formula's
        catalog range do not overlap
    """
    low, high = LEVEL_DIGIT_RANGES[DifficultyLevel.coerce(level)]
    if formula is not None:
        low = max(low, formula.min_digits)
        high = min(high, formula.max_digits)
    if low > high:
        return None
    return low, high


def number_with_digits(min_digits: int, max_digits: int, rng: random.Random | None = None) -> int:
    """Pick a digit count uniformly, then a number with exactly that many digits."""
    rng = rng or random
    digits = rng.randint(min_digits, max_digits)
    low = 10 ** (digits - 1) if digits > 1 else 0
    return rng.randint(low, 10**digits - 1)
