"""
Formula Catalog.

Static registry of the abacus techniques the engine can trace. Each entry
declares its difficulty tier, category, the digit range drills are drawn
from, and the operand contract the dispatcher enforces:

- unary formulas work with a fixed second operand (n + 5, n × 9, ...)
- binary formulas accept operand2 from a declared range (n + 1..4)

The table is built once at import time and exposed read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class FormulaType(str, Enum):
    """Supported formula ids."""

    # Addition
    ADD_SIMPLE = "add_simple"  # n + 1..4
    ADD_5 = "add_5"  # n + 5 (upper bead)
    ADD_6_TO_9 = "add_6_to_9"  # n + 6..9 = n + 5 + 1..4
    ADD_10 = "add_10"  # n + 10
    ADD_COMPLEMENT = "add_complement"  # a + b, column addition with carries

    # Subtraction
    SUBTRACT_SIMPLE = "subtract_simple"  # n - 1..4
    SUBTRACT_5 = "subtract_5"  # n - 5
    SUBTRACT_6_TO_9 = "subtract_6_to_9"  # n - 6..9 = n - 5 - 1..4
    SUBTRACT_10 = "subtract_10"  # n - 10
    SUBTRACT_COMPLEMENT = "subtract_complement"  # a - b, column subtraction with borrows

    # Multiplication
    MULTIPLY_2 = "multiply_2"  # n × 2 = n + n
    MULTIPLY_5 = "multiply_5"  # n × 5 = (n × 10) ÷ 2
    MULTIPLY_9 = "multiply_9"  # n × 9 = (n × 10) - n
    MULTIPLY_10 = "multiply_10"  # n × 10
    MULTIPLY_11 = "multiply_11"  # n × 11 = (n × 10) + n
    MULTIPLY_25 = "multiply_25"  # n × 25 = (n × 100) ÷ 4
    MULTIPLY_125 = "multiply_125"  # n × 125 = (n × 1000) ÷ 8

    # Division
    DIVIDE_2 = "divide_2"  # n ÷ 2
    DIVIDE_5 = "divide_5"  # n ÷ 5 = (n ÷ 10) × 2
    DIVIDE_10 = "divide_10"  # n ÷ 10
    DIVIDE_4 = "divide_4"  # n ÷ 4 = (n ÷ 2) ÷ 2
    DIVIDE_8 = "divide_8"  # n ÷ 8 = ((n ÷ 2) ÷ 2) ÷ 2


class DifficultyLevel(str, Enum):
    """
    Ordered difficulty tiers.

    Tiers compare by rank, so `formula.difficulty <= level` reads naturally.
    """

    BEGINNER = "beginner"  # 2-digit numbers, single-bead moves
    INTERMEDIATE = "intermediate"  # 2-3 digits, 5/10 complements
    ADVANCED = "advanced"  # 3-4 digits, multi-digit columns
    EXPERT = "expert"  # 4-6 digits, every formula

    @property
    def rank(self) -> int:
        return _LEVEL_ORDER.index(self)

    @property
    def display_name(self) -> str:
        """Human-readable name."""
        return self.value.title()

    @classmethod
    def coerce(cls, level: DifficultyLevel | str) -> DifficultyLevel:
        """
        Accept a tier or its string value (case-insensitive).

        Raises:
            ValueError: If the string names no tier
        """
        if isinstance(level, cls):
            return level
        return cls(str(level).lower())

    # Plain strings compare by tier rank too, never alphabetically
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, str):
            return NotImplemented
        return self.rank < DifficultyLevel.coerce(other).rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, str):
            return NotImplemented
        return self.rank <= DifficultyLevel.coerce(other).rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, str):
            return NotImplemented
        return self.rank > DifficultyLevel.coerce(other).rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, str):
            return NotImplemented
        return self.rank >= DifficultyLevel.coerce(other).rank


_LEVEL_ORDER = (
    DifficultyLevel.BEGINNER,
    DifficultyLevel.INTERMEDIATE,
    DifficultyLevel.ADVANCED,
    DifficultyLevel.EXPERT,
)


class OperationCategory(str, Enum):
    """Arithmetic operation a formula belongs to."""

    ADDITION = "addition"
    SUBTRACTION = "subtraction"
    MULTIPLICATION = "multiplication"
    DIVISION = "division"

    @property
    def symbol(self) -> str:
        return {
            OperationCategory.ADDITION: "+",
            OperationCategory.SUBTRACTION: "-",
            OperationCategory.MULTIPLICATION: "×",
            OperationCategory.DIVISION: "÷",
        }[self]


@dataclass(frozen=True)
class Formula:
    """
    One catalog entry.

    Exactly one of fixed_operand / operand2_range is set. An open upper
    bound (low, None) accepts any operand2 >= low; for subtraction the
    dispatcher additionally caps operand2 at operand1.
    """

    id: FormulaType
    name: str
    description: str
    category: OperationCategory
    difficulty: DifficultyLevel
    min_digits: int
    max_digits: int
    fixed_operand: int | None = None
    operand2_range: tuple[int, int | None] | None = None

    @property
    def operator(self) -> str:
        return self.category.symbol

    @property
    def is_unary(self) -> bool:
        return self.fixed_operand is not None

    def contract_text(self) -> str:
        """Describe the operand2 contract for error messages and listings."""
        if self.fixed_operand is not None:
            return f"operand2 is fixed at {self.fixed_operand}"
        low, high = self.operand2_range or (0, None)
        if high is None:
            if self.category is OperationCategory.SUBTRACTION:
                return f"operand2 must be between {low} and operand1"
            return f"operand2 must be an integer >= {low}"
        return f"operand2 must be between {low} and {high}"


_A = OperationCategory.ADDITION
_S = OperationCategory.SUBTRACTION
_M = OperationCategory.MULTIPLICATION
_D = OperationCategory.DIVISION

_B = DifficultyLevel.BEGINNER
_I = DifficultyLevel.INTERMEDIATE
_ADV = DifficultyLevel.ADVANCED
_E = DifficultyLevel.EXPERT

_CATALOG = (
    # Addition
    Formula(FormulaType.ADD_SIMPLE, "Simple addition", "n + 1, n + 2, n + 3, n + 4",
            _A, _B, 1, 7, operand2_range=(1, 4)),
    Formula(FormulaType.ADD_5, "Add via 5", "n + 5 (the upper bead)",
            _A, _B, 1, 7, fixed_operand=5),
    Formula(FormulaType.ADD_6_TO_9, "Add 6 to 9", "n + 6/7/8/9 = n + 5 + (1/2/3/4)",
            _A, _I, 1, 7, operand2_range=(6, 9)),
    Formula(FormulaType.ADD_10, "Add via 10", "n + 10 (move to the next rod)",
            _A, _I, 1, 7, fixed_operand=10),
    Formula(FormulaType.ADD_COMPLEMENT, "Complement addition", "a + b column by column, carrying past 10",
            _A, _ADV, 1, 7, operand2_range=(0, None)),
    # Subtraction
    Formula(FormulaType.SUBTRACT_SIMPLE, "Simple subtraction", "n - 1, n - 2, n - 3, n - 4",
            _S, _B, 1, 7, operand2_range=(1, 4)),
    Formula(FormulaType.SUBTRACT_5, "Subtract via 5", "n - 5 (the upper bead)",
            _S, _B, 1, 7, fixed_operand=5),
    Formula(FormulaType.SUBTRACT_6_TO_9, "Subtract 6 to 9", "n - 6/7/8/9 = n - 5 - (1/2/3/4)",
            _S, _I, 1, 7, operand2_range=(6, 9)),
    Formula(FormulaType.SUBTRACT_10, "Subtract via 10", "n - 10 (borrow from the tens rod)",
            _S, _I, 2, 7, fixed_operand=10),
    Formula(FormulaType.SUBTRACT_COMPLEMENT, "Complement subtraction", "a - b column by column, borrowing from 10",
            _S, _ADV, 1, 7, operand2_range=(0, None)),
    # Multiplication
    Formula(FormulaType.MULTIPLY_2, "Multiply by 2", "n × 2 = n + n",
            _M, _B, 1, 6, fixed_operand=2),
    Formula(FormulaType.MULTIPLY_5, "Multiply by 5", "n × 5 = (n × 10) ÷ 2",
            _M, _I, 1, 6, fixed_operand=5),
    Formula(FormulaType.MULTIPLY_9, "Multiply by 9", "n × 9 = (n × 10) - n",
            _M, _I, 1, 6, fixed_operand=9),
    Formula(FormulaType.MULTIPLY_10, "Multiply by 10", "n × 10 (append a zero)",
            _M, _B, 1, 7, fixed_operand=10),
    Formula(FormulaType.MULTIPLY_11, "Multiply by 11", "n × 11 = (n × 10) + n",
            _M, _I, 1, 5, fixed_operand=11),
    Formula(FormulaType.MULTIPLY_25, "Multiply by 25", "n × 25 = (n × 100) ÷ 4",
            _M, _ADV, 1, 5, fixed_operand=25),
    Formula(FormulaType.MULTIPLY_125, "Multiply by 125", "n × 125 = (n × 1000) ÷ 8",
            _M, _E, 1, 4, fixed_operand=125),
    # Division
    Formula(FormulaType.DIVIDE_2, "Divide by 2", "n ÷ 2 (long division)",
            _D, _B, 1, 7, fixed_operand=2),
    Formula(FormulaType.DIVIDE_5, "Divide by 5", "n ÷ 5 = (n ÷ 10) × 2",
            _D, _I, 2, 7, fixed_operand=5),
    Formula(FormulaType.DIVIDE_10, "Divide by 10", "n ÷ 10 (drop the trailing zero)",
            _D, _B, 2, 7, fixed_operand=10),
    Formula(FormulaType.DIVIDE_4, "Divide by 4", "n ÷ 4 = (n ÷ 2) ÷ 2",
            _D, _I, 2, 7, fixed_operand=4),
    Formula(FormulaType.DIVIDE_8, "Divide by 8", "n ÷ 8 = ((n ÷ 2) ÷ 2) ÷ 2",
            _D, _ADV, 3, 7, fixed_operand=8),
)

FORMULAS: Mapping[FormulaType, Formula] = MappingProxyType(
    {formula.id: formula for formula in _CATALOG}
)


def get_formula(formula: FormulaType | str) -> Formula:
    """
    Look up a catalog entry.

    Args:
        formula: FormulaType or its string value (case-insensitive)

    Raises:
        KeyError: If the id is not in the catalog
    """
    if isinstance(formula, str) and not isinstance(formula, FormulaType):
        try:
            formula = FormulaType(formula.lower())
        except ValueError:
            raise KeyError(formula) from None
    return FORMULAS[formula]


def formulas_for_level(level: DifficultyLevel | str) -> list[Formula]:
    """All formulas a student at this tier may be drilled on, in catalog order."""
    level = DifficultyLevel.coerce(level)
    return [formula for formula in FORMULAS.values() if formula.difficulty <= level]


def formulas_by_category(category: OperationCategory) -> list[Formula]:
    return [formula for formula in FORMULAS.values() if formula.category is category]
