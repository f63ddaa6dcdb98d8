"""
Core Module - Digit codec, formula catalog and errors.

Everything the calculation engine and the problem generator share lives
here. Both sides should import from mental_arithmetic.core rather than
re-declaring formula ids or tiers.
"""

from mental_arithmetic.core.digits import (
    digits_to_number,
    get_digit_count,
    has_borrow,
    has_carry,
    split_into_digits,
    trim_leading_zeros,
)
from mental_arithmetic.core.errors import FormulaContractError, MentalArithmeticError
from mental_arithmetic.core.formulas import (
    FORMULAS,
    DifficultyLevel,
    Formula,
    FormulaType,
    OperationCategory,
    formulas_by_category,
    formulas_for_level,
    get_formula,
)

__all__ = [
    # Digits
    "split_into_digits",
    "digits_to_number",
    "get_digit_count",
    "trim_leading_zeros",
    "has_carry",
    "has_borrow",
    # Catalog
    "FORMULAS",
    "Formula",
    "FormulaType",
    "DifficultyLevel",
    "OperationCategory",
    "get_formula",
    "formulas_for_level",
    "formulas_by_category",
    # Errors
    "MentalArithmeticError",
    "FormulaContractError",
]
