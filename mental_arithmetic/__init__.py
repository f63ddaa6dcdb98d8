"""
mental-arith - Soroban (abacus) mental arithmetic engine.

Breaks arithmetic into named formulas, traces each calculation as the
digit-level moves a student makes on the rods, and generates drills that
respect every formula's operand contract.

Quick start:
    >>> from mental_arithmetic import calculate_by_formula, FormulaType
    >>> calculate_by_formula(FormulaType.ADD_6_TO_9, 45, 8).result
    53
"""

from loguru import logger

from mental_arithmetic.core import (
    FORMULAS,
    DifficultyLevel,
    Formula,
    FormulaContractError,
    FormulaType,
    MentalArithmeticError,
    OperationCategory,
    digits_to_number,
    formulas_by_category,
    formulas_for_level,
    get_digit_count,
    get_formula,
    split_into_digits,
)
from mental_arithmetic.engine import CalculationResult, CalculationStep, calculate_by_formula
from mental_arithmetic.generation import (
    ALL_EXAMPLES,
    Problem,
    SequenceConfig,
    SequenceMethod,
    SequenceProblem,
    generate_problems,
    generate_problems_by_level,
    generate_sequence,
    get_examples_by_formula,
    get_examples_by_level,
    validate_sequence,
)

__version__ = "1.0.0"

# Library logging stays silent until an application opts in (see cli.main.configure_logging)
logger.disable("mental_arithmetic")

__all__ = [
    "FORMULAS",
    "Formula",
    "FormulaType",
    "DifficultyLevel",
    "OperationCategory",
    "get_formula",
    "formulas_for_level",
    "formulas_by_category",
    "split_into_digits",
    "digits_to_number",
    "get_digit_count",
    "MentalArithmeticError",
    "FormulaContractError",
    "calculate_by_formula",
    "CalculationResult",
    "CalculationStep",
    "Problem",
    "generate_problems",
    "generate_problems_by_level",
    "SequenceConfig",
    "SequenceMethod",
    "SequenceProblem",
    "generate_sequence",
    "validate_sequence",
    "ALL_EXAMPLES",
    "get_examples_by_level",
    "get_examples_by_formula",
]
