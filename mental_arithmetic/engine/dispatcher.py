"""
Formula Dispatcher - the single public entry point for traced calculations.

Checks the operands against the catalog contract, then routes to the
algorithm registered for the formula. Violations raise
FormulaContractError before any algorithm runs, so callers never see a
partial trace.
"""

from __future__ import annotations

from typing import Callable

from loguru import logger

from mental_arithmetic.core.errors import FormulaContractError
from mental_arithmetic.core.formulas import (
    Formula,
    FormulaType,
    OperationCategory,
    get_formula,
)
from mental_arithmetic.engine import addition, division, multiplication, subtraction
from mental_arithmetic.engine.models import CalculationResult

UnaryAlgorithm = Callable[[int], CalculationResult]
BinaryAlgorithm = Callable[[int, int], CalculationResult]

UNARY_ALGORITHMS: dict[FormulaType, UnaryAlgorithm] = {
    FormulaType.ADD_5: addition.add_5,
    FormulaType.ADD_10: addition.add_10,
    FormulaType.SUBTRACT_5: subtraction.subtract_5,
    FormulaType.SUBTRACT_10: subtraction.subtract_10,
    FormulaType.MULTIPLY_2: multiplication.multiply_2,
    FormulaType.MULTIPLY_5: multiplication.multiply_5,
    FormulaType.MULTIPLY_9: multiplication.multiply_9,
    FormulaType.MULTIPLY_10: multiplication.multiply_10,
    FormulaType.MULTIPLY_11: multiplication.multiply_11,
    FormulaType.MULTIPLY_25: multiplication.multiply_25,
    FormulaType.MULTIPLY_125: multiplication.multiply_125,
    FormulaType.DIVIDE_2: division.divide_2,
    FormulaType.DIVIDE_4: division.divide_4,
    FormulaType.DIVIDE_5: division.divide_5,
    FormulaType.DIVIDE_8: division.divide_8,
    FormulaType.DIVIDE_10: division.divide_10,
}

BINARY_ALGORITHMS: dict[FormulaType, BinaryAlgorithm] = {
    FormulaType.ADD_SIMPLE: addition.add_simple,
    FormulaType.ADD_6_TO_9: addition.add_6_to_9,
    FormulaType.ADD_COMPLEMENT: addition.add_complement,
    FormulaType.SUBTRACT_SIMPLE: subtraction.subtract_simple,
    FormulaType.SUBTRACT_6_TO_9: subtraction.subtract_6_to_9,
    FormulaType.SUBTRACT_COMPLEMENT: subtraction.subtract_complement,
}


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _violation(formula: FormulaType | str, contract: str) -> FormulaContractError:
    logger.warning(f"Contract violation for {getattr(formula, 'value', formula)}: {contract}")
    return FormulaContractError(formula, contract)


def check_contract(formula: Formula, operand1: int, operand2: int | None) -> None:
    """
    Validate operands against a catalog entry.

    Raises:
        FormulaContractError: Naming the first violated contract
    """
    if not _is_int(operand1) or operand1 < 0:
        raise _violation(formula.id, f"operand1 must be a non-negative integer, got {operand1!r}")
    if operand2 is not None and (not _is_int(operand2) or operand2 < 0):
        raise _violation(formula.id, f"operand2 must be a non-negative integer, got {operand2!r}")

    if formula.fixed_operand is not None:
        if operand2 is not None and operand2 != formula.fixed_operand:
            raise _violation(formula.id, f"{formula.contract_text()}, got {operand2}")
        amount = formula.fixed_operand
    else:
        if operand2 is None:
            raise _violation(formula.id, f"operand2 is required: {formula.contract_text()}")
        low, high = formula.operand2_range or (0, None)
        if operand2 < low or (high is not None and operand2 > high):
            raise _violation(formula.id, f"{formula.contract_text()}, got {operand2}")
        amount = operand2

    if formula.category is OperationCategory.SUBTRACTION and amount > operand1:
        raise _violation(
            formula.id,
            f"result would be negative ({operand1} - {amount}); operand1 must be >= {amount}",
        )


def calculate_by_formula(
    formula: FormulaType | str,
    operand1: int,
    operand2: int | None = None,
) -> CalculationResult:
    """
    Trace one calculation with the named formula.

    Args:
        formula: FormulaType or its string value
        operand1: The number being worked on
        operand2: Second operand; required for binary formulas, optional
            (and must equal the fixed operand) for unary ones

    Returns:
        A fresh CalculationResult with steps numbered 1..N

    Raises:
        FormulaContractError: If the formula is unknown or the operands
            break its contract
    """
    try:
        entry = get_formula(formula)
    except KeyError:
        raise _violation(formula, "unknown formula") from None

    check_contract(entry, operand1, operand2)
    logger.debug(f"Calculating {entry.id.value}: operand1={operand1} operand2={operand2}")

    if entry.id in BINARY_ALGORITHMS:
        return BINARY_ALGORITHMS[entry.id](operand1, operand2)
    return UNARY_ALGORITHMS[entry.id](operand1)
