"""
Exceptions raised by the mental arithmetic engine.

Only contract violations are errors. Running out of eligible formulas or
operands while generating problems is reported as an empty result instead.
"""

from __future__ import annotations


class MentalArithmeticError(Exception):
    """Base class for all engine errors."""


class FormulaContractError(MentalArithmeticError, ValueError):
    """
    Raised when operands violate a formula's declared contract.

    Attributes:
        formula: The formula id the call was made with (as given)
        contract: Human-readable statement of the violated contract
    """

    def __init__(self, formula: object, contract: str):
        self.formula = formula
        self.contract = contract
        name = getattr(formula, "value", formula)
        super().__init__(f"{name}: {contract}")
