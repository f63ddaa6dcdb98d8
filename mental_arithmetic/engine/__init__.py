"""
Step-trace calculation engine.

Use calculate_by_formula as the entry point; the per-formula algorithms are
importable for composition but do not validate their operands.
"""

from mental_arithmetic.engine.dispatcher import calculate_by_formula, check_contract
from mental_arithmetic.engine.models import CalculationResult, CalculationStep
from mental_arithmetic.engine.trace import TraceBuilder, renumber_steps

__all__ = [
    "calculate_by_formula",
    "check_contract",
    "CalculationResult",
    "CalculationStep",
    "TraceBuilder",
    "renumber_steps",
]
