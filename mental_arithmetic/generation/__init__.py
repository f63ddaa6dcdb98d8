"""
Problem generation: random drills per formula or tier, chained
add/subtract sequences, and the curated bank.
"""

from mental_arithmetic.generation.examples import (
    ADVANCED_EXAMPLES,
    ALL_EXAMPLES,
    BEGINNER_EXAMPLES,
    EXPERT_EXAMPLES,
    INTERMEDIATE_EXAMPLES,
    get_examples_by_formula,
    get_examples_by_level,
)
from mental_arithmetic.generation.models import (
    Problem,
    SequenceConfig,
    SequenceMethod,
    SequenceOperation,
    SequenceProblem,
)
from mental_arithmetic.generation.problem_generator import (
    GENERATORS,
    ProblemGenerator,
    generate_problems,
    generate_problems_by_level,
)
from mental_arithmetic.generation.sampling import LEVEL_DIGIT_RANGES, digit_range_for
from mental_arithmetic.generation.sequence import (
    METHOD_ALIASES,
    RULE_TABLES,
    generate_sequence,
    generate_sequences,
    get_available_operations,
    methods_for,
    validate_sequence,
)

__all__ = [
    "Problem",
    "GENERATORS",
    "ProblemGenerator",
    "generate_problems",
    "generate_problems_by_level",
    "LEVEL_DIGIT_RANGES",
    "digit_range_for",
    "SequenceConfig",
    "SequenceMethod",
    "SequenceOperation",
    "SequenceProblem",
    "RULE_TABLES",
    "METHOD_ALIASES",
    "methods_for",
    "get_available_operations",
    "generate_sequence",
    "generate_sequences",
    "validate_sequence",
    "BEGINNER_EXAMPLES",
    "INTERMEDIATE_EXAMPLES",
    "ADVANCED_EXAMPLES",
    "EXPERT_EXAMPLES",
    "ALL_EXAMPLES",
    "get_examples_by_level",
    "get_examples_by_formula",
]
