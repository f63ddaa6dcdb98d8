"""
Chained add/subtract sequences.

A sequence starts from a random number and applies one bead move at a time.
A move is legal only when the rod it touches allows it under one of the
requested methods, so a sheet can be held to direct moves, or to direct
moves plus small-friend swaps, before big-friend carries are introduced.

Rule tables are keyed by the digit currently on the rod. Direct and
small-friend moves may land on any of the sequence's rods; big-friend moves
touch the ones rod and never follow another big-friend move.
"""

from __future__ import annotations

import random
from types import MappingProxyType
from typing import Iterable, Mapping

from loguru import logger

from mental_arithmetic.config import get_settings
from mental_arithmetic.generation.models import (
    SequenceConfig,
    SequenceMethod,
    SequenceOperation,
    SequenceProblem,
)

# digit on the rod -> (deltas that may be added, deltas that may be subtracted)
RuleTable = Mapping[int, "tuple[tuple[int, ...], tuple[int, ...]]"]

# Rule registry - populated by register_rules; a method allows the union of its tables
RULE_TABLES: dict[SequenceMethod, list[RuleTable]] = {}

# Share of picks that go to a big-friend move when plain moves are also available
CARRY_WEIGHT = 0.25

_NO_MOVES: tuple[tuple[int, ...], tuple[int, ...]] = ((), ())


def register_rules(
    method: SequenceMethod,
    table: dict[int, tuple[tuple[int, ...], tuple[int, ...]]],
) -> RuleTable:
    """Register a digit rule table under a method and return it read-only."""
    frozen = MappingProxyType(table)
    RULE_TABLES.setdefault(method, []).append(frozen)
    return frozen


# ============================================================================
# RULE TABLES
# ============================================================================

DIRECT_RULES = register_rules(SequenceMethod.DIRECT, {
    0: ((1, 2, 3, 4, 5, 6, 7, 8, 9), ()),
    1: ((1, 2, 3, 5, 6, 7, 8), (1,)),
    2: ((1, 2, 5, 6, 7), (1, 2)),
    3: ((1, 5, 6), (1, 2, 3)),
    4: ((5,), (1, 2, 3, 4)),
    5: ((1, 2, 3, 4), (5,)),
    6: ((1, 2, 3), (1, 5, 6)),
    7: ((1, 2), (1, 2, 5, 7)),
    8: ((1,), (1, 2, 3, 5, 8)),
    9: ((), (1, 2, 3, 4, 5, 6, 7, 8, 9)),
})

# One table per small-friend pair
register_rules(SequenceMethod.SMALL_FRIEND, {4: ((1,), ()), 5: ((), (1,))})  # 4 + 1 = 5, 5 - 1 = 4
register_rules(SequenceMethod.SMALL_FRIEND, {3: ((2,), ()), 5: ((), (2,))})  # 3 + 2 = 5, 5 - 2 = 3
register_rules(SequenceMethod.SMALL_FRIEND, {2: ((3,), ()), 6: ((), (3,))})  # 2 + 3 = 5, 6 - 3 = 3
register_rules(SequenceMethod.SMALL_FRIEND, {1: ((4,), ()), 7: ((), (4,))})  # 1 + 4 = 5, 7 - 4 = 3

# delta -> (add mask, subtract mask), indexed by the ones digit.
# "Y" always, "T" only when the tens rod is non-zero, "." never.
BIG_FRIEND_RULES: Mapping[int, tuple[str, str]] = MappingProxyType({
    9: (".YYYT.YYYT", "TTTT.TTTT."),
    8: ("..YTT..YTT", "TTT..TTT.."),
    7: ("...YY...YY", "TT...TT..."),
    6: ("....Y....Y", "T....T...."),
    5: (".....YYYYY", "TTTTT....."),
    4: ("......YYYY", "TTTT......"),
    3: (".......YYY", "TTT......."),
    2: ("........YY", "TT........"),
    1: (".........Y", "T........."),
})

# Sheet presets by name, including the names older trainer screens use
METHOD_ALIASES: Mapping[str, tuple[SequenceMethod, ...]] = MappingProxyType({
    "direct": (SequenceMethod.DIRECT,),
    "small_friend": (SequenceMethod.SMALL_FRIEND,),
    "big_friend": (SequenceMethod.BIG_FRIEND,),
    "mix": tuple(SequenceMethod),
    "formulasiz": (SequenceMethod.DIRECT,),
    "kichik_dost": (SequenceMethod.SMALL_FRIEND,),
    "katta_dost": (SequenceMethod.BIG_FRIEND,),
    "oddiy": (SequenceMethod.DIRECT,),
    "formula5": (SequenceMethod.SMALL_FRIEND,),
    "formula10plus": (SequenceMethod.BIG_FRIEND,),
    "hammasi": tuple(SequenceMethod),
    "basic": (SequenceMethod.DIRECT,),
    "small_friend_1": (SequenceMethod.SMALL_FRIEND,),
    "small_friend_2": (SequenceMethod.SMALL_FRIEND,),
    "big_friend_3": (SequenceMethod.BIG_FRIEND,),
    "big_friend_4": (SequenceMethod.BIG_FRIEND,),
    "mixed": tuple(SequenceMethod),
})


def methods_for(name: str) -> tuple[SequenceMethod, ...]:
    """Resolve a preset name; unknown names fall back to direct moves only."""
    methods = METHOD_ALIASES.get(name.lower())
    if methods is None:
        logger.warning(f"Unknown sequence preset {name!r}, using direct moves")
        return (SequenceMethod.DIRECT,)
    return methods


# ============================================================================
# RULE CHECKS
# ============================================================================


def rod_digit(value: int, column: int = 0) -> int:
    """Digit on a rod, counting columns from the ones rod."""
    return abs(value) // 10**column % 10


def table_allows(method: SequenceMethod, digit: int, delta: int, is_add: bool) -> bool:
    for table in RULE_TABLES.get(method, ()):
        addable, subtractable = table.get(digit, _NO_MOVES)
        if delta in (addable if is_add else subtractable):
            return True
    return False


def big_friend_allowed(value: int, delta: int, is_add: bool) -> bool:
    masks = BIG_FRIEND_RULES.get(delta)
    if masks is None:
        return False
    flag = masks[0 if is_add else 1][rod_digit(value)]
    return flag == "Y" or (flag == "T" and rod_digit(value, 1) > 0)


def get_available_operations(
    value: int,
    methods: Iterable[SequenceMethod],
    last_method: SequenceMethod | None = None,
    digits: int = 1,
) -> list[SequenceOperation]:
    """
    Every legal move from `value`.

    Direct and small-friend moves are offered on each of the `digits` lowest
    rods, scaled to that rod's place value. A delta already offered on a rod
    is not offered again by a later table. Big-friend moves are offered on
    the ones rod unless the previous move was one.
    """
    allowed = {SequenceMethod(method) for method in methods}
    operations: list[SequenceOperation] = []

    for column in range(digits):
        digit = rod_digit(value, column)
        place = 10**column
        seen: set[tuple[int, bool]] = set()
        for method in (SequenceMethod.DIRECT, SequenceMethod.SMALL_FRIEND):
            if method not in allowed:
                continue
            for table in RULE_TABLES.get(method, ()):
                addable, subtractable = table.get(digit, _NO_MOVES)
                for is_add, deltas in ((True, addable), (False, subtractable)):
                    for delta in deltas:
                        if (delta, is_add) in seen:
                            continue
                        seen.add((delta, is_add))
                        operations.append(
                            SequenceOperation(delta=delta * place, is_add=is_add, method=method)
                        )

    if SequenceMethod.BIG_FRIEND in allowed and last_method is not SequenceMethod.BIG_FRIEND:
        for delta in range(1, 10):
            for is_add in (True, False):
                if big_friend_allowed(value, delta, is_add):
                    operations.append(
                        SequenceOperation(
                            delta=delta,
                            is_add=is_add,
                            method=SequenceMethod.BIG_FRIEND,
                            is_carry=True,
                        )
                    )
    return operations


def classify_move(value: int, delta: int) -> SequenceMethod | None:
    """
    Method a signed move from `value` needs, or None if no rule allows it.

    A move must change a single rod: its size is one non-zero digit times a
    place value.
    """
    size = abs(delta)
    if size == 0:
        return None
    column = 0
    while size % 10 == 0:
        size //= 10
        column += 1
    if size > 9:
        return None

    is_add = delta > 0
    digit = rod_digit(value, column)
    for method in (SequenceMethod.DIRECT, SequenceMethod.SMALL_FRIEND):
        if table_allows(method, digit, size, is_add):
            return method
    if column == 0 and big_friend_allowed(value, size, is_add):
        return SequenceMethod.BIG_FRIEND
    return None


# ============================================================================
# GENERATION & VALIDATION
# ============================================================================


def _pick(operations: list[SequenceOperation], rng: random.Random) -> SequenceOperation:
    plain = [operation for operation in operations if not operation.is_carry]
    carries = [operation for operation in operations if operation.is_carry]
    if plain and rng.random() > CARRY_WEIGHT:
        return rng.choice(plain)
    if carries:
        return rng.choice(carries)
    return rng.choice(operations)


def generate_sequence(config: SequenceConfig, rng: random.Random | None = None) -> SequenceProblem:
    """
    Build one chained sequence.

    When no move fits, the last move is undone and another is drawn. The
    sequence comes back shorter than `config.terms` only if the starting
    number has no legal move or the retry budget runs out.

    Args:
        config: Digits, length, allowed methods and range policy
        rng: Optional seeded source for reproducible sheets
    """
    rng = rng or random
    low = 1 if config.digits == 1 else 10 ** (config.digits - 1)
    start = rng.randint(low, 10**config.digits - 1)
    ceiling = 10 ** (config.digits + 1)

    value = start
    operations: list[SequenceOperation] = []
    budget = config.terms * get_settings().max_sampling_attempts
    attempts = 0
    while len(operations) < config.terms - 1 and attempts < budget:
        attempts += 1
        last_method = operations[-1].method if operations else None
        candidates = get_available_operations(value, config.methods, last_method, config.digits)
        if config.non_negative:
            candidates = [
                operation for operation in candidates
                if 0 <= value + operation.signed < ceiling
            ]
        if not candidates:
            if not operations:
                break
            value -= operations.pop().signed
            continue
        operation = _pick(candidates, rng)
        operations.append(operation)
        value += operation.signed

    if len(operations) < config.terms - 1:
        logger.warning(
            f"Sequence from {start} stopped at {len(operations) + 1}/{config.terms} terms "
            f"after {attempts} attempts"
        )
    logger.debug(f"Generated {config.digits}-digit sequence of {len(operations) + 1} terms")
    return SequenceProblem(start=start, operations=tuple(operations), answer=value)


def generate_sequences(
    config: SequenceConfig,
    count: int,
    rng: random.Random | None = None,
) -> list[SequenceProblem]:
    """A sheet of `count` sequences sharing one config."""
    rng = rng or random
    return [generate_sequence(config, rng) for _ in range(max(count, 0))]


def validate_sequence(terms: list[int], methods: Iterable[SequenceMethod]) -> list[str]:
    """
    Check a printed sequence move by move.

    Args:
        terms: Starting number followed by signed deltas
        methods: Methods the sheet is allowed to use

    Returns:
        One message per broken rule; empty when the sequence is valid
    """
    if len(terms) < 2:
        return ["A sequence needs at least 2 numbers"]

    allowed = {SequenceMethod(method) for method in methods}
    errors: list[str] = []
    value = terms[0]
    last_was_carry = False
    for index, delta in enumerate(terms[1:], start=1):
        method = classify_move(value, delta)
        if method is None:
            errors.append(f"Move {index} ({delta:+d}) has no bead rule from {value}")
        elif method not in allowed:
            errors.append(f"Move {index} ({delta:+d}) needs {method.value}, which is not allowed")

        is_carry = method is SequenceMethod.BIG_FRIEND
        if is_carry and last_was_carry:
            errors.append(f"Move {index} is a second big-friend carry in a row")
        value += delta
        last_was_carry = is_carry
    return errors
