"""Numeric mappings from qualitative attributes to the numbers used in metrics."""

from menet.domain.network import Cost, Importance, Neglect, Reliability, Strength, Valence

# Behaviour -> outcome link reliability
RELIABILITY_VALUES: dict[Reliability, float] = {
    "always": 1.0,
    "usually": 0.75,
    "sometimes": 0.5,
    "rarely": 0.25,
}

# Outcome -> value link strength
STRENGTH_VALUES: dict[Strength, float] = {
    "strong": 1.0,
    "moderate": 0.6,
    "weak": 0.3,
}

VALENCE_MULTIPLIERS: dict[Valence, int] = {
    "positive": 1,
    "negative": -1,
}

# Doubling scale, used as a divisor for leverage
COST_VALUES: dict[Cost, int] = {
    "trivial": 1,
    "low": 2,
    "medium": 4,
    "high": 8,
    "very-high": 16,
}

IMPORTANCE_VALUES: dict[Importance, int] = {
    "critical": 4,
    "high": 3,
    "medium": 2,
    "low": 1,
}

NEGLECT_VALUES: dict[Neglect, int] = {
    "severely-neglected": 4,
    "somewhat-neglected": 3,
    "adequately-met": 2,
    "well-satisfied": 1,
}


def reliability_to_number(reliability: Reliability) -> float:
    return RELIABILITY_VALUES[reliability]


def strength_to_number(strength: Strength) -> float:
    return STRENGTH_VALUES[strength]


def valence_to_multiplier(valence: Valence) -> int:
    return VALENCE_MULTIPLIERS[valence]


def cost_to_number(cost: Cost) -> int:
    return COST_VALUES[cost]


def importance_to_number(importance: Importance) -> int:
    return IMPORTANCE_VALUES[importance]


def neglect_to_number(neglect: Neglect) -> int:
    return NEGLECT_VALUES[neglect]


MAPPINGS = {
    "reliability": RELIABILITY_VALUES,
    "strength": STRENGTH_VALUES,
    "valence": VALENCE_MULTIPLIERS,
    "cost": COST_VALUES,
    "importance": IMPORTANCE_VALUES,
    "neglect": NEGLECT_VALUES,
}
