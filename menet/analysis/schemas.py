"""Derived records produced by path computation and metrics."""

from typing import Literal

from pydantic import ConfigDict

from menet.domain.base import CamelModel
from menet.domain.network import Behaviour, Value


class PathToValue(CamelModel):
    """A single behaviour -> outcome -> value path.

    Attributes:
        effective_valence: "positive" when both legs have the same valence
        path_weight: reliability x strength, in [0, 1]
        influence: sign x path_weight x importance of the value
    """

    model_config = ConfigDict(frozen=True)

    behaviour_id: str
    outcome_id: str
    value_id: str
    bo_link_id: str
    ov_link_id: str
    effective_valence: Literal["positive", "negative"]
    path_weight: float
    influence: float


class BehaviourPaths(CamelModel):
    """All paths leaving one behaviour, with influence split by sign.

    ``negative_influence`` holds the absolute value of the negative sum.
    Id lists are in first-seen path order.
    """

    behaviour_id: str
    paths: list[PathToValue] = []
    positive_influence: float = 0.0
    negative_influence: float = 0.0
    net_influence: float = 0.0
    positive_value_ids: list[str] = []
    negative_value_ids: list[str] = []
    outcome_ids: list[str] = []


class ValueSupport(CamelModel):
    """All paths reaching one value, with support split by sign."""

    value_id: str
    paths: list[PathToValue] = []
    positive_support: float = 0.0
    negative_support: float = 0.0
    net_support: float = 0.0
    supporting_behaviour_ids: list[str] = []
    harming_behaviour_ids: list[str] = []


class BehaviourMetrics(CamelModel):
    behaviour_id: str
    leverage_score: float
    coverage: int
    conflict_index: float
    positive_influence: float
    negative_influence: float
    net_influence: float
    positive_value_ids: list[str] = []
    negative_value_ids: list[str] = []


class ValueMetrics(CamelModel):
    """Support metrics for one value.

    ``fragility_score`` is ``math.inf`` for values with no positive support.
    """

    value_id: str
    fragility_score: float
    support_strength: float
    negative_support: float = 0.0
    net_support: float = 0.0
    supporting_behaviours: list[str] = []
    harming_behaviours: list[str] = []


class LeverageInsight(CamelModel):
    behaviour: Behaviour
    metrics: BehaviourMetrics
    supported_values: list[Value]
    via_outcomes: list[str]  # outcome labels


class FragilityInsight(CamelModel):
    value: Value
    metrics: ValueMetrics
    supporting_behaviours: list[Behaviour]
    is_orphan: bool


class ConflictInsight(CamelModel):
    behaviour: Behaviour
    metrics: BehaviourMetrics
    positive_values: list[Value]
    negative_values: list[Value]


class NetworkAnalysis(CamelModel):
    """Full analysis report for one network snapshot."""

    behaviour_metrics: dict[str, BehaviourMetrics] = {}
    value_metrics: dict[str, ValueMetrics] = {}
    top_leverage: list[LeverageInsight] = []
    fragile_values: list[FragilityInsight] = []
    conflict_behaviours: list[ConflictInsight] = []
