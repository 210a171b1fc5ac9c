"""Metrics computation: leverage, coverage, conflict index and fragility.

Formulas
========
  leverage       = net influence / cost
  coverage       = number of distinct values reached with positive influence
  conflict index = min(positive influence, negative influence)
  fragility      = importance x neglect / positive support

A value with no positive support has infinite fragility (``math.inf``),
which sorts ahead of every finite score. All functions are pure: they read
the network snapshot and return fresh results on every call.
"""

import math
from typing import TypeVar

from loguru import logger

from menet.analysis.mappings import cost_to_number, importance_to_number, neglect_to_number
from menet.analysis.paths import compute_all_paths, group_paths_by_behaviour, group_paths_by_value
from menet.analysis.schemas import (
    BehaviourMetrics,
    BehaviourPaths,
    ConflictInsight,
    FragilityInsight,
    LeverageInsight,
    NetworkAnalysis,
    PathToValue,
    ValueMetrics,
    ValueSupport,
)
from menet.domain.network import Behaviour, Network, Value
from menet.errors import InternalConsistencyError

INFINITE_FRAGILITY = math.inf
FRAGILITY_THRESHOLD = 3.0
CONFLICT_THRESHOLD = 0.5
TOP_LEVERAGE_COUNT = 5

T = TypeVar("T")


def _lookup(items: dict[str, T], item_id: str, kind: str) -> T:
    try:
        return items[item_id]
    except KeyError as err:
        raise InternalConsistencyError(f"{kind} not found: {item_id}") from err


def compute_leverage_score(behaviour: Behaviour, paths: BehaviourPaths) -> float:
    return paths.net_influence / cost_to_number(behaviour.cost)


def compute_coverage(paths: BehaviourPaths) -> int:
    return len(paths.positive_value_ids)


def compute_conflict_index(paths: BehaviourPaths) -> float:
    """Zero unless the behaviour has both positive and negative effects."""
    return min(paths.positive_influence, paths.negative_influence)


def compute_fragility_score(value: Value, support: ValueSupport) -> float:
    if support.positive_support <= 0:
        return INFINITE_FRAGILITY
    return (
        importance_to_number(value.importance)
        * neglect_to_number(value.neglect)
        / support.positive_support
    )


def compute_all_behaviour_metrics(
    network: Network, paths: list[PathToValue] | None = None
) -> dict[str, BehaviourMetrics]:
    paths_by_behaviour = group_paths_by_behaviour(network, paths)
    result = {}

    for behaviour in network.behaviours:
        summary = paths_by_behaviour[behaviour.id]
        result[behaviour.id] = BehaviourMetrics(
            behaviour_id=behaviour.id,
            leverage_score=compute_leverage_score(behaviour, summary),
            coverage=compute_coverage(summary),
            conflict_index=compute_conflict_index(summary),
            positive_influence=summary.positive_influence,
            negative_influence=summary.negative_influence,
            net_influence=summary.net_influence,
            positive_value_ids=list(summary.positive_value_ids),
            negative_value_ids=list(summary.negative_value_ids),
        )

    return result


def compute_all_value_metrics(
    network: Network, paths: list[PathToValue] | None = None
) -> dict[str, ValueMetrics]:
    paths_by_value = group_paths_by_value(network, paths)
    result = {}

    for value in network.values:
        support = paths_by_value[value.id]
        result[value.id] = ValueMetrics(
            value_id=value.id,
            fragility_score=compute_fragility_score(value, support),
            support_strength=support.positive_support,
            negative_support=support.negative_support,
            net_support=support.net_support,
            supporting_behaviours=list(support.supporting_behaviour_ids),
            harming_behaviours=list(support.harming_behaviour_ids),
        )

    return result


def get_top_leverage_behaviours(
    network: Network,
    count: int = TOP_LEVERAGE_COUNT,
    *,
    paths: list[PathToValue] | None = None,
    behaviour_metrics: dict[str, BehaviourMetrics] | None = None,
) -> list[LeverageInsight]:
    """Behaviours with positive leverage, highest first.

    Args:
        network: Network snapshot
        count: Maximum number of behaviours to return
        paths: Precomputed paths for this network
        behaviour_metrics: Precomputed metrics for this network

    Returns:
        Up to ``count`` insights; ties keep network order

    Raises:
        InternalConsistencyError: If a metrics entry names a behaviour missing from the network
    """
    if paths is None:
        paths = compute_all_paths(network)
    if behaviour_metrics is None:
        behaviour_metrics = compute_all_behaviour_metrics(network, paths)
    paths_by_behaviour = group_paths_by_behaviour(network, paths)
    behaviours = network.behaviours_by_id()

    ranked = sorted(
        (m for m in behaviour_metrics.values() if m.leverage_score > 0),
        key=lambda m: m.leverage_score,
        reverse=True,
    )[:count]

    insights = []
    for metrics in ranked:
        behaviour = _lookup(behaviours, metrics.behaviour_id, "Behaviour")
        summary = _lookup(paths_by_behaviour, metrics.behaviour_id, "Behaviour paths")
        insights.append(
            LeverageInsight(
                behaviour=behaviour,
                metrics=metrics,
                supported_values=[v for v in network.values if v.id in summary.positive_value_ids],
                via_outcomes=[o.label for o in network.outcomes if o.id in summary.outcome_ids],
            )
        )
    return insights


def get_fragile_values(
    network: Network,
    threshold: float = FRAGILITY_THRESHOLD,
    *,
    paths: list[PathToValue] | None = None,
    value_metrics: dict[str, ValueMetrics] | None = None,
) -> list[FragilityInsight]:
    """Values above the fragility threshold, orphans (infinite fragility) first.

    Raises:
        InternalConsistencyError: If a metrics entry names a value missing from the network
    """
    if value_metrics is None:
        value_metrics = compute_all_value_metrics(network, paths)
    values = network.values_by_id()

    # math.inf compares greater than every finite score, so orphans lead
    ranked = sorted(
        (
            m
            for m in value_metrics.values()
            if m.fragility_score > threshold or m.fragility_score == INFINITE_FRAGILITY
        ),
        key=lambda m: m.fragility_score,
        reverse=True,
    )

    insights = []
    for metrics in ranked:
        value = _lookup(values, metrics.value_id, "Value")
        insights.append(
            FragilityInsight(
                value=value,
                metrics=metrics,
                supporting_behaviours=[
                    b for b in network.behaviours if b.id in metrics.supporting_behaviours
                ],
                is_orphan=metrics.fragility_score == INFINITE_FRAGILITY,
            )
        )
    return insights


def get_conflict_behaviours(
    network: Network,
    threshold: float = CONFLICT_THRESHOLD,
    *,
    paths: list[PathToValue] | None = None,
    behaviour_metrics: dict[str, BehaviourMetrics] | None = None,
) -> list[ConflictInsight]:
    """Behaviours whose conflict index is strictly above ``threshold``, highest first.

    Raises:
        InternalConsistencyError: If a metrics entry names a behaviour missing from the network
    """
    if paths is None:
        paths = compute_all_paths(network)
    if behaviour_metrics is None:
        behaviour_metrics = compute_all_behaviour_metrics(network, paths)
    paths_by_behaviour = group_paths_by_behaviour(network, paths)
    behaviours = network.behaviours_by_id()

    ranked = sorted(
        (m for m in behaviour_metrics.values() if m.conflict_index > threshold),
        key=lambda m: m.conflict_index,
        reverse=True,
    )

    insights = []
    for metrics in ranked:
        behaviour = _lookup(behaviours, metrics.behaviour_id, "Behaviour")
        summary = _lookup(paths_by_behaviour, metrics.behaviour_id, "Behaviour paths")
        insights.append(
            ConflictInsight(
                behaviour=behaviour,
                metrics=metrics,
                positive_values=[v for v in network.values if v.id in summary.positive_value_ids],
                negative_values=[v for v in network.values if v.id in summary.negative_value_ids],
            )
        )
    return insights


def analyze_network(
    network: Network,
    *,
    top_leverage_count: int = TOP_LEVERAGE_COUNT,
    fragility_threshold: float = FRAGILITY_THRESHOLD,
    conflict_threshold: float = CONFLICT_THRESHOLD,
) -> NetworkAnalysis:
    """Run the full analysis over one network snapshot.

    Paths and per-node metrics are computed once and shared by the ranking views.
    """
    paths = compute_all_paths(network)
    behaviour_metrics = compute_all_behaviour_metrics(network, paths)
    value_metrics = compute_all_value_metrics(network, paths)

    analysis = NetworkAnalysis(
        behaviour_metrics=behaviour_metrics,
        value_metrics=value_metrics,
        top_leverage=get_top_leverage_behaviours(
            network, top_leverage_count, paths=paths, behaviour_metrics=behaviour_metrics
        ),
        fragile_values=get_fragile_values(
            network, fragility_threshold, paths=paths, value_metrics=value_metrics
        ),
        conflict_behaviours=get_conflict_behaviours(
            network, conflict_threshold, paths=paths, behaviour_metrics=behaviour_metrics
        ),
    )

    logger.debug(
        f"Analysed network: {len(analysis.top_leverage)} top leverage, "
        f"{len(analysis.fragile_values)} fragile values, "
        f"{len(analysis.conflict_behaviours)} conflict behaviours"
    )
    return analysis
