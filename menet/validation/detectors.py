"""Structural detectors, each a single pass over the raw network."""

from collections import defaultdict
from typing import Literal

from pydantic import BaseModel

from menet.analysis.mappings import reliability_to_number, strength_to_number
from menet.domain.network import BehaviourOutcomeLink, Network, OutcomeValueLink, Value
from menet.domain.warnings import NodeRef, ValidationWarning, WarningType
from menet.validation.status import generate_warning_id, get_severity


class ValencePath(BaseModel):
    """A behaviour -> outcome -> value path as seen by the conflict detector."""

    behaviour_id: str
    outcome_id: str
    value_id: str
    valence: Literal["positive", "negative"]
    weight: float  # reliability x strength, negated for negative paths


def _warning(
    warning_type: WarningType,
    node_id: str,
    message: str,
    related_node_ids: list[str],
    suggestion: str,
) -> ValidationWarning:
    return ValidationWarning(
        id=generate_warning_id(warning_type, node_id),
        type=warning_type,
        node_id=node_id,
        message=message,
        severity=get_severity(warning_type),
        related_node_ids=related_node_ids,
        suggestion=suggestion,
    )


def _quoted(labels: list[str]) -> str:
    return ", ".join(f'"{label}"' for label in labels)


def detect_orphan_values(network: Network) -> list[ValidationWarning]:
    """Values with no path from any behaviour.

    A value is an orphan when no outcome links to it, or when none of the
    outcomes linking to it is the target of a behaviour-outcome link.
    """
    bo_links, ov_links = network.split_links()
    outcomes_with_behaviours = {link.target_id for link in bo_links}

    incoming: dict[str, list[str]] = defaultdict(list)
    for link in ov_links:
        incoming[link.target_id].append(link.source_id)

    warnings = []
    for value in network.values:
        incoming_outcome_ids = incoming.get(value.id, [])
        if any(outcome_id in outcomes_with_behaviours for outcome_id in incoming_outcome_ids):
            continue
        warnings.append(
            _warning(
                "orphan-value",
                value.id,
                f'"{value.label}" has no connection from any behaviour',
                list(incoming_outcome_ids),
                "Connect this value to an outcome, or use Why Ladder to trace a behaviour "
                "to this value.",
            )
        )
    return warnings


def detect_unexplained_behaviours(network: Network) -> list[ValidationWarning]:
    """Behaviours with no outgoing behaviour-outcome link."""
    linked = {link.source_id for link in network.behaviour_outcome_links()}

    return [
        _warning(
            "unexplained-behaviour",
            behaviour.id,
            f'"{behaviour.label}" has no outcomes linked',
            [],
            "Use Why Ladder to explore what outcomes this behaviour produces.",
        )
        for behaviour in network.behaviours
        if behaviour.id not in linked
    ]


def detect_floating_outcomes(network: Network) -> list[ValidationWarning]:
    """Outcomes with no outgoing outcome-value link."""
    linked = {link.source_id for link in network.outcome_value_links()}

    return [
        _warning(
            "floating-outcome",
            outcome.id,
            f'"{outcome.label}" is not connected to any value',
            [],
            'Ask "Why does this outcome matter?" to connect it to a value.',
        )
        for outcome in network.outcomes
        if outcome.id not in linked
    ]


def detect_outcome_level_conflicts(network: Network) -> list[ValidationWarning]:
    """Behaviours with at least one negative behaviour-outcome link.

    One warning per behaviour, listing every outcome it affects negatively.
    """
    behaviours = network.behaviours_by_id()
    outcomes = network.outcomes_by_id()

    negative_by_behaviour: dict[str, list[BehaviourOutcomeLink]] = defaultdict(list)
    for link in network.behaviour_outcome_links():
        if link.valence == "negative":
            negative_by_behaviour[link.source_id].append(link)

    warnings = []
    for behaviour_id, negative_links in negative_by_behaviour.items():
        behaviour = behaviours.get(behaviour_id)
        if behaviour is None:
            continue

        negative_outcomes = [
            outcomes[link.target_id] for link in negative_links if link.target_id in outcomes
        ]
        if not negative_outcomes:
            continue

        warnings.append(
            _warning(
                "outcome-level-conflict",
                behaviour_id,
                f'"{behaviour.label}" has negative effects on: '
                f"{_quoted([o.label for o in negative_outcomes])}",
                [o.id for o in negative_outcomes],
                "Consider whether the benefits outweigh the costs, or find alternatives.",
            )
        )
    return warnings


def compute_paths_to_values(network: Network) -> list[ValencePath]:
    """Join behaviour-outcome links to outcome-value links sharing an outcome.

    The path is positive when both legs have the same valence.
    """
    bo_links, ov_links = network.split_links()

    ov_links_by_outcome: dict[str, list[OutcomeValueLink]] = defaultdict(list)
    for ov_link in ov_links:
        ov_links_by_outcome[ov_link.source_id].append(ov_link)

    paths = []
    for bo_link in bo_links:
        for ov_link in ov_links_by_outcome.get(bo_link.target_id, []):
            valence = "positive" if bo_link.valence == ov_link.valence else "negative"
            weight = reliability_to_number(bo_link.reliability) * strength_to_number(
                ov_link.strength
            )
            paths.append(
                ValencePath(
                    behaviour_id=bo_link.source_id,
                    outcome_id=bo_link.target_id,
                    value_id=ov_link.target_id,
                    valence=valence,
                    weight=weight if valence == "positive" else -weight,
                )
            )
    return paths


def net_value_sets(paths: list[ValencePath]) -> tuple[list[str], list[str]]:
    """Net each value's signed path weights.

    Returns:
        Tuple of (value IDs netting positive, value IDs netting negative),
        disjoint and in first-seen order. Values netting exactly zero are in neither.
    """
    net: dict[str, float] = {}
    for path in paths:
        net[path.value_id] = net.get(path.value_id, 0.0) + path.weight

    positive = [value_id for value_id, weight in net.items() if weight > 0]
    negative = [value_id for value_id, weight in net.items() if weight < 0]
    return positive, negative


def value_refs(value_ids: list[str], values: dict[str, Value]) -> list[NodeRef]:
    return [NodeRef(id=values[v].id, label=values[v].label) for v in value_ids if v in values]


def detect_value_level_conflicts(network: Network) -> list[ValidationWarning]:
    """Behaviours that help one set of values while hurting a disjoint set."""
    behaviours = network.behaviours_by_id()
    values = network.values_by_id()

    paths_by_behaviour: dict[str, list[ValencePath]] = defaultdict(list)
    for path in compute_paths_to_values(network):
        paths_by_behaviour[path.behaviour_id].append(path)

    warnings = []
    for behaviour_id, behaviour_paths in paths_by_behaviour.items():
        behaviour = behaviours.get(behaviour_id)
        if behaviour is None:
            continue

        positive_ids, negative_ids = net_value_sets(behaviour_paths)
        if not positive_ids or not negative_ids:
            continue

        helps = _quoted([ref.label for ref in value_refs(positive_ids, values)])
        hurts = _quoted([ref.label for ref in value_refs(negative_ids, values)])
        warnings.append(
            _warning(
                "value-level-conflict",
                behaviour_id,
                f'"{behaviour.label}" creates a trade-off: helps {helps} but hurts {hurts}',
                positive_ids + negative_ids,
                "Consider whether this trade-off aligns with your priorities.",
            )
        )
    return warnings
