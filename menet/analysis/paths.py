"""Path computation: every behaviour -> outcome -> value path with its weight and influence."""

from collections import defaultdict

from loguru import logger

from menet.analysis.mappings import (
    importance_to_number,
    reliability_to_number,
    strength_to_number,
    valence_to_multiplier,
)
from menet.analysis.schemas import BehaviourPaths, PathToValue, ValueSupport
from menet.domain.network import Network, OutcomeValueLink


def _append_unique(items: list[str], item: str) -> None:
    if item not in items:
        items.append(item)


def compute_all_paths(network: Network) -> list[PathToValue]:
    """Compute all paths from behaviours to values through outcomes.

    Outcome-value links are indexed by source outcome once, then every
    behaviour-outcome link is joined against that index. Links pointing at a
    value that is not in the network are skipped.

    Args:
        network: Network snapshot

    Returns:
        One path per (behaviour-outcome link, outcome-value link) pair sharing an outcome
    """
    bo_links, ov_links = network.split_links()
    values = network.values_by_id()

    ov_links_by_outcome: dict[str, list[OutcomeValueLink]] = defaultdict(list)
    for ov_link in ov_links:
        ov_links_by_outcome[ov_link.source_id].append(ov_link)

    paths = []
    for bo_link in bo_links:
        outcome_id = bo_link.target_id
        for ov_link in ov_links_by_outcome.get(outcome_id, []):
            value = values.get(ov_link.target_id)
            if value is None:
                continue

            sign = valence_to_multiplier(bo_link.valence) * valence_to_multiplier(ov_link.valence)
            path_weight = reliability_to_number(bo_link.reliability) * strength_to_number(
                ov_link.strength
            )
            influence = sign * path_weight * importance_to_number(value.importance)

            paths.append(
                PathToValue(
                    behaviour_id=bo_link.source_id,
                    outcome_id=outcome_id,
                    value_id=value.id,
                    bo_link_id=bo_link.id,
                    ov_link_id=ov_link.id,
                    effective_valence="positive" if sign > 0 else "negative",
                    path_weight=path_weight,
                    influence=influence,
                )
            )

    logger.debug(f"Computed {len(paths)} paths from {len(bo_links)} behaviour-outcome links")
    return paths


def group_paths_by_behaviour(
    network: Network, paths: list[PathToValue] | None = None
) -> dict[str, BehaviourPaths]:
    """Group paths by behaviour and sum their influence.

    Every behaviour in the network gets an entry, even with no paths.

    Args:
        network: Network snapshot
        paths: Precomputed paths for this network, computed if not given

    Returns:
        Dictionary of behaviour ID to BehaviourPaths, in network order
    """
    if paths is None:
        paths = compute_all_paths(network)

    result = {
        behaviour.id: BehaviourPaths(behaviour_id=behaviour.id) for behaviour in network.behaviours
    }

    for path in paths:
        summary = result.get(path.behaviour_id)
        if summary is None:
            continue

        summary.paths.append(path)
        _append_unique(summary.outcome_ids, path.outcome_id)

        if path.influence > 0:
            summary.positive_influence += path.influence
            _append_unique(summary.positive_value_ids, path.value_id)
        elif path.influence < 0:
            summary.negative_influence += abs(path.influence)
            _append_unique(summary.negative_value_ids, path.value_id)

    for summary in result.values():
        summary.net_influence = summary.positive_influence - summary.negative_influence

    return result


def group_paths_by_value(
    network: Network, paths: list[PathToValue] | None = None
) -> dict[str, ValueSupport]:
    """Group paths by value and sum the support they provide.

    Every value in the network gets an entry, even with no paths.

    Args:
        network: Network snapshot
        paths: Precomputed paths for this network, computed if not given

    Returns:
        Dictionary of value ID to ValueSupport, in network order
    """
    if paths is None:
        paths = compute_all_paths(network)

    result = {value.id: ValueSupport(value_id=value.id) for value in network.values}

    for path in paths:
        summary = result.get(path.value_id)
        if summary is None:
            continue

        summary.paths.append(path)

        if path.influence > 0:
            summary.positive_support += path.influence
            _append_unique(summary.supporting_behaviour_ids, path.behaviour_id)
        elif path.influence < 0:
            summary.negative_support += abs(path.influence)
            _append_unique(summary.harming_behaviour_ids, path.behaviour_id)

    for summary in result.values():
        summary.net_support = summary.positive_support - summary.negative_support

    return result


def get_values_reached_by_behaviour(network: Network, behaviour_id: str) -> dict[str, list[str]]:
    """Value IDs a behaviour reaches, split into "positive" and "negative"."""
    summary = group_paths_by_behaviour(network).get(behaviour_id)
    if summary is None:
        return {"positive": [], "negative": []}
    return {
        "positive": list(summary.positive_value_ids),
        "negative": list(summary.negative_value_ids),
    }


def get_behaviours_supporting_value(network: Network, value_id: str) -> dict[str, list[str]]:
    """Behaviour IDs affecting a value, split into "supporting" and "harming"."""
    summary = group_paths_by_value(network).get(value_id)
    if summary is None:
        return {"supporting": [], "harming": []}
    return {
        "supporting": list(summary.supporting_behaviour_ids),
        "harming": list(summary.harming_behaviour_ids),
    }


def get_outcomes_for_behaviour(network: Network, behaviour_id: str) -> list[str]:
    summary = group_paths_by_behaviour(network).get(behaviour_id)
    if summary is None:
        return []
    return list(summary.outcome_ids)
