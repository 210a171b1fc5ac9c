import math

import pytest

from menet.analysis.metrics import (
    INFINITE_FRAGILITY,
    analyze_network,
    compute_all_behaviour_metrics,
    compute_all_value_metrics,
    get_conflict_behaviours,
    get_fragile_values,
    get_top_leverage_behaviours,
)
from menet.domain.network import Network
from menet.errors import InternalConsistencyError
from tests.networks import behaviour, bo_link, outcome, ov_link, single_path_network, value


def test_single_positive_path(single_path: Network) -> None:
    """One behaviour reaching one value through one outcome."""
    metrics = compute_all_behaviour_metrics(single_path)["b"]
    value_metrics = compute_all_value_metrics(single_path)["v"]

    assert metrics.leverage_score == pytest.approx(1.125), "2.25 influence / cost 2"
    assert metrics.coverage == 1
    assert metrics.conflict_index == 0
    assert value_metrics.fragility_score == pytest.approx(6 / 2.25)
    assert value_metrics.support_strength == pytest.approx(2.25)
    assert value_metrics.supporting_behaviours == ["b"]


def test_single_negative_path() -> None:
    network = single_path_network(ov_valence="negative")

    metrics = compute_all_behaviour_metrics(network)["b"]
    value_metrics = compute_all_value_metrics(network)["v"]

    assert metrics.net_influence == pytest.approx(-2.25)
    assert metrics.leverage_score < 0
    assert metrics.coverage == 0
    assert metrics.conflict_index == 0, "No positive leg to conflict with"
    assert value_metrics.fragility_score == INFINITE_FRAGILITY
    assert value_metrics.harming_behaviours == ["b"]


def test_unconnected_value_is_infinitely_fragile(orphan_network: Network) -> None:
    fragile = get_fragile_values(orphan_network)

    assert [item.value.id for item in fragile] == ["v-orphan"]
    assert fragile[0].is_orphan
    assert math.isinf(fragile[0].metrics.fragility_score)
    assert fragile[0].supporting_behaviours == []

    leverage_ids = [item.behaviour.id for item in get_top_leverage_behaviours(orphan_network)]
    assert "v-orphan" not in leverage_ids


def test_orphans_sort_ahead_of_finite_scores(example_network: Network) -> None:
    network = example_network.model_copy(
        update={"values": [*example_network.values, value("v-new", label="New")]}
    )

    fragile = get_fragile_values(network)

    assert [item.value.id for item in fragile] == ["v-new", "v-productivity"]
    assert fragile[1].metrics.fragility_score == pytest.approx(4.0), "9 / 2.25"
    assert not fragile[1].is_orphan


def test_fragility_threshold_is_strict(single_path: Network) -> None:
    score = compute_all_value_metrics(single_path)["v"].fragility_score

    assert get_fragile_values(single_path, threshold=score) == []
    assert len(get_fragile_values(single_path, threshold=score - 0.01)) == 1


def test_conflict_threshold_is_strict(trade_off: Network) -> None:
    metrics = compute_all_behaviour_metrics(trade_off)["b"]
    assert metrics.conflict_index == pytest.approx(2.0)

    assert get_conflict_behaviours(trade_off, threshold=2.0) == []
    conflicts = get_conflict_behaviours(trade_off, threshold=1.99)
    assert [item.behaviour.id for item in conflicts] == ["b"]
    assert [v.id for v in conflicts[0].positive_values] == ["v1"]
    assert [v.id for v in conflicts[0].negative_values] == ["v2"]


def test_agreeing_behaviours_never_conflict() -> None:
    network = Network(
        behaviours=[behaviour("b1"), behaviour("b2")],
        outcomes=[outcome("o")],
        values=[value("v")],
        links=[bo_link("b1", "o"), bo_link("b2", "o"), ov_link("o", "v")],
    )

    metrics = compute_all_behaviour_metrics(network)
    assert all(m.conflict_index == 0 for m in metrics.values())
    assert get_conflict_behaviours(network, threshold=0) == []


def test_conflict_index_is_bounded_by_both_sides(
    example_network: Network, trade_off: Network
) -> None:
    for network in (example_network, trade_off):
        for metrics in compute_all_behaviour_metrics(network).values():
            assert metrics.conflict_index <= metrics.positive_influence
            assert metrics.conflict_index <= metrics.negative_influence


def test_top_leverage_ranking(example_network: Network) -> None:
    top = get_top_leverage_behaviours(example_network)

    assert [item.behaviour.id for item in top] == ["b-meditate", "b-exercise", "b-meal-prep"]
    assert top[0].metrics.leverage_score == pytest.approx(4.05)
    assert top[1].metrics.leverage_score == pytest.approx(1.65)
    assert [v.id for v in top[1].supported_values] == ["v-health", "v-happiness", "v-productivity"]
    assert top[1].via_outcomes == ["Better physical fitness", "More energy"]


def test_top_leverage_respects_count_and_ties() -> None:
    network = Network(
        behaviours=[behaviour("b2"), behaviour("b1"), behaviour("b3")],
        outcomes=[outcome("o")],
        values=[value("v")],
        links=[bo_link("b2", "o"), bo_link("b1", "o"), bo_link("b3", "o"), ov_link("o", "v")],
    )

    top = get_top_leverage_behaviours(network, count=2)

    assert [item.behaviour.id for item in top] == ["b2", "b1"], "Ties keep network order"


def test_negative_leverage_is_not_ranked() -> None:
    network = single_path_network(ov_valence="negative")
    assert get_top_leverage_behaviours(network) == []


def test_every_node_has_metrics(orphan_network: Network) -> None:
    analysis = analyze_network(orphan_network)

    assert set(analysis.behaviour_metrics) == {"b", "b-idle"}
    assert set(analysis.value_metrics) == {"v", "v-orphan"}
    assert analysis.behaviour_metrics["b-idle"].leverage_score == 0


def test_analysis_is_deterministic(example_network: Network) -> None:
    first = analyze_network(example_network)
    second = analyze_network(example_network)

    assert first.model_dump() == second.model_dump()
    assert first is not second


def test_empty_network() -> None:
    analysis = analyze_network(Network())

    assert analysis.behaviour_metrics == {}
    assert analysis.value_metrics == {}
    assert analysis.top_leverage == []
    assert analysis.fragile_values == []
    assert analysis.conflict_behaviours == []


def test_stale_metrics_raise(single_path: Network, trade_off: Network) -> None:
    empty = Network()

    with pytest.raises(InternalConsistencyError, match="Behaviour not found: b"):
        get_top_leverage_behaviours(
            empty, behaviour_metrics=compute_all_behaviour_metrics(single_path)
        )

    with pytest.raises(InternalConsistencyError, match="Value not found: v"):
        get_fragile_values(
            empty, threshold=0, value_metrics=compute_all_value_metrics(single_path)
        )

    with pytest.raises(InternalConsistencyError):
        get_conflict_behaviours(
            empty, threshold=0, behaviour_metrics=compute_all_behaviour_metrics(trade_off)
        )


def test_analysis_thresholds_are_configurable(example_network: Network) -> None:
    analysis = analyze_network(
        example_network, top_leverage_count=1, fragility_threshold=1.0, conflict_threshold=0
    )

    assert len(analysis.top_leverage) == 1
    assert [item.value.id for item in analysis.fragile_values] == [
        "v-productivity",
        "v-health",
        "v-happiness",
    ]
    assert analysis.conflict_behaviours == []


def test_infinite_fragility_serialises_as_string(orphan_network: Network) -> None:
    payload = analyze_network(orphan_network).model_dump_json(by_alias=True)
    assert '"fragilityScore":"Infinity"' in payload
