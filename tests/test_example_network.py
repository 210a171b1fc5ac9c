from menet.domain.network import Network
from menet.example_network import create_example_network, is_example_network
from menet.export.network_json import parse_network_json, serialize_network
from menet.validation import validate_network
from tests.networks import single_path_network


def test_example_network_shape(example_network: Network) -> None:
    stats = example_network.stats()

    assert (stats.behaviours, stats.outcomes, stats.values, stats.links) == (4, 4, 3, 12)
    assert {link.valence for link in example_network.outcome_value_links()} == {
        "positive",
        "negative",
    }


def test_example_network_is_deterministic() -> None:
    first = create_example_network(timestamp="2024-01-01T00:00:00+00:00")
    second = create_example_network(timestamp="2024-01-01T00:00:00+00:00")

    assert first == second
    assert [b.id for b in first.behaviours] == [
        "b-exercise",
        "b-meal-prep",
        "b-meditate",
        "b-gaming",
    ]


def test_example_network_is_valid(example_network: Network) -> None:
    assert validate_network(example_network).warnings == []
    assert parse_network_json(serialize_network(example_network)).node_count() == 11


def test_is_example_network(example_network: Network) -> None:
    assert is_example_network(example_network)
    assert not is_example_network(single_path_network())

    trimmed = example_network.model_copy(update={"behaviours": example_network.behaviours[:2]})
    assert not is_example_network(trimmed), "Needs at least 3 example behaviours"
