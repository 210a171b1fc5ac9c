"""Tests for LocalNetworkStore functionality."""

from pathlib import Path

import pytest

from menet.domain.network import NETWORK_VERSION, Network
from menet.errors import StoreError
from menet.network_store.local import LocalNetworkStore


def test_empty_store() -> None:
    store = LocalNetworkStore()

    assert store.get_network().is_empty(), "New store should hold an empty network"
    with pytest.raises(ValueError, match="No filepath provided"):
        store.save()


def test_missing_file_starts_empty(tmp_path: Path) -> None:
    store = LocalNetworkStore(filepath=tmp_path / "network.json")
    assert store.get_network() == Network()


def test_save_and_load(tmp_path: Path, example_network: Network) -> None:
    filepath = tmp_path / "nested" / "network.json"
    store = LocalNetworkStore.from_network(example_network.model_copy(update={"version": "0.9"}))

    store.save(str(filepath))
    loaded = LocalNetworkStore(filepath=filepath).get_network()

    assert loaded.version == NETWORK_VERSION, "Saved networks carry the current version"
    assert loaded.behaviours == example_network.behaviours
    assert loaded.links == example_network.links


def test_replace_and_clear(example_network: Network) -> None:
    store = LocalNetworkStore()

    store.replace_network(example_network)
    assert store.get_network().node_count() == 11

    store.clear()
    assert store.get_network().is_empty()


@pytest.mark.parametrize("content", ["{broken", '{"behaviours": [{"id": ""}]}'])
def test_corrupt_file_raises(tmp_path: Path, content: str) -> None:
    filepath = tmp_path / "network.json"
    filepath.write_text(content)

    with pytest.raises(StoreError, match="Failed to load network"):
        LocalNetworkStore(filepath=filepath)
