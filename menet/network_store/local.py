import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from menet.domain.network import NETWORK_VERSION, Network
from menet.errors import StoreError
from menet.network_store.base import NetworkStore


class LocalNetworkStore(NetworkStore):
    """Local network store that keeps the network in a JSON file."""

    def __init__(self, filepath: str | Path | None = None) -> None:
        """Initialize LocalNetworkStore.

        Args:
            filepath: Path to network file. If provided and exists, will auto-load.
                     If provided and doesn't exist, starts with an empty network and
                     saves to this path when save() is called.
                     If not provided, keeps the network in memory only.

        Raises:
            StoreError: If the file exists but does not hold a valid network
        """
        self._filepath = str(filepath) if filepath else None

        if self._filepath and Path(self._filepath).exists():
            try:
                with open(self._filepath, "r") as f:
                    self._network = Network.model_validate(json.load(f))
            except (json.JSONDecodeError, ValidationError) as err:
                raise StoreError(f"Failed to load network from {self._filepath}: {err}") from err
            logger.info(
                f"Loaded network with {self._network.node_count()} nodes from {self._filepath}"
            )
        else:
            self._network = Network()

    @classmethod
    def from_network(cls, network: Network) -> "LocalNetworkStore":
        """Create an in-memory store holding ``network`` (useful for testing)."""
        instance = cls(filepath=None)
        instance._network = network
        return instance

    def get_network(self) -> Network:
        return self._network

    def replace_network(self, network: Network) -> None:
        self._network = network

    def clear(self) -> None:
        self._network = Network()

    def save(self, filepath: str | None = None) -> None:
        """Save the network to a JSON file, stamped with the current format version.

        Args:
            filepath: Path to save to. If not provided, uses the filepath from initialization.
        """
        save_path = filepath or self._filepath
        if not save_path:
            raise ValueError(
                "No filepath provided and no default filepath set during initialization"
            )

        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        network = self._network.model_copy(update={"version": NETWORK_VERSION})
        with open(save_path, "w") as f:
            f.write(network.model_dump_json(by_alias=True, exclude_none=True))
