from typing import Protocol

from menet.domain.network import Network


class NetworkStore(Protocol):
    """Protocol for network storage implementations."""

    def get_network(self) -> Network:
        """Get the current network snapshot."""
        ...

    def replace_network(self, network: Network) -> None:
        """Replace the stored network with a new snapshot."""
        ...

    def clear(self) -> None:
        """Replace the stored network with an empty one."""
        ...

    def save(self, filepath: str | None = None) -> None:
        """Save the network to disk."""
        ...
