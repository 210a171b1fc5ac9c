"""Exception types raised by menet."""


class MenetError(Exception):
    """Base class for all menet errors."""


class InternalConsistencyError(MenetError):
    """Raised when derived metrics reference a node the network does not contain.

    This means the caller handed the engine metrics computed from a different
    network snapshot than the one being ranked.
    """


class NetworkImportError(MenetError):
    """Raised when imported network JSON is malformed or inconsistent."""


class StoreError(MenetError):
    """Raised when a local store file cannot be read."""
