"""Caller-owned memo of the last network analysis."""

import threading
from hashlib import sha256

from loguru import logger

from menet.analysis.metrics import (
    CONFLICT_THRESHOLD,
    FRAGILITY_THRESHOLD,
    TOP_LEVERAGE_COUNT,
    analyze_network,
)
from menet.analysis.schemas import NetworkAnalysis
from menet.domain.network import Network


def network_fingerprint(network: Network) -> str:
    """Content hash of a network, ignoring its export timestamp."""
    payload = network.model_dump_json(by_alias=True, exclude={"exported_at"})
    return sha256(payload.encode()).hexdigest()


class AnalysisCache:
    """Keeps the analysis of the most recently seen network content.

    The analysis engine itself holds no state; callers that render the same
    network repeatedly use this cache to skip recomputation. A network with
    different content (different fingerprint) replaces the cached entry.
    """

    def __init__(
        self,
        *,
        top_leverage_count: int = TOP_LEVERAGE_COUNT,
        fragility_threshold: float = FRAGILITY_THRESHOLD,
        conflict_threshold: float = CONFLICT_THRESHOLD,
    ) -> None:
        self._top_leverage_count = top_leverage_count
        self._fragility_threshold = fragility_threshold
        self._conflict_threshold = conflict_threshold
        self._lock = threading.Lock()
        self._key: str | None = None
        self._analysis: NetworkAnalysis | None = None
        self.hits = 0
        self.misses = 0

    def get(self, network: Network) -> NetworkAnalysis:
        key = network_fingerprint(network)
        with self._lock:
            if key == self._key and self._analysis is not None:
                self.hits += 1
                return self._analysis

        analysis = analyze_network(
            network,
            top_leverage_count=self._top_leverage_count,
            fragility_threshold=self._fragility_threshold,
            conflict_threshold=self._conflict_threshold,
        )

        with self._lock:
            self.misses += 1
            self._key = key
            self._analysis = analysis
        logger.debug(f"Cached analysis for network {key[:12]}")
        return analysis

    def invalidate(self) -> None:
        with self._lock:
            self._key = None
            self._analysis = None
