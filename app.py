import sys

from loguru import logger

from menet.api import create_app
from menet.cache import AnalysisCache
from menet.config import settings
from menet.network_store.local import LocalNetworkStore
from menet.warning_store.local import LocalWarningStateStore

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

logger.info(f"Loading network from {settings.network_store_path}")
network_store = LocalNetworkStore(filepath=settings.network_store_path)
warning_store = LocalWarningStateStore(
    filepath=settings.warning_state_path, snooze_hours=settings.snooze_hours
)
analysis_cache = AnalysisCache(
    top_leverage_count=settings.top_leverage_count,
    fragility_threshold=settings.fragility_threshold,
    conflict_threshold=settings.conflict_threshold,
)
app = create_app(
    network_store=network_store,
    warning_store=warning_store,
    analysis_cache=analysis_cache,
)
