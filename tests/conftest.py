from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from menet.api import create_app
from menet.cache import AnalysisCache
from menet.domain.network import Network
from menet.example_network import create_example_network
from tests.fakes import FakeNetworkStore, FakeWarningStateStore
from tests.networks import (
    TIMESTAMP,
    behaviour,
    bo_link,
    outcome,
    ov_link,
    single_path_network,
    trade_off_network,
    value,
)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def example_network() -> Network:
    return create_example_network(timestamp=TIMESTAMP)


@pytest.fixture
def single_path() -> Network:
    return single_path_network()


@pytest.fixture
def trade_off() -> Network:
    return trade_off_network()


@pytest.fixture
def orphan_network() -> Network:
    """Scenario A plus an unconnected value, an unexplained behaviour and a floating outcome."""
    return Network(
        behaviours=[behaviour("b"), behaviour("b-idle", label="Idle")],
        outcomes=[outcome("o"), outcome("o-float", label="Float")],
        values=[value("v"), value("v-orphan", label="Orphan")],
        links=[bo_link("b", "o"), ov_link("o", "v")],
    )


@pytest.fixture
def fake_network_store(orphan_network: Network) -> FakeNetworkStore:
    return FakeNetworkStore(orphan_network)


@pytest.fixture
def fake_warning_store() -> FakeWarningStateStore:
    return FakeWarningStateStore()


@pytest.fixture
def test_client(
    fake_network_store: FakeNetworkStore, fake_warning_store: FakeWarningStateStore
) -> TestClient:
    """Create test client with fake implementations."""
    app = create_app(
        network_store=fake_network_store,
        warning_store=fake_warning_store,
        analysis_cache=AnalysisCache(),
    )
    return TestClient(app)
