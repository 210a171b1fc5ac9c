from tests.fakes.fake_network_store import FakeNetworkStore
from tests.fakes.fake_warning_store import FakeWarningStateStore

__all__ = ["FakeNetworkStore", "FakeWarningStateStore"]
