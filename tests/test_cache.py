from menet.analysis.metrics import analyze_network
from menet.cache import AnalysisCache, network_fingerprint
from menet.domain.network import Network
from tests.networks import value


def test_repeated_reads_hit_the_cache(example_network: Network) -> None:
    cache = AnalysisCache()

    first = cache.get(example_network)
    second = cache.get(example_network)

    assert first is second
    assert (cache.hits, cache.misses) == (1, 1)
    assert first == analyze_network(example_network)


def test_export_time_does_not_change_the_fingerprint(example_network: Network) -> None:
    exported = example_network.model_copy(update={"exported_at": "2024-06-01T12:00:00+00:00"})
    assert network_fingerprint(exported) == network_fingerprint(example_network)


def test_changed_content_misses(example_network: Network) -> None:
    cache = AnalysisCache()
    cache.get(example_network)

    changed = example_network.model_copy(
        update={"values": [*example_network.values, value("v-new")]}
    )
    analysis = cache.get(changed)

    assert cache.misses == 2
    assert "v-new" in analysis.value_metrics


def test_invalidate_and_thresholds(example_network: Network) -> None:
    cache = AnalysisCache(top_leverage_count=1)
    cache.get(example_network)

    cache.invalidate()
    analysis = cache.get(example_network)

    assert cache.misses == 2
    assert len(analysis.top_leverage) == 1
