from pysyllaba.runtime.cache import (
    DiskCache,
    MemoryCache,
    NullCache,
    cache_from_dir,
    make_cache_key,
    make_g2p_key,
)
from pysyllaba.runtime.tracing import trace_timing
from pysyllaba.types import Trace


def test_cache_key_is_stable_and_order_independent():
    assert make_cache_key({"a": 1, "b": 2}) == make_cache_key({"b": 2, "a": 1})
    assert make_cache_key("x") != make_cache_key("y")


def test_g2p_key_depends_on_backend_version():
    base = make_g2p_key(word="happy", lang="en-us", backend="kokorog2p")
    bumped = make_g2p_key(
        word="happy", lang="en-us", backend="kokorog2p", backend_version="2.0"
    )
    assert base != bumped


def test_cache_from_dir(tmp_path):
    assert isinstance(cache_from_dir(None), NullCache)
    assert isinstance(cache_from_dir(":memory:"), MemoryCache)
    assert isinstance(cache_from_dir(str(tmp_path)), DiskCache)


def test_disk_cache_round_trip(tmp_path):
    cache = DiskCache(tmp_path / "g2p")
    assert cache.get("missing") is None
    cache.set("k", {"phonetic": "/ˈhæpi/"})
    assert cache.get("k") == {"phonetic": "/ˈhæpi/"}


def test_memory_and_null_cache():
    memory = MemoryCache()
    memory.set("k", 1)
    assert memory.get("k") == 1

    null = NullCache()
    null.set("k", 1)
    assert null.get("k") is None


def test_trace_timing_records_event():
    trace = Trace()
    with trace_timing(trace, "align", "align", word="happy") as details:
        details["tier"] = "strict"

    (event,) = trace.events
    assert event.stage == "align"
    assert event.ms >= 0.0
    assert event.details == {"word": "happy", "tier": "strict"}
