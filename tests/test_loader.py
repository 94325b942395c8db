# tests/test_loader.py
import asyncio
import threading
import time
from concurrent.futures import TimeoutError as FutureTimeout

import pytest

from keyboard_predict.core.loader import LoadState, ResourceLoader, default_loader


def test_starts_not_loaded(config):
    loader = ResourceLoader(config)
    assert loader.state is LoadState.NOT_LOADED
    assert loader.resources is None
    assert loader.parse_count == 0


def test_ensure_loaded(config):
    loader = ResourceLoader(config)
    res = loader.ensure_loaded(timeout=5)
    assert loader.is_loaded
    assert len(res.terms) == 18
    assert len(res.bigrams) == 6
    assert res.load_seconds >= 0
    # later calls return the same tables without parsing again
    assert loader.ensure_loaded() is res
    assert loader.parse_count == 1


def test_concurrent_callers_share_one_parse(config):
    loader = ResourceLoader(config, on_parse=lambda cfg: time.sleep(0.05))
    results = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        results.append(loader.ensure_loaded(timeout=5))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert loader.parse_count == 1
    assert len(results) == 8
    assert all(r is results[0] for r in results)


def test_start_returns_shared_future(config):
    loader = ResourceLoader(config)
    fut = loader.start()
    assert loader.start() is fut
    fut.result(timeout=5)
    assert loader.state is LoadState.LOADED


def test_missing_files_load_empty(missing_config):
    loader = ResourceLoader(missing_config)
    res = loader.ensure_loaded(timeout=5)
    assert loader.is_loaded
    assert len(res.terms) == 0
    assert len(res.bigrams) == 0


def test_parse_failure_falls_back_to_empty_tables(config, caplog):
    def boom(cfg):
        raise RuntimeError("disk on fire")

    loader = ResourceLoader(config, on_parse=boom)
    res = loader.ensure_loaded(timeout=5)
    assert loader.state is LoadState.LOADED
    assert len(res.terms) == 0
    assert "loading suggestion resources failed" in caplog.text
    # no retry
    loader.ensure_loaded()
    assert loader.parse_count == 1


def test_on_parse_hook_receives_config(config):
    seen = []
    loader = ResourceLoader(config, on_parse=seen.append)
    loader.ensure_loaded(timeout=5)
    assert seen == [config]


def test_async_callers_share_one_parse(config):
    loader = ResourceLoader(config, on_parse=lambda cfg: time.sleep(0.02))

    async def many():
        return await asyncio.gather(*(loader.ensure_loaded_async() for _ in range(5)))

    results = asyncio.run(many())
    assert loader.parse_count == 1
    assert all(r is results[0] for r in results)


def test_ensure_loaded_timeout(config):
    release = threading.Event()
    loader = ResourceLoader(config, on_parse=lambda cfg: release.wait(5))
    with pytest.raises(FutureTimeout):
        loader.ensure_loaded(timeout=0.01)
    assert loader.state is LoadState.LOADING
    release.set()
    assert loader.ensure_loaded(timeout=5) is loader.resources


def test_default_loader_is_shared():
    assert default_loader() is default_loader()
