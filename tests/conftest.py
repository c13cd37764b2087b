# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from wallclock.config.resolver_config import ResolverConfig
from wallclock.core.oracle import ZoneInfoOracle
from wallclock.core.resolver import WallTimeResolver


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture(autouse=True)
def _clear_observer_env(monkeypatch):
    monkeypatch.delenv("WALLCLOCK_OBSERVER_ZONE", raising=False)


@pytest.fixture
def oracle() -> ZoneInfoOracle:
    return ZoneInfoOracle()


@pytest.fixture
def make_resolver(oracle):
    """
    Factory fixture for WallTimeResolver.

    Usage:
        resolver = make_resolver()
        resolver = make_resolver(observer_zone="Asia/Tokyo", ambiguity="later")
        resolver = make_resolver(counting_oracle, ambiguity="first")
    """

    def _make(oracle_=None, **overrides) -> WallTimeResolver:
        return WallTimeResolver(oracle_ or oracle, ResolverConfig(**overrides))

    return _make


@pytest.fixture
def resolver(make_resolver) -> WallTimeResolver:
    return make_resolver()
