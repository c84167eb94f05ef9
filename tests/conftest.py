"""Test configuration and fixtures for the NimRev scoring engine"""
import asyncio
import copy
from typing import Any, Callable, Dict, List, Optional

import pytest

from nimrev.caching.cache_manager import FeatureCache
from nimrev.config.settings import EngineConfig
from nimrev.core.scan_engine import ScanEngine
from nimrev.database.persistence import ScanPersistence
from nimrev.integrations.feature_provider import FeatureProvider
from nimrev.models.features import Features, parse_features
from nimrev.models.results import ScanRecord
from nimrev.test.mock_data import (
    MockFeatureProvider,
    get_blank_feature_payload,
    get_mock_transactions
)

TEST_ADDRESS = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"


class FakeClock:
    """Manually advanced clock, in seconds"""
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000


class HangingProvider(FeatureProvider):
    """Provider whose extraction never completes"""
    name = "hanging"

    def __init__(self):
        self.cancelled = False

    async def extract(self, address, network, options=None):
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise


class StaticProvider(FeatureProvider):
    """Provider returning a fixed payload"""
    name = "static"

    def __init__(self, payload: Dict[str, Any]):
        self.payload = payload
        self.calls: List[Dict[str, Any]] = []

    async def extract(self, address, network, options=None):
        self.calls.append({"address": address, "network": network, "options": options})
        return copy.deepcopy(self.payload)


class RecordingPersistence(ScanPersistence):
    def __init__(self, scan_id: Optional[str] = "scan-1"):
        self.scan_id = scan_id
        self.records: List[ScanRecord] = []

    async def save_scan(self, record: ScanRecord) -> Optional[str]:
        self.records.append(record)
        return self.scan_id


class FailingPersistence(ScanPersistence):
    async def save_scan(self, record: ScanRecord) -> Optional[str]:
        raise ConnectionError("storage unavailable")


@pytest.fixture
def blank_payload() -> Dict[str, Any]:
    """Feature payload with every measurement unknown"""
    return get_blank_feature_payload()


@pytest.fixture
def make_features() -> Callable[..., Features]:
    """Build a validated bundle from the blank payload plus overrides.

    Overrides use wire names; nested groups are merged key by key.
    """
    def _make(**overrides) -> Features:
        payload = get_blank_feature_payload()
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(payload.get(key), dict):
                payload[key].update(value)
            else:
                payload[key] = value
        return parse_features(payload)
    return _make


@pytest.fixture
def zero_payload() -> Dict[str, Any]:
    """Feature payload where every measurement is a measured zero"""
    payload = get_blank_feature_payload()
    for key, value in payload.items():
        if isinstance(value, dict):
            payload[key] = {
                field: (False if field == "multiChainPresence" else 0)
                for field in value
            }
        elif key != "transactionData":
            payload[key] = 0
    return payload


@pytest.fixture
def scam_transactions() -> List[Dict[str, Any]]:
    return get_mock_transactions(count=10, value=5_000_000, gas_used=150_000)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def mock_provider() -> MockFeatureProvider:
    return MockFeatureProvider()


@pytest.fixture
def engine(mock_provider, clock) -> ScanEngine:
    """Engine on the deterministic provider with a controllable cache clock"""
    config = EngineConfig(cache_ttl_ms=30_000, timeout_ms=500)
    return ScanEngine(
        config=config,
        feature_provider=mock_provider,
        cache=FeatureCache(ttl_ms=config.cache_ttl_ms, clock=clock)
    )
