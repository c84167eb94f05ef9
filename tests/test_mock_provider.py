"""Tests for the deterministic mock provider"""
import pytest

from nimrev.models.features import Features, parse_features
from nimrev.models.network import Network
from nimrev.test.mock_data import (
    MOCK_EPOCH_MS,
    MOCK_TRANSACTION_COUNT,
    MockFeatureProvider,
    address_seed,
    get_mock_feature_payload
)


@pytest.mark.parametrize("address", ["abc", "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU", "0x" + "f" * 40])
def test_payload_conforms_to_schema(address):
    features = parse_features(get_mock_feature_payload(address))

    assert len(features.transaction_data) == MOCK_TRANSACTION_COUNT
    assert features.transaction_data[0].timestamp == MOCK_EPOCH_MS


def test_seed_range():
    for address in ("abc", "zzzzzzzzzzzz", "0x" + "a" * 64):
        assert 0 <= address_seed(address) < 1


@pytest.mark.asyncio
async def test_same_address_same_bundle():
    provider = MockFeatureProvider()

    first = await provider.extract("addr-one", Network.SOLANA)
    second = await provider.extract("addr-one", Network.POLYGON)

    assert isinstance(first, Features)
    assert first == second
    assert provider.calls == 2


@pytest.mark.asyncio
async def test_different_addresses_differ():
    provider = MockFeatureProvider()

    first = await provider.extract("addr-one", Network.SOLANA)
    second = await provider.extract("addr-two-longer", Network.SOLANA)

    assert first != second
