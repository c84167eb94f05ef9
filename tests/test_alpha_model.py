"""Tests for the alpha model"""
import pytest

from nimrev.analysis.alpha_model import AlphaModel


@pytest.mark.asyncio
async def test_no_signal(make_features):
    result = await AlphaModel().predict(make_features())

    assert result.alpha_score == 0
    assert result.potential_multiplier == 1
    assert result.confidence == pytest.approx(0.45)
    assert result.signals == ()


@pytest.mark.asyncio
async def test_all_triggers(make_features):
    features = make_features(
        volumeSpikes={"last24h": 12},
        socialSentiment={"score": 0.9},
        whaleActivity={"accumulating": 0.8},
        developmentActivity={"commits": 60},
        marketCapGrowth={"last7d": 4},
    )

    result = await AlphaModel().predict(features)

    assert result.alpha_score == pytest.approx(1.0)
    assert result.potential_multiplier == pytest.approx(2 * 1.5 * 3 * 1.2 * 4)
    assert result.confidence == pytest.approx(0.95)
    assert result.signals == (
        "Massive volume spike",
        "Extremely positive sentiment",
        "Whale accumulation",
        "High development activity",
        "Market cap growth",
    )


@pytest.mark.asyncio
async def test_multiplier_is_capped(make_features):
    features = make_features(
        volumeSpikes={"last24h": 50},
        whaleActivity={"accumulating": 0.9},
        marketCapGrowth={"last7d": 900_000},
    )

    result = await AlphaModel().predict(features)

    assert result.potential_multiplier == 1_000_000


@pytest.mark.asyncio
async def test_confidence_ignores_non_weighted_triggers(make_features):
    features = make_features(
        developmentActivity={"commits": 500},
        marketCapGrowth={"last7d": 3},
    )

    result = await AlphaModel().predict(features)

    assert result.alpha_score == pytest.approx(0.25)
    assert result.potential_multiplier == pytest.approx(1.2 * 3)
    assert result.confidence == pytest.approx(0.45)
