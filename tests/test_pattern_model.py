"""Tests for the pattern model"""
import math

import pytest

from nimrev.analysis.pattern_model import PatternModel
from nimrev.config.settings import PatternThresholds
from nimrev.models.features import parse_features
from nimrev.test.mock_data import get_mock_transactions


def _transactions(blank_payload, transactions):
    blank_payload["transactionData"] = transactions
    return parse_features(blank_payload).transaction_data


@pytest.mark.asyncio
async def test_empty_transactions():
    result = await PatternModel().analyze(())

    assert result.risk_level == 0
    assert not math.isnan(result.risk_level)
    assert result.known_patterns == ()
    assert result.novel_patterns == ()


@pytest.mark.asyncio
async def test_all_large_high_gas_is_a_scam_pattern(blank_payload, scam_transactions):
    transactions = _transactions(blank_payload, scam_transactions)

    result = await PatternModel().analyze(transactions)

    assert len(result.known_patterns) == 1
    pattern = result.known_patterns[0]
    assert pattern.type == "scam_pattern"
    assert pattern.similarity == 1.0
    assert result.risk_level == pytest.approx(0.3)


@pytest.mark.asyncio
async def test_similarity_at_threshold_does_not_match(blank_payload):
    # 17 of 20 = 0.85, which must exceed the threshold to count
    transactions = (
        get_mock_transactions(count=17, value=2_000_000, gas_used=200_000)
        + get_mock_transactions(count=3, value=10, gas_used=21_000)
    )

    result = await PatternModel().analyze(_transactions(blank_payload, transactions))

    assert result.known_patterns == ()
    assert result.risk_level == 0


@pytest.mark.asyncio
async def test_custom_threshold(blank_payload):
    transactions = (
        get_mock_transactions(count=6, value=2_000_000, gas_used=200_000)
        + get_mock_transactions(count=4, value=10, gas_used=21_000)
    )
    model = PatternModel(PatternThresholds(confidence_threshold=0.5))

    result = await model.analyze(_transactions(blank_payload, transactions))

    assert result.known_patterns[0].similarity == pytest.approx(0.6)


@pytest.mark.parametrize("value,gas,bucket", [
    (5_000_000, 150_000, "large_high_gas"),
    (1_000_000, 150_000, "medium_high_gas"),
    (1_001, 21_000, "medium_normal_gas"),
    (1_000, 100_000, "small_normal_gas"),
    (0, 100_001, "small_high_gas"),
])
def test_classify(blank_payload, value, gas, bucket):
    transaction = _transactions(
        blank_payload, get_mock_transactions(count=1, value=value, gas_used=gas)
    )[0]

    assert PatternModel().classify(transaction) == bucket
