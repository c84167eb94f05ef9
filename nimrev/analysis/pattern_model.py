"""Transaction pattern recognition"""
import logging
from typing import List, Optional, Sequence

from ..config.settings import PatternThresholds
from ..models.features import Transaction
from ..models.results import KnownPattern, NovelPattern, PatternResult
from .scoring_utils import clamp01

logger = logging.getLogger(__name__)

SCAM_BUCKET = "large_high_gas"


class PatternModel:
    """Buckets transactions by size and gas and matches known scam shapes.

    Novel pattern detection has no model behind it yet and always reports an
    empty list.
    """

    def __init__(self, thresholds: Optional[PatternThresholds] = None):
        self.thresholds = thresholds or PatternThresholds()

    def classify(self, transaction: Transaction) -> str:
        t = self.thresholds
        if transaction.value > t.large_value:
            size = "large"
        elif transaction.value > t.medium_value:
            size = "medium"
        else:
            size = "small"
        gas = "high_gas" if transaction.gas_used > t.high_gas else "normal_gas"
        return f"{size}_{gas}"

    async def analyze(self, transactions: Sequence[Transaction]) -> PatternResult:
        known = []
        novel: List[NovelPattern] = []

        matches = sum(1 for tx in transactions if self.classify(tx) == SCAM_BUCKET)
        similarity = clamp01(matches / len(transactions)) if transactions else 0.0

        if similarity > self.thresholds.confidence_threshold:
            known.append(KnownPattern(
                type="scam_pattern",
                similarity=similarity,
                description="High proportion of large value and high gas transactions"
            ))

        return PatternResult(
            known_patterns=tuple(known),
            novel_patterns=tuple(novel),
            risk_level=clamp01(len(known) * 0.3 + len(novel) * 0.1)
        )
