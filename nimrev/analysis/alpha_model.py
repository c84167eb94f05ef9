"""Upside (alpha) scoring"""
import logging
from typing import Optional

from ..config.settings import AlphaThresholds
from ..models.features import Features
from ..models.results import AlphaResult
from .scoring_utils import clamp01, nz

logger = logging.getLogger(__name__)


class AlphaModel:
    """Scores opportunity and compounds a potential return multiplier"""

    def __init__(self, thresholds: Optional[AlphaThresholds] = None):
        self.thresholds = thresholds or AlphaThresholds()

    async def predict(self, features: Features) -> AlphaResult:
        t = self.thresholds
        alpha = 0.0
        multiplier = 1.0
        signals = []

        volume_spike = nz(features.volume_spikes.last_24h) > t.volume_spike
        positive_sentiment = nz(features.social_sentiment.score) > t.sentiment
        whale_accumulation = nz(features.whale_activity.accumulating) > t.whale_accumulation
        growth = nz(features.market_cap_growth.last_7d)

        if volume_spike:
            alpha += 0.3
            multiplier *= 2
            signals.append("Massive volume spike")
        if positive_sentiment:
            alpha += 0.25
            multiplier *= 1.5
            signals.append("Extremely positive sentiment")
        if whale_accumulation:
            alpha += 0.2
            multiplier *= 3
            signals.append("Whale accumulation")
        if nz(features.development_activity.commits) > t.dev_commits:
            alpha += 0.15
            multiplier *= 1.2
            signals.append("High development activity")
        if growth > t.market_cap_growth:
            alpha += 0.1
            multiplier *= max(1, growth)
            signals.append("Market cap growth")

        confidence = clamp01(
            0.45
            + (0.2 if volume_spike else 0)
            + (0.15 if positive_sentiment else 0)
            + (0.15 if whale_accumulation else 0)
        )

        return AlphaResult(
            alpha_score=clamp01(alpha),
            potential_multiplier=min(t.multiplier_cap, multiplier),
            confidence=confidence,
            signals=tuple(signals)
        )
