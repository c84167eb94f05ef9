"""Rule-based threat scoring"""
import logging
from typing import Optional

from ..config.settings import ThreatThresholds
from ..models.features import Features
from ..models.results import ThreatResult
from .scoring_utils import clamp01

logger = logging.getLogger(__name__)

BASE_CONFIDENCE = 0.35


class ThreatModel:
    """Scores rug/scam risk from liquidity, holder, age and bot signals.

    Each rule adds a fixed increment to the score and a partial bonus to the
    confidence. A rule whose input is unknown (None) never fires.
    """

    def __init__(self, thresholds: Optional[ThreatThresholds] = None):
        self.thresholds = thresholds or ThreatThresholds()

    async def predict(self, features: Features) -> ThreatResult:
        t = self.thresholds
        score = 0.0
        confidence = BASE_CONFIDENCE
        indicators = []

        liquidity = features.liquidity_ratio
        if liquidity is not None and liquidity < t.liquidity_low:
            score += 0.4
            confidence += 0.2
            indicators.append("Extremely low liquidity ratio")

        top10 = features.holder_distribution.top10_percent
        if top10 is not None and top10 > t.whale_top10_high:
            score += 0.3
            confidence += 0.15
            indicators.append("High whale concentration")

        age = features.contract_age_sec
        if age is not None and age < t.new_contract_sec:
            score += 0.2
            confidence += 0.1
            indicators.append("Very new contract")

        bot_activity = features.transaction_patterns.bot_like_activity
        if bot_activity is not None and bot_activity > t.bot_activity_high:
            score += 0.25
            confidence += 0.1
            indicators.append("Bot-like transaction patterns")

        logger.debug(f"Threat rules fired: {len(indicators)}")

        return ThreatResult(
            threat_score=clamp01(score),
            confidence=clamp01(confidence),
            indicators=tuple(indicators)
        )
