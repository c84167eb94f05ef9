"""Viral potential scoring"""
import logging
import math
from typing import Optional

from ..config.settings import ViralThresholds
from ..models.features import Features
from ..models.results import ViralResult
from .scoring_utils import clamp01, nz, round_half_up, weighted_average

logger = logging.getLogger(__name__)


class ViralModel:
    """Scores how quickly attention around an address might spread"""

    def __init__(self, thresholds: Optional[ViralThresholds] = None):
        self.thresholds = thresholds or ViralThresholds()

    async def predict(self, features: Features) -> ViralResult:
        t = self.thresholds
        score = 0.0
        hours = math.inf
        catalysts = []

        mention_growth = nz(features.social_mentions.growth_24h)
        big_followers = nz(features.influencer_activity.big_followers)
        search_spike = nz(features.search_trends.spike)

        if mention_growth > t.mention_growth:
            score += 0.4
            hours = min(hours, max(6, 72 - mention_growth * 2))
            catalysts.append("Exponential social growth")
        if big_followers > t.influencer_followers:
            score += 0.3
            hours = min(hours, 48)
            catalysts.append("Major influencer engagement")
        if search_spike > t.search_spike:
            score += 0.2
            hours = min(hours, 24)
            catalysts.append("Search trend spike")
        if nz(features.network_effect.velocity) > t.network_velocity:
            score += 0.1
            hours = min(hours, 12)
            catalysts.append("Strong network velocity")
        if nz(features.meme_potential) > t.meme_potential:
            catalysts.append("High meme potential")

        confidence = clamp01(weighted_average(
            [
                min(1, mention_growth / 10),
                1 if big_followers > 0 else 0,
                min(1, search_spike / 5)
            ],
            [0.5, 0.3, 0.2]
        ))

        # inf only means nothing fired
        time_to_viral = (
            max(1, round_half_up(hours)) if math.isfinite(hours) else t.fallback_hours
        )

        return ViralResult(
            viral_score=clamp01(score),
            time_to_viral_hrs=time_to_viral,
            confidence=confidence,
            catalysts=tuple(catalysts)
        )
