"""Scan engine settings and per-model thresholds."""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import load_config

logger = logging.getLogger(__name__)

VALID_TONES = ("clinical", "vermin")


@dataclass(frozen=True)
class ThreatThresholds:
    """Rule thresholds for the threat model"""
    liquidity_low: float = 0.01
    whale_top10_high: float = 80.0  # percent of supply held by top 10%
    new_contract_sec: int = 86400
    bot_activity_high: float = 0.7


@dataclass(frozen=True)
class AlphaThresholds:
    """Trigger thresholds for the alpha model"""
    volume_spike: float = 10.0
    sentiment: float = 0.8
    whale_accumulation: float = 0.7
    dev_commits: int = 50
    market_cap_growth: float = 2.0
    multiplier_cap: float = 1_000_000.0


@dataclass(frozen=True)
class ViralThresholds:
    """Trigger thresholds for the viral model"""
    mention_growth: float = 5.0
    influencer_followers: int = 0
    search_spike: float = 3.0
    network_velocity: float = 0.8
    meme_potential: float = 0.8
    fallback_hours: int = 72


@dataclass(frozen=True)
class PatternThresholds:
    """Classification cut-offs for the pattern model"""
    confidence_threshold: float = 0.85
    large_value: float = 1_000_000
    medium_value: float = 1_000
    high_gas: int = 100_000


@dataclass
class EngineConfig:
    """Configuration for the scan engine"""
    cache_ttl_ms: int = 30_000
    timeout_ms: int = 15_000
    default_tone: str = "clinical"
    max_batch_size: int = 10
    threat: ThreatThresholds = field(default_factory=ThreatThresholds)
    alpha: AlphaThresholds = field(default_factory=AlphaThresholds)
    viral: ViralThresholds = field(default_factory=ViralThresholds)
    pattern: PatternThresholds = field(default_factory=PatternThresholds)

    def __post_init__(self):
        if self.cache_ttl_ms <= 0:
            raise ValueError(f"cache_ttl_ms must be positive, got {self.cache_ttl_ms}")
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {self.timeout_ms}")
        if self.max_batch_size <= 0:
            raise ValueError(f"max_batch_size must be positive, got {self.max_batch_size}")
        if self.default_tone not in VALID_TONES:
            raise ValueError(
                f"default_tone must be one of {VALID_TONES}, got {self.default_tone!r}"
            )

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @classmethod
    def from_env(cls, overrides: Optional[Dict[str, Any]] = None) -> "EngineConfig":
        """Build engine configuration from environment variables.

        Args:
            overrides: Values that take precedence over the environment,
                keyed like ``load_config()``

        Returns:
            EngineConfig: Populated configuration
        """
        config = load_config()
        if overrides:
            config.update(overrides)

        engine_config = cls(
            cache_ttl_ms=config['SCAN_CACHE_TTL_MS'],
            timeout_ms=config['SCAN_TIMEOUT_MS'],
            default_tone=config['SCAN_DEFAULT_TONE'],
            max_batch_size=config['SCAN_MAX_BATCH_SIZE'],
            threat=ThreatThresholds(
                liquidity_low=config['THREAT_LIQUIDITY_LOW'],
                whale_top10_high=config['THREAT_WHALE_TOP10_HIGH'],
                new_contract_sec=config['THREAT_NEW_CONTRACT_SEC'],
                bot_activity_high=config['THREAT_BOT_ACTIVITY_HIGH'],
            ),
            pattern=PatternThresholds(
                confidence_threshold=config['PATTERN_CONFIDENCE_THRESHOLD'],
            ),
        )
        logger.debug(
            f"Engine configured: ttl={engine_config.cache_ttl_ms}ms "
            f"timeout={engine_config.timeout_ms}ms tone={engine_config.default_tone}"
        )
        return engine_config
