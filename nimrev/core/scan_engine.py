"""Scan engine: resolves features, fans out to the scoring models and
assembles the analysis report"""
import asyncio
import time
from typing import Any, Dict, List, Optional, Sequence

from ..analysis.alpha_model import AlphaModel
from ..analysis.pattern_model import PatternModel
from ..analysis.scoring_utils import calculate_risk_level, clamp01
from ..analysis.threat_model import ThreatModel
from ..analysis.viral_model import ViralModel
from ..caching.cache_manager import FeatureCache
from ..config.settings import EngineConfig
from ..database.persistence import ScanPersistence
from ..error_handling.scan_errors import ScanError, ScanTimeoutError, ValidationError
from ..integrations.feature_provider import FeatureProvider
from ..models.features import Features, parse_features
from ..models.network import Network
from ..models.results import (
    Analysis,
    AnalysisMetadata,
    BatchScanItem,
    BatchScanResult,
    ScanRecord,
    ScanResult
)
from ..reporting.summarizer import SummaryTone, summarize
from ..test.mock_data import MockFeatureProvider
from ..utils.logging import get_logger, log_error
from ..utils.validation import validate_address, validate_network

logger = get_logger(__name__)

MODELS_USED = 4


class ScanEngine:
    """Turns an address into a composite threat/alpha/viral/pattern report.

    Holds no per-request state. The feature cache is the only shared
    mutable resource and is injected, never global.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        feature_provider: Optional[FeatureProvider] = None,
        cache: Optional[FeatureCache] = None,
        persistence: Optional[ScanPersistence] = None,
        threat_model: Optional[ThreatModel] = None,
        alpha_model: Optional[AlphaModel] = None,
        viral_model: Optional[ViralModel] = None,
        pattern_model: Optional[PatternModel] = None
    ):
        self.config = config if config is not None else EngineConfig()
        self.feature_provider = feature_provider if feature_provider is not None else MockFeatureProvider()
        self.cache = cache if cache is not None else FeatureCache(ttl_ms=self.config.cache_ttl_ms)
        self.persistence = persistence
        self.threat_model = threat_model if threat_model is not None else ThreatModel(self.config.threat)
        self.alpha_model = alpha_model if alpha_model is not None else AlphaModel(self.config.alpha)
        self.viral_model = viral_model if viral_model is not None else ViralModel(self.config.viral)
        self.pattern_model = pattern_model if pattern_model is not None else PatternModel(self.config.pattern)

        self.stats = {
            "scans": 0,
            "failed_scans": 0,
            "timeouts": 0,
            "provider_calls": 0,
            "persisted": 0,
            "persistence_errors": 0
        }

    async def close(self) -> None:
        await self.feature_provider.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _resolve_tone(self, tone: Optional[str]) -> SummaryTone:
        try:
            return SummaryTone(tone or self.config.default_tone)
        except ValueError:
            raise ValidationError(
                "Invalid tone",
                [{
                    "field": "tone",
                    "message": f"Tone must be one of: {', '.join(t.value for t in SummaryTone)}",
                    "type": "enum"
                }]
            ) from None

    async def get_features(
        self,
        address: str,
        network: Network,
        options: Optional[Dict[str, Any]] = None
    ) -> Features:
        """Serve features from cache, else extract them under the timeout"""
        cached = self.cache.get(network, address)
        if cached is not None:
            logger.debug(f"Cache hit for {network.value}:{address}")
            return cached

        self.stats["provider_calls"] += 1
        try:
            raw = await asyncio.wait_for(
                self.feature_provider.extract(address, network, options),
                timeout=self.config.timeout_seconds
            )
        except asyncio.TimeoutError:
            self.stats["timeouts"] += 1
            logger.warning(
                f"Feature extraction timed out for {network.value}:{address}",
                extra={"timeout_ms": self.config.timeout_ms, "provider": self.feature_provider.name}
            )
            raise ScanTimeoutError(address, network.value, self.config.timeout_ms) from None

        features = parse_features(raw)
        self.cache.set(network, address, features)
        return features

    async def _persist(self, record: ScanRecord) -> Optional[str]:
        """Hand the scan to the persistence port; failures are logged, not raised"""
        try:
            persisted_id = await self.persistence.save_scan(record)
        except Exception as e:
            self.stats["persistence_errors"] += 1
            log_error(
                logger,
                e,
                "Failed to persist scan",
                {"address": record.address, "network": record.network.value}
            )
            return None

        self.stats["persisted"] += 1
        return str(persisted_id) if persisted_id is not None else None

    async def scan(
        self,
        address: str,
        network: Any,
        feature_options: Optional[Dict[str, Any]] = None,
        visibility: Optional[str] = None,
        scanned_by: Optional[str] = None,
        tone: Optional[str] = None
    ) -> ScanResult:
        """Run a full scan of one address.

        Args:
            address: Address to scan
            network: Network name or ``Network`` member
            feature_options: Passed through to the feature provider
            visibility: "public" or "private", recorded by persistence
            scanned_by: Caller/user identifier, recorded by persistence
            tone: Summary tone, defaults to the configured tone

        Returns:
            ScanResult: Analysis plus the persistence id, if any

        Raises:
            ValidationError: Bad input or a non-conformant feature bundle
            ScanTimeoutError: Feature extraction exceeded the timeout
        """
        try:
            address = validate_address(address)
            network = validate_network(network)
            summary_tone = self._resolve_tone(tone)
            if visibility is not None and visibility not in ("public", "private"):
                raise ValidationError(
                    "Invalid visibility",
                    [{"field": "visibility", "message": "Visibility must be public or private", "type": "literal_error"}]
                )
        except ValidationError as e:
            self.stats["failed_scans"] += 1
            logger.warning(f"Rejected scan request: {e.message}", extra={"validation_errors": e.errors})
            raise

        started = time.perf_counter()
        logger.info(f"Starting scan for {network.value}:{address}", extra={"tone": summary_tone.value})

        try:
            features = await self.get_features(address, network, feature_options)
        except ValidationError as e:
            self.stats["failed_scans"] += 1
            logger.warning(
                f"Feature bundle for {network.value}:{address} failed validation",
                extra={"validation_errors": e.errors}
            )
            raise
        except ScanError:
            self.stats["failed_scans"] += 1
            raise

        threat, alpha, viral, patterns = await asyncio.gather(
            self.threat_model.predict(features),
            self.alpha_model.predict(features),
            self.viral_model.predict(features),
            self.pattern_model.analyze(features.transaction_data)
        )

        overall_confidence = clamp01((threat.confidence + alpha.confidence + viral.confidence) / 3)
        summary = summarize(
            summary_tone,
            address=address,
            network=network,
            threat=threat,
            alpha=alpha,
            viral=viral
        )

        analysis = Analysis(
            threat=threat,
            alpha=alpha,
            viral=viral,
            patterns=patterns,
            summary=summary,
            threat_level=calculate_risk_level(threat.threat_score * 100),
            metadata=AnalysisMetadata(
                processing_ms=(time.perf_counter() - started) * 1000,
                overall_confidence=overall_confidence,
                feature_keys=features.key_count,
                models_used=MODELS_USED
            )
        )

        persisted_id = None
        if self.persistence is not None:
            persisted_id = await self._persist(ScanRecord(
                address=address,
                network=network,
                analysis=analysis,
                visibility=visibility,
                scanned_by=scanned_by
            ))

        self.stats["scans"] += 1
        logger.info(
            f"Scan completed for {network.value}:{address}",
            extra={
                "threat_score": threat.threat_score,
                "overall_confidence": overall_confidence,
                "processing_ms": analysis.metadata.processing_ms,
                "persisted_id": persisted_id
            }
        )

        return ScanResult(analysis=analysis, persisted_id=persisted_id)

    async def scan_many(
        self,
        addresses: Sequence[str],
        network: Any,
        **scan_kwargs
    ) -> BatchScanResult:
        """Scan several addresses concurrently.

        Per-address failures are reported on the item instead of raised.

        Raises:
            ValidationError: Empty batch or more than ``max_batch_size`` addresses
        """
        addresses = list(addresses)
        if not addresses or len(addresses) > self.config.max_batch_size:
            raise ValidationError(
                "Invalid batch size",
                [{
                    "field": "addresses",
                    "message": f"Batch must contain 1 to {self.config.max_batch_size} addresses",
                    "type": "too_long" if addresses else "too_short"
                }]
            )

        results = await asyncio.gather(
            *(self.scan(address, network, **scan_kwargs) for address in addresses),
            return_exceptions=True
        )

        items: List[BatchScanItem] = []
        for address, result in zip(addresses, results):
            if isinstance(result, ScanError):
                items.append(BatchScanItem(address=str(address), error=result.to_dict()))
            elif isinstance(result, BaseException):
                raise result
            else:
                items.append(BatchScanItem(address=address, result=result))

        return BatchScanResult(items=items)

    def get_stats(self) -> Dict[str, Any]:
        """Get engine and cache statistics"""
        return {
            **self.stats,
            "cache": self.cache.get_stats()
        }
