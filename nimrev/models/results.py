from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .network import Network

Visibility = Literal["public", "private"]


class ResultModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class ThreatResult(ResultModel):
    threat_score: float = Field(..., ge=0, le=1)
    confidence: float = Field(..., ge=0, le=1)
    indicators: Tuple[str, ...] = ()


class AlphaResult(ResultModel):
    alpha_score: float = Field(..., ge=0, le=1)
    potential_multiplier: float = Field(..., ge=1, le=1_000_000)
    confidence: float = Field(..., ge=0, le=1)
    signals: Tuple[str, ...] = ()


class ViralResult(ResultModel):
    viral_score: float = Field(..., ge=0, le=1)
    time_to_viral_hrs: int = Field(..., ge=1, description="Estimated hours until viral; lower is sooner")
    confidence: float = Field(..., ge=0, le=1)
    catalysts: Tuple[str, ...] = ()


class KnownPattern(ResultModel):
    type: str
    similarity: float = Field(..., ge=0, le=1)
    description: str


class NovelPattern(ResultModel):
    type: str
    confidence: float = Field(..., ge=0, le=1)
    description: str


class PatternResult(ResultModel):
    known_patterns: Tuple[KnownPattern, ...] = ()
    novel_patterns: Tuple[NovelPattern, ...] = ()
    risk_level: float = Field(..., ge=0, le=1)


class AnalysisMetadata(ResultModel):
    processing_ms: float = Field(..., ge=0)
    overall_confidence: float = Field(..., ge=0, le=1)
    feature_keys: int = Field(..., ge=0)
    models_used: int = Field(..., ge=0)


class Analysis(ResultModel):
    """Aggregate report for one scan"""
    threat: ThreatResult
    alpha: AlphaResult
    viral: ViralResult
    patterns: PatternResult
    summary: str
    threat_level: str = Field(..., description="critical, high, medium or low band of the threat score")
    metadata: AnalysisMetadata


class ScanRecord(ResultModel):
    """What the engine hands to a persistence port"""
    address: str
    network: Network
    analysis: Analysis
    visibility: Optional[Visibility] = None
    scanned_by: Optional[str] = None


class ScanResult(ResultModel):
    analysis: Analysis
    persisted_id: Optional[str] = None


class BatchScanItem(ResultModel):
    address: str
    result: Optional[ScanResult] = None
    error: Optional[dict] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BatchScanResult(ResultModel):
    items: List[BatchScanItem]

    @property
    def succeeded(self) -> int:
        return sum(1 for item in self.items if item.ok)

    @property
    def failed(self) -> int:
        return len(self.items) - self.succeeded
