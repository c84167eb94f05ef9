from .features import Features, parse_features
from .network import Network
from .results import (
    AlphaResult,
    Analysis,
    PatternResult,
    ScanRecord,
    ScanResult,
    ThreatResult,
    ViralResult
)
