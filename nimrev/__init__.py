"""NimRev scoring engine: composite threat, alpha, viral and pattern
analysis for blockchain addresses"""
from .config.settings import EngineConfig
from .core.scan_engine import ScanEngine
from .error_handling.scan_errors import ScanError, ScanTimeoutError, ValidationError
from .models.network import Network
from .reporting.summarizer import SummaryTone

__version__ = "0.1.0"

__all__ = [
    "EngineConfig",
    "Network",
    "ScanEngine",
    "ScanError",
    "ScanTimeoutError",
    "SummaryTone",
    "ValidationError",
]
