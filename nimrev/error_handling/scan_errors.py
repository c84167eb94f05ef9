from typing import Optional, Dict, Any, List
import logging
from enum import Enum

logger = logging.getLogger(__name__)

class ScanErrorType(Enum):
    VALIDATION = "validation"
    TIMEOUT = "timeout"
    NETWORK_ERROR = "network_error"
    SERVER_ERROR = "server_error"
    RATE_LIMIT = "rate_limit"
    NOT_FOUND = "not_found"
    UNKNOWN = "unknown"

class ScanError(Exception):
    """Base exception for scan engine errors"""
    def __init__(
        self,
        message: str,
        error_type: ScanErrorType = ScanErrorType.UNKNOWN,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.error_type = error_type
        self.status_code = status_code
        self.details = details or {}
        self.original_error = original_error
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Error body for the web layer"""
        body = {
            "error": self.message,
            "type": self.error_type.value,
            "status_code": self.status_code
        }
        if self.details:
            body["details"] = self.details
        return body

class ValidationError(ScanError, ValueError):
    """Malformed address/network or a feature bundle that fails the schema"""
    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        self.errors = errors or []
        super().__init__(
            message,
            ScanErrorType.VALIDATION,
            status_code=400,
            details={"validation_errors": self.errors}
        )

    @property
    def fields(self) -> List[str]:
        return [error["field"] for error in self.errors]

    @classmethod
    def from_pydantic(cls, exc, message: str = "Validation error") -> "ValidationError":
        """Convert a pydantic ValidationError into per-field details"""
        errors = []
        for error in exc.errors():
            errors.append({
                "field": ".".join(str(x) for x in error["loc"]),
                "message": error["msg"],
                "type": error["type"]
            })
        return cls(message, errors)

class ScanTimeoutError(ScanError, TimeoutError):
    """Feature resolution exceeded the configured timeout"""
    def __init__(self, address: str, network: str, timeout_ms: int):
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Feature extraction for {network}:{address} timed out after {timeout_ms}ms",
            ScanErrorType.TIMEOUT,
            status_code=503,
            details={"timeout_ms": timeout_ms, "retryable": True}
        )

class FeatureProviderError(ScanError):
    """Error raised by a feature provider while fetching a bundle"""
    def __init__(
        self,
        message: str,
        error_type: ScanErrorType = ScanErrorType.UNKNOWN,
        status_code: Optional[int] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(
            message,
            error_type,
            status_code=502,
            details={"upstream_status": status_code} if status_code else None,
            original_error=original_error
        )
        self.upstream_status = status_code

def provider_error_from_status(provider_name: str, status_code: int, endpoint: str) -> FeatureProviderError:
    """Map an upstream HTTP status onto a FeatureProviderError"""
    if status_code == 404:
        error_type = ScanErrorType.NOT_FOUND
    elif status_code == 429:
        error_type = ScanErrorType.RATE_LIMIT
    elif 500 <= status_code < 600:
        error_type = ScanErrorType.SERVER_ERROR
    else:
        error_type = ScanErrorType.UNKNOWN

    return FeatureProviderError(
        f"{provider_name} returned HTTP {status_code} for {endpoint}",
        error_type,
        status_code=status_code
    )

def should_retry(error: ScanError) -> bool:
    """Determine if the caller may retry based on the error type"""
    retriable_errors = {
        ScanErrorType.TIMEOUT,
        ScanErrorType.RATE_LIMIT,
        ScanErrorType.SERVER_ERROR,
        ScanErrorType.NETWORK_ERROR
    }

    return error.error_type in retriable_errors
