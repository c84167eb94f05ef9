"""Persistence port for completed scans"""
from abc import ABC, abstractmethod
from typing import Optional

from ..models.results import ScanRecord


class ScanPersistence(ABC):
    """Sink supplied by the host application's storage layer.

    The engine hands over each finished scan and keeps no reference to it
    afterwards. Storage itself is not implemented here.
    """

    @abstractmethod
    async def save_scan(self, record: ScanRecord) -> Optional[str]:
        """Store a scan and return its identifier, if the backend assigns one"""
