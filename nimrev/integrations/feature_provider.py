"""Feature provider port"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Union

from ..models.features import Features
from ..models.network import Network


class FeatureProvider(ABC):
    """Produces the feature bundle for an (address, network) pair.

    Implementations may perform network I/O. The engine validates whatever
    they return, so a raw mapping is as acceptable as a ``Features`` instance.
    Retry policy, if any, belongs to the implementation.
    """

    name = "feature_provider"

    @abstractmethod
    async def extract(
        self,
        address: str,
        network: Network,
        options: Optional[Dict[str, Any]] = None
    ) -> Union[Features, Mapping[str, Any]]:
        """Fetch features for an address"""

    async def close(self) -> None:
        """Release any held resources"""
