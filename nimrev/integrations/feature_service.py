"""Feature provider backed by an HTTP feature-indexing service"""
import asyncio
import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import aiohttp
import backoff

from ..error_handling.scan_errors import (
    FeatureProviderError,
    ScanErrorType,
    provider_error_from_status,
    should_retry
)
from ..models.network import Network
from .feature_provider import FeatureProvider

logger = logging.getLogger(__name__)


def _giveup(error: Exception) -> bool:
    """Stop retrying on upstream answers that will not change"""
    return isinstance(error, FeatureProviderError) and not should_retry(error)


class FeatureServiceProvider(FeatureProvider):
    """Fetches feature bundles as JSON from ``{base_url}/features/{network}/{address}``.

    Connection errors, 429 and 5xx responses are retried up to
    ``max_retries`` times with exponential backoff; everything else surfaces
    as ``FeatureProviderError``.
    """

    name = "feature_service"

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        max_retries: int = 3,
        retry_delay: float = 1.0,
        timeout: float = 10.0,
        session: Optional[aiohttp.ClientSession] = None
    ):
        if not base_url:
            raise ValueError("base_url must be set for the feature service")

        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.timeout = timeout
        self.session = session
        self._owns_session = session is None

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "FeatureServiceProvider":
        """Build from a ``load_config()`` dict"""
        return cls(
            base_url=config['FEATURE_SERVICE_URL'],
            api_key=config['FEATURE_SERVICE_API_KEY'],
            max_retries=config['FEATURE_SERVICE_MAX_RETRIES'],
            timeout=config['FEATURE_SERVICE_TIMEOUT']
        )

    async def initialize(self):
        """Initialize HTTP session"""
        if not self.session:
            headers = {"Accept": "application/json"}
            if self.api_key:
                headers["Authorization"] = f"Bearer {self.api_key}"
            self.session = aiohttp.ClientSession(
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
            self._owns_session = True

    async def close(self):
        """Close HTTP session"""
        if self.session and self._owns_session:
            await self.session.close()
        self.session = None

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _fetch(self, endpoint: str, params: Optional[Dict[str, str]]) -> Dict:
        url = f"{self.base_url}{endpoint}"
        async with self.session.get(url, params=params) as response:
            if response.status != 200:
                raise provider_error_from_status(self.name, response.status, endpoint)
            return await response.json()

    async def extract(
        self,
        address: str,
        network: Network,
        options: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Fetch the raw feature payload; the engine validates it"""
        if not self.session:
            await self.initialize()

        network = Network(network)
        endpoint = f"/features/{network.value}/{quote(address, safe='')}"
        params = {key: str(value) for key, value in options.items()} if options else None

        fetch = backoff.on_exception(
            backoff.expo,
            (aiohttp.ClientError, asyncio.TimeoutError, FeatureProviderError),
            max_tries=max(0, self.max_retries) + 1,
            giveup=_giveup,
            factor=self.retry_delay,
            logger=logger
        )(self._fetch)

        try:
            payload = await fetch(endpoint, params)
        except FeatureProviderError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FeatureProviderError(
                f"Network error fetching features from {self.name}: {e}",
                ScanErrorType.NETWORK_ERROR,
                original_error=e
            ) from e

        if not isinstance(payload, dict):
            raise FeatureProviderError(
                f"{self.name} returned a non-object payload for {endpoint}",
                ScanErrorType.UNKNOWN
            )

        logger.debug(f"Fetched features for {network.value}:{address} from {self.name}")
        return payload.get("features", payload)
