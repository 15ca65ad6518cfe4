import asyncio
import json
import logging
import aiohttp
from typing import Optional

from features.observations.models.observation_types import (
    FetchError,
    FetchErrorKind,
    Snapshot,
    SnapshotResult
)
from core.config import settings

logger = logging.getLogger(__name__)

def _reject_constant(name: str):
    # json.loads accepts NaN and Infinity, which are not JSON
    raise ValueError(f"Invalid JSON constant {name}")

class AmedasClient:
    """Client for JMA AMeDAS map snapshots.

    One GET per call, no retries and no caching. Every failure comes back
    as a ``FetchError`` inside the result instead of being raised.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        prefix_length: Optional[int] = None
    ):
        self._session: Optional[aiohttp.ClientSession] = None
        self.timeout = aiohttp.ClientTimeout(total=timeout or settings.request["timeout"])
        self.prefix_length = prefix_length or settings.malformed_prefix_length

    async def _init_session(self) -> aiohttp.ClientSession:
        if not self._session or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def close(self):
        if self._session:
            await self._session.close()
            self._session = None

    async def fetch_snapshot(self, provider_key: str) -> SnapshotResult:
        """Fetch the snapshot published for one 14-digit provider key."""
        url = settings.snapshot_url(provider_key)

        try:
            session = await self._init_session()
            async with session.get(url) as response:
                if not 200 <= response.status < 300:
                    logger.error(f"❌ AMeDAS snapshot {provider_key} returned HTTP {response.status}")
                    return SnapshotResult.failure(FetchError(
                        kind=FetchErrorKind.HTTP_STATUS,
                        status=response.status,
                        message=f"HTTP error! status: {response.status}"
                    ))
                text = await response.text(errors="replace")

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"❌ Error fetching AMeDAS snapshot {provider_key}: {str(e)}")
            return SnapshotResult.failure(FetchError(
                kind=FetchErrorKind.NETWORK,
                message=f"Error fetching AMeDAS data: {str(e) or type(e).__name__}"
            ))
        except Exception as e:
            logger.error(f"❌ Unexpected error fetching AMeDAS snapshot {provider_key}: {str(e)}")
            return SnapshotResult.failure(FetchError(
                kind=FetchErrorKind.NETWORK,
                message=f"Error fetching AMeDAS data: {str(e) or type(e).__name__}"
            ))

        # JMA answers 200 with an empty body when nothing was published
        if not text.strip():
            logger.warning(f"⚠️ Empty AMeDAS snapshot for {provider_key}")
            return SnapshotResult.failure(FetchError(
                kind=FetchErrorKind.EMPTY_BODY,
                message="Empty response from JMA API"
            ))

        try:
            data = json.loads(text, parse_constant=_reject_constant)
        except ValueError as e:
            raw_prefix = text[:self.prefix_length]
            logger.error(f"❌ JSON parse error for AMeDAS snapshot {provider_key}: {str(e)}")
            logger.error(f"   └─ Response text: {raw_prefix}")
            return SnapshotResult.failure(FetchError(
                kind=FetchErrorKind.MALFORMED_PAYLOAD,
                message="Invalid JSON response from JMA API",
                raw_prefix=raw_prefix
            ))

        snapshot = Snapshot(provider_key=provider_key, data=data)
        logger.info(f"📡 Fetched AMeDAS snapshot {provider_key} ({len(snapshot)} stations)")
        return SnapshotResult.success(snapshot)
