import asyncio
import logging
import aiohttp
from datetime import datetime
from typing import Optional

from features.common.exceptions.observation_exceptions import UpstreamResolverError
from core.config import settings

logger = logging.getLogger(__name__)

class LatestTimeService:
    """Resolves the most recent AMeDAS publication time.

    JMA publishes the newest snapshot time as a single ISO-8601 line in
    ``latest_time.txt``; that instant is already aligned to a published
    10-minute slot.
    """

    def __init__(self, timeout: Optional[float] = None):
        self._session: Optional[aiohttp.ClientSession] = None
        self.timeout = aiohttp.ClientTimeout(total=timeout or settings.request["timeout"])
        self._last_time: Optional[datetime] = None

    async def _init_session(self) -> aiohttp.ClientSession:
        if not self._session or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def close(self):
        if self._session:
            await self._session.close()
            self._session = None

    async def get_latest_time(self) -> datetime:
        """Get the latest published observation time."""
        url = settings.latest_time_url
        try:
            session = await self._init_session()
            async with session.get(url) as response:
                if response.status != 200:
                    raise UpstreamResolverError(
                        f"Failed to fetch latest time: {response.status}"
                    )
                text = (await response.text(errors="replace")).strip()
        except UpstreamResolverError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"❌ Error fetching latest AMeDAS time: {str(e)}")
            raise UpstreamResolverError(
                f"Error fetching latest time: {str(e) or type(e).__name__}"
            ) from e
        except Exception as e:
            logger.error(f"❌ Unexpected error fetching latest AMeDAS time: {str(e)}")
            raise UpstreamResolverError(
                f"Error fetching latest time: {str(e) or type(e).__name__}"
            ) from e

        if not text:
            raise UpstreamResolverError("Latest time not available")

        try:
            latest = datetime.fromisoformat(text)
        except ValueError as e:
            raise UpstreamResolverError(f"Invalid latest time {text[:50]!r}") from e

        if latest.tzinfo is None:
            raise UpstreamResolverError(f"Latest time {text!r} has no UTC offset")

        if self._last_time is None or latest > self._last_time:
            logger.info(f"🕒 Latest AMeDAS time: {latest.isoformat()}")
            self._last_time = latest
        return latest
