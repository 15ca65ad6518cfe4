from fastapi_cache import FastAPICache
from fastapi_cache.backends.inmemory import InMemoryBackend
from fastapi_cache.decorator import cache
import logging

from core.config import settings

logger = logging.getLogger(__name__)

def init_cache():
    """Initialize the in-memory backend used by the static airport routes."""
    FastAPICache.init(
        backend=InMemoryBackend(),
        prefix=settings.cache_prefix
    )
    logger.info("🗄️ In-memory route cache initialized")

def cached_static(namespace: str):
    """Cache a route that serves static reference data, with no expiry."""
    return cache(expire=None, namespace=namespace)
