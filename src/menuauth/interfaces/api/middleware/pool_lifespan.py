"""Pool lifespan middleware - opens pool on startup, closes on shutdown."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Middleware tying the connection pool to the ASGI lifespan."""

    def __init__(self, pool: AsyncConnectionPool, wait_timeout: float = 10.0) -> None:
        self._pool = pool
        self._wait_timeout = wait_timeout

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        """Open pool and wait for the minimum number of connections."""
        await self._pool.open(wait=True, timeout=self._wait_timeout)
        logger.info("Connection pool %s opened", self._pool.name)

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        """Close pool when ASGI server shuts down."""
        await self._pool.close()
        logger.info("Connection pool %s closed", self._pool.name)
