"""Health check endpoints."""

import falcon.asgi
import psycopg


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, pool=None) -> None:
        self._pool = pool

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (database)."""
        if self._pool is not None:
            try:
                await self._pool.check()
            except psycopg.Error as e:
                resp.media = {"status": "unavailable", "error": str(e)}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
