"""Auth middleware - extracts user from bearer token."""

from dataclasses import dataclass

import falcon.asgi

ANONYMOUS_USER_ID = "anonymous"


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Validates bearer tokens and sets req.context.user.

    Requests without a token get the anonymous user, which the group
    membership resolver does not know, so menu endpoints answer 401.
    An invalid token sets req.context.user to None.
    """

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Extract user from Authorization header."""
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer "):
            req.context.user = RequestUser(user_id=ANONYMOUS_USER_ID)
            return

        req.context.user = None
        if self._keycloak:
            user = self._keycloak.decode_token(auth[7:])
            if user:
                req.context.user = RequestUser(
                    user_id=user.user_id,
                    email=user.email,
                    username=user.username,
                )
