"""Keycloak OIDC provider for JWT validation."""

import logging
from dataclasses import dataclass, field

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class OIDCUser:
    """Authenticated user from OIDC token."""

    user_id: str
    email: str | None
    username: str | None
    groups: list[str] = field(default_factory=list)


class KeycloakProvider:
    """Keycloak OIDC - validates access tokens by introspection."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token, return user info or None if it is not active.

        The application user id is the preferred_username claim, falling back
        to the subject.
        """
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as e:
            logger.warning("Token introspection failed: %s", e)
            return None
        if not token_info.get("active"):
            return None
        username = token_info.get("preferred_username")
        return OIDCUser(
            user_id=username or token_info.get("sub", ""),
            email=token_info.get("email"),
            username=username,
            groups=list(token_info.get("groups", [])),
        )
