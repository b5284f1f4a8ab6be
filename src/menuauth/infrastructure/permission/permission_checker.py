"""Permission checker implementation - effective menu permissions."""

from menuauth.application.services.menu_authorization import MenuAuthorizationService
from menuauth.domain.value_objects import Capability


class MenuPermissionChecker:
    """Checks user capabilities on menus via merged group grants."""

    def __init__(self, authorization_service: MenuAuthorizationService) -> None:
        self._authorization = authorization_service

    async def check(self, user_id: str, menu_id: str, capability: Capability) -> bool:
        """Check if user has capability on menu."""
        return await self._authorization.has_access(user_id, menu_id, capability)
