"""Permission checker port - menu capability authorization."""

from typing import Protocol

from menuauth.domain.value_objects import Capability


class PermissionChecker(Protocol):
    """Port for checking user capabilities on menus."""

    async def check(self, user_id: str, menu_id: str, capability: Capability) -> bool: ...
