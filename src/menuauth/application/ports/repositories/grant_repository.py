"""Permission grant repository port."""

from collections.abc import Iterable
from typing import Protocol

from menuauth.domain.entities import PermissionGrant


class GrantRepository(Protocol):
    """Port for group menu permission persistence."""

    async def list_all(self) -> list[PermissionGrant]: ...

    async def list_for_groups(self, group_ids: Iterable[str]) -> list[PermissionGrant]: ...

    async def list_by_group(self, group_id: str) -> list[PermissionGrant]: ...

    async def replace_for_group(self, group_id: str, grants: list[PermissionGrant]) -> None: ...
