"""Group repository port."""

from typing import Protocol

from menuauth.domain.entities import Group


class GroupRepository(Protocol):
    """Port for group lookups."""

    async def get_by_id(self, group_id: str) -> Group | None: ...

    async def list_all(self) -> list[Group]: ...
