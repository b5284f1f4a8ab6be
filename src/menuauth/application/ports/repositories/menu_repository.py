"""Menu repository port."""

from typing import Protocol

from menuauth.domain.entities import MenuNode


class MenuRepository(Protocol):
    """Port for reading the menu snapshot."""

    async def list_all(self) -> list[MenuNode]: ...

    async def list_enabled(self) -> list[MenuNode]: ...

    async def search(self, title: str | None = None, target: str | None = None) -> list[MenuNode]: ...
