"""PostgreSQL menu repository implementation."""

from psycopg import AsyncConnection

from menuauth.domain.entities import MenuNode

_COLUMNS = "menu_id, title, url, icon, sort_order, enabled, parent_id, description"


def _row_to_menu(r: tuple) -> MenuNode:
    return MenuNode(
        menu_id=r[0],
        title=r[1],
        target=r[2],
        icon=r[3],
        sort_order=r[4] if r[4] is not None else 0,
        enabled=bool(r[5]),
        parent_id=r[6],
        description=r[7],
    )


class PostgresMenuRepository:
    """Menu repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_all(self) -> list[MenuNode]:
        """List every menu, enabled or not."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM menu ORDER BY sort_order, menu_id"
        )
        rows = await cur.fetchall()
        return [_row_to_menu(r) for r in rows]

    async def list_enabled(self) -> list[MenuNode]:
        """List enabled menus."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM menu WHERE enabled = TRUE ORDER BY sort_order, menu_id"
        )
        rows = await cur.fetchall()
        return [_row_to_menu(r) for r in rows]

    async def search(self, title: str | None = None, target: str | None = None) -> list[MenuNode]:
        """Case-insensitive substring search on title or url."""
        if not title and not target:
            return await self.list_all()
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM menu "
            "WHERE (%s::text IS NOT NULL AND title ILIKE %s) "
            "OR (%s::text IS NOT NULL AND url ILIKE %s) "
            "ORDER BY sort_order, menu_id",
            (
                title or None,
                f"%{title}%" if title else None,
                target or None,
                f"%{target}%" if target else None,
            ),
        )
        rows = await cur.fetchall()
        return [_row_to_menu(r) for r in rows]
