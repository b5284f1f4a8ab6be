"""PostgreSQL group menu permission repository implementation."""

from collections.abc import Iterable

from psycopg import AsyncConnection

from menuauth.domain.entities import PermissionGrant

_COLUMNS = "group_id, menu_id, can_read, can_write, can_delete, can_admin"


def _row_to_grant(r: tuple) -> PermissionGrant:
    return PermissionGrant(
        group_id=r[0],
        menu_id=r[1],
        can_read=bool(r[2]),
        can_write=bool(r[3]),
        can_delete=bool(r[4]),
        can_admin=bool(r[5]),
    )


class PostgresGrantRepository:
    """Grant repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_all(self) -> list[PermissionGrant]:
        """List all grants."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM group_menu_permission")
        rows = await cur.fetchall()
        return [_row_to_grant(r) for r in rows]

    async def list_for_groups(self, group_ids: Iterable[str]) -> list[PermissionGrant]:
        """List grants belonging to any of the groups."""
        ids = list(group_ids)
        if not ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM group_menu_permission WHERE group_id = ANY(%s)",
            (ids,),
        )
        rows = await cur.fetchall()
        return [_row_to_grant(r) for r in rows]

    async def list_by_group(self, group_id: str) -> list[PermissionGrant]:
        """List grants of one group."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM group_menu_permission WHERE group_id = %s",
            (group_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_grant(r) for r in rows]

    async def replace_for_group(self, group_id: str, grants: list[PermissionGrant]) -> None:
        """Delete all grants of group, then insert the new set."""
        await self._conn.execute(
            "DELETE FROM group_menu_permission WHERE group_id = %s",
            (group_id,),
        )
        if not grants:
            return
        async with self._conn.cursor() as cur:
            await cur.executemany(
                f"INSERT INTO group_menu_permission ({_COLUMNS}) "
                "VALUES (%s, %s, %s, %s, %s, %s)",
                [
                    (
                        group_id,
                        g.menu_id,
                        g.can_read,
                        g.can_write,
                        g.can_delete,
                        g.can_admin,
                    )
                    for g in grants
                ],
            )
