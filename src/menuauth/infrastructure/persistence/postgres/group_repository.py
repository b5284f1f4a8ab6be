"""PostgreSQL group repository implementation."""

from psycopg import AsyncConnection

from menuauth.domain.entities import Group


class PostgresGroupRepository:
    """Group repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, group_id: str) -> Group | None:
        """Get group by group_id."""
        cur = await self._conn.execute(
            "SELECT group_id, group_name, description, level, is_active "
            "FROM app_group WHERE group_id = %s",
            (group_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Group(group_id=r[0], group_name=r[1], description=r[2], level=r[3], is_active=r[4])

    async def list_all(self) -> list[Group]:
        """List all groups."""
        cur = await self._conn.execute(
            "SELECT group_id, group_name, description, level, is_active "
            "FROM app_group ORDER BY level, group_id"
        )
        rows = await cur.fetchall()
        return [
            Group(group_id=r[0], group_name=r[1], description=r[2], level=r[3], is_active=r[4])
            for r in rows
        ]
