"""PostgreSQL user-group membership repository implementation."""

from psycopg import AsyncConnection


class PostgresMembershipRepository:
    """Membership repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_active_user_group_ids(self, user_id: str) -> list[str] | None:
        """Active groups of an active user; None if the user is unknown or inactive."""
        cur = await self._conn.execute(
            "SELECT is_active FROM app_user WHERE user_id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r or not r[0]:
            return None
        cur = await self._conn.execute(
            "SELECT ug.group_id FROM user_group ug "
            "JOIN app_group g ON g.group_id = ug.group_id "
            "WHERE ug.user_id = %s AND g.is_active = TRUE "
            "ORDER BY ug.group_id",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [row[0] for row in rows]
