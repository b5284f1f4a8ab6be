"""User-group membership repository port."""

from typing import Protocol


class MembershipRepository(Protocol):
    """Port for user to group assignments."""

    async def get_active_user_group_ids(self, user_id: str) -> list[str] | None:
        """Group ids of an active user, or None if the user is unknown or inactive."""
        ...
