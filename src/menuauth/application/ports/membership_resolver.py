"""Group membership resolver port - who is the caller and which groups."""

from typing import Protocol

from menuauth.domain.value_objects import Principal


class GroupMembershipResolver(Protocol):
    """Port resolving a user id to a principal.

    Returns None when the user cannot be authenticated (unknown or inactive),
    which is distinct from a principal with no groups.
    """

    async def resolve(self, user_id: str) -> Principal | None: ...
