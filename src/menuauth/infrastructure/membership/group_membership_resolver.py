"""Group membership resolver backed by the user_group table."""

from menuauth.domain.value_objects import Principal


class UserGroupMembershipResolver:
    """Resolves a user id to its active groups through the unit of work."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def resolve(self, user_id: str) -> Principal | None:
        """Principal with group ids, or None when the user is unknown or inactive."""
        async with self._uow_factory() as uow:
            group_ids = await uow.memberships.get_active_user_group_ids(user_id)
        if group_ids is None:
            return None
        return Principal(principal_id=user_id, group_ids=frozenset(group_ids))
