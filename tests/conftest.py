"""Pytest fixtures for menuauth tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager

import pytest

from menuauth.application.services.menu_authorization import MenuAuthorizationService
from menuauth.domain.entities import Group, MenuNode, PermissionGrant
from menuauth.infrastructure.membership.group_membership_resolver import (
    UserGroupMembershipResolver,
)


# --- Fake repositories ---


class FakeMenuRepository:
    """In-memory menu repository."""

    def __init__(self) -> None:
        self._rows: list[MenuNode] = []

    def add(self, *menus: MenuNode) -> None:
        """Helper to add menu rows for tests (duplicates allowed)."""
        self._rows.extend(menus)

    async def list_all(self) -> list[MenuNode]:
        return list(self._rows)

    async def list_enabled(self) -> list[MenuNode]:
        return [m for m in self._rows if m.enabled]

    async def search(self, title: str | None = None, target: str | None = None) -> list[MenuNode]:
        if not title and not target:
            return list(self._rows)
        hits = []
        for m in self._rows:
            if title and title.lower() in m.title.lower():
                hits.append(m)
            elif target and m.target and target.lower() in m.target.lower():
                hits.append(m)
        return hits


class FakeGrantRepository:
    """In-memory group menu permission repository."""

    def __init__(self) -> None:
        self._rows: list[PermissionGrant] = []

    def add(self, *grants: PermissionGrant) -> None:
        """Helper to add grants for tests."""
        self._rows.extend(grants)

    async def list_all(self) -> list[PermissionGrant]:
        return list(self._rows)

    async def list_for_groups(self, group_ids: Iterable[str]) -> list[PermissionGrant]:
        ids = set(group_ids)
        return [g for g in self._rows if g.group_id in ids]

    async def list_by_group(self, group_id: str) -> list[PermissionGrant]:
        return [g for g in self._rows if g.group_id == group_id]

    async def replace_for_group(self, group_id: str, grants: list[PermissionGrant]) -> None:
        self._rows = [g for g in self._rows if g.group_id != group_id]
        self._rows.extend(grants)


class FakeGroupRepository:
    """In-memory group repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Group] = {}

    def add_group(self, group: Group) -> None:
        """Helper to add group for tests."""
        self._by_id[group.group_id] = group

    async def get_by_id(self, group_id: str) -> Group | None:
        return self._by_id.get(group_id)

    async def list_all(self) -> list[Group]:
        return list(self._by_id.values())


class FakeMembershipRepository:
    """In-memory user to group assignments."""

    def __init__(self) -> None:
        self._users: dict[str, bool] = {}
        self._groups: dict[str, list[str]] = {}

    def add_user(self, user_id: str, *group_ids: str, is_active: bool = True) -> None:
        """Helper to add user with its groups for tests."""
        self._users[user_id] = is_active
        self._groups[user_id] = list(group_ids)

    async def get_active_user_group_ids(self, user_id: str) -> list[str] | None:
        if not self._users.get(user_id):
            return None
        return list(self._groups.get(user_id, []))


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.menus = FakeMenuRepository()
        self.grants = FakeGrantRepository()
        self.groups = FakeGroupRepository()
        self.memberships = FakeMembershipRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_factory(uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


def menu(
    menu_id: str,
    parent_id: str | None = None,
    sort_order: int = 0,
    enabled: bool = True,
    title: str | None = None,
    target: str | None = None,
) -> MenuNode:
    """Shorthand MenuNode builder."""
    return MenuNode(
        menu_id=menu_id,
        title=title or menu_id.replace("-", " ").title(),
        target=target,
        sort_order=sort_order,
        enabled=enabled,
        parent_id=parent_id,
    )


def grant(group_id: str, menu_id: str, *capabilities: str) -> PermissionGrant:
    """Shorthand PermissionGrant builder: grant("ADMIN", "m1", "read", "write")."""
    return PermissionGrant(
        group_id=group_id,
        menu_id=menu_id,
        can_read="read" in capabilities,
        can_write="write" in capabilities,
        can_delete="delete" in capabilities,
        can_admin="admin" in capabilities,
    )


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_factory(fake_uow)


@pytest.fixture
def authorization(uow_factory) -> MenuAuthorizationService:
    """MenuAuthorizationService over the fake unit of work."""
    return MenuAuthorizationService(
        unit_of_work_factory=uow_factory,
        membership_resolver=UserGroupMembershipResolver(uow_factory),
    )


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - returns True by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.check.return_value = True
    return mock


@pytest.fixture
def seeded_uow(fake_uow: FakeUnitOfWork) -> FakeUnitOfWork:
    """Default navigation menu with ADMIN and USER groups.

    alice: ADMIN, bob: USER, carol: no groups, dave: inactive.
    """
    fake_uow.menus.add(
        menu("dashboard", sort_order=1, target="/dashboard"),
        menu("projects", sort_order=2),
        menu("project-new", "projects", sort_order=21, target="/project-new"),
        menu("project-archive", "projects", sort_order=23, target="/project-archive"),
        menu("system", sort_order=5),
        menu("menu-management", "system", sort_order=51, target="/menu-management"),
        menu("legacy", sort_order=9, enabled=False, target="/legacy"),
    )
    fake_uow.groups.add_group(Group(group_id="ADMIN", group_name="Administrators", level=9))
    fake_uow.groups.add_group(Group(group_id="USER", group_name="Users"))
    fake_uow.grants.add(
        grant("ADMIN", "dashboard", "read", "write", "delete", "admin"),
        grant("ADMIN", "project-new", "read", "write", "delete", "admin"),
        grant("ADMIN", "project-archive", "read", "write", "delete", "admin"),
        grant("ADMIN", "menu-management", "read", "write", "delete", "admin"),
        grant("ADMIN", "legacy", "read"),
        grant("USER", "dashboard", "read"),
        grant("USER", "project-new", "read", "write"),
    )
    fake_uow.memberships.add_user("alice", "ADMIN")
    fake_uow.memberships.add_user("bob", "USER")
    fake_uow.memberships.add_user("carol")
    fake_uow.memberships.add_user("dave", "ADMIN", is_active=False)
    return fake_uow
