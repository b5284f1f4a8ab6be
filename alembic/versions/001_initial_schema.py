"""Initial schema - menu, group, user, membership and group menu permission.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "menu",
        sa.Column("id", sa.BigInteger(), sa.Identity(), primary_key=True),
        sa.Column("menu_id", sa.String(100), nullable=False),
        sa.Column("parent_id", sa.String(100), nullable=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("url", sa.String(500), nullable=True),
        sa.Column("icon", sa.String(100), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    # No foreign key on parent_id: orphans are read back and reported as anomalies.
    op.create_index("ix_menu_menu_id", "menu", ["menu_id"], unique=True)
    op.create_index("ix_menu_parent_id", "menu", ["parent_id"])

    op.create_table(
        "app_group",
        sa.Column("group_id", sa.String(50), primary_key=True),
        sa.Column("group_name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("level", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_app_group_group_name", "app_group", ["group_name"], unique=True)

    op.create_table(
        "app_user",
        sa.Column("user_id", sa.String(50), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("department", sa.String(100), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )

    op.create_table(
        "user_group",
        sa.Column("user_id", sa.String(50), sa.ForeignKey("app_user.user_id", ondelete="CASCADE"), primary_key=True),
        sa.Column("group_id", sa.String(50), sa.ForeignKey("app_group.group_id", ondelete="CASCADE"), primary_key=True),
    )

    op.create_table(
        "group_menu_permission",
        sa.Column("group_id", sa.String(50), sa.ForeignKey("app_group.group_id", ondelete="CASCADE"), primary_key=True),
        sa.Column("menu_id", sa.String(100), primary_key=True),
        sa.Column("can_read", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("can_write", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("can_delete", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("can_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    # Seed default groups and navigation menu
    op.execute(
        "INSERT INTO app_group (group_id, group_name, description, level) VALUES "
        "('ADMIN', 'Administrators', 'System administrators', 9), "
        "('USER', 'Users', 'Regular users', 1)"
    )
    menus = [
        ("dashboard", None, "Dashboard", "/dashboard", "bx-tachometer", 1),
        ("projects", None, "Project Management", None, "bx-folder", 2),
        ("tasks", None, "Task Management", None, "bx-task", 3),
        ("reports", None, "Reports", "/reports", "bx-line-chart", 4),
        ("system", None, "System Management", None, "bx-cog", 5),
        ("settings", None, "Settings", "/settings", "bx-cog", 6),
        ("project-new", "projects", "New Project", "/project-new", "bx-plus", 21),
        ("project-templates", "projects", "Project Templates", "/project-templates", "bx-bookmark", 22),
        ("project-archive", "projects", "Project Archive", "/project-archive", "bx-archive", 23),
        ("task-my", "tasks", "My Tasks", "/task-my", "bx-user", 31),
        ("task-calendar", "tasks", "Task Calendar", "/task-calendar", "bx-calendar", 32),
        ("task-timeline", "tasks", "Task Timeline", "/task-timeline", "bx-time", 33),
        ("menu-management", "system", "Menu Management", "/menu-management", "bx-menu", 51),
    ]
    menu_table = sa.table(
        "menu",
        sa.column("menu_id", sa.String),
        sa.column("parent_id", sa.String),
        sa.column("title", sa.String),
        sa.column("url", sa.String),
        sa.column("icon", sa.String),
        sa.column("sort_order", sa.Integer),
    )
    op.bulk_insert(
        menu_table,
        [
            {
                "menu_id": menu_id,
                "parent_id": parent_id,
                "title": title,
                "url": url,
                "icon": icon,
                "sort_order": sort_order,
            }
            for menu_id, parent_id, title, url, icon, sort_order in menus
        ],
    )

    # Grants only on navigable menus; grouping menus show up through their children.
    grant_table = sa.table(
        "group_menu_permission",
        sa.column("group_id", sa.String),
        sa.column("menu_id", sa.String),
        sa.column("can_read", sa.Boolean),
        sa.column("can_write", sa.Boolean),
        sa.column("can_delete", sa.Boolean),
        sa.column("can_admin", sa.Boolean),
    )
    leaf_ids = [m[0] for m in menus if m[3] is not None]
    admin_grants = [
        {
            "group_id": "ADMIN",
            "menu_id": menu_id,
            "can_read": True,
            "can_write": True,
            "can_delete": True,
            "can_admin": True,
        }
        for menu_id in leaf_ids
    ]
    user_grants = [
        {
            "group_id": "USER",
            "menu_id": menu_id,
            "can_read": True,
            "can_write": True,
            "can_delete": False,
            "can_admin": False,
        }
        for menu_id in leaf_ids
        if menu_id != "menu-management"
    ]
    op.bulk_insert(grant_table, admin_grants + user_grants)


def downgrade() -> None:
    op.drop_table("group_menu_permission")
    op.drop_table("user_group")
    op.drop_table("app_user")
    op.drop_index("ix_app_group_group_name", table_name="app_group")
    op.drop_table("app_group")
    op.drop_index("ix_menu_parent_id", table_name="menu")
    op.drop_index("ix_menu_menu_id", table_name="menu")
    op.drop_table("menu")
