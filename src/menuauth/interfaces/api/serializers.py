"""JSON shapes for menu API responses."""

from menuauth.domain.entities import MenuTreeNode, PermissionGrant


def menu_tree_to_dict(node: MenuTreeNode) -> dict:
    """Serialize a tree node and its children."""
    menu = node.menu
    data = {
        "menu_id": menu.menu_id,
        "title": menu.title,
        "url": menu.target,
        "icon": menu.icon,
        "parent_id": menu.parent_id,
        "sort_order": menu.sort_order,
        "enabled": menu.enabled,
        "children": [menu_tree_to_dict(child) for child in node.children],
    }
    if node.permission is not None:
        data["permissions"] = node.permission.to_dict()
    return data


def forest_to_dict(forest: list[MenuTreeNode]) -> dict:
    return {"items": [menu_tree_to_dict(root) for root in forest]}


def grant_to_dict(grant: PermissionGrant) -> dict:
    return {
        "group_id": grant.group_id,
        "menu_id": grant.menu_id,
        "can_read": grant.can_read,
        "can_write": grant.can_write,
        "can_delete": grant.can_delete,
        "can_admin": grant.can_admin,
    }
