"""Unit tests for the menu tree builder."""

import itertools
import logging

from menuauth.domain.entities import MenuTreeNode
from menuauth.domain.services import build_menu_forest, prune_forest
from menuauth.domain.value_objects import AnomalyKind, EffectivePermission

from tests.conftest import menu


def _shape(forest: list[MenuTreeNode]) -> list:
    """Nested (menu_id, children) structure for comparisons."""
    return [(node.menu_id, _shape(list(node.children))) for node in forest]


def _sample_menus():
    return [
        menu("sys", sort_order=5),
        menu("sys-menu", "sys", sort_order=51),
        menu("sys-group", "sys", sort_order=52),
        menu("dashboard", sort_order=1),
        menu("projects", sort_order=2),
        menu("project-new", "projects", sort_order=21),
        menu("project-archive", "projects", sort_order=23),
    ]


def test_build_links_children_and_sorts_siblings() -> None:
    """Roots and children are ordered by sort_order."""
    forest = build_menu_forest(_sample_menus())
    assert _shape(forest.to_tree()) == [
        ("dashboard", []),
        ("projects", [("project-new", []), ("project-archive", [])]),
        ("sys", [("sys-menu", []), ("sys-group", [])]),
    ]
    assert forest.anomalies == ()


def test_build_keeps_every_node_exactly_once() -> None:
    """Node count of the forest equals the number of unique input rows."""
    menus = _sample_menus()
    forest = build_menu_forest(menus)
    walked = [m.menu_id for m, _ in forest.walk()]
    assert len(forest) == len(menus)
    assert sorted(walked) == sorted(m.menu_id for m in menus)


def test_build_is_independent_of_input_order() -> None:
    """Every permutation of the input yields the same tree."""
    menus = _sample_menus()[:5]
    expected = _shape(build_menu_forest(menus).to_tree())
    for permutation in itertools.permutations(menus):
        assert _shape(build_menu_forest(permutation).to_tree()) == expected


def test_build_breaks_sort_order_ties_by_menu_id() -> None:
    """Siblings with equal sort_order are ordered by menu_id."""
    forest = build_menu_forest(
        [menu("b", sort_order=1), menu("c", sort_order=0), menu("a", sort_order=1)]
    )
    assert [r.menu_id for r in forest.roots] == ["c", "a", "b"]


def test_build_duplicate_menu_id_keeps_first(caplog) -> None:
    """Duplicate menu_id: first row kept, anomaly logged."""
    first = menu("dup", title="First")
    second = menu("dup", title="Second")
    with caplog.at_level(logging.WARNING):
        forest = build_menu_forest([first, menu("other"), second])

    assert len(forest) == 2
    assert forest.get("dup").title == "First"
    assert [a.kind for a in forest.anomalies] == [AnomalyKind.DUPLICATE_MENU_ID]
    assert "duplicate_menu_id" in caplog.text


def test_build_self_parent_becomes_root(caplog) -> None:
    """A menu naming itself as parent is kept as a root."""
    with caplog.at_level(logging.WARNING):
        forest = build_menu_forest([menu("x", "x"), menu("y")])

    assert {r.menu_id for r in forest.roots} == {"x", "y"}
    assert forest.anomalies[0].kind == AnomalyKind.SELF_PARENT
    assert forest.anomalies[0].menu_id == "x"
    assert "self_parent" in caplog.text


def test_build_orphan_becomes_root() -> None:
    """A menu whose parent is missing is kept as a root, with its children."""
    forest = build_menu_forest([menu("lost", "gone"), menu("lost-child", "lost")])
    assert _shape(forest.to_tree()) == [("lost", [("lost-child", [])])]
    assert [a.kind for a in forest.anomalies] == [AnomalyKind.ORPHAN]


def test_build_parent_cycle_is_broken() -> None:
    """a -> b -> a: one member becomes root, nothing is lost, walk terminates."""
    forest = build_menu_forest(
        [menu("a", "b", sort_order=1), menu("b", "a", sort_order=2), menu("c", "b")]
    )
    assert _shape(forest.to_tree()) == [("a", [("b", [("c", [])])])]
    assert [a.kind for a in forest.anomalies] == [AnomalyKind.CYCLE]
    assert len(list(forest.walk())) == 3


def test_build_empty_input() -> None:
    forest = build_menu_forest([])
    assert len(forest) == 0
    assert forest.to_tree() == []


def test_walk_reports_depth() -> None:
    forest = build_menu_forest(_sample_menus())
    depths = {m.menu_id: d for m, d in forest.walk()}
    assert depths["sys"] == 0
    assert depths["sys-menu"] == 1


def test_deep_chain_does_not_recurse() -> None:
    """A long parent chain is handled without hitting the recursion limit."""
    menus = [menu("n0")] + [menu(f"n{i}", f"n{i - 1}") for i in range(1, 5000)]
    forest = build_menu_forest(menus)
    tree = prune_forest(forest, keep=lambda m: m.menu_id == "n4999")
    assert len(forest) == 5000
    assert tree[0].menu_id == "n0"


def test_to_tree_annotates_every_node() -> None:
    forest = build_menu_forest(_sample_menus())
    tree = forest.to_tree(annotate=lambda m: EffectivePermission(can_read=m.menu_id == "sys"))
    assert tree[2].permission == EffectivePermission(can_read=True)
    assert tree[2].children[0].permission == EffectivePermission()


def test_prune_keeps_ancestors_of_visible_nodes() -> None:
    """Grouping nodes survive when a descendant survives."""
    forest = build_menu_forest(_sample_menus())
    tree = prune_forest(forest, keep=lambda m: m.menu_id == "project-archive")
    assert _shape(tree) == [("projects", [("project-archive", [])])]


def test_prune_gate_removes_whole_subtree() -> None:
    """A node failing the gate hides its subtree even if descendants qualify."""
    menus = [menu("root", enabled=False), menu("leaf", "root")]
    forest = build_menu_forest(menus)
    tree = prune_forest(forest, keep=lambda m: True, gate=lambda m: m.enabled)
    assert tree == []
