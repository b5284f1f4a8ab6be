"""Menu tree builder - flat menu rows to an ordered forest.

Nodes live in an arena keyed by ``menu_id``; child lists hold ids, never
object references, so a malformed snapshot cannot produce shared or
circular structure. Every traversal is iterative.

Snapshot inconsistencies are recovered locally and reported as
``DataAnomaly`` values (and logged at WARNING):

* duplicate ``menu_id`` - the first row wins, later rows are skipped
* ``parent_id`` equal to own ``menu_id`` - node becomes a root
* ``parent_id`` naming a missing menu (orphan) - node becomes a root
* longer parent cycles - one member per cycle becomes a root
"""

import logging
from collections.abc import Callable, Iterable, Iterator

from menuauth.domain.entities import MenuNode, MenuTreeNode
from menuauth.domain.value_objects import AnomalyKind, DataAnomaly, EffectivePermission

logger = logging.getLogger(__name__)

Annotate = Callable[[MenuNode], EffectivePermission | None]
Predicate = Callable[[MenuNode], bool]


def sort_key(menu: MenuNode) -> tuple[int, str]:
    """Sibling order: sort_order ascending, then menu_id."""
    return (menu.sort_order, menu.menu_id)


class MenuForest:
    """Immutable forest of menus addressed by menu_id."""

    def __init__(
        self,
        nodes: dict[str, MenuNode],
        roots: list[str],
        children: dict[str, list[str]],
        anomalies: list[DataAnomaly],
    ) -> None:
        self._nodes = nodes
        self._roots = tuple(roots)
        self._children = {k: tuple(v) for k, v in children.items()}
        self.anomalies = tuple(anomalies)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, menu_id: object) -> bool:
        return menu_id in self._nodes

    @property
    def root_ids(self) -> tuple[str, ...]:
        return self._roots

    @property
    def roots(self) -> list[MenuNode]:
        return [self._nodes[r] for r in self._roots]

    def get(self, menu_id: str) -> MenuNode | None:
        return self._nodes.get(menu_id)

    def child_ids(self, menu_id: str) -> tuple[str, ...]:
        return self._children.get(menu_id, ())

    def children_of(self, menu_id: str) -> list[MenuNode]:
        return [self._nodes[c] for c in self.child_ids(menu_id)]

    def walk(self) -> Iterator[tuple[MenuNode, int]]:
        """Pre-order traversal yielding (menu, depth)."""
        stack = [(r, 0) for r in reversed(self._roots)]
        while stack:
            menu_id, depth = stack.pop()
            yield self._nodes[menu_id], depth
            for child in reversed(self.child_ids(menu_id)):
                stack.append((child, depth + 1))

    def post_order(self) -> list[str]:
        """Menu ids with every child listed before its parent."""
        order: list[str] = []
        stack = [(r, False) for r in reversed(self._roots)]
        while stack:
            menu_id, expanded = stack.pop()
            if expanded:
                order.append(menu_id)
                continue
            stack.append((menu_id, True))
            for child in reversed(self.child_ids(menu_id)):
                stack.append((child, False))
        return order

    def to_tree(self, annotate: Annotate | None = None) -> list[MenuTreeNode]:
        """Materialise nested tree nodes, optionally attaching a permission."""
        return self._assemble(annotate=annotate, keep=None, gate=None)

    def _assemble(
        self,
        annotate: Annotate | None,
        keep: Predicate | None,
        gate: Predicate | None,
    ) -> list[MenuTreeNode]:
        built: dict[str, MenuTreeNode] = {}
        for menu_id in self.post_order():
            menu = self._nodes[menu_id]
            children = tuple(built[c] for c in self.child_ids(menu_id) if c in built)
            if gate is not None and not gate(menu):
                continue
            if keep is not None and not children and not keep(menu):
                continue
            built[menu_id] = MenuTreeNode(
                menu=menu,
                children=children,
                permission=annotate(menu) if annotate else None,
            )
        return [built[r] for r in self._roots if r in built]


def build_menu_forest(menus: Iterable[MenuNode]) -> MenuForest:
    """Index menus by id, link children to parents and order siblings."""
    anomalies: list[DataAnomaly] = []

    nodes: dict[str, MenuNode] = {}
    for menu in menus:
        if menu.menu_id in nodes:
            anomalies.append(
                _report(
                    AnomalyKind.DUPLICATE_MENU_ID,
                    menu.menu_id,
                    f"skipped duplicate row titled {menu.title!r}, kept {nodes[menu.menu_id].title!r}",
                )
            )
            continue
        nodes[menu.menu_id] = menu

    roots: list[str] = []
    children: dict[str, list[str]] = {}
    for menu in nodes.values():
        parent_id = menu.parent_id
        if parent_id is None:
            roots.append(menu.menu_id)
        elif parent_id == menu.menu_id:
            anomalies.append(
                _report(AnomalyKind.SELF_PARENT, menu.menu_id, "parent is itself, treated as root")
            )
            roots.append(menu.menu_id)
        elif parent_id not in nodes:
            anomalies.append(
                _report(
                    AnomalyKind.ORPHAN,
                    menu.menu_id,
                    f"parent {parent_id!r} does not exist, treated as root",
                )
            )
            roots.append(menu.menu_id)
        else:
            children.setdefault(parent_id, []).append(menu.menu_id)

    _break_cycles(nodes, roots, children, anomalies)

    roots.sort(key=lambda r: sort_key(nodes[r]))
    for child_ids in children.values():
        child_ids.sort(key=lambda c: sort_key(nodes[c]))

    return MenuForest(nodes, roots, children, anomalies)


def prune_forest(
    forest: MenuForest,
    keep: Predicate,
    gate: Predicate | None = None,
    annotate: Annotate | None = None,
) -> list[MenuTreeNode]:
    """Bottom-up filter of the forest.

    A node survives when it passes ``gate`` (if given) and either satisfies
    ``keep`` itself or has at least one surviving child. A node failing
    ``gate`` removes its whole subtree.
    """
    return forest._assemble(annotate=annotate, keep=keep, gate=gate)


def _break_cycles(
    nodes: dict[str, MenuNode],
    roots: list[str],
    children: dict[str, list[str]],
    anomalies: list[DataAnomaly],
) -> None:
    """Promote one member of every parent cycle to a root."""
    reachable = _reachable_from(roots, children)
    if len(reachable) == len(nodes):
        return

    for menu_id in list(nodes):
        if menu_id in reachable:
            continue
        # Parent links of unreachable nodes stay inside the unreachable set,
        # so following them must revisit a node of the cycle.
        path: list[str] = []
        seen: set[str] = set()
        current = menu_id
        while current not in seen:
            seen.add(current)
            path.append(current)
            current = nodes[current].parent_id
        cycle = path[path.index(current) :]
        head = min(cycle, key=lambda c: sort_key(nodes[c]))
        children[nodes[head].parent_id].remove(head)
        roots.append(head)
        anomalies.append(
            _report(
                AnomalyKind.CYCLE,
                head,
                f"parent cycle {' -> '.join(cycle)}, treated as root",
            )
        )
        reachable |= _reachable_from([head], children)


def _reachable_from(start: list[str], children: dict[str, list[str]]) -> set[str]:
    reachable: set[str] = set()
    stack = list(start)
    while stack:
        menu_id = stack.pop()
        if menu_id in reachable:
            continue
        reachable.add(menu_id)
        stack.extend(children.get(menu_id, ()))
    return reachable


def _report(kind: AnomalyKind, menu_id: str, detail: str) -> DataAnomaly:
    logger.warning("Menu snapshot anomaly %s on %r: %s", kind.value, menu_id, detail)
    return DataAnomaly(kind=kind, menu_id=menu_id, detail=detail)
