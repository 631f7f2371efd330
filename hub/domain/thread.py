"""Threaded view of parent-linked items.

Paper comments and discussion replies are stored flat, each pointing at an
optional parent in the same container. ``build_forest`` turns such a list
into nested nodes for display.

Placement rules:
- ``parent_id`` is None: top level
- parent present in the input: appended to that parent's children
- parent absent from the input (deleted, or on another page): top level
- ``parent_id`` equals the item's own id: top level
- an item that would end up as its own ancestor: the earliest item of the
  loop (in input order) is placed at the top level

Nothing is ever dropped, so a forest built from N items has N nodes. Every
pass is a loop over the input, so arbitrarily deep chains build without
recursion.
"""

from collections.abc import Callable, Hashable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Generic, Optional, Protocol, TypeVar


class Threadable(Protocol):
    """Anything with an id and an optional parent id."""

    @property
    def id(self) -> Hashable: ...

    @property
    def parent_id(self) -> Optional[Hashable]: ...


T = TypeVar("T", bound=Threadable)

_UNSEEN, _ON_PATH, _DONE = 0, 1, 2

# Deepest nesting level used when a thread is rendered for clients
MAX_THREAD_DEPTH = 20


@dataclass
class ThreadNode(Generic[T]):
    """One item and the nodes that answer it, in input order."""

    item: T
    children: list["ThreadNode[T]"] = field(default_factory=list)


def _resolve_parents(items: Sequence[T]) -> list[Optional[int]]:
    """Map each input position to the position of its parent, or None."""
    # First occurrence of an id is the one children attach to
    position: dict[Hashable, int] = {}
    for i, item in enumerate(items):
        position.setdefault(item.id, i)

    return [
        position.get(item.parent_id) if item.parent_id is not None else None
        for item in items
    ]


def _break_cycles(parents: list[Optional[int]]) -> None:
    """Detach the earliest member of every parent loop, in place."""
    state = [_UNSEEN] * len(parents)
    for start in range(len(parents)):
        path: list[int] = []
        current = start
        while current is not None and state[current] == _UNSEEN:
            state[current] = _ON_PATH
            path.append(current)
            current = parents[current]

        if current is not None and state[current] == _ON_PATH:
            loop = path[path.index(current) :]
            parents[min(loop)] = None

        for visited in path:
            state[visited] = _DONE


def build_forest(items: Sequence[T]) -> list[ThreadNode[T]]:
    """Nest a flat list of items under their parents.

    The input is not modified. Building twice from the same input gives
    equal forests.

    Args:
        items: Items in display order (normally creation order)

    Returns:
        Top-level nodes in input order, each with its descendants attached
    """
    parents = _resolve_parents(items)
    _break_cycles(parents)

    nodes = [ThreadNode(item=item) for item in items]
    roots: list[ThreadNode[T]] = []
    for node, parent in zip(nodes, parents):
        if parent is None:
            roots.append(node)
        else:
            nodes[parent].children.append(node)

    return roots


def walk(forest: Sequence[ThreadNode[T]]) -> Iterator[tuple[ThreadNode[T], int]]:
    """Yield ``(node, depth)`` pairs depth-first, pre-order.

    Top-level nodes have depth 0.
    """
    stack = [(node, 0) for node in reversed(forest)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((child, depth + 1) for child in reversed(node.children))


def count_nodes(forest: Sequence[ThreadNode[T]]) -> int:
    """Total number of nodes in the forest."""
    return sum(1 for _ in walk(forest))


V = TypeVar("V")


def map_forest(
    forest: Sequence[ThreadNode[T]],
    convert: Callable[[T], V],
    children_of: Callable[[V], list[V]],
    max_depth: Optional[int] = None,
) -> list[V]:
    """Convert a forest into nested output objects, keeping order.

    The shape is kept down to ``max_depth``. Descendants of a node at
    ``max_depth`` are placed after it, in pre-order, among its siblings, so
    the output never nests deeper than ``max_depth`` however long a reply
    chain is. Every item is still converted exactly once.

    Args:
        forest: Nodes built by ``build_forest``
        convert: Builds the output object for one item
        children_of: Returns the list on an output object that receives its
            converted children
        max_depth: Deepest nesting level in the output (top level is 0);
            unlimited when None

    Returns:
        Converted top-level objects
    """
    roots: list[V] = []
    stack = [(node, roots, 0) for node in reversed(forest)]
    while stack:
        node, siblings, depth = stack.pop()
        converted = convert(node.item)
        siblings.append(converted)
        if max_depth is not None and depth >= max_depth:
            target, child_depth = siblings, depth
        else:
            target, child_depth = children_of(converted), depth + 1
        stack.extend((child, target, child_depth) for child in reversed(node.children))
    return roots
