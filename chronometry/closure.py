"""Transitive closure over directed relations.

Eras (sub-era membership) and concepts (broader/narrower, exact matches) are
both plain relations between hashable nodes; this module answers "everything
reachable from X" for them without recursion, so cyclic or very deep
declarations neither loop forever nor blow the stack.
"""

from collections import defaultdict
from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

Node = TypeVar("Node", bound=Hashable)


def transitive_closure(
    start: Node,
    successors: Callable[[Node], Iterable[Node]],
    *,
    transitive: bool = True,
) -> list[Node]:
    """Nodes reachable from ``start`` through ``successors``.

    Args:
        start: Node to expand (never part of the result, even on a cycle)
        successors: Callback returning the direct successors of a node
        transitive: When False only the direct successors are returned

    Returns:
        Deduplicated nodes in depth-first discovery order
    """
    result: list[Node] = []
    visited = {start}
    stack = list(reversed(list(successors(start))))
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        result.append(node)
        if transitive:
            stack.extend(reversed(list(successors(node))))
    return result


def successors_from_pairs(
    pairs: Iterable[tuple[Node, Node]],
    *,
    inverse: bool = False,
    symmetric: bool = False,
) -> Callable[[Node], tuple[Node, ...]]:
    """Build a ``successors`` callback from ``(source, target)`` pairs.

    ``inverse`` follows pairs target to source; ``symmetric`` follows both
    directions. The pairs are snapshotted, so later changes to the source
    collection are not seen by the callback.
    """
    lookup: dict[Node, list[Node]] = defaultdict(list)
    for source, target in pairs:
        if symmetric or not inverse:
            lookup[source].append(target)
        if symmetric or inverse:
            lookup[target].append(source)

    def successors(node: Node) -> tuple[Node, ...]:
        return tuple(lookup.get(node, ()))

    return successors
