"""Graph traversal, tree flipping and a queue of composed linear functions."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence


def build_adjacency(
    edges: Iterable[tuple[Hashable, Hashable]], directed: bool = False
) -> dict[Hashable, list[Hashable]]:
    """Adjacency lists for the edges; every endpoint appears as a key."""
    adjacency: defaultdict[Hashable, list[Hashable]] = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        if directed:
            adjacency[v]  # noqa: B018 - register the endpoint
        else:
            adjacency[v].append(u)
    return dict(adjacency)


def depth_first(
    adjacency: Mapping[Hashable, Sequence[Hashable]], start: Hashable
) -> Iterator[Hashable]:
    """Yield the nodes reachable from ``start`` in depth-first preorder."""
    seen = set()
    stack = [start]
    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        yield node
        stack.extend(reversed(adjacency.get(node, ())))


def xor_tree(
    edges: Iterable[tuple[int, int]], initial: Sequence[int], goal: Sequence[int]
) -> list[int]:
    """Nodes to pick, in order, to turn ``initial`` into ``goal`` on a tree rooted at node 1.

    Picking a node flips it and every descendant an even number of levels below it.
    """
    n = len(initial)
    if len(goal) != n:
        raise ValueError("initial and goal must have the same length")
    if any(v not in (0, 1) for v in (*initial, *goal)):
        raise ValueError("node values must be 0 or 1")
    edges = list(edges)
    if n == 0:
        if edges:
            raise ValueError("edges given for an empty tree")
        return []
    if len(edges) != n - 1:
        raise ValueError(f"a tree of {n} nodes has {n - 1} edges")
    if any(not (1 <= u <= n and 1 <= v <= n) for u, v in edges):
        raise ValueError(f"edge endpoints must lie in 1..{n}")
    adjacency = build_adjacency(edges)
    picks = []
    visited = set()
    stack = [(1, 0, 0)]
    while stack:
        node, own, other = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        if int(initial[node - 1]) ^ own != int(goal[node - 1]):
            picks.append(node)
            own ^= 1
        stack.extend(
            (child, other, own)
            for child in reversed(adjacency.get(node, []))
            if child not in visited
        )
    if len(visited) != n:
        raise ValueError("edges do not form a connected tree")
    return picks


class QueueComposite:
    """FIFO queue of linear maps x -> a*x + b, evaluated as their composition."""

    def __init__(self, modulus: int = 998244353) -> None:
        self.modulus = modulus
        self._front: list[tuple[tuple[int, int], tuple[int, int]]] = []
        self._back: list[tuple[int, int]] = []
        self._back_total = (1, 0)

    def _compose(self, first: tuple[int, int], then: tuple[int, int]) -> tuple[int, int]:
        a1, b1 = first
        a2, b2 = then
        m = self.modulus
        return a2 * a1 % m, (a2 * b1 + b2) % m

    def __len__(self) -> int:
        return len(self._front) + len(self._back)

    def push(self, a: int, b: int) -> None:
        """Append the map x -> a*x + b; it is applied after every earlier one."""
        self._back.append((a, b))
        self._back_total = self._compose(self._back_total, (a, b))

    def pop(self) -> tuple[int, int]:
        """Remove and return the oldest map as (a, b)."""
        if not self._front:
            if not self._back:
                raise IndexError("pop from an empty queue")
            total = (1, 0)
            while self._back:
                item = self._back.pop()
                total = self._compose(item, total)
                self._front.append((item, total))
            self._back_total = (1, 0)
        item, _ = self._front.pop()
        return item

    def evaluate(self, x: int) -> int:
        """Apply every queued map, oldest first, to ``x`` modulo the modulus."""
        front = self._front[-1][1] if self._front else (1, 0)
        a, b = self._compose(front, self._back_total)
        return (a * x + b) % self.modulus