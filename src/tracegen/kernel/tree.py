"""Program trees - ordered rose trees of generated values.

Generated histories are long chains of single-child nodes, so every
traversal here walks an explicit stack instead of recursing per level.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")
P = TypeVar("P")


@dataclass(frozen=True)
class Value(Generic[P]):
    """A payload paired with the logical time at which it was inserted."""

    payload: P
    time: float

    def __str__(self) -> str:
        return f"{self.payload!r} @ {self.time:g}"


@dataclass(frozen=True, eq=False)
class Tree(Generic[A]):
    """Ordered tree with arbitrary branching factor.

    Siblings are alternative futures of their parent; a chain of
    single-child nodes is one linear history.
    """

    value: A
    children: tuple[Tree[A], ...] = field(default_factory=tuple)

    @classmethod
    def leaf(cls, value: A) -> Tree[A]:
        return cls(value)

    @classmethod
    def node(cls, value: A, children: tuple[Tree[A], ...] | list[Tree[A]]) -> Tree[A]:
        return cls(value, tuple(children))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        pending: list[tuple[Tree[Any], Tree[Any]]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if left.value != right.value or len(left.children) != len(right.children):
                return False
            pending.extend(zip(left.children, right.children))
        return True

    def __hash__(self) -> int:
        # Pre-order labels with child counts determine the shape uniquely.
        return hash(tuple((node.value, len(node.children)) for node in self._walk()))

    def _walk(self) -> Iterator[Tree[A]]:
        """Nodes in pre-order."""
        stack: list[Tree[A]] = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    def map(self, fn: Callable[[A], B]) -> Tree[B]:
        """Relabel every node, keeping the shape."""
        # Post-order: a node is rebuilt once all of its children are.
        built: list[Tree[B]] = []
        stack: list[tuple[Tree[A], bool]] = [(self, False)]
        while stack:
            current, expanded = stack.pop()
            if not expanded:
                stack.append((current, True))
                stack.extend((child, False) for child in reversed(current.children))
                continue
            count = len(current.children)
            children = tuple(built[len(built) - count:]) if count else ()
            del built[len(built) - count:]
            built.append(Tree(fn(current.value), children))
        return built[0]

    def flatten(self) -> list[A]:
        """Labels in pre-order."""
        return [node.value for node in self._walk()]

    def paths(self) -> list[list[A]]:
        """Every root-to-leaf label sequence, left to right.

        Each path is one complete alternative history.
        """
        found: list[list[A]] = []
        path: list[A] = []
        stack: list[tuple[Tree[A], int]] = [(self, 0)]
        while stack:
            current, level = stack.pop()
            del path[level:]
            path.append(current.value)
            if not current.children:
                found.append(list(path))
            stack.extend((child, level + 1) for child in reversed(current.children))
        return found

    def depth(self) -> int:
        deepest = 0
        stack: list[tuple[Tree[A], int]] = [(self, 1)]
        while stack:
            current, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in current.children)
        return deepest

    def find_all(self, predicate: Callable[[A], bool]) -> Iterator[Tree[A]]:
        """Find all subtrees whose label satisfies ``predicate``, in pre-order."""
        return (node for node in self._walk() if predicate(node.value))

    def as_tree(self, show: Callable[[A], str] = str) -> str:
        """Simple tree visualization for debugging."""
        lines = [show(self.value)]
        lines.extend(_draw_children(self, show))
        return "\n".join(lines)


def _draw_children(root: Tree[Any], show: Callable[[Any], str]) -> list[str]:
    lines: list[str] = []
    stack: list[tuple[Tree[Any], str, bool]] = [
        (child, "", index == len(root.children) - 1) for index, child in enumerate(root.children)
    ]
    stack.reverse()
    while stack:
        current, prefix, last = stack.pop()
        head, tail = ("└── ", "    ") if last else ("├── ", "│   ")
        lines.append(prefix + head + show(current.value))
        count = len(current.children)
        for index in range(count - 1, -1, -1):
            stack.append((current.children[index], prefix + tail, index == count - 1))
    return lines


Forest = tuple[Tree[A], ...]
