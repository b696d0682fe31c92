"""Binary search tree shapes for SearchTreeLib.

A tree is one of exactly three immutable shapes:

    Empty                      no value
    Leaf(value)                a single value without children
    Node(left, value, right)   a value with two child subtrees

Every operation is defined on each shape. Nothing is ever mutated after
construction: ``insert`` builds a new tree which shares every untouched
subtree with the old one, so callers rebind their variable::

    tree = EMPTY
    for value in (5, 3, 8):
        tree = tree.insert(value)

Trees are not balanced, so sorted input gives a tree as deep as it is
long. Operations on Node walk the tree with loops and explicit stacks
rather than recursion, so depth is bounded by memory, not by Python's
recursion limit.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar


T = TypeVar("T")

Visitor = Callable[[T], Any]

EMPTY_SYMBOL = "."


class BinarySearchTree(ABC, Generic[T]):
    """Abstract base for the three tree shapes.

    Values must support ``<`` and ``==``. Values equal to a node's value are
    routed into its right subtree, so the tree behaves as a multiset: every
    insertion adds a node, duplicates included.
    """

    __slots__ = ()

    @abstractmethod
    def count(self) -> int:
        """Return the number of values stored in this tree.

        Returns:
            int: 0 for Empty, 1 for Leaf, left + 1 + right for Node
        """
        pass

    @abstractmethod
    def insert(self, value: T) -> "BinarySearchTree[T]":
        """Return a new tree containing ``value`` in addition to this tree's values.

        The receiver is left untouched.

        Args:
            value: Value to insert

        Returns:
            BinarySearchTree: The new tree
        """
        pass

    @abstractmethod
    def search(self, value: T) -> Optional["BinarySearchTree[T]"]:
        """Find the first subtree on the search path whose value equals ``value``.

        Only the single root-to-leaf path chosen by comparisons is examined,
        so an equal value elsewhere in the tree is never reached.

        Args:
            value: Value to look for

        Returns:
            The subtree itself (not a copy), or None if not found
        """
        pass

    @abstractmethod
    def traverse_in_order(self, visit: "Visitor[T]") -> None:
        """Call ``visit`` on every value, left subtree first, then value, then right."""
        pass

    @abstractmethod
    def traverse_pre_order(self, visit: "Visitor[T]") -> None:
        """Call ``visit`` on every value, value first, then left, then right."""
        pass

    @abstractmethod
    def traverse_post_order(self, visit: "Visitor[T]") -> None:
        """Call ``visit`` on every value, left, then right, then the value."""
        pass

    @abstractmethod
    def description(self) -> str:
        """Render the tree as text for debugging.

        Not a serialization format; the output is not meant to be parsed.
        """
        pass

    @property
    def is_empty(self) -> bool:
        """True only for the Empty shape."""
        return False

    def __len__(self) -> int:
        return self.count()

    def __str__(self) -> str:
        return self.description()


@dataclass(frozen=True)
class Empty(BinarySearchTree[T]):
    """An empty tree or empty subtree."""

    def count(self) -> int:
        return 0

    def insert(self, value: T) -> BinarySearchTree[T]:
        return Node(EMPTY, value, EMPTY)

    def search(self, value: T) -> Optional[BinarySearchTree[T]]:
        return None

    def traverse_in_order(self, visit: "Visitor[T]") -> None:
        return

    def traverse_pre_order(self, visit: "Visitor[T]") -> None:
        return

    def traverse_post_order(self, visit: "Visitor[T]") -> None:
        return

    def description(self) -> str:
        return EMPTY_SYMBOL

    @property
    def is_empty(self) -> bool:
        return True


@dataclass(frozen=True)
class Leaf(BinarySearchTree[T]):
    """A childless node, the compact form of ``Node(Empty(), value, Empty())``.

    Inserting into a Leaf keeps the stored value as the parent and always
    places the new value in a child Leaf, even when the equivalent Node form
    would do the same thing through a recursive call. Both forms hold the
    same values in the same order; only the shape differs.
    """

    value: T

    def count(self) -> int:
        return 1

    def insert(self, value: T) -> BinarySearchTree[T]:
        if value < self.value:
            return Node(Leaf(value), self.value, EMPTY)
        return Node(EMPTY, self.value, Leaf(value))

    def search(self, value: T) -> Optional[BinarySearchTree[T]]:
        return self if value == self.value else None

    def traverse_in_order(self, visit: "Visitor[T]") -> None:
        visit(self.value)

    def traverse_pre_order(self, visit: "Visitor[T]") -> None:
        visit(self.value)

    def traverse_post_order(self, visit: "Visitor[T]") -> None:
        visit(self.value)

    def description(self) -> str:
        return f"{self.value}"


# Stack entries for _walk: (True, value) visits a value, (False, tree) expands a subtree
_IN_ORDER = ("right", "value", "left")
_PRE_ORDER = ("right", "left", "value")
_POST_ORDER = ("value", "right", "left")


def _walk(tree: BinarySearchTree[T], visit: "Visitor[T]", push_order: Tuple[str, ...]) -> None:
    """Depth-first walk with an explicit stack.

    ``push_order`` lists a Node's parts in the order they are pushed,
    which is the reverse of the order they are visited.
    """
    stack: List[Tuple[bool, Any]] = [(False, tree)]

    while stack:
        is_value, item = stack.pop()
        if is_value:
            visit(item)
        elif isinstance(item, Node):
            for part in push_order:
                if part == "value":
                    stack.append((True, item.value))
                else:
                    stack.append((False, getattr(item, part)))
        elif isinstance(item, Leaf):
            visit(item.value)


@dataclass(frozen=True)
class Node(BinarySearchTree[T]):
    """A value with a left and a right subtree.

    Every value reachable through ``left`` is less than ``value``; every
    value reachable through ``right`` is greater than or equal to it.
    """

    left: BinarySearchTree[T]
    value: T
    right: BinarySearchTree[T]

    def count(self) -> int:
        total = 0
        stack: List[BinarySearchTree[T]] = [self]

        while stack:
            subtree = stack.pop()
            if isinstance(subtree, Node):
                total += 1
                stack.append(subtree.left)
                stack.append(subtree.right)
            else:
                total += subtree.count()

        return total

    def insert(self, value: T) -> BinarySearchTree[T]:
        # Record the descent, then rebuild the path bottom-up
        path: List[Tuple["Node[T]", bool]] = []
        current: BinarySearchTree[T] = self

        while isinstance(current, Node):
            went_left = value < current.value
            path.append((current, went_left))
            current = current.left if went_left else current.right

        rebuilt = current.insert(value)

        # Untouched branches are shared with the new tree
        for node, went_left in reversed(path):
            if went_left:
                rebuilt = Node(rebuilt, node.value, node.right)
            else:
                rebuilt = Node(node.left, node.value, rebuilt)

        return rebuilt

    def search(self, value: T) -> Optional[BinarySearchTree[T]]:
        current: BinarySearchTree[T] = self

        while isinstance(current, Node):
            if value == current.value:
                return current
            current = current.left if value < current.value else current.right

        return current.search(value)

    def traverse_in_order(self, visit: "Visitor[T]") -> None:
        _walk(self, visit, _IN_ORDER)

    def traverse_pre_order(self, visit: "Visitor[T]") -> None:
        _walk(self, visit, _PRE_ORDER)

    def traverse_post_order(self, visit: "Visitor[T]") -> None:
        _walk(self, visit, _POST_ORDER)

    def description(self) -> str:
        # Strings on the stack are emitted as-is, trees are expanded
        parts: List[str] = []
        stack: List[Any] = [self]

        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, Node):
                stack.extend([")", item.right, f") <- {item.value} -> (", item.left, "("])
            else:
                parts.append(item.description())

        return "".join(parts)


# Shared empty tree; every Empty() compares equal to it
EMPTY: BinarySearchTree[Any] = Empty()
