"""Tree traversal strategies for SearchTreeLib.

Traversers wrap the three traversal orders defined on every tree shape
behind one interface, so the order can be chosen at runtime and a visitor
failure can be routed through an error policy.
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from ..config import TraversalOrder, parse_order
from ..error_policies import ErrorPolicy, FailFastPolicy
from .tree import BinarySearchTree, Visitor


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers are stateless apart from their error policy and may be
    reused across trees.
    """

    order: TraversalOrder

    def __init__(self, error_policy: Optional[ErrorPolicy] = None):
        """Initialize traverser with an error policy.

        Args:
            error_policy: Policy consulted when the visitor raises
                (None = fail fast, the visitor's exception propagates)
        """
        self.error_policy = error_policy or FailFastPolicy()

    def traverse(self, tree: BinarySearchTree, visit: Visitor) -> None:
        """Visit every value of ``tree`` in this traverser's order.

        Args:
            tree: Tree to walk
            visit: Callable invoked once per value
        """
        # Subclasses may override handle(), so only the stock policy skips the wrapper
        if type(self.error_policy) is FailFastPolicy:
            self._walk(tree, visit)
        else:
            self._walk(tree, self._guarded(visit))

    def _guarded(self, visit: Visitor) -> Visitor:
        """Wrap a visitor so its exceptions go to the error policy."""
        def guarded_visit(value):
            try:
                visit(value)
            except Exception as error:
                self.error_policy.handle(error, value, self.order)
        return guarded_visit

    @abstractmethod
    def _walk(self, tree: BinarySearchTree, visit: Visitor) -> None:
        pass


class InOrderTraverser(TreeTraverser):
    """In-order traversal: left subtree, value, right subtree.

    For a tree built by insertion this visits values in non-decreasing order.
    """

    order = TraversalOrder.IN_ORDER

    def _walk(self, tree: BinarySearchTree, visit: Visitor) -> None:
        tree.traverse_in_order(visit)


class PreOrderTraverser(TreeTraverser):
    """Pre-order traversal: value, left subtree, right subtree.

    Re-inserting the values of an insertion-built tree in this order,
    starting from empty, rebuilds an equal tree.
    """

    order = TraversalOrder.PRE_ORDER

    def _walk(self, tree: BinarySearchTree, visit: Visitor) -> None:
        tree.traverse_pre_order(visit)


class PostOrderTraverser(TreeTraverser):
    """Post-order traversal: left subtree, right subtree, value."""

    order = TraversalOrder.POST_ORDER

    def _walk(self, tree: BinarySearchTree, visit: Visitor) -> None:
        tree.traverse_post_order(visit)


_TRAVERSERS = {
    TraversalOrder.IN_ORDER: InOrderTraverser,
    TraversalOrder.PRE_ORDER: PreOrderTraverser,
    TraversalOrder.POST_ORDER: PostOrderTraverser,
}


def create_traverser(strategy: Union[TraversalOrder, str],
                     error_policy: Optional[ErrorPolicy] = None) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        strategy: TraversalOrder or name of one (in, pre, post, in_order, ...)
        error_policy: Policy for visitor errors (None = fail fast)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _TRAVERSERS[parse_order(strategy)](error_policy)
