"""High-level API for SearchTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API (shapes,
traversers, collectors) for ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from .config import TraversalConfig, TraversalOrder
from .error_policies import ErrorPolicy
from .core.tree import BinarySearchTree, Empty, Leaf, EMPTY
from .core.traverser import create_traverser
from .core.collector import ValueCollector


def build_tree(values: Iterable[Any],
               tree: BinarySearchTree = EMPTY) -> BinarySearchTree:
    """Insert values one after another and return the resulting tree.

    Args:
        values: Values to insert, in insertion order
        tree: Starting tree (default: empty). It is not modified.

    Returns:
        The new tree

    Example:
        >>> tree = build_tree([5, 3, 8, 1, 4])
        >>> collect_values(tree)
        [1, 3, 4, 5, 8]
    """
    for value in values:
        tree = tree.insert(value)
    return tree


def traverse_tree(
    tree: BinarySearchTree,
    visit: Callable[[Any], Any],
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
    error_policy: Optional[ErrorPolicy] = None,
) -> None:
    """Simple interface for tree traversal.

    This is the primary high-level function for visiting values. It handles
    the common case without dealing with configs and traverser classes.

    Args:
        tree: Tree to walk
        visit: Called once per value, in traversal order
        order: Traversal order (in, pre, post)
        error_policy: What to do when ``visit`` raises (None = re-raise)

    Example:
        >>> traverse_tree(build_tree([2, 1, 3]), print, order="pre")
        2
        1
        3
    """
    config = TraversalConfig(order=order, error_policy=error_policy)
    traverser = create_traverser(config.order, config.resolved_policy())
    traverser.traverse(tree, visit)


def collect_values(
    tree: BinarySearchTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
) -> List[Any]:
    """Return the tree's values as a list in the given order.

    Args:
        tree: Tree to walk
        order: Traversal order (in, pre, post)

    Returns:
        List of values; in-order gives them sorted
    """
    collector = ValueCollector()
    traverse_tree(tree, collector, order=order)
    return collector.result()


def count_nodes(tree: BinarySearchTree) -> int:
    """Count values stored in a tree."""
    return tree.count()


def find_subtree(tree: BinarySearchTree, value: Any) -> Optional[BinarySearchTree]:
    """Find the subtree rooted at ``value``.

    Args:
        tree: Tree to search
        value: Value to look for

    Returns:
        The first matching subtree on the search path, or None
    """
    return tree.search(value)


def contains(tree: BinarySearchTree, value: Any) -> bool:
    """Check whether ``value`` is on the tree's search path."""
    return tree.search(value) is not None


def get_tree_stats(tree: BinarySearchTree) -> Dict[str, Any]:
    """Get statistics about a tree's shape.

    Depth counts from 0 at the root. A value without children counts as a
    leaf whether it is stored as a Leaf or as a Node with two empty subtrees.

    Args:
        tree: Tree to analyse

    Returns:
        Dictionary with tree statistics:
        - total_nodes: Number of stored values
        - leaf_nodes: Values without children
        - internal_nodes: Values with at least one child
        - height: Number of levels (0 for an empty tree)
        - depths: Mapping of depth -> number of values at that depth

    Example:
        >>> stats = get_tree_stats(build_tree([5, 3, 8]))
        >>> stats['height']
        2
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'depths': {},
    }

    # Stack stores (subtree, depth) tuples
    stack: List[Tuple[BinarySearchTree, int]] = [(tree, 0)]

    while stack:
        subtree, depth = stack.pop()
        if isinstance(subtree, Empty):
            continue

        stats['total_nodes'] += 1
        stats['height'] = max(stats['height'], depth + 1)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

        if isinstance(subtree, Leaf) or (
                subtree.left.is_empty and subtree.right.is_empty):
            stats['leaf_nodes'] += 1
            continue

        stack.append((subtree.right, depth + 1))
        stack.append((subtree.left, depth + 1))

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats
