"""SearchTreeLib - Immutable Binary Search Tree Library.

SearchTreeLib provides a generic, comparison-based binary search tree built
from three immutable shapes (Empty, Leaf, Node), with insertion, point search,
counting, and visitor-driven traversal in-order, pre-order and post-order.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from searchtreelib import EMPTY, collect_values

    tree = EMPTY
    for value in (5, 3, 8):
        tree = tree.insert(value)

    collect_values(tree)        # [3, 5, 8]
    tree.search(3)              # Node(left=Empty(), value=3, right=Empty())
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core import (
    BinarySearchTree,
    Empty,
    Leaf,
    Node,
    EMPTY,
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
    DataCollector,
    ValueCollector,
    CountCollector,
    SumCollector,
    MaxCollector,
    CustomCollector,
)
from .config import TraversalOrder, TraversalConfig
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
)
from .api import (
    build_tree,
    traverse_tree,
    collect_values,
    count_nodes,
    find_subtree,
    contains,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Shapes
    'BinarySearchTree',
    'Empty',
    'Leaf',
    'Node',
    'EMPTY',
    # Traversal
    'TreeTraverser',
    'InOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'create_traverser',
    # Collectors
    'DataCollector',
    'ValueCollector',
    'CountCollector',
    'SumCollector',
    'MaxCollector',
    'CustomCollector',
    # Config
    'TraversalOrder',
    'TraversalConfig',
    # Error policies
    'ErrorPolicy',
    'FailFastPolicy',
    'ContinueOnErrorsPolicy',
    'CollectErrorsPolicy',
    'ThresholdPolicy',
    # API
    'build_tree',
    'traverse_tree',
    'collect_values',
    'count_nodes',
    'find_subtree',
    'contains',
    'get_tree_stats',
]
