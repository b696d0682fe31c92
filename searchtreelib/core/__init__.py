"""Core abstractions for SearchTreeLib.

This module contains the tree shapes and the traversal and collection
machinery built on top of them.
"""

from .tree import BinarySearchTree, Empty, Leaf, Node, EMPTY
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    ValueCollector,
    CountCollector,
    SumCollector,
    MaxCollector,
    CustomCollector,
)

__all__ = [
    "BinarySearchTree",
    "Empty",
    "Leaf",
    "Node",
    "EMPTY",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "create_traverser",
    "DataCollector",
    "ValueCollector",
    "CountCollector",
    "SumCollector",
    "MaxCollector",
    "CustomCollector",
]
