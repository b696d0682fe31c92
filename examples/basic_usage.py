#!/usr/bin/env python3
"""
Basic SearchTreeLib usage.

This example demonstrates:
- Building a tree by repeated insertion
- Searching for a subtree
- Visiting values in the three traversal orders
- Handling a failing visitor with an error policy
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import (
    EMPTY,
    CollectErrorsPolicy,
    SumCollector,
    collect_values,
    get_tree_stats,
    traverse_tree,
)


def main():
    # Trees are immutable values: rebind on every insert
    tree = EMPTY
    for value in (5, 3, 8, 1, 4):
        tree = tree.insert(value)

    print(f"Tree:   {tree}")
    print(f"Count:  {tree.count()}")

    for order in ("in", "pre", "post"):
        print(f"{order + '-order:':<11} {collect_values(tree, order=order)}")

    subtree = tree.search(3)
    print(f"\nsearch(3) -> {subtree}")
    print(f"search(9) -> {tree.search(9)}")

    total = SumCollector()
    traverse_tree(tree, total)
    print(f"\nSum of values: {total.result()}")

    stats = get_tree_stats(tree)
    print(f"Height: {stats['height']}, leaves: {stats['leaf_nodes']}")

    # Fails on 4; the policy keeps the walk going
    def reciprocal(value):
        print(f"  1/{value - 4} = {1 / (value - 4):.3f}")

    policy = CollectErrorsPolicy()
    print("\nReciprocals of value - 4:")
    traverse_tree(tree, reciprocal, error_policy=policy)
    for error in policy.errors:
        print(f"  skipped {error['value']}: {error['error_type']}")


if __name__ == "__main__":
    main()
