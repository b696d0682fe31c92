"""Configuration system for SearchTreeLib.

This module defines how users specify their traversal requirements:
which order values are visited in, and what happens when a visitor fails.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from .error_policies import ErrorPolicy


class TraversalOrder(Enum):
    """Order in which a traversal offers values to the visitor.

    Each order is a depth-first walk; they differ only in when a node's
    own value is visited relative to its subtrees.
    """
    IN_ORDER = "in_order"       # Left, value, right (sorted for a BST)
    PRE_ORDER = "pre_order"     # Value before subtrees
    POST_ORDER = "post_order"   # Subtrees before value


_ORDER_ALIASES = {
    'in': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'pre': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from an enum member or a string alias.

    Args:
        order: TraversalOrder or one of its string aliases
            ('in', 'inorder', 'in_order', 'pre', ... ; case-insensitive)

    Returns:
        TraversalOrder member

    Raises:
        ValueError: If the string does not name a known order
    """
    if isinstance(order, TraversalOrder):
        return order

    order_lower = str(order).lower().replace('-', '_')
    if order_lower not in _ORDER_ALIASES:
        raise ValueError(
            f"Unknown traversal order: {order}. "
            f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
        )
    return _ORDER_ALIASES[order_lower]


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal.

    Example:
        >>> config = TraversalConfig(order=TraversalOrder.PRE_ORDER)
        >>> config = TraversalConfig(order="post",
        ...                          error_policy=CollectErrorsPolicy())
    """

    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER
    error_policy: Optional["ErrorPolicy"] = None  # None = fail fast

    def __post_init__(self):
        self.order = parse_order(self.order)

    def resolved_policy(self) -> "ErrorPolicy":
        """Return the configured policy, or a fail-fast policy if unset."""
        from .error_policies import FailFastPolicy

        if self.error_policy is None:
            return FailFastPolicy()
        return self.error_policy
