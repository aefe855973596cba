"""Configuration system for BinTreeLib.

This module defines how callers describe a traversal: which visiting order
to use, which depths to report, and which nodes to keep.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Union

from .exceptions import UnknownStrategyError

logger = logging.getLogger(__name__)


class TraversalStrategy(Enum):
    """Order in which nodes are visited."""
    IN_ORDER = "in_order"           # Left, node, right (default)
    PRE_ORDER = "pre_order"         # Node before children
    POST_ORDER = "post_order"       # Children before node
    BREADTH_FIRST = "bfs"           # Level by level


# Accepted spellings for each strategy
_STRATEGY_NAMES = {
    'in_order': TraversalStrategy.IN_ORDER,
    'inorder': TraversalStrategy.IN_ORDER,
    'dfs': TraversalStrategy.IN_ORDER,
    'depth_first': TraversalStrategy.IN_ORDER,
    'pre_order': TraversalStrategy.PRE_ORDER,
    'preorder': TraversalStrategy.PRE_ORDER,
    'dfs_pre': TraversalStrategy.PRE_ORDER,
    'post_order': TraversalStrategy.POST_ORDER,
    'postorder': TraversalStrategy.POST_ORDER,
    'dfs_post': TraversalStrategy.POST_ORDER,
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'level': TraversalStrategy.BREADTH_FIRST,
    'level_order': TraversalStrategy.BREADTH_FIRST,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or name (case-insensitive)

    Returns:
        TraversalStrategy enum value

    Raises:
        UnknownStrategyError: If the name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in _STRATEGY_NAMES:
        return _STRATEGY_NAMES[strategy_lower]

    logger.debug("Rejected traversal strategy %r", strategy)
    raise UnknownStrategyError(strategy, _STRATEGY_NAMES.keys())


@dataclass
class DepthConfig:
    """Depth window for a traversal, relative to the starting node."""

    min_depth: int = 0                  # Minimum depth to yield
    max_depth: Optional[int] = None     # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded."""
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at this depth should be visited."""
        if self.max_depth is None:
            return True
        return depth < self.max_depth


@dataclass
class FilterConfig:
    """Node filtering applied to a traversal's output.

    Filters decide what is reported; they never stop the traversal from
    descending below a rejected node.
    """

    include_filter: Optional[Callable[[Any], bool]] = None
    exclude_filter: Optional[Callable[[Any], bool]] = None

    def should_include(self, node) -> bool:
        """Check if a node passes the filters.

        Exclusion takes precedence over inclusion.
        """
        if self.exclude_filter and self.exclude_filter(node):
            return False

        if self.include_filter:
            return bool(self.include_filter(node))

        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal."""

    strategy: TraversalStrategy = TraversalStrategy.IN_ORDER
    depth: DepthConfig = field(default_factory=DepthConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)

    @classmethod
    def shallow(cls, max_depth: int = 1,
                strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST) -> 'TraversalConfig':
        """Create a config that stops after ``max_depth`` levels.

        Args:
            max_depth: Deepest level to visit (default 1 = root and children)
            strategy: Visiting order

        Returns:
            TraversalConfig limited to the top of the tree
        """
        return cls(strategy=strategy, depth=DepthConfig(max_depth=max_depth))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        return errors
