"""Exception hierarchy for BinTreeLib.

Tree operations themselves never raise for "not found" outcomes - they return
None. These exceptions cover misuse of the traversal configuration layer.
"""


class BinTreeLibError(Exception):
    """Base class for all BinTreeLib errors."""
    pass


class UnknownStrategyError(BinTreeLibError, ValueError):
    """Raised when a traversal strategy name is not recognized."""

    def __init__(self, strategy, choices=None):
        self.strategy = strategy
        self.choices = list(choices or [])
        message = f"Unknown traversal strategy: {strategy}"
        if self.choices:
            message += f". Choose from: {', '.join(self.choices)}"
        super().__init__(message)


class InvalidConfigError(BinTreeLibError, ValueError):
    """Raised when a TraversalConfig fails validation.

    Attributes:
        errors: The individual validation messages
    """

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__(f"Invalid configuration: {'; '.join(self.errors)}")
