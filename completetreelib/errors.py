"""Exceptions raised by completetreelib."""

from .results import MutationResult


class CompleteTreeError(Exception):
    """Base class for all completetreelib errors."""
    pass


class IncompleteTreeError(CompleteTreeError):
    """Raised when an operation needs a complete tree and the tree is not.

    The tree can only reach this state through outside tampering with its
    nodes; ``restore()`` rebuilds it into a complete shape.
    """
    pass


class MutationRejectedError(CompleteTreeError):
    """Raised in strict mode instead of returning a rejected result."""

    def __init__(self, result: MutationResult):
        super().__init__(result.message)
        self.result = result


class ValueNotFoundError(CompleteTreeError, KeyError):
    """Raised in strict mode when ``remove`` finds no matching value."""

    def __init__(self, result: MutationResult):
        super().__init__(result.message)
        self.result = result

    def __str__(self) -> str:
        return self.result.message
