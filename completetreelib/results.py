"""Mutation results for completetreelib.

Every mutating tree operation returns a MutationResult instead of printing
a message and returning nothing. A result is truthy only when the
mutation was applied, so callers can write ``if tree.push_node(5): ...``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Outcome(Enum):
    """What happened to a requested mutation."""
    APPLIED = "applied"        # The tree was changed
    REJECTED = "rejected"      # Refused, tree unchanged
    NOT_FOUND = "not_found"    # Nothing matched, tree unchanged


class RejectReason(Enum):
    """Why a mutation was refused. Values are the user-facing messages."""
    TREE_EMPTY = "cannot remove, the tree is empty"
    TREE_INCOMPLETE = "the tree is incomplete, cannot create node"
    LEVEL_OUT_OF_RANGE = "cannot insert, level is out of range"
    INDEX_OUT_OF_RANGE = "can't insert, index is out of range"
    COMPLETENESS_CONSTRAINT = "can't insert due to completeness constraint"
    POSITION_TAKEN = "cannot insert, specified position is taken"
    NOT_INSERTED = "couldn't insert"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a push, insert or remove call."""

    outcome: Outcome
    value: Optional[int] = None
    reason: Optional[RejectReason] = None

    @classmethod
    def applied(cls, value: int) -> "MutationResult":
        return cls(Outcome.APPLIED, value)

    @classmethod
    def rejected(cls, value: Optional[int], reason: RejectReason) -> "MutationResult":
        return cls(Outcome.REJECTED, value, reason)

    @classmethod
    def not_found(cls, value: int) -> "MutationResult":
        return cls(Outcome.NOT_FOUND, value)

    @property
    def is_applied(self) -> bool:
        return self.outcome is Outcome.APPLIED

    @property
    def is_rejected(self) -> bool:
        return self.outcome is Outcome.REJECTED

    @property
    def is_not_found(self) -> bool:
        return self.outcome is Outcome.NOT_FOUND

    @property
    def message(self) -> str:
        """Human readable description of the outcome."""
        if self.reason is not None:
            return self.reason.message
        if self.is_not_found:
            return f"cannot remove, value {self.value} not found"
        return "ok"

    def __bool__(self) -> bool:
        return self.is_applied
