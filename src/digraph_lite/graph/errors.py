"""Exceptions raised by the graph containers."""
from __future__ import annotations


class InvariantViolation(Exception):
    """Raised by consistency checks when the adjacency indices disagree."""

    def __init__(self, invariant: str, detail: str) -> None:
        self.invariant = invariant
        self.detail = detail
        super().__init__(f"Graph invariant {invariant!r} violated: {detail}")
