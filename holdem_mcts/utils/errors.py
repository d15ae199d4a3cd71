"""Error taxonomy for the decision engine.

All errors are input-validation failures: nothing here is transient, so
nothing is ever retried. They propagate to the caller of ``decide``.
"""

from __future__ import annotations


class PokerMCTSError(Exception):
    """Base class for decision engine errors."""


class InvalidCard(PokerMCTSError, ValueError):
    """A card token does not name one of the 13 ranks and 4 suits."""

    def __init__(self, token: object, reason: str = "") -> None:
        self.token = token
        message = f"Invalid card: {token!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InsufficientDeck(PokerMCTSError):
    """The unseen cards cannot cover the draws a rollout needs."""

    def __init__(self, needed: int, remaining: int) -> None:
        self.needed = needed
        self.remaining = remaining
        super().__init__(
            f"Cannot deal {needed} cards, only {remaining} remaining"
        )


class RootNeverVisited(PokerMCTSError):
    """The search finished without completing a single rollout."""

    def __init__(self, time_budget_ms: float) -> None:
        self.time_budget_ms = time_budget_ms
        super().__init__(
            f"No rollout completed within a {time_budget_ms}ms time budget"
        )
