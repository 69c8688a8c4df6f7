"""Reconnect backoff policy for the push channels."""

import logging

logger = logging.getLogger(__name__)


class LinearBackoff:
    """
    Linear reconnect backoff.

    Every failure bumps the attempt counter and the next delay is
    ``attempts * step``: 1s, 2s, 3s, ... with no upper bound.

    The counter is only cleared through ``reset()``; whether a successful
    open resets it is left to the owning connection.
    """

    def __init__(self, step_seconds: float = 1.0):
        if step_seconds < 0:
            raise ValueError("step_seconds must be non-negative")
        self.step_seconds = step_seconds
        self.attempts = 0

    def next_delay(self) -> float:
        """Record one failure and return the delay before the next attempt."""
        self.attempts += 1
        delay = self.attempts * self.step_seconds
        logger.debug(f"Backoff attempt {self.attempts}, next delay {delay:.2f}s")
        return delay

    def reset(self) -> None:
        self.attempts = 0
