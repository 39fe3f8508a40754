"""
Retrier: attempt tracking, give-up decisions and wait intervals.

The Retrier never sleeps or re-invokes anything. A calling loop drives it:

    retrier = new_retrier(with_strategy(exponential(2.0)), with_max_attempts(3))
    while not retrier.should_give_up():
        try:
            return do_work()
        except PermanentError:
            retrier.break_()
        except TransientError:
            time.sleep(retrier.next_interval())
            retrier.mark_attempt()

Instances are not thread-safe; one retry loop owns one Retrier.
"""

import logging

from .backoff import apply_jitter, clamp
from .config import Option, RetrierConfig, apply_options

logger = logging.getLogger(__name__)


class Retrier:
    """Tracks attempts for a single retry sequence."""

    def __init__(self, *options: Option):
        """
        Initialize the retrier.

        Args:
            *options: Configuration options, applied in order to a default RetrierConfig
        """
        self.config = apply_options(RetrierConfig(), options)
        self._attempts_made = 0
        self._broken = False

    @property
    def attempts_made(self) -> int:
        return self._attempts_made

    @property
    def broken(self) -> bool:
        return self._broken

    @property
    def max_attempts(self) -> int:
        return self.config.max_attempts

    @property
    def forever(self) -> bool:
        return self.config.forever

    def mark_attempt(self) -> None:
        """Record one attempt of the retried operation."""
        self._attempts_made += 1

    def should_give_up(self) -> bool:
        """
        Decide whether the caller should stop retrying.

        A broken retrier always gives up. Otherwise a bounded retrier gives up
        only once attempts_made is strictly greater than max_attempts, so
        max_attempts=2 still allows a retry after the second attempt.
        """
        if self._broken:
            return True
        if self.config.forever:
            return False
        if self._attempts_made > self.config.max_attempts:
            logger.debug(
                f"Giving up after {self._attempts_made} attempts "
                f"(max_attempts={self.config.max_attempts})"
            )
            return True
        return False

    def break_(self) -> None:
        """Force every later should_give_up() to return True."""
        if not self._broken:
            logger.info(f"Retrier broken after {self._attempts_made} attempts")
        self._broken = True

    def next_interval(self) -> float:
        """
        Compute how long to wait before the next attempt.

        Uses the current attempt count and does not change it.

        Returns:
            Interval in seconds, jittered by up to JITTER_INTERVAL when enabled,
            never below zero
        """
        interval = self.config.strategy(self._attempts_made)
        if self.config.jitter:
            return apply_jitter(interval)
        return clamp(interval)

    def __repr__(self) -> str:
        bound = "forever" if self.config.forever else self.config.max_attempts
        return (
            f"Retrier(attempts_made={self._attempts_made}, "
            f"max_attempts={bound}, jitter={self.config.jitter}, "
            f"broken={self._broken})"
        )


def new_retrier(*options: Option) -> Retrier:
    """Build a Retrier from options applied in order."""
    return Retrier(*options)
