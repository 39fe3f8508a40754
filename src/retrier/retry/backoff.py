"""
Backoff strategies and jitter.

A strategy maps the number of attempts already made to a base interval
in seconds. Strategies are plain callables and hold no state.
"""

import logging
import math
import random
from typing import Callable

logger = logging.getLogger(__name__)

BackoffStrategy = Callable[[int], float]

# Maximum deviation, in seconds, that jitter may add to or subtract from an interval
JITTER_INTERVAL = 1.0


def constant(interval: float) -> BackoffStrategy:
    """Strategy that always yields ``interval``."""

    def strategy(attempts_made: int) -> float:
        return interval

    return strategy


def exponential(base: float, adjustment: float = 0.0) -> BackoffStrategy:
    """
    Exponential strategy with a flat adjustment.

    The first interval is half of ``base`` so that the sequence doubles
    cleanly: base/2, base, 2*base, 4*base, ... and ``adjustment`` is added
    to every term. Neither a cap nor a lower bound is applied here.
    Once the exponential term no longer fits in a float it saturates to
    infinity (signed like ``base``), so wrap the strategy in ``capped`` to
    keep intervals finite at very high attempt counts. A zero ``base``
    always yields ``adjustment``.

    Args:
        base: Nominal base interval in seconds
        adjustment: Seconds added after the exponential term (may be negative)

    Returns:
        Strategy computing ``base / 2 * 2**attempts_made + adjustment``
    """
    base_amount = base / 2

    def strategy(attempts_made: int) -> float:
        try:
            growth = base_amount * (2**attempts_made)
        except OverflowError:
            if base_amount == 0:
                return adjustment
            growth = math.copysign(math.inf, base_amount)
        return growth + adjustment

    return strategy


def linear(step: float, adjustment: float = 0.0) -> BackoffStrategy:
    """Linear strategy: ``step * (attempts_made + 1) + adjustment``."""

    def strategy(attempts_made: int) -> float:
        return step * (attempts_made + 1) + adjustment

    return strategy


def capped(strategy: BackoffStrategy, max_interval: float) -> BackoffStrategy:
    """Wrap ``strategy`` so it never yields more than ``max_interval``."""

    def wrapped(attempts_made: int) -> float:
        return min(strategy(attempts_made), max_interval)

    return wrapped


def apply_jitter(interval: float, bound: float = JITTER_INTERVAL) -> float:
    """
    Perturb an interval by a uniform offset in [-bound, +bound].

    The result is within ``bound`` of ``interval`` only when ``interval`` is
    non-negative; a negative interval is clamped to zero after the offset.

    Args:
        interval: Base interval in seconds
        bound: Maximum absolute deviation in seconds

    Returns:
        Jittered interval, never below zero
    """
    return clamp(interval + random.uniform(-bound, bound))


def clamp(interval: float) -> float:
    """Clamp a computed interval to zero so it can be handed to a timer."""
    if interval < 0:
        logger.debug(f"Clamping negative interval {interval:.3f}s to 0")
        return 0.0
    return interval
