"""
Retrier configuration and the options that build it.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable

from .backoff import BackoffStrategy, constant


@dataclass
class RetrierConfig:
    """
    Configuration for a Retrier.

    Attributes:
        strategy: Backoff strategy used by next_interval (default: constant 1s)
        max_attempts: Attempts allowed before giving up (default: 5)
        forever: Never give up based on the attempt count (default: False)
        jitter: Randomize computed intervals by up to JITTER_INTERVAL (default: False)
    """

    strategy: BackoffStrategy = field(default_factory=lambda: constant(1.0))
    max_attempts: int = 5
    forever: bool = False
    jitter: bool = False


Option = Callable[[RetrierConfig], None]


def apply_options(config: RetrierConfig, options: Iterable[Option]) -> RetrierConfig:
    """Apply options to ``config`` in order; later options win."""
    for option in options:
        option(config)
    return config


def with_strategy(strategy: BackoffStrategy) -> Option:
    """Use ``strategy`` to compute intervals."""

    def option(config: RetrierConfig) -> None:
        config.strategy = strategy

    return option


def with_max_attempts(max_attempts: int) -> Option:
    """Give up once more than ``max_attempts`` attempts have been made."""

    def option(config: RetrierConfig) -> None:
        config.max_attempts = max_attempts
        config.forever = False

    return option


def try_forever() -> Option:
    """Never give up based on the attempt count."""

    def option(config: RetrierConfig) -> None:
        config.forever = True

    return option


def with_jitter() -> Option:
    """Randomize each computed interval."""

    def option(config: RetrierConfig) -> None:
        config.jitter = True

    return option
