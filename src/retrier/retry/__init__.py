"""
Retrier - Retry Logic.

Give-up decisions and backoff intervals for caller-driven retry loops.
"""

from .backoff import (
    JITTER_INTERVAL,
    BackoffStrategy,
    apply_jitter,
    capped,
    constant,
    exponential,
    linear,
)
from .config import (
    Option,
    RetrierConfig,
    apply_options,
    try_forever,
    with_jitter,
    with_max_attempts,
    with_strategy,
)
from .retrier import Retrier, new_retrier

__all__ = [
    "JITTER_INTERVAL",
    "BackoffStrategy",
    "apply_jitter",
    "capped",
    "constant",
    "exponential",
    "linear",
    "Option",
    "RetrierConfig",
    "apply_options",
    "try_forever",
    "with_jitter",
    "with_max_attempts",
    "with_strategy",
    "Retrier",
    "new_retrier",
]
