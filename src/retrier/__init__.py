"""
Retrier - Backoff and give-up decisions for retry loops.

The caller performs the operation and waits; the Retrier only decides
whether to keep going and for how long to wait.
"""

from .retry import (
    JITTER_INTERVAL,
    BackoffStrategy,
    Option,
    Retrier,
    RetrierConfig,
    apply_jitter,
    apply_options,
    capped,
    constant,
    exponential,
    linear,
    new_retrier,
    try_forever,
    with_jitter,
    with_max_attempts,
    with_strategy,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Retrier
    "Retrier",
    "new_retrier",
    # Options
    "Option",
    "RetrierConfig",
    "apply_options",
    "with_strategy",
    "with_max_attempts",
    "try_forever",
    "with_jitter",
    # Strategies
    "BackoffStrategy",
    "JITTER_INTERVAL",
    "constant",
    "exponential",
    "linear",
    "capped",
    "apply_jitter",
]
