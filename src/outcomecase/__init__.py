"""outcomecase: a success/failure Outcome type and its combinators.

    >>> from outcomecase import failure, from_throwing, success
    >>> success(2).map(lambda n: n + 1)
    Success(3)
    >>> from_throwing(lambda: int("x")).is_failure()
    True
"""

import logging

from .foundation import (
    DescribedError,
    Describable,
    ErrorCode,
    ErrorReport,
    OutcomeSettings,
    classify_exception,
    clear_settings_cache,
    describe,
    get_settings,
)
from .monads import (
    Failure,
    Outcome,
    Success,
    catching,
    collect_outcomes,
    failure,
    from_throwing,
    from_throwing_async,
    sequence,
    success,
    traverse,
)
from .runtime import configure_logging

__version__ = "0.1.0"

logging.getLogger("outcomecase").addHandler(logging.NullHandler())

__all__ = [
    # Outcome
    "Outcome", "Success", "Failure", "success", "failure",
    "from_throwing", "from_throwing_async", "catching",
    "sequence", "traverse", "collect_outcomes",
    # Errors
    "Describable", "describe", "DescribedError", "ErrorCode", "ErrorReport", "classify_exception",
    # Config & logging
    "OutcomeSettings", "get_settings", "clear_settings_cache", "configure_logging",
]
