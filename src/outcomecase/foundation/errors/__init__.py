"""Error capability for outcomecase.

- Describable/describe: the human-readable description every carried error offers
- DescribedError: value-equal base for caller-defined error variants
- ErrorCode/classify_exception: coarse failure classification
- ErrorReport: serializable failure snapshot
"""

from .errors import (
    DescribedError,
    Describable,
    ErrorCode,
    ErrorReport,
    classify_exception,
    describe,
)

__all__ = [
    "Describable", "describe", "DescribedError",
    "ErrorCode", "classify_exception",
    "ErrorReport",
]
