"""fallible: a Result type for explicit, composable error handling.

Public API:
    - ok() / err(): Construct a Success or a Failure
    - attempt(): Capture what a callable raises as a Failure
    - Result, Success, Failure: The result type and its two variants
    - FallibleError, UnwrapError: Library exceptions
"""

from __future__ import annotations

import logging

from fallible.errors import FallibleError, UnwrapError
from fallible.result import Failure, Result, Success, attempt, err, ok

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fallible")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fallible").addHandler(logging.NullHandler())

__all__ = [
    "FallibleError",
    "Failure",
    "Result",
    "Success",
    "UnwrapError",
    "attempt",
    "err",
    "ok",
]
