"""Exception hierarchy for fallible."""

from __future__ import annotations


class FallibleError(Exception):
    """Base exception for all fallible errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnwrapError(FallibleError):
    """A result was unwrapped as the variant it is not.

    Raised by ``unwrap_err()`` on a ``Success``, and by ``unwrap()`` on a
    ``Failure`` whose payload cannot be raised.
    """
