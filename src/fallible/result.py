"""Result type for explicit, composable error handling.

A ``Result`` is either a ``Success`` holding a value or a ``Failure`` holding
an exception. Fallible functions return one instead of raising, and callers
chain the follow-up steps with ``map`` and ``and_then``: the first failure in a
chain short-circuits every later step and surfaces unchanged at the end.

Example:
    def safe_divide(n: float, m: float) -> Result[float, ZeroDivisionError]:
        if m == 0:
            return err(ZeroDivisionError("Divide by zero"))
        return ok(n / m)

    safe_divide(10, 2).map(lambda x: x * x).unwrap()  # 25.0
    safe_divide(10, 0).unwrap_or(42)  # 42

    match safe_divide(1, 3):
        case Success(value):
            print(value)
        case Failure(error):
            print(f"failed: {error}")
"""

from __future__ import annotations

import abc
import dataclasses
import logging
import typing

from fallible.errors import UnwrapError

if typing.TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

logger = logging.getLogger(__name__)

UNWRAP_ERR_ON_SUCCESS = "unwrap_err() called on Success"

_UNWRAP_HINT = "Check is_ok()/is_err() before unwrapping, or use unwrap_or()."


class Result[T, E: BaseException](abc.ABC):
    """Outcome of a fallible operation: ``Success[T]`` or ``Failure[E]``.

    ``Result`` is sealed; the only variants are the two defined in this module.
    Instances are immutable and every transformation returns a new instance.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: typing.Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"Result is sealed; {cls.__qualname__} cannot subclass it. "
                "Use Success or Failure."
            )

    # --- Inspection ---

    @abc.abstractmethod
    def is_ok(self) -> bool:
        """Return True if this result is a ``Success``."""

    @abc.abstractmethod
    def is_err(self) -> bool:
        """Return True if this result is a ``Failure``."""

    # --- Extraction ---

    @abc.abstractmethod
    def unwrap(self) -> T:
        """Return the success value, or raise the held error.

        On a ``Failure`` the error object itself is raised, not a wrapper, so
        ``except`` receives exactly the instance that was stored.

        Each raise starts from the traceback the error carried when the
        ``Failure`` was built, so repeated unwraps do not stack frames. Python
        still records an exception being handled at the call site as the
        error's ``__context__``.

        Raises:
            E: The held error when this result is a ``Failure``.
        """

    @abc.abstractmethod
    def unwrap_or[U](self, default: U) -> T | U:
        """Return the success value, or ``default`` on a ``Failure``."""

    @abc.abstractmethod
    def unwrap_or_else[U](self, f: Callable[[E], U]) -> T | U:
        """Return the success value, or ``f(error)`` on a ``Failure``.

        ``f`` is only called on the failure path.
        """

    @abc.abstractmethod
    def unwrap_err(self) -> E:
        """Return the held error.

        Raises:
            UnwrapError: When this result is a ``Success``. The message is
                always ``"unwrap_err() called on Success"``
                (``UNWRAP_ERR_ON_SUCCESS``), independent of the held value.
        """

    @abc.abstractmethod
    def value_or_none(self) -> T | None:
        """Return the success value, or None on a ``Failure``."""

    @abc.abstractmethod
    def error_or_none(self) -> E | None:
        """Return the held error, or None on a ``Success``."""

    # --- Transformation ---

    @abc.abstractmethod
    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply ``f`` to the success value and wrap the return in a new ``Success``.

        A ``Failure`` passes through as a new ``Failure`` carrying the same
        error object; ``f`` is not called. Use ``and_then`` when ``f`` itself
        returns a ``Result``.

        Example:
            safe_divide(10, 2).map(lambda x: x * x).unwrap()  # 25.0
        """

    @abc.abstractmethod
    def map_err[X: BaseException](self, f: Callable[[E], X]) -> Result[T, X]:
        """Apply ``f`` to the held error and wrap the return in a new ``Failure``.

        The dual of ``map``: a ``Success`` passes through untouched and ``f``
        is not called.
        """

    @abc.abstractmethod
    def and_then[U, X: BaseException](
        self, f: Callable[[T], Result[U, X]]
    ) -> Result[U, E | X]:
        """Chain a ``Result``-producing step onto a ``Success``.

        On a ``Success`` the result of ``f(value)`` is returned as is, without
        nesting. On a ``Failure`` ``f`` is not called and the failure is
        propagated.

        Example:
            (
                safe_divide(10, 2)
                .and_then(sqrt)
                .map(format_answer)
                .map_err(report)  # sees the first failure of the chain
            )
        """


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T](Result[T, typing.Never]):
    """A successful result holding ``value``."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or[U](self, default: U) -> T:
        return self.value

    def unwrap_or_else[U](self, f: Callable[[typing.Never], U]) -> T:
        return self.value

    def unwrap_err(self) -> typing.Never:
        logger.debug(
            "unwrap_err() on Success holding %s", type(self.value).__name__
        )
        raise UnwrapError(UNWRAP_ERR_ON_SUCCESS, hint=_UNWRAP_HINT)

    def value_or_none(self) -> T:
        return self.value

    def error_or_none(self) -> None:
        return None

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        return Success(f(self.value))

    def map_err[X: BaseException](self, f: Callable[[typing.Never], X]) -> Success[T]:
        return Success(self.value)

    def and_then[U, X: BaseException](
        self, f: Callable[[T], Result[U, X]]
    ) -> Result[U, X]:
        return f(self.value)


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E: BaseException](Result[typing.Never, E]):
    """A failed result holding ``error``."""

    error: E
    _traceback: TracebackType | None = dataclasses.field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        # Traceback the error arrived with; every unwrap raises from it.
        tb = getattr(self.error, "__traceback__", None)
        object.__setattr__(self, "_traceback", tb)

    def _carry(self) -> Failure[E]:
        carried = Failure(self.error)
        object.__setattr__(carried, "_traceback", self._traceback)
        return carried

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> typing.Never:
        error = self.error
        if not isinstance(error, BaseException):
            raise UnwrapError(
                f"unwrap() called on Failure({error!r})",
                hint="Failure payloads must be exceptions to be raised.",
            )
        logger.debug("unwrap() on Failure, raising %s", type(error).__name__)
        raise error.with_traceback(self._traceback)

    def unwrap_or[U](self, default: U) -> U:
        return default

    def unwrap_or_else[U](self, f: Callable[[E], U]) -> U:
        return f(self.error)

    def unwrap_err(self) -> E:
        return self.error

    def value_or_none(self) -> None:
        return None

    def error_or_none(self) -> E:
        return self.error

    def map[U](self, f: Callable[[typing.Never], U]) -> Failure[E]:
        return self._carry()

    def map_err[X: BaseException](self, f: Callable[[E], X]) -> Failure[X]:
        return Failure(f(self.error))

    def and_then[U, X: BaseException](
        self, f: Callable[[typing.Never], Result[U, X]]
    ) -> Failure[E]:
        return self._carry()


def ok[T](value: T) -> Result[T, typing.Never]:
    """Create a ``Success`` holding ``value``."""
    return Success(value)


def err[E: BaseException](error: E) -> Result[typing.Never, E]:
    """Create a ``Failure`` holding ``error``."""
    return Failure(error)


def attempt[T](
    fn: Callable[..., T],
    /,
    *args: typing.Any,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    **kwargs: typing.Any,
) -> Result[T, BaseException]:
    """Call ``fn(*args, **kwargs)`` and capture what it raises as a ``Failure``.

    The inverse of ``unwrap``: code that signals errors by raising can be
    brought into a ``Result`` chain. The captured exception object is stored
    unchanged.

    Args:
        fn: The callable to invoke.
        *args: Positional arguments for ``fn``.
        catch: Exception class, or tuple of classes, to capture. Anything
            else propagates to the caller.
        **kwargs: Keyword arguments for ``fn``.

    Returns:
        ``Success`` with the return value, or ``Failure`` with the exception.

    Example:
        attempt(int, "42").unwrap()  # 42
        attempt(int, "forty-two", catch=ValueError).is_err()  # True
    """
    try:
        value = fn(*args, **kwargs)
    except catch as exc:
        logger.debug(
            "attempt(%s) captured %s: %s",
            getattr(fn, "__qualname__", repr(fn)),
            type(exc).__name__,
            exc,
        )
        return Failure(exc)
    return Success(value)
