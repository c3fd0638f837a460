"""
Fallible result carrier for fsquery.

A ``Result`` is either ``Success`` holding a value or ``Failure`` holding an
``FsError``. Operations are sequenced with ``chain``/``map``, which run only on
success and forward a failure unchanged, and inspected at the end of a chain
with ``match`` or the ``is_success``/``get`` accessors.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from .errors import FsError, ResultError


T = TypeVar('T')
U = TypeVar('U')
R = TypeVar('R')


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful result holding a value."""

    value: T

    @property
    def error(self) -> Optional[FsError]:
        return None

    def is_success(self) -> bool:
        return True

    def is_fail(self) -> bool:
        return False

    def get(self) -> T:
        """Return the held value."""
        return self.value

    def get_or(self, default: Any) -> T:
        return self.value

    def chain(self, fn: Callable[[T], 'Result[U]']) -> 'Result[U]':
        """Apply a result-returning function to the held value."""
        return fn(self.value)

    def map(self, fn: Callable[[T], U]) -> 'Result[U]':
        """Apply a plain function to the held value and wrap its return."""
        return Success(fn(self.value))

    def match(self, success: Callable[[T], R], fail: Callable[[FsError], R]) -> R:
        """Branch on the variant; calls ``success`` with the value."""
        return success(self.value)


@dataclass(frozen=True)
class Failure:
    """Failed result holding an FsError."""

    error: FsError

    def is_success(self) -> bool:
        return False

    def is_fail(self) -> bool:
        return True

    def get(self):
        """
        Request the value of a failed result.

        Raises:
            ResultError: Always, carrying the held FsError
        """
        raise ResultError(self.error)

    def get_or(self, default: Any) -> Any:
        return default

    def chain(self, fn: Callable[[Any], 'Result[U]']) -> 'Failure':
        # Same failure object, fn is never called
        return self

    def map(self, fn: Callable[[Any], U]) -> 'Failure':
        return self

    def match(self, success: Callable[[Any], R], fail: Callable[[FsError], R]) -> R:
        """Branch on the variant; calls ``fail`` with the error."""
        return fail(self.error)


Result = Union[Success[T], Failure]


def success(value: T) -> Success[T]:
    return Success(value)


def fail(error: FsError) -> Failure:
    return Failure(error)
