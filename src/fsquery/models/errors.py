"""
Failure taxonomy for fsquery.

Every query operation reports filesystem problems as an ``FsError`` value held
inside a ``Failure`` result instead of raising. The kind code tells callers
which condition occurred; the message is human readable and ``meta`` keeps the
original diagnostic object where one exists.
"""

from typing import Any, Dict, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


class FsErrorKind(Enum):
    """Enumeration of failure kinds produced by probing and selection."""
    NOT_FOUND = "not-found"
    NOT_FOLDER = "not-folder"
    NOT_FILE = "not-file"
    UNKNOWN = "unknown"


class FsError(BaseModel):
    """
    A typed filesystem failure.

    Attributes:
        kind: Failure kind code
        message: Human-readable description of the failure
        meta: Optional opaque diagnostic payload (e.g. the original OSError)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: FsErrorKind = Field(..., description="Failure kind code")
    message: str = Field(..., description="Human-readable failure message")
    meta: Optional[Any] = Field(None, description="Opaque diagnostic payload")

    @field_validator('kind', mode='before')
    @classmethod
    def validate_kind(cls, v) -> FsErrorKind:
        """Accept kind codes given as strings."""
        if isinstance(v, str):
            try:
                return FsErrorKind(v)
            except ValueError:
                raise ValueError(f"Invalid error kind: {v}")
        return v

    @property
    def code(self) -> str:
        """The kind code as a plain string."""
        return self.kind.value

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            'kind': self.kind.value,
            'message': self.message,
            'meta': repr(self.meta) if self.meta is not None else None,
        }

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"


class ResultError(Exception):
    """Raised when the value of a failed result is requested."""

    def __init__(self, error: FsError):
        super().__init__(str(error))
        self.error = error


def not_found(path: str) -> FsError:
    return FsError(kind=FsErrorKind.NOT_FOUND, message=f"Path not found: {path}")


def not_a_folder(path: str) -> FsError:
    return FsError(kind=FsErrorKind.NOT_FOLDER, message=f"Path is not a folder: {path}")


def not_a_file(path: str) -> FsError:
    return FsError(kind=FsErrorKind.NOT_FILE, message=f"Path is not a file: {path}")


def unknown(exc: BaseException) -> FsError:
    """Wrap an unexpected OS error, keeping the original as payload."""
    return FsError(kind=FsErrorKind.UNKNOWN, message=str(exc), meta=exc)
