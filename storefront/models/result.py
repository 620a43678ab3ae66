# storefront/models/result.py

"""Discriminated outcome returned by every repository operation."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")

UNKNOWN_ERROR = "Unknown error"


@dataclass(frozen=True)
class Success(Generic[T]):
    """The call completed and produced a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Error:
    """The call failed.

    ``code`` carries the HTTP status for protocol-level failures and is
    ``None`` when the request never produced a response.
    """

    message: str
    code: int | None = None

    @property
    def is_success(self) -> bool:
        return False


Result = Union[Success[T], Error]
