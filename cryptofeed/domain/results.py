"""Result containers for cache operations.

Each cache operation completes with exactly one outcome: a :class:`Success`
carrying a value or a :class:`Failure` carrying the exception that describes
what went wrong. Callers branch on the variant instead of catching
exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, TypeVar, Union

from .models import CryptoFeed

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """
    Successful outcome.

    Attributes
    ----------
    value : T
        Payload of the operation (``None`` for operations without one)
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """
    Failed outcome.

    Attributes
    ----------
    error : Exception
        Exception classifying the failure
    """

    error: Exception

    @property
    def is_success(self) -> bool:
        return False


LoadCryptoFeedResult = Union[Success[List[CryptoFeed]], Failure]
SaveResult = Union[Success[None], Failure]
