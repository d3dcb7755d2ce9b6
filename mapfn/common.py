"""Common types shared by the mapping combinators.

This module provides the absence sentinel, the error raised when sampling an
empty mapping, and the structural protocol that every input mapping satisfies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Protocol, Tuple

__all__ = [
    "EmptyCollection",
    "MappingLike",
    "NOT_FOUND",
    "NotFound",
    "Predicate",
    "Reducer",
    "Transform",
    "ValueTransform",
]


class EmptyCollection(Exception):
    """Exception raised when an operation needs at least one entry.

    Sampling a key from an empty mapping has no valid answer, and returning
    any value instead could collide with a legitimate key.
    """

    pass


@dataclass(frozen=True)
class NotFound:
    """Singleton result of a search that matched no entry.

    Keys may be of any type, including None, so a search reports absence with
    this dedicated type rather than with a value that could also be a key.
    """

    @staticmethod
    def instance() -> NotFound:
        """Get the singleton NotFound instance.

        Returns:
            The global NotFound instance.
        """
        return NOT_FOUND

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound()


class MappingLike[K, V](Protocol):
    """Anything that enumerates unique (key, value) pairs.

    Plain dicts, collections.abc.Mapping implementations and FnMap all qualify.
    """

    def items(self) -> Iterable[Tuple[K, V]]: ...


type Predicate[K, V] = Callable[[K, V], bool]
type Transform[K, V, L, W] = Callable[[K, V], Tuple[L, W]]
type ValueTransform[K, V, W] = Callable[[K, V], W]
type Reducer[A, K, V] = Callable[[A, K, V], A]
