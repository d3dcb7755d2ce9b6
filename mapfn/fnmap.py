"""Method-style access to the mapping combinators.

An FnMap wraps any mapping without copying it and exposes the combinators as
methods. Operations that build a mapping return a new FnMap over a fresh dict;
the wrapped mapping is never modified.
"""

from __future__ import annotations

import random
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, Union

from mapfn import combinators
from mapfn.common import (
    MappingLike,
    NotFound,
    Predicate,
    Reducer,
    Transform,
    ValueTransform,
)

__all__ = ["FnMap"]


class FnMap[K, V]:
    """A read-only view of a mapping with functional combinators attached.

    Example:
        >>> FnMap({"a": 1, "b": 2}).select(lambda k, v: v > 1)
        FnMap({'b': 2})
    """

    def __init__(self, mapping: MappingLike[K, V]) -> None:
        """Wrap an existing mapping.

        Args:
            mapping: Any object whose items() yields unique (key, value) pairs.
                It is referenced, not copied.
        """
        self._mapping = mapping

    @classmethod
    def empty(cls) -> FnMap[K, V]:
        """Create an empty FnMap."""
        return cls({})

    @classmethod
    def mk(cls, pairs: Iterable[Tuple[K, V]]) -> FnMap[K, V]:
        """Create an FnMap from key-value pairs.

        Args:
            pairs: Iterable of (key, value) tuples

        Returns:
            New FnMap instance

        Note:
            If there are duplicate keys, later pairs take precedence.
        """
        return cls(dict(pairs))

    def unwrap(self) -> MappingLike[K, V]:
        """Return the wrapped mapping."""
        return self._mapping

    def items(self) -> Iterator[Tuple[K, V]]:
        """Iterate over all key-value pairs."""
        return iter(self._mapping.items())

    def keys(self) -> Iterator[K]:
        """Iterate over all keys."""
        for key, _ in self.items():
            yield key

    def values(self) -> Iterator[V]:
        """Iterate over all values."""
        for _, value in self.items():
            yield value

    def size(self) -> int:
        """Get the number of entries."""
        return sum(1 for _ in self.items())

    def null(self) -> bool:
        """Check if there are no entries."""
        for _ in self.items():
            return False
        return True

    def select(self, test: Predicate[K, V]) -> FnMap[K, V]:
        """Keep the entries that pass the test."""
        return FnMap(combinators.select(self._mapping, test))

    def reject(self, test: Predicate[K, V]) -> FnMap[K, V]:
        """Drop the entries that pass the test."""
        return FnMap(combinators.reject(self._mapping, test))

    def find_key_where(self, test: Predicate[K, V]) -> Union[K, NotFound]:
        """Return the first passing key, or NOT_FOUND."""
        return combinators.find_key_where(self._mapping, test)

    def find_entry_where(self, test: Predicate[K, V]) -> Optional[Tuple[K, V]]:
        """Return the first passing (key, value) pair, or None."""
        return combinators.find_entry_where(self._mapping, test)

    def random_key(self, rng: Optional[random.Random] = None) -> K:
        """Return a uniformly chosen key.

        Raises:
            EmptyCollection: If there are no entries.
        """
        return combinators.random_key(self._mapping, rng)

    def map_entries[L, W](self, transform: Transform[K, V, L, W]) -> FnMap[L, W]:
        """Rebuild from transformed pairs; later duplicates win."""
        return FnMap(combinators.map_entries(self._mapping, transform))

    def map_values[W](self, fn: ValueTransform[K, V, W]) -> FnMap[K, W]:
        """Transform each value, keeping its key."""
        return FnMap(combinators.map_values(self._mapping, fn))

    def reduce[A](self, initial: A, reducer: Reducer[A, K, V]) -> A:
        """Fold every entry into an accumulator."""
        return combinators.reduce(self._mapping, initial, reducer)

    def all_pass(self, test: Predicate[K, V]) -> bool:
        return combinators.all_pass(self._mapping, test)

    def any_pass(self, test: Predicate[K, V]) -> bool:
        return combinators.any_pass(self._mapping, test)

    def none_pass(self, test: Predicate[K, V]) -> bool:
        return combinators.none_pass(self._mapping, test)

    def _as_dict(self) -> Dict[K, V]:
        return dict(self.items())

    def __len__(self) -> int:
        """Get the number of entries (Python len() support)."""
        return self.size()

    def __bool__(self) -> bool:
        """Check if there are entries (Python bool() support)."""
        return not self.null()

    def __iter__(self) -> Iterator[K]:
        """Iterate over keys, as a dict does."""
        return self.keys()

    def __contains__(self, key: Any) -> bool:
        """Check if a key exists (Python 'in' operator support)."""
        return combinators.any_pass(self._mapping, lambda k, _: k == key)

    def __getitem__(self, key: K) -> V:
        """Get value by key (Python bracket operator support).

        Args:
            key: Key to look up

        Returns:
            Associated value

        Raises:
            KeyError: If the key is not found
        """
        entry = combinators.find_entry_where(self._mapping, lambda k, _: k == key)
        if entry is None:
            raise KeyError(key)
        return entry[1]

    def __repr__(self) -> str:
        return f"FnMap({self._as_dict()!r})"

    def __eq__(self, other: object) -> bool:
        """Compare entries with another FnMap or any mapping."""
        if isinstance(other, FnMap):
            return self._as_dict() == other._as_dict()
        items = getattr(other, "items", None)
        if items is None:
            return NotImplemented
        return self._as_dict() == dict(items())
