"""Higher-order combinators over mappings.

Every function takes a mapping plus a callback over its entries and returns a
new dict, a single key or entry, a boolean, or an accumulated value. The source
mapping is only ever read through ``items()`` and is never mutated.

Entries are visited in ``items()`` order. Callers should not rely on that order
except where a function documents it (duplicate keys in ``map_entries`` and the
meaning of "first" in the search functions).

Mutating the source mapping while one of these functions is iterating it is
undefined behaviour. For a plain dict the interpreter raises RuntimeError,
which propagates like any callback exception: nothing here catches, wraps or
retries errors.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Optional, Tuple, Union

from mapfn.common import (
    NOT_FOUND,
    EmptyCollection,
    MappingLike,
    NotFound,
    Predicate,
    Reducer,
    Transform,
    ValueTransform,
)

__all__ = [
    "all_pass",
    "any_pass",
    "find_entry_where",
    "find_key_where",
    "map_entries",
    "map_values",
    "none_pass",
    "random_key",
    "reduce",
    "reject",
    "select",
]


def _filter[K, V](
    mapping: MappingLike[K, V], test: Predicate[K, V], keep: bool
) -> Dict[K, V]:
    # Shared by select and reject so the two stay exact complements
    return {
        key: value
        for key, value in mapping.items()
        if bool(test(key, value)) == keep
    }


def select[K, V](mapping: MappingLike[K, V], test: Predicate[K, V]) -> Dict[K, V]:
    """Keep the entries that pass a test.

    Every entry is evaluated exactly once.

    Args:
        mapping: The source mapping.
        test: Called as ``test(key, value)`` for each entry.

    Returns:
        A new dict with exactly the entries for which test returned True.
    """
    return _filter(mapping, test, True)


def reject[K, V](mapping: MappingLike[K, V], test: Predicate[K, V]) -> Dict[K, V]:
    """Drop the entries that pass a test.

    The complement of select under the same predicate.

    Args:
        mapping: The source mapping.
        test: Called as ``test(key, value)`` for each entry.

    Returns:
        A new dict with exactly the entries for which test returned False.
    """
    return _filter(mapping, test, False)


def find_entry_where[K, V](
    mapping: MappingLike[K, V], test: Predicate[K, V]
) -> Optional[Tuple[K, V]]:
    """Find the first entry that passes a test.

    Iteration stops as soon as an entry passes.

    Args:
        mapping: The source mapping.
        test: Called as ``test(key, value)`` for each visited entry.

    Returns:
        The first passing (key, value) pair in iteration order, or None.
    """
    for key, value in mapping.items():
        if test(key, value):
            return (key, value)
    return None


def find_key_where[K, V](
    mapping: MappingLike[K, V], test: Predicate[K, V]
) -> Union[K, NotFound]:
    """Find the key of the first entry that passes a test.

    Iteration stops as soon as an entry passes. If nothing passes, every
    entry is evaluated exactly once.

    Args:
        mapping: The source mapping.
        test: Called as ``test(key, value)`` for each visited entry.

    Returns:
        The first passing key in iteration order, or NOT_FOUND. Any key,
        None included, is returned as is.
    """
    entry = find_entry_where(mapping, test)
    return NOT_FOUND if entry is None else entry[0]


def random_key[K, V](
    mapping: MappingLike[K, V], rng: Optional[random.Random] = None
) -> K:
    """Pick a key uniformly at random.

    Args:
        mapping: The source mapping.
        rng: Optional random source. Pass a seeded ``random.Random`` for
            reproducible draws; by default the module-level generator is used.

    Returns:
        One key of the mapping, each with equal probability.

    Raises:
        EmptyCollection: If the mapping has no entries.
    """
    keys = [key for key, _ in mapping.items()]
    if not keys:
        raise EmptyCollection("random_key on an empty mapping")
    logging.debug("Drawing random key from %d candidates", len(keys))
    source = random if rng is None else rng
    return keys[source.randrange(len(keys))]


def map_entries[K, V, L, W](
    mapping: MappingLike[K, V], transform: Transform[K, V, L, W]
) -> Dict[L, W]:
    """Build a new mapping from transformed entries.

    Every entry is transformed exactly once. If two transformed entries share
    a key, the one processed later (in iteration order) wins.

    Args:
        mapping: The source mapping.
        transform: Called as ``transform(key, value)``, returning the new
            (key, value) pair.

    Returns:
        A new dict of the transformed pairs.
    """
    result: Dict[L, W] = {}
    for key, value in mapping.items():
        new_key, new_value = transform(key, value)
        if new_key in result:
            logging.debug("map_entries overwrote duplicate key %r", new_key)
        result[new_key] = new_value
    return result


def map_values[K, V, W](
    mapping: MappingLike[K, V], fn: ValueTransform[K, V, W]
) -> Dict[K, W]:
    """Transform each value, keeping its key.

    Args:
        mapping: The source mapping.
        fn: Called as ``fn(key, value)``, returning the new value.

    Returns:
        A new dict with the same keys as the source.
    """
    return {key: fn(key, value) for key, value in mapping.items()}


def reduce[A, K, V](
    mapping: MappingLike[K, V], initial: A, reducer: Reducer[A, K, V]
) -> A:
    """Fold every entry into an accumulator.

    The result only depends on iteration order if the reducer does.

    Args:
        mapping: The source mapping.
        initial: The starting accumulator, returned as is for an empty mapping.
        reducer: Called as ``reducer(acc, key, value)``, returning the next
            accumulator.

    Returns:
        The accumulator after every entry has been folded in.
    """
    acc = initial
    for key, value in mapping.items():
        acc = reducer(acc, key, value)
    return acc


def all_pass[K, V](mapping: MappingLike[K, V], test: Predicate[K, V]) -> bool:
    """Check that every entry passes. Stops at the first failure; True if empty."""
    for key, value in mapping.items():
        if not test(key, value):
            return False
    return True


def any_pass[K, V](mapping: MappingLike[K, V], test: Predicate[K, V]) -> bool:
    """Check that some entry passes. Stops at the first pass; False if empty."""
    for key, value in mapping.items():
        if test(key, value):
            return True
    return False


def none_pass[K, V](mapping: MappingLike[K, V], test: Predicate[K, V]) -> bool:
    """Check that no entry passes. Stops at the first pass; True if empty."""
    return not any_pass(mapping, test)
