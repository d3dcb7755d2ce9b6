from mapfn.combinators import (
    all_pass,
    any_pass,
    find_entry_where,
    find_key_where,
    map_entries,
    map_values,
    none_pass,
    random_key,
    reduce,
    reject,
    select,
)
from mapfn.common import NOT_FOUND, EmptyCollection, MappingLike, NotFound
from mapfn.fnmap import FnMap

__all__ = [
    "EmptyCollection",
    "FnMap",
    "MappingLike",
    "NOT_FOUND",
    "NotFound",
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
