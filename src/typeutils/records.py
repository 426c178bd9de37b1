"""
Record Traversal Helpers

Functional helpers over records: mappings from string keys to values.

OWN KEYS ONLY:
    Traversal (keys, values, size, for_each, map, filter, reduce, every,
    some, extract) visits a record's own keys, in iteration order.

    For a plain dict every key is an own key.
    For a ChainMap, the first map holds the own keys and the parent maps
    hold inherited ones:

        base = {"lang": "en"}
        record = ChainMap({"name": "x"}, base)
        keys(record)               -> ["name"]
        has_keys(record, ["lang"]) -> True

    has_keys is the one exception: it uses plain `in`, so inherited
    keys count as present.

CALLBACKS:
    Callbacks are called as fn(value, key, record) (reduce prepends the
    accumulator). Only as many leading arguments as the callback accepts
    are passed, so `lambda v: v > 0` is as valid as `lambda v, k, r: ...`.
    Converters such as str, int or bool receive the value only.

    When `this_arg` is given it is bound as the callback's first argument.

NOTE: `map` and `filter` shadow the builtins inside this module.
Import the module (`from typeutils import records`) rather than its names.
"""

from __future__ import annotations

import functools
import inspect
from collections import ChainMap
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, TypeVar


TYPE = "object"

R = TypeVar("R")


def _own_items(record: Mapping) -> List[Tuple[str, Any]]:
    """Snapshot of the record's own (key, value) pairs in iteration order."""
    if isinstance(record, ChainMap):
        return list(record.maps[0].items())
    return list(record.items())


def _positional_arity(fn: Callable) -> Optional[int]:
    """
    Number of positional arguments to pass to fn.

    None means "everything" and is only returned for an explicit *args.
    Types (str, int, bool, ...) and callables whose signature cannot be
    read are treated as one-argument converters and get the value only.
    """
    if isinstance(fn, type):
        return 1
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 1

    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def _bind(fn: Callable, this_arg: Any = None) -> Callable:
    """Return a caller that binds this_arg and trims arguments to fn's arity."""
    arity = _positional_arity(fn)
    if this_arg is not None:
        fn = functools.partial(fn, this_arg)
        if arity is not None:
            arity = max(arity - 1, 0)

    if arity is None:
        return fn

    def call(*args):
        return fn(*args[:arity])

    return call


def is_record(value) -> bool:
    return isinstance(value, Mapping)


def keys(record: Mapping) -> List[str]:
    return [k for k, _ in _own_items(record)]


def values(record: Mapping) -> List[Any]:
    return [v for _, v in _own_items(record)]


def size(record: Mapping) -> int:
    return len(_own_items(record))


def for_each(record: Mapping, fn: Callable[..., Any], this_arg: Any = None) -> None:
    """Call fn(value, key, record) for every own entry, in order."""
    call = _bind(fn, this_arg)
    for k, v in _own_items(record):
        call(v, k, record)


def map(record: Mapping, fn: Callable[..., R], this_arg: Any = None) -> Dict[str, R]:
    """
    Build a new dict with the same keys and values replaced by fn's result.

    Args:
        record: Source record (not modified)
        fn: Called as fn(value, key, record)
        this_arg: Optional object bound as fn's first argument

    Returns:
        New dict; key order matches the source
    """
    call = _bind(fn, this_arg)
    return {k: call(v, k, record) for k, v in _own_items(record)}


def filter(record: Mapping, predicate: Callable[..., bool], this_arg: Any = None) -> Dict[str, Any]:
    """
    Build a new dict holding only the entries for which predicate is truthy.

    filter(r, p) and filter(r, not p) together always partition r.
    """
    call = _bind(predicate, this_arg)
    return {k: v for k, v in _own_items(record) if call(v, k, record)}


def reduce(record: Mapping, fn: Callable[..., R], initial: R, this_arg: Any = None) -> R:
    """
    Left fold over own entries.

    The accumulator is threaded as fn(acc, value, key, record),
    starting from `initial`. An empty record returns `initial`.

    Example:
        reduce({"a": 1, "b": 2}, lambda acc, v: acc + v, 0) -> 3
    """
    call = _bind(fn, this_arg)
    result = initial
    for k, v in _own_items(record):
        result = call(result, v, k, record)
    return result


def every(record: Mapping, predicate: Callable[..., bool], this_arg: Any = None) -> bool:
    """True if predicate holds for all own entries. Stops at the first failure."""
    call = _bind(predicate, this_arg)
    for k, v in _own_items(record):
        if not call(v, k, record):
            return False
    return True


def some(record: Mapping, predicate: Callable[..., bool], this_arg: Any = None) -> bool:
    """True if predicate holds for any own entry. Stops at the first success."""
    call = _bind(predicate, this_arg)
    for k, v in _own_items(record):
        if call(v, k, record):
            return True
    return False


def has_keys(record: Mapping, keys: Iterable[str]) -> bool:
    """True if every key is present, inherited keys included."""
    return all(k in record for k in keys)


def extract(record: Mapping, keys: Iterable[str]) -> Dict[str, Any]:
    """New dict with only the listed own keys, in the record's order."""
    wanted = set(keys)
    return {k: v for k, v in _own_items(record) if k in wanted}
