"""
key-projected set operations and small sequence helpers.

every function that returns a sequence is lazy and single-pass. required
arguments are validated when the function is called, not when the result
is first iterated, so those functions hand off to a private generator.
"""
from __future__ import annotations

import logging
from itertools import chain, batched, islice
from .types import *
from .comparer import KeyComparer
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_MISSING = object()


def _require(value: Any, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(name)


# --- min / max with default ---

def _extreme(values: Iterable[Any], default: Any, is_better: Callable[[Any, Any], bool]) -> Any:
    """pick the best non-None value; default only when values is empty"""
    is_empty = True
    best = _MISSING
    for value in values:
        is_empty = False
        # None never takes part in the comparison
        if value is None:
            continue
        if best is _MISSING or is_better(value, best):
            best = value
    if is_empty:
        return default
    return None if best is _MISSING else best


def min_or_default(source: Iterable[T], selector: Optional[Selector[T, U]] = None,
                   default: Any = None) -> Any:
    """
    returns the minimum element, or the minimum projected value when a selector is
    given. an empty source returns default instead of raising.
    """
    _require(source, 'source')
    values = source if selector is None else map(selector, source)
    return _extreme(values, default, lambda value, best: value < best)


def max_or_default(source: Iterable[T], selector: Optional[Selector[T, U]] = None,
                   default: Any = None) -> Any:
    """
    returns the maximum element, or the maximum projected value when a selector is
    given. an empty source returns default instead of raising.
    """
    _require(source, 'source')
    values = source if selector is None else map(selector, source)
    return _extreme(values, default, lambda value, best: value > best)


# --- key-projected set operations ---

def distinct_by(source: Iterable[T], selector: KeySelector[T, K]) -> Iterator[T]:
    """first-seen element per distinct key, in original order"""
    _require(source, 'source')
    return _distinct_iterator(source, KeyComparer(selector))


def _distinct_iterator(source: Iterable[T], comparer: KeyComparer[T, K]) -> Iterator[T]:
    seen = set()
    for item in source:
        keyed = comparer.keyed(item)
        if keyed not in seen:
            seen.add(keyed)
            yield item


def except_by(first: Iterable[T], second: Iterable[T], selector: KeySelector[T, K]) -> Iterator[T]:
    """
    produces the set difference of two sequences by projected key.
    elements of first whose key does not occur in second, first-seen per key.
    """
    _require(first, 'first')
    _require(second, 'second')
    return _except_iterator(first, second, KeyComparer(selector))


def _except_iterator(first: Iterable[T], second: Iterable[T],
                     comparer: KeyComparer[T, K]) -> Iterator[T]:
    # keys of second act as already seen, so they are never emitted
    seen = {comparer.keyed(item) for item in second}
    for item in first:
        keyed = comparer.keyed(item)
        if keyed not in seen:
            seen.add(keyed)
            yield item


def intersect_by(first: Iterable[T], second: Iterable[T], selector: KeySelector[T, K]) -> Iterator[T]:
    """
    produces the set intersection of two sequences by projected key.
    elements of first whose key also occurs in second, first-seen per key.
    """
    _require(first, 'first')
    _require(second, 'second')
    return _intersect_iterator(first, second, KeyComparer(selector))


def _intersect_iterator(first: Iterable[T], second: Iterable[T],
                        comparer: KeyComparer[T, K]) -> Iterator[T]:
    pending = {comparer.keyed(item) for item in second}
    for item in first:
        keyed = comparer.keyed(item)
        # removing the key emits each one at most once
        if keyed in pending:
            pending.remove(keyed)
            yield item


def union_by(first: Iterable[T], second: Iterable[T], selector: KeySelector[T, K]) -> Iterator[T]:
    """
    produces the set union of two sequences by projected key.
    first's element wins when both sequences share a key.
    """
    _require(first, 'first')
    _require(second, 'second')
    return _distinct_iterator(chain(first, second), KeyComparer(selector))


def contains_by(first: Iterable[T], value: T, selector: KeySelector[T, K]) -> bool:
    """true if any element of first has the same key as value"""
    _require(first, 'first')
    comparer = KeyComparer(selector)
    return any(comparer.equals(item, value) for item in first)


# --- shaping ---

def concat_one(source: Iterable[T], item: T) -> Iterator[T]:
    """source followed by item"""
    _require(source, 'source')
    return chain(source, (item,))


def partition(source: Optional[Iterable[T]], size: int = DEFAULT_PART_SIZE) -> Iterator[List[T]]:
    """
    splits source into consecutive lists of at most size elements; only the last
    one may be shorter. a None source or a non-positive size gives an empty iterator.

    chunks are produced on demand: reading the first chunk consumes only the
    first size elements of source.
    """
    if source is None or size <= 0:
        logger.debug(f"partition of {'no source' if source is None else 'source'} "
                     f"with size {size} yields nothing")
        return iter(())
    return map(list, batched(source, size))


def take_with_ellipsis(source: Iterable[str], count: int,
                       ellipsis: str = DEFAULT_ELLIPSIS) -> Iterator[str]:
    """
    like take(count), but when source holds more than count items the last
    returned item is replaced by ellipsis. reads at most count + 1 items.
    """
    _require(source, 'source')
    return _take_with_ellipsis_iterator(source, count, ellipsis)


def _take_with_ellipsis_iterator(source: Iterable[str], count: int, ellipsis: str) -> Iterator[str]:
    if count <= 0:
        return
    iterator = iter(source)
    yield from islice(iterator, count - 1)
    # the count-th item is held back until we know whether another follows
    last = next(iterator, _MISSING)
    if last is _MISSING:
        return
    if next(iterator, _MISSING) is _MISSING:
        yield last
    else:
        yield ellipsis


# --- absent vs empty ---

def null_if_empty(source: Optional[Iterable[T]]) -> Optional[Iterable[T]]:
    """
    returns source unchanged if it has elements, otherwise None.
    iterables without a length are materialized into a list first.
    """
    if source is None:
        return None
    if not isinstance(source, Sized):
        source = list(source)
    return source if len(source) > 0 else None


def is_null_or_empty(source: Optional[Iterable[T]]) -> bool:
    """
    true if source is None or has no elements. an iterator without a length
    is probed, which consumes its first element.
    """
    if source is None:
        return True
    if isinstance(source, Sized):
        return len(source) == 0
    return next(iter(source), _MISSING) is _MISSING


def string_join(source: Optional[Iterable[Optional[str]]], separator: Optional[str]) -> str:
    """
    joins source with separator. None source gives an empty string, None items
    and a None separator count as empty strings.
    """
    if source is None:
        logger.debug("string_join of no source yields an empty string")
        return ''
    parts = ['' if item is None else item for item in source] or ['']
    return ('' if separator is None else separator).join(parts)
