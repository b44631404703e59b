from __future__ import annotations

from functools import cmp_to_key
from .types import *
from .errors import InvalidArgumentError, InvalidCastError


def _order(left: Any, right: Any) -> int:
    """three-way comparison using the natural order of the keys."""
    if left < right: return -1
    if right < left: return 1
    return 0


class KeyComparer(Generic[T, K]):
    """
    compares, equates and hashes objects by a projected key.

    one instance serves every comparison style python accepts:
    - equality and hashing through equals() / hash(), or keyed() for native sets and dicts
    - ordering through compare(), the instance itself as a cmp function, or sort_key for sorted()
    - untyped ordering through compare_objects(), checked against element_type
    """
    __slots__ = ('_selector', '_descending', '_element_type')

    def __init__(self, selector: KeySelector[T, K], descending: bool = False,
                 element_type: Optional[Type[T]] = None):
        if selector is None:
            raise InvalidArgumentError('selector')
        self._selector = selector
        self._descending = descending
        self._element_type = element_type

    @property
    def selector(self) -> KeySelector[T, K]:
        return self._selector

    @property
    def descending(self) -> bool:
        return self._descending

    @property
    def element_type(self) -> Optional[Type[T]]:
        return self._element_type

    def equals(self, x: T, y: T) -> bool:
        """true if both objects project to equal keys"""
        return self._selector(x) == self._selector(y)

    def hash(self, obj: T) -> int:
        """hash of the projected key"""
        if obj is None:
            raise InvalidArgumentError('obj')
        return hash(self._selector(obj))

    def compare(self, x: T, y: T) -> int:
        """negative, zero or positive as x sorts before, with or after y"""
        result = _order(self._selector(x), self._selector(y))
        return -result if self._descending else result

    def compare_objects(self, x: Any, y: Any) -> int:
        """
        untyped compare. when element_type was given, both values must be instances
        of it (None always passes) or InvalidCastError is raised. without element_type
        nothing is checked and a mismatched value fails however the selector fails.
        """
        if self._element_type is not None:
            for value in (x, y):
                # None casts to any element type
                if value is not None and not isinstance(value, self._element_type):
                    raise InvalidCastError(value, self._element_type)
        return self.compare(x, y)

    def __call__(self, x: T, y: T) -> int:
        return self.compare(x, y)

    @property
    def sort_key(self) -> Callable[[T], Any]:
        """key function for sorted(), min(), max() and friends"""
        return cmp_to_key(self.compare)

    def keyed(self, item: T) -> 'KeyedItem[T]':
        """wrap an item so native sets and dicts see it through this comparer"""
        return KeyedItem(self, item)

    def reversed(self) -> 'KeyComparer[T, K]':
        """same projection, opposite direction"""
        return KeyComparer(self._selector, not self._descending, self._element_type)

    def __repr__(self) -> str:
        direction = 'descending' if self._descending else 'ascending'
        return f"KeyComparer(selector={self._selector!r}, {direction})"


class KeyedItem(Generic[T]):
    """hashable wrapper whose equality and hash are those of its comparer."""
    __slots__ = ('comparer', 'item')

    def __init__(self, comparer: KeyComparer[T, Any], item: T):
        self.comparer = comparer
        self.item = item

    def __hash__(self) -> int:
        # None is hashed without projecting it
        if self.item is None: return 0
        return self.comparer.hash(self.item)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyedItem):
            return NotImplemented
        if self.item is None or other.item is None:
            return self.item is None and other.item is None
        return self.comparer.equals(self.item, other.item)

    def __repr__(self) -> str:
        return f"KeyedItem(item={self.item!r})"
