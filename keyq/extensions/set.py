from __future__ import annotations
import typing
from ..types import *
from .. import sequences

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _identity(item):
    return item


class SetAccessor(Generic[T]):
    """
    set-theoretic operations that compare elements by a projected key.
    without a key selector the elements themselves are the keys.
    every result keeps the order of first appearance.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """return distinct elements, first one per key."""
        from ..enumerable import Enumerable
        selector = key_selector or _identity
        return Enumerable(lambda: sequences.distinct_by(self._enumerable._get_data(), selector))

    def union(self, other: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences; this sequence wins on a shared key."""
        from ..enumerable import Enumerable
        selector = key_selector or _identity
        return Enumerable(lambda: sequences.union_by(self._enumerable._get_data(), other, selector))

    def intersect(self, other: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """return elements whose key also occurs in the other sequence."""
        from ..enumerable import Enumerable
        selector = key_selector or _identity
        return Enumerable(lambda: sequences.intersect_by(self._enumerable._get_data(), other, selector))

    def except_(self, other: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """return elements whose key does not occur in the other sequence (set difference)."""
        from ..enumerable import Enumerable
        selector = key_selector or _identity
        return Enumerable(lambda: sequences.except_by(self._enumerable._get_data(), other, selector))

    def contains(self, value: T, key_selector: Optional[KeySelector[T, K]] = None) -> bool:
        """determines whether any element has the same key as value."""
        return sequences.contains_by(self._enumerable._get_data(), value, key_selector or _identity)
