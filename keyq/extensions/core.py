from __future__ import annotations
import typing
from itertools import islice
from ..types import *
from ..comparer import KeyComparer
from .. import sequences

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: (x for x in self._get_data() if predicate(x)))

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: map(selector, self._get_data()))

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: islice(self._get_data(), max(count, 0)))

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: islice(self._get_data(), max(count, 0), None))

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a value to the end of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: sequences.concat_one(self._get_data(), element))

    def order_by(self: 'Enumerable[T]', key_selector: KeySelector[T, K]) -> 'Enumerable[T]':
        """stable sort by a key"""
        return self.order_with(KeyComparer(key_selector))

    def order_by_descending(self: 'Enumerable[T]', key_selector: KeySelector[T, K]) -> 'Enumerable[T]':
        """stable sort by a key in descending order"""
        return self.order_with(KeyComparer(key_selector, descending=True))

    def order_with(self: 'Enumerable[T]', comparer: KeyComparer[T, Any]) -> 'Enumerable[T]':
        """stable sort using a key comparer"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: sorted(self._get_data(), key=comparer.sort_key))
