from __future__ import annotations
import typing
from ..types import *
from .. import sequences

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def partition(self, size: int = DEFAULT_PART_SIZE) -> 'Enumerable[List[T]]':
        """
        splits the sequence into consecutive lists of at most size elements.
        a non-positive size gives an empty sequence.
        """
        from ..enumerable import Enumerable
        return Enumerable(lambda: sequences.partition(self._enumerable._get_data(), size))

    def take_with_ellipsis(self, count: int, ellipsis: str = DEFAULT_ELLIPSIS) -> 'Enumerable[str]':
        """take up to count items, ending with ellipsis if more were available"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: sequences.take_with_ellipsis(self._enumerable._get_data(), count, ellipsis))

    def concat_one(self, item: T) -> 'Enumerable[T]':
        """the sequence followed by item"""
        return self._enumerable.append(item)
