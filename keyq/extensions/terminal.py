from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from .. import sequences

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._enumerable._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable._get_data()}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._enumerable._get_data())
        return sum(1 for x in self._enumerable._get_data() if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        if predicate is None: return not sequences.is_null_or_empty(self._enumerable._get_data())
        return any(predicate(x) for x in self._enumerable._get_data())

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        for item in self._enumerable._get_data():
            if predicate is None or predicate(item): return item
        if predicate is None: raise ValueError("sequence contains no elements")
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default. errors raised while enumerating propagate."""
        for item in self._enumerable._get_data():
            if predicate is None or predicate(item): return item
        return default

    def min_or_default(self, selector: Optional[Selector[T, U]] = None, default: Any = None) -> Any:
        """minimum element or projected value, default when empty"""
        data = self.list()
        if selector is None:
            optimized = self._enumerable._try_numpy_optimization(data, 'min')
            if optimized is not None: return optimized
        return sequences.min_or_default(data, selector, default)

    def max_or_default(self, selector: Optional[Selector[T, U]] = None, default: Any = None) -> Any:
        """maximum element or projected value, default when empty"""
        data = self.list()
        if selector is None:
            optimized = self._enumerable._try_numpy_optimization(data, 'max')
            if optimized is not None: return optimized
        return sequences.max_or_default(data, selector, default)

    def string_join(self, separator: str) -> str:
        """join the elements with separator"""
        return sequences.string_join(self._enumerable._get_data(), separator)

    def null_if_empty(self) -> Optional[List[T]]:
        """the elements as a list, or None when there are none"""
        return sequences.null_if_empty(self.list())
