from __future__ import annotations

import numpy as np
from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> Iterable[T]:
        """get the underlying data as an iterable"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], Iterable[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func

    def _get_data(self) -> Iterable[T]:
        """get the current data. nothing is evaluated before iteration starts."""
        return self._data_func()

    def _try_numpy_optimization(self, data: List[T], operation: str) -> Optional[Any]:
        """
        try to answer min/max with numpy when every element is an int, or every
        element is a float and none is nan. returns the original element, never
        the numpy scalar.
        """
        try:
            if not data:
                return None
            if all(type(x) is int for x in data):
                arr = np.array(data)
            elif all(type(x) is float for x in data):
                arr = np.array(data)
                if np.isnan(arr).any():
                    return None
            else:
                # mixed int/float would be widened to float
                return None
            # argmin/argmax return the first extreme, as the plain helpers do
            if operation == 'min':
                return data[int(arr.argmin())]
            elif operation == 'max':
                return data[int(arr.argmax())]
            return None
        except (TypeError, ValueError, AttributeError, OverflowError): # catch specific errors
            return None

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, linq-inspired enumerable whose set operations compare by projected key."""
    def __init__(self, data_func: Callable[[], Iterable[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)
