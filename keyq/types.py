from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional,
    Dict, List, Set, Type, Sized
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]

# default maximal size of one chunk produced by partition()
DEFAULT_PART_SIZE = 64

# default trailing marker produced by take_with_ellipsis()
DEFAULT_ELLIPSIS = "..."
