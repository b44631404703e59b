r"""
'    __ __ ______ __  __ ____
'   / //_// ____/ \ \/ // __ \
'  / ,<  / __/     \  // / / /
' / /| |/ /___     / // /_/ /
'/_/ |_/_____/    /_/ \___\_\
"""

# expose the comparer
from .comparer import KeyComparer, KeyedItem

# expose the sequence helpers
from .sequences import (
    min_or_default,
    max_or_default,
    distinct_by,
    except_by,
    intersect_by,
    union_by,
    contains_by,
    concat_one,
    partition,
    take_with_ellipsis,
    null_if_empty,
    is_null_or_empty,
    string_join
)

# expose the fluent wrapper
from .enumerable import Enumerable
from .factories import from_iterable, from_range, empty, Q

# expose errors and defaults
from .errors import KeyqError, InvalidArgumentError, InvalidCastError
from .types import DEFAULT_PART_SIZE, DEFAULT_ELLIPSIS

# define what `import *` does
__all__ = [
    "KeyComparer",
    "KeyedItem",
    "min_or_default",
    "max_or_default",
    "distinct_by",
    "except_by",
    "intersect_by",
    "union_by",
    "contains_by",
    "concat_one",
    "partition",
    "take_with_ellipsis",
    "null_if_empty",
    "is_null_or_empty",
    "string_join",
    "Enumerable",
    "from_iterable",
    "from_range",
    "empty",
    "Q",
    "KeyqError",
    "InvalidArgumentError",
    "InvalidCastError",
    "DEFAULT_PART_SIZE",
    "DEFAULT_ELLIPSIS"
]
