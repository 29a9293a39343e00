"""
seqops: lazy, linq-style sequence operators for python iterables.

    >>> from seqops import S
    >>> S([1, 2, 3, 4, 5, 5]).set.except_([4, 5, 6]).to.list()
    [1, 2, 3]
"""

# expose the main class
from .enumerable import Enumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    count_from,
    repeat,
    empty,
    generate,
    memoize,
    seq,
    S
)

# expose the operator functions
from .operators import (
    all_,
    any_,
    contains,
    first,
    last,
    single,
    distinct,
    except_,
    intersect,
    union,
    element_at,
    count,
    sequence_equal,
    skip_while,
    where
)

# expose comparers, errors and supporting classes
from .comparers import (
    EqualityComparer,
    DefaultEqualityComparer,
    KeyEqualityComparer,
    CaseInsensitiveComparer,
    ArrayEqualityComparer,
    default_comparer
)
from .errors import (
    SequenceError,
    NotFoundError,
    MultipleMatchesError,
    IndexOutOfRangeError
)
from .iterators import OperatorIterator
from .types import MemoizedSequence

# define what `import *` does
__all__ = [
    "Enumerable",
    "from_iterable",
    "from_range",
    "count_from",
    "repeat",
    "empty",
    "generate",
    "memoize",
    "seq",
    "S",
    "all_",
    "any_",
    "contains",
    "first",
    "last",
    "single",
    "distinct",
    "except_",
    "intersect",
    "union",
    "element_at",
    "count",
    "sequence_equal",
    "skip_while",
    "where",
    "EqualityComparer",
    "DefaultEqualityComparer",
    "KeyEqualityComparer",
    "CaseInsensitiveComparer",
    "ArrayEqualityComparer",
    "default_comparer",
    "SequenceError",
    "NotFoundError",
    "MultipleMatchesError",
    "IndexOutOfRangeError",
    "OperatorIterator",
    "MemoizedSequence"
]
