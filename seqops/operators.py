"""
linq-style operators over plain python iterables.

terminal operators (quantifiers, search, count, element_at, sequence_equal)
consume their input during the call. set operators, where and skip_while return
lazy iterator objects that pull from their inputs only when consumed.
"""
from __future__ import annotations
import logging
from contextlib import ExitStack, closing
from .types import *
from .comparers import EqualityComparer, resolve_comparer
from .errors import NotFoundError, MultipleMatchesError, IndexOutOfRangeError
from .iterators import (
    WhereIterator, SkipWhileIterator, DistinctIterator,
    ExceptIterator, IntersectIterator, UnionIterator
)

logger = logging.getLogger(__name__)

ComparerArg = Union[EqualityComparer[T], KeySelector[T, Any], None]

_MISSING = object()


def _always(_: Any) -> bool:
    return True


# --- quantifiers & search ---

def all_(source: Iterable[T], predicate: Predicate[T]) -> bool:
    """true when every element satisfies the predicate (vacuously true when empty)"""
    for item in source:
        if not predicate(item):
            return False
    return True


def any_(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> bool:
    """true when some element satisfies the predicate, or when non-empty if no predicate"""
    predicate = predicate or _always
    for item in source:
        if predicate(item):
            return True
    return False


def contains(source: Iterable[T], item: T, comparer: ComparerArg = None) -> bool:
    """membership test under the comparer, short-circuiting on the first hit"""
    comparer = resolve_comparer(comparer)
    for element in source:
        if comparer.equals(element, item):
            return True
    return False


def first(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> T:
    """first element satisfying the predicate"""
    predicate = predicate or _always
    for item in source:
        if predicate(item):
            return item
    raise NotFoundError()


def last(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> T:
    """last element satisfying the predicate; always scans the whole source"""
    predicate = predicate or _always
    result = _MISSING
    for item in source:
        if predicate(item):
            result = item
    if result is _MISSING:
        raise NotFoundError()
    return result


def single(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> T:
    """the only element satisfying the predicate"""
    predicate = predicate or _always
    result = _MISSING
    for item in source:
        if predicate(item):
            if result is not _MISSING:
                logger.debug("single: second match %r after %r", item, result)
                raise MultipleMatchesError(result, item)
            result = item
    if result is _MISSING:
        raise NotFoundError()
    return result


# --- set algebra (lazy) ---

def distinct(source: Iterable[T], comparer: ComparerArg = None) -> DistinctIterator[T]:
    """first occurrence of every element, in source order"""
    return DistinctIterator(source, resolve_comparer(comparer))


def except_(source1: Iterable[T], source2: Iterable[T], comparer: ComparerArg = None) -> ExceptIterator[T]:
    """distinct elements of source1 that do not appear in source2"""
    return ExceptIterator(source1, source2, resolve_comparer(comparer))


def intersect(source1: Iterable[T], source2: Iterable[T], comparer: ComparerArg = None) -> IntersectIterator[T]:
    """distinct elements of source1 that also appear in source2, in source1 order"""
    return IntersectIterator(source1, source2, resolve_comparer(comparer))


def union(source1: Iterable[T], source2: Iterable[T], comparer: ComparerArg = None) -> UnionIterator[T]:
    """distinct elements of source1 followed by the unseen distinct elements of source2"""
    return UnionIterator(source1, source2, resolve_comparer(comparer))


# --- positional, counting, comparison, slicing ---

def element_at(source: Iterable[T], index: int) -> T:
    """element at a zero-based position, found by scanning from the start"""
    if index < 0:
        raise IndexOutOfRangeError(index)
    for position, item in enumerate(source):
        if position == index:
            return item
    raise IndexOutOfRangeError(index)


def count(source: Iterable[T], predicate: Optional[Predicate[T]] = None) -> int:
    """number of elements satisfying the predicate"""
    if predicate is None:
        return sum(1 for _ in source)
    return sum(1 for item in source if predicate(item))


def sequence_equal(source1: Iterable[T], source2: Iterable[T], comparer: ComparerArg = None) -> bool:
    """
    true when both sequences have the same length and pairwise equal elements.
    both iterators are closed on every exit path, including a mismatch or an
    exception from the comparer or either source.
    """
    comparer = resolve_comparer(comparer)
    with ExitStack() as stack:
        e1 = _scoped(stack, iter(source1))
        e2 = _scoped(stack, iter(source2))
        position = 0
        while True:
            item1 = next(e1, _MISSING)
            item2 = next(e2, _MISSING)
            if item1 is _MISSING and item2 is _MISSING:
                return True
            if item1 is _MISSING or item2 is _MISSING:
                logger.debug("sequence_equal: lengths differ at position %d", position)
                return False
            if not comparer.equals(item1, item2):
                logger.debug("sequence_equal: mismatch at position %d", position)
                return False
            position += 1


def _scoped(stack: ExitStack, iterator: Iterator[T]) -> Iterator[T]:
    if hasattr(iterator, 'close'):
        stack.enter_context(closing(iterator))
    return iterator


def skip_while(source: Iterable[T], predicate: Predicate[T]) -> SkipWhileIterator[T]:
    """everything from the first element that fails the predicate onwards"""
    return SkipWhileIterator(source, predicate)


def where(source: Iterable[T], predicate: Predicate[T]) -> WhereIterator[T]:
    """elements satisfying the predicate, in source order"""
    return WhereIterator(source, predicate)
