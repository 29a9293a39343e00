"""
explicit iterator objects behind the lazy operators.

each instance owns its upstream cursor(s) and any seen / excluded sets. nothing
is pulled from upstream at construction; every __next__ call advances exactly
one output step.
"""
from __future__ import annotations
import logging
from .types import *
from .comparers import EqualityComparer

logger = logging.getLogger(__name__)


def _close_upstream(iterator: Optional[Iterator[Any]]) -> None:
    """release an upstream iterator if it holds resources (generators, other operators)"""
    close = getattr(iterator, 'close', None)
    if close is not None:
        close()


class OperatorIterator(Iterator[T]):
    """base for the lazy operators: single pass, closable, usable as a context manager"""

    def __init__(self) -> None:
        self._finished = False

    def __iter__(self) -> 'OperatorIterator[T]':
        return self

    def __next__(self) -> T:
        if self._finished:
            raise StopIteration
        try:
            return self._advance()
        except BaseException:
            # exhaustion or a failed step both end the iteration, like a generator
            self._finished = True
            self._release()
            raise

    def _advance(self) -> T:
        """produce the next value or raise StopIteration"""
        raise NotImplementedError

    def _release(self) -> None:
        """drop upstream cursors and auxiliary state"""

    def close(self) -> None:
        """stop early and release upstream iterators"""
        if not self._finished:
            self._finished = True
            self._release()

    def __enter__(self) -> 'OperatorIterator[T]':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


class _SingleSourceIterator(OperatorIterator[T]):
    def __init__(self, source: Iterable[T]):
        super().__init__()
        self._source = source
        self._cursor: Optional[Iterator[T]] = None

    def _pull(self) -> T:
        # raises StopIteration once upstream is exhausted
        if self._cursor is None:
            self._cursor = iter(self._source)
        return next(self._cursor)

    def _release(self) -> None:
        _close_upstream(self._cursor)
        self._cursor = None
        self._source = None


class WhereIterator(_SingleSourceIterator[T]):
    def __init__(self, source: Iterable[T], predicate: Predicate[T]):
        super().__init__(source)
        self._predicate = predicate

    def _advance(self) -> T:
        while True:
            item = self._pull()
            if self._predicate(item):
                return item


class SkipWhileIterator(_SingleSourceIterator[T]):
    """once the predicate fails it is never applied again"""

    def __init__(self, source: Iterable[T], predicate: Predicate[T]):
        super().__init__(source)
        self._predicate = predicate
        self._skipping = True

    def _advance(self) -> T:
        if not self._skipping:
            return self._pull()
        while True:
            item = self._pull()
            if not self._predicate(item):
                self._skipping = False
                return item


class DistinctIterator(_SingleSourceIterator[T]):
    def __init__(self, source: Iterable[T], comparer: EqualityComparer[T]):
        super().__init__(source)
        self._comparer = comparer
        self._seen: Set[Any] = set()

    def _advance(self) -> T:
        while True:
            item = self._pull()
            key = self._comparer.key(item)
            if key not in self._seen:
                self._seen.add(key)
                return item

    def _release(self) -> None:
        super()._release()
        self._seen = set()


class ExceptIterator(_SingleSourceIterator[T]):
    """
    yields elements of the first source missing from the second.
    each yielded element joins the exclusion set, so duplicates within the
    first source come out only once: [1, 2, 3, 4, 5, 5] except [4, 5, 6] is [1, 2, 3].
    """

    def __init__(self, source: Iterable[T], excluded: Iterable[T], comparer: EqualityComparer[T]):
        super().__init__(source)
        self._excluded_source = excluded
        self._comparer = comparer
        self._excluded: Optional[Set[Any]] = None

    def _advance(self) -> T:
        if self._excluded is None:
            key = self._comparer.key
            excluded_source, self._excluded_source = self._excluded_source, None
            self._excluded = {key(item) for item in excluded_source}
            logger.debug("except: materialized %d excluded keys", len(self._excluded))
        while True:
            item = self._pull()
            key = self._comparer.key(item)
            if key not in self._excluded:
                self._excluded.add(key)
                return item

    def _release(self) -> None:
        super()._release()
        self._excluded_source = None
        self._excluded = set()


class IntersectIterator(_SingleSourceIterator[T]):
    """yields elements of the first source present in the second, each at most once"""

    def __init__(self, source: Iterable[T], other: Iterable[T], comparer: EqualityComparer[T]):
        super().__init__(source)
        self._other_source = other
        self._comparer = comparer
        self._members: Optional[Set[Any]] = None
        self._yielded: Set[Any] = set()

    def _advance(self) -> T:
        if self._members is None:
            key = self._comparer.key
            other_source, self._other_source = self._other_source, None
            self._members = {key(item) for item in other_source}
            logger.debug("intersect: materialized %d member keys", len(self._members))
        while True:
            item = self._pull()
            key = self._comparer.key(item)
            if key in self._members and key not in self._yielded:
                self._yielded.add(key)
                return item

    def _release(self) -> None:
        super()._release()
        self._other_source = None
        self._members = set()
        self._yielded = set()


class UnionIterator(OperatorIterator[T]):
    """first occurrences of the first source, then unseen first occurrences of the second"""

    def __init__(self, first: Iterable[T], second: Iterable[T], comparer: EqualityComparer[T]):
        super().__init__()
        self._sources: List[Iterable[T]] = [first, second]
        self._comparer = comparer
        self._cursor: Optional[Iterator[T]] = None
        self._seen: Set[Any] = set()

    def _advance(self) -> T:
        while True:
            if self._cursor is None:
                if not self._sources:
                    raise StopIteration
                self._cursor = iter(self._sources.pop(0))
            try:
                item = next(self._cursor)
            except StopIteration:
                self._cursor = None
                continue
            key = self._comparer.key(item)
            if key not in self._seen:
                self._seen.add(key)
                return item

    def _release(self) -> None:
        _close_upstream(self._cursor)
        self._cursor = None
        self._sources = []
        self._seen = set()
