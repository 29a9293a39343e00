from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]


class MemoizedSequence(Generic[T]):
    """
    re-iterable view over a one-shot iterable.
    pulls from the source only when an iterator runs past the cache, so
    several iterators may interleave over the same underlying data.
    """

    def __init__(self, source: Iterable[T]):
        self._source = source
        self._cache: List[T] = []
        self._source_iterator: Optional[Iterator[T]] = None
        self._is_fully_enumerated = False

    def _get_iterator(self) -> Iterator[T]:
        """get or create the source iterator"""
        if self._source_iterator is None:
            self._source_iterator = iter(self._source)
        return self._source_iterator

    def _materialize_to_index(self, target_index: int) -> bool:
        """materialize the cache up to (and including) the target index"""
        iterator = self._get_iterator()
        while len(self._cache) <= target_index and not self._is_fully_enumerated:
            try:
                self._cache.append(next(iterator))
            except StopIteration:
                self._is_fully_enumerated = True
        return target_index < len(self._cache)

    def __iter__(self) -> Iterator[T]:
        # index based so an iterator never misses items pulled by another one
        index = 0
        while index < len(self._cache) or self._materialize_to_index(index):
            yield self._cache[index]
            index += 1

    @property
    def cached_count(self) -> int:
        return len(self._cache)

    @property
    def is_fully_enumerated(self) -> bool:
        return self._is_fully_enumerated

    def __repr__(self) -> str:
        return f"MemoizedSequence(cached={self.cached_count}, complete={self._is_fully_enumerated})"
