from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _iterate(self) -> Iterator[T]:
        """start a fresh pass over the underlying data"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], Iterable[T]]):
        """init with a function that returns a fresh iterable when called"""
        self._data_func = data_func

    def _iterate(self) -> Iterator[T]:
        """nothing is evaluated until this runs"""
        return iter(self._data_func())

    def _get_data(self) -> List[T]:
        """materialize one full pass as a list"""
        return list(self._iterate())

    def __iter__(self) -> Iterator[T]:
        return self._iterate()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data_func!r})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, linq-inspired enumerable over python iterables."""
    def __init__(self, data_func: Callable[[], Iterable[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.to = TerminalAccessor(self)
