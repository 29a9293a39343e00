from __future__ import annotations
from abc import ABC, abstractmethod

import numpy as np
from .types import *


class EqualityComparer(ABC, Generic[T]):
    """
    equality capability over T: an equality relation plus a compatible hash.
    two values that compare equal must produce the same hash.
    """

    @abstractmethod
    def equals(self, x: T, y: T) -> bool:
        pass

    @abstractmethod
    def hash(self, value: T) -> int:
        pass

    def key(self, value: T) -> '_ComparerKey[T]':
        """wrap a value so builtin sets and dicts use this comparer"""
        return _ComparerKey(value, self)


class DefaultEqualityComparer(EqualityComparer[Any]):
    """natural python equality (==) and hash()"""

    def equals(self, x: Any, y: Any) -> bool:
        return x == y

    def hash(self, value: Any) -> int:
        return hash(value)

    def key(self, value: Any) -> Any:
        # natural equality needs no wrapper
        return value

    def __repr__(self) -> str:
        return "DefaultEqualityComparer()"


default_comparer = DefaultEqualityComparer()


class KeyEqualityComparer(EqualityComparer[T]):
    """compares values by a projected key, optionally using another comparer on the keys"""

    def __init__(self, key_selector: KeySelector[T, K], inner: Optional[EqualityComparer[K]] = None):
        self._key_selector = key_selector
        self._inner = inner or default_comparer

    def equals(self, x: T, y: T) -> bool:
        return self._inner.equals(self._key_selector(x), self._key_selector(y))

    def hash(self, value: T) -> int:
        return self._inner.hash(self._key_selector(value))


class CaseInsensitiveComparer(EqualityComparer[str]):
    """string equality ignoring case, using unicode case folding"""

    def equals(self, x: str, y: str) -> bool:
        return x.casefold() == y.casefold()

    def hash(self, value: str) -> int:
        return hash(value.casefold())


class ArrayEqualityComparer(EqualityComparer[np.ndarray]):
    """
    compares numpy arrays by shape, dtype and contents.
    ndarrays are unhashable and their == is elementwise, so they need this
    comparer for any hash-based operator.
    object-dtype arrays are rejected when equal_nan is set: numpy cannot
    compare them nan-aware, and distinct nan objects hash differently.
    """

    def __init__(self, equal_nan: bool = False):
        self._equal_nan = equal_nan

    def _check_dtype(self, arr: np.ndarray) -> None:
        if self._equal_nan and arr.dtype.kind == 'O':
            raise TypeError("equal_nan is not supported for object-dtype arrays")

    def equals(self, x: np.ndarray, y: np.ndarray) -> bool:
        x, y = np.asarray(x), np.asarray(y)
        self._check_dtype(x)
        self._check_dtype(y)
        if x.shape != y.shape or x.dtype != y.dtype:
            return False
        return bool(np.array_equal(x, y, equal_nan=self._equal_nan))

    def hash(self, value: np.ndarray) -> int:
        arr = np.ascontiguousarray(value)
        self._check_dtype(arr)
        if arr.dtype.kind == 'O':
            return hash((arr.shape, tuple(arr.ravel().tolist())))
        if arr.dtype.kind in 'fc':
            # -0.0 == 0.0 but their bytes differ
            arr = arr + 0
            if self._equal_nan:
                arr = np.where(np.isnan(arr), np.nan, arr)
        return hash((arr.shape, np.asarray(value).dtype.str, arr.tobytes()))


class _ComparerKey(Generic[T]):
    """hashable wrapper that routes __eq__ and __hash__ through a comparer"""

    __slots__ = ('value', '_comparer', '_hash')

    def __init__(self, value: T, comparer: EqualityComparer[T]):
        self.value = value
        self._comparer = comparer
        self._hash = comparer.hash(value)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _ComparerKey):
            return NotImplemented
        return self._comparer.equals(self.value, other.value)

    def __repr__(self) -> str:
        return f"_ComparerKey({self.value!r})"


def resolve_comparer(comparer: Union[EqualityComparer[T], KeySelector[T, Any], None]) -> EqualityComparer[T]:
    """
    normalise the comparer argument accepted by every operator.
    none means natural equality; a plain callable is treated as a key selector.
    """
    if comparer is None:
        return default_comparer
    if isinstance(comparer, EqualityComparer):
        return comparer
    if callable(comparer):
        return KeyEqualityComparer(comparer)
    raise TypeError(f"expected an EqualityComparer or a key selector, got {type(comparer).__name__}")
