from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from .. import operators

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable
    from ..operators import ComparerArg

class TerminalAccessor(Generic[T]):
    """eager operations: each call runs one pass over the enumerable"""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable._get_data()

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        return operators.count(self._enumerable, predicate)

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        return operators.any_(self._enumerable, predicate)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return operators.all_(self._enumerable, predicate)

    def contains(self, item: T, comparer: 'ComparerArg' = None) -> bool:
        """check if the sequence holds an element equal to item"""
        return operators.contains(self._enumerable, item, comparer)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        return operators.first(self._enumerable, predicate)

    def last(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get last element"""
        return operators.last(self._enumerable, predicate)

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        return operators.single(self._enumerable, predicate)

    def element_at(self, index: int) -> T:
        """get the element at a zero-based position"""
        return operators.element_at(self._enumerable, index)

    def sequence_equal(self, other: Iterable[T], comparer: 'ComparerArg' = None) -> bool:
        """check pairwise equality with another sequence"""
        return operators.sequence_equal(self._enumerable, other, comparer)
