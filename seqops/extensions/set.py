from __future__ import annotations
import typing
from ..types import *
from .. import operators
from ..comparers import resolve_comparer

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable
    from ..operators import ComparerArg

class SetAccessor(Generic[T]):
    """
    provides the set-theoretic operations.
    every operation takes an optional comparer; none means natural equality,
    and a plain callable is used as a key selector.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, comparer: 'ComparerArg' = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: operators.distinct(self._enumerable, comparer))

    def union(self, other: Iterable[T], comparer: 'ComparerArg' = None) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: operators.union(self._enumerable, other, comparer))

    def intersect(self, other: Iterable[T], comparer: 'ComparerArg' = None) -> 'Enumerable[T]':
        """return the order-preserving intersection of two sequences."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: operators.intersect(self._enumerable, other, comparer))

    def except_(self, other: Iterable[T], comparer: 'ComparerArg' = None) -> 'Enumerable[T]':
        """return distinct elements from the first sequence not in the second (set difference)."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: operators.except_(self._enumerable, other, comparer))

    # --- boolean set checks ---

    def _keys(self, items: Iterable[T], comparer: 'ComparerArg') -> Set[Any]:
        key = resolve_comparer(comparer).key
        return {key(item) for item in items}

    def is_subset_of(self, other: Iterable[T], comparer: 'ComparerArg' = None) -> bool:
        """determines whether every element of this sequence appears in another."""
        return self._keys(self._enumerable, comparer).issubset(self._keys(other, comparer))

    def is_superset_of(self, other: Iterable[T], comparer: 'ComparerArg' = None) -> bool:
        """determines whether every element of another sequence appears in this one."""
        return self._keys(self._enumerable, comparer).issuperset(self._keys(other, comparer))

    def is_disjoint_with(self, other: Iterable[T], comparer: 'ComparerArg' = None) -> bool:
        """determines whether this sequence has no elements in common with another."""
        # only the other side is materialized; stops at the first shared element
        other_keys = self._keys(other, comparer)
        key = resolve_comparer(comparer).key
        return operators.all_(self._enumerable, lambda item: key(item) not in other_keys)
