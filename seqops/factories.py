import typing
from itertools import count as _count_up, islice, repeat as _repeat
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable; one-shot iterables stay one-shot"""
    from .enumerable import Enumerable
    return Enumerable(lambda: data)

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(lambda: range(start, start + count))

def count_from(start: int = 0, step: int = 1) -> 'Enumerable[int]':
    """create an infinite arithmetic sequence"""
    from .enumerable import Enumerable
    return Enumerable(lambda: _count_up(start, step))

def repeat(item: T, count: Optional[int] = None) -> 'Enumerable[T]':
    """create enumerable with repeated item, infinite when count is none"""
    from .enumerable import Enumerable
    if count is None:
        return Enumerable(lambda: _repeat(item))
    return Enumerable(lambda: _repeat(item, count))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: ())

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Enumerable[T]':
    """generate sequence using a function, infinite when count is none"""
    from .enumerable import Enumerable
    def generate_data():
        calls = (generator_func() for _ in _count_up())
        return calls if count is None else islice(calls, count)
    return Enumerable(generate_data)

def memoize(data: Iterable[T]) -> 'Enumerable[T]':
    """wrap a one-shot iterable so it can be iterated any number of times"""
    from .enumerable import Enumerable
    memo = MemoizedSequence(data)
    return Enumerable(lambda: memo)

# --- aliases ---
seq = from_iterable
S = from_iterable
