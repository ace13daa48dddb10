import typing
from itertools import count as _counter, islice
from itertools import repeat as _repeat
from .types import *
from .sources import ArraySource, MappingSource, IterableSource

if typing.TYPE_CHECKING:
    from .iterator import PullIterator


def iterate(source: Producible[T]) -> 'PullIterator[T]':
    """wrap any producible source"""
    from .iterator import PullIterator
    return PullIterator(source)

def from_list(data: Iterable[T]) -> 'PullIterator[T]':
    """create iterator over a fixed, ordered copy of data"""
    return iterate(ArraySource(data))

def from_mapping(mapping: Mapping[K, V]) -> 'PullIterator[V]':
    """create iterator over the values of a mapping, in a key order fixed now"""
    return iterate(MappingSource(mapping))

def from_iterable(data: Iterable[T]) -> 'PullIterator[T]':
    """create iterator that pulls lazily from any python iterable"""
    return iterate(IterableSource(data))

def from_range(start: int, count: int) -> 'PullIterator[int]':
    """create iterator over count consecutive integers"""
    return from_list(range(start, start + count))

def repeat(item: T, count: Optional[int] = None) -> 'PullIterator[T]':
    """create iterator with a repeated item. unbounded when count is none"""
    if count is None:
        return from_iterable(_repeat(item))
    return from_list([item] * count)

def empty() -> 'PullIterator[Any]':
    """create empty iterator"""
    return from_list([])

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'PullIterator[T]':
    """
    produce elements by calling generator_func once per pull.
    unbounded when count is none, bound it with take().
    """
    calls = (generator_func() for _ in _counter())
    if count is not None:
        calls = islice(calls, count)
    return from_iterable(calls)

# --- aliases ---
pullq = from_list
P = from_list
