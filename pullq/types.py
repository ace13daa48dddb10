from abc import ABC, abstractmethod
from typing import (
    TypeVar, Generic, Callable, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Mapping, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Action = Callable[[T], None]
Accumulator = Callable[[U, T], U]


class _Exhausted:
    """the 'no more elements' signal returned by pull_next"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "EXHAUSTED"

    def __reduce__(self):
        return (_Exhausted, ())


# a singleton, compared with `is`. never a legitimate element.
EXHAUSTED = _Exhausted()


class Producible(ABC, Generic[T]):
    """
    the single capability every source provides: hand out the next element,
    or EXHAUSTED once there is nothing left.

    subclassing is optional. any object with a callable pull_next counts as
    a producible for isinstance checks.
    """

    @abstractmethod
    def pull_next(self) -> Union[T, _Exhausted]:
        """return the next element and advance, or EXHAUSTED"""
        pass

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Producible:
            for klass in subclass.__mro__:
                if "pull_next" in klass.__dict__:
                    return callable(klass.__dict__["pull_next"])
        return NotImplemented
