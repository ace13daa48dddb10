from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    from ..iterator import PullIterator


class _TerminalOperations(Generic[T]):
    """operations that drain the wrapper and return a plain value"""

    def collect(self: 'PullIterator[T]') -> List[T]:
        """drain into a list, in pull order"""
        result = []
        while (item := self.pull_next()) is not EXHAUSTED:
            result.append(item)
        return result

    def count(self: 'PullIterator[T]') -> int:
        """drain and count the elements"""
        total = 0
        while self.pull_next() is not EXHAUSTED:
            total += 1
        return total

    def nth(self: 'PullIterator[T]', n: int, default: Optional[T] = None) -> Optional[T]:
        """
        discard n elements and return the next one, or default if the source
        runs out first.

        indexing is relative to the wrapper's current position, not to the
        start of the source: calling nth(0) twice returns two consecutive
        elements.
        """
        if n < 0:
            raise ValueError(f"index must be non-negative, got {n}")
        index = 0
        while (item := self.pull_next()) is not EXHAUSTED:
            if index == n:
                return item
            index += 1
        return default

    def last(self: 'PullIterator[T]', default: Optional[T] = None) -> Optional[T]:
        """drain and return the final element, or default if there was none"""
        current = default
        while (item := self.pull_next()) is not EXHAUSTED:
            current = item
        return current

    def for_each(self: 'PullIterator[T]', action: Action[T]) -> None:
        """call action once per element, in pull order"""
        while (item := self.pull_next()) is not EXHAUSTED:
            action(item)


class TerminalAccessor(Generic[T]):
    """conversions to python, numpy and pandas containers. every call drains the wrapper."""

    def __init__(self, iterator_instance: 'PullIterator[T]'):
        self._iterator = iterator_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._iterator.collect()

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._iterator.collect())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._iterator.collect())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary, later keys overwrite earlier ones"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._iterator.collect()}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._iterator.collect())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._iterator.collect())

    def aggregate(self, accumulator: Accumulator[T, T], seed: Optional[T] = None) -> T:
        """fold the elements left to right, starting from seed when given"""
        data = self._iterator.collect()
        if seed is not None:
            return reduce(accumulator, data, seed)
        if not data:
            raise ValueError("cannot aggregate empty sequence without seed")
        return reduce(accumulator, data)
