from __future__ import annotations

import logging
from .types import *
from .sources import ArraySource

# --- combinators ---
from .extensions.core import _CoreOperations
from .extensions.terminal import _TerminalOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)


class PullIterator(
    _CoreOperations[T],
    _TerminalOperations[T]
):
    """
    the single consuming handle over a producible source.

    every combinator and terminal operation consumes the wrapper. once the
    source has reported EXHAUSTED the wrapper is spent and keeps returning
    EXHAUSTED without asking the source again.
    """

    def __init__(self, source: Producible[T]):
        if not callable(getattr(source, "pull_next", None)):
            raise TypeError(f"{type(source).__name__} does not provide a callable pull_next()")
        self._source = source
        self._is_spent = False
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    @classmethod
    def over(cls, data: Iterable[T]) -> 'PullIterator[T]':
        """wrap a fresh array source over data"""
        return cls(ArraySource(data))

    def pull_next(self) -> Union[T, Any]:
        """pull the next element from the owned source, or EXHAUSTED"""
        if self._is_spent:
            return EXHAUSTED
        item = self._source.pull_next()
        if item is EXHAUSTED:
            self._is_spent = True
        return item

    @property
    def exhausted(self) -> bool:
        """true once a pull has come back EXHAUSTED"""
        return self._is_spent

    # --- python iterator protocol ---

    def __iter__(self) -> 'PullIterator[T]':
        return self

    def __next__(self) -> T:
        item = self.pull_next()
        if item is EXHAUSTED:
            raise StopIteration
        return item

    def __repr__(self) -> str:
        state = "spent" if self._is_spent else "live"
        return f"PullIterator({self._source!r}, {state})"
