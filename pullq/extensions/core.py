from __future__ import annotations
import typing
import logging
from ..types import *

if typing.TYPE_CHECKING:
    from ..iterator import PullIterator

logger = logging.getLogger(__name__)


def _check_count(n: int, name: str = "count") -> None:
    if n < 0:
        raise ValueError(f"{name} must be non-negative, got {n}")


class _CoreOperations(Generic[T]):
    """
    eager combinators. each one drains its receiver (or drains until its
    bound is met), materializes the results into a list and hands back a
    new wrapper over that list.
    """

    def map(self: 'PullIterator[T]', selector: Selector[T, U]) -> 'PullIterator[U]':
        """project each element to a new form"""
        from ..iterator import PullIterator
        result = []
        while (item := self.pull_next()) is not EXHAUSTED:
            result.append(selector(item))
        return PullIterator.over(result)

    def filter(self: 'PullIterator[T]', predicate: Predicate[T]) -> 'PullIterator[T]':
        """keep the elements the predicate accepts, in pull order"""
        from ..iterator import PullIterator
        result = []
        while (item := self.pull_next()) is not EXHAUSTED:
            if predicate(item):
                result.append(item)
        return PullIterator.over(result)

    def take(self: 'PullIterator[T]', count: int) -> 'PullIterator[T]':
        """
        take at most 'count' elements. stops pulling as soon as the bound is
        met, so this is the one combinator that is safe on unbounded sources.
        the receiver keeps its position after the taken elements.
        """
        from ..iterator import PullIterator
        _check_count(count)
        result = []
        while len(result) < count:
            item = self.pull_next()
            if item is EXHAUSTED:
                break
            result.append(item)
        return PullIterator.over(result)

    def skip(self: 'PullIterator[T]', count: int) -> 'PullIterator[T]':
        """
        advance this wrapper's own source by up to 'count' pulls and return
        the same wrapper, positioned after the skipped elements
        """
        skipped = self.take(count)
        logger.debug("skipped %d of %d requested elements", skipped.count(), count)
        return self

    def step_by(self: 'PullIterator[T]', step: int) -> 'PullIterator[T]':
        """keep the first element, then every 'step'-th one after it"""
        from ..iterator import PullIterator
        if step < 1:
            raise ValueError(f"step must be at least 1, got {step}")
        result = []
        while (item := self.pull_next()) is not EXHAUSTED:
            result.append(item)
            self.skip(step - 1)
        return PullIterator.over(result)

    def partition(self: 'PullIterator[T]',
                  predicate: Predicate[T]) -> Tuple['PullIterator[T]', 'PullIterator[T]']:
        """split into (matching, non-matching) in a single pass"""
        from ..iterator import PullIterator
        matches, rest = [], []
        while (item := self.pull_next()) is not EXHAUSTED:
            (matches if predicate(item) else rest).append(item)
        logger.debug("partitioned into %d matching and %d non-matching", len(matches), len(rest))
        return PullIterator.over(matches), PullIterator.over(rest)

    def reverse(self: 'PullIterator[T]') -> 'PullIterator[T]':
        """drain and hand the elements back in reverse pull order"""
        from ..iterator import PullIterator
        data = self.collect()
        data.reverse()
        logger.debug("reversed %d elements", len(data))
        return PullIterator.over(data)

    def chain(self: 'PullIterator[T]', other: Union['PullIterator[T]', Producible[T]]) -> 'PullIterator[T]':
        """drain this wrapper, then 'other', and iterate over both in that order"""
        from ..iterator import PullIterator
        if not isinstance(other, PullIterator):
            other = PullIterator(other)
        # both sides are drained before the new wrapper exists
        head = self.collect()
        head.extend(other.collect())
        return PullIterator.over(head)

    # --- aliases ---
    transform = map
    bounded_take = take
    concatenate = chain
