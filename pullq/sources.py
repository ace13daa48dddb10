import logging
from .types import *

logger = logging.getLogger(__name__)


class ArraySource(Producible[T]):
    """walks an owned copy of an ordered sequence with a cursor"""

    def __init__(self, data: Iterable[T]):
        # owned copy, later changes to the caller's list are not seen
        self._data: List[T] = list(data)
        self._index = 0

    def pull_next(self) -> Union[T, Any]:
        if self._index >= len(self._data):
            return EXHAUSTED
        item = self._data[self._index]
        self._index += 1
        return item

    def __repr__(self) -> str:
        return f"ArraySource(position={self._index}, length={len(self._data)})"


class MappingSource(Producible[V]):
    """
    yields the values of a mapping.

    the key order is snapshotted once at construction, so the pull order is
    fixed for the lifetime of the source regardless of how the backing
    container enumerates itself. the backing mapping is read, not copied:
    mutating it after construction is not supported.
    """

    def __init__(self, mapping: Mapping[K, V]):
        self._keys: List[K] = list(mapping.keys())
        self._data = mapping
        self._index = 0
        logger.debug("snapshotted %d keys", len(self._keys))

    def pull_next(self) -> Union[V, Any]:
        if self._index >= len(self._keys):
            return EXHAUSTED
        value = self._data[self._keys[self._index]]
        self._index += 1
        return value

    def __repr__(self) -> str:
        return f"MappingSource(position={self._index}, keys={len(self._keys)})"


class IterableSource(Producible[T]):
    """adapts any python iterable, including generators and infinite iterators"""

    def __init__(self, iterable: Iterable[T]):
        self._iterator = iter(iterable)
        self._is_exhausted = False

    def pull_next(self) -> Union[T, Any]:
        if self._is_exhausted:
            return EXHAUSTED
        try:
            return next(self._iterator)
        except StopIteration:
            self._is_exhausted = True
            return EXHAUSTED

    def __repr__(self) -> str:
        state = "exhausted" if self._is_exhausted else "live"
        return f"IterableSource({state})"
