"""Terminal reducers that fold admitted key/value pairs into a dictionary."""

from __future__ import annotations

from typing import Any, Dict, List, Protocol

from mapwise import MapwiseException
from mapwise._typing import Key, Value


class Collector(Protocol):
    count: int

    def add(self, key: Key, value: Value, index: int) -> None:
        ...

    def result(self) -> Dict[Key, Any]:
        ...


class IndexCollector:
    """Keeps one value per key. The last value written for a key wins while the
    key keeps the position of its first occurrence."""

    def __init__(self) -> None:
        self._container: Dict[Key, Value] = {}
        self.count = 0

    def add(self, key: Key, value: Value, index: int) -> None:
        try:
            self._container[key] = value
        except TypeError as exception:
            raise InvalidKeyError(key, index) from exception
        self.count += 1

    def result(self) -> Dict[Key, Value]:
        return self._container


class GroupCollector:
    """Keeps an ordered list of values per key, in the order they were added."""

    def __init__(self) -> None:
        self._container: Dict[Key, List[Value]] = {}
        self.count = 0

    def add(self, key: Key, value: Value, index: int) -> None:
        try:
            group = self._container.get(key)
        except TypeError as exception:
            raise InvalidKeyError(key, index) from exception
        if group is None:
            self._container[key] = [value]
        else:
            group.append(value)
        self.count += 1

    def result(self) -> Dict[Key, List[Value]]:
        return self._container


class InvalidKeyError(MapwiseException, TypeError):
    """Computed key cannot be used as a dictionary key."""

    def __init__(self, key: Any, index: int) -> None:
        super().__init__(
            f"unhashable key {key!r} of type {type(key).__name__} at index {index}"
        )
        self.key = key
        self.index = index
