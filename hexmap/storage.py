"""Pluggable backing stores for a grid's cell payloads.

The grid only needs get / insert / iterate. Any :class:`TileStore` can be
handed to :class:`~hexmap.grid.Grid` in place of the default dict-backed one.
"""
from __future__ import annotations

import abc
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, MutableMapping, Optional, TypeVar

from .coordinate import CellCoordinate

T = TypeVar("T")


class TileStore(MutableMapping[CellCoordinate, T]):
    """Mapping of :class:`CellCoordinate` to payload.

    Missing keys behave like any mapping (``get`` returns ``None``). Only
    :meth:`view` signals a backend that cannot be reached, by raising
    :class:`~hexmap.errors.CollectionAccessError`.
    """

    @abc.abstractmethod
    def view(self) -> Mapping[CellCoordinate, T]:
        """Read-only view of the whole collection."""


class DictTileStore(TileStore[T]):
    """In-memory store backed by a plain dict."""

    def __init__(self, data: Optional[Dict[CellCoordinate, T]] = None) -> None:
        self._data: Dict[CellCoordinate, T] = dict(data) if data else {}

    def __getitem__(self, key: CellCoordinate) -> T:
        return self._data[key]

    def __setitem__(self, key: CellCoordinate, value: T) -> None:
        self._data[key] = value

    def __delitem__(self, key: CellCoordinate) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[CellCoordinate]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DictTileStore):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"DictTileStore({self._data!r})"

    def view(self) -> Mapping[CellCoordinate, T]:
        return MappingProxyType(self._data)
