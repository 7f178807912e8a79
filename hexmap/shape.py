"""Reusable tile stamps.

A :class:`Shape` is a small 2-D array of optional payloads. Slot ``(i, j)``
stands for the local cell ``(q=i, r=j)``; slots holding ``None`` are outside
the pattern and never take part in a transfer to or from a grid.
"""
from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

import numpy as np

from .coordinate import CellCoordinate
from .transform import Transform

T = TypeVar("T")

Index = Tuple[int, int]


class Shape(Generic[T]):
    def __init__(self, hexes: np.ndarray, transform: Optional[Transform] = None) -> None:
        if hexes.ndim != 2:
            raise ValueError(f"shape array must be 2-D, got {hexes.ndim}-D")
        self._hexes = hexes
        self.transform = transform if transform is not None else Transform()

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def _from_mask(
        cls, mask: np.ndarray, factory: Callable[[], T], transform: Transform
    ) -> "Shape[T]":
        hexes = np.full(mask.shape, None, dtype=object)
        # Row-major, one factory call per member slot
        for idx in zip(*np.nonzero(mask)):
            hexes[idx] = factory()
        return cls(hexes, transform)

    @classmethod
    def make_triangle(
        cls, size: int, rotation: int, upper: bool, factory: Callable[[], T]
    ) -> "Shape[T]":
        """Triangle with ``size`` cells per side.

        ``upper`` keeps the half of the ``size x size`` block nearest the
        local origin (``i + j < size``); otherwise the far half is used.
        """
        _check_size(size)
        i, j = np.indices((size, size))
        mask = (i + j < size) if upper else (i + j >= size - 1)
        return cls._from_mask(mask, factory, Transform(rotation=rotation))

    @classmethod
    def make_rhombus(
        cls, size: int, rotation: int, left: bool, factory: Callable[[], T]
    ) -> "Shape[T]":
        """Full ``size x size`` parallelogram.

        With ``left`` false the pattern is mirrored across the q axis so it
        leans the other way.
        """
        _check_size(size)
        mask = np.ones((size, size), dtype=bool)
        return cls._from_mask(mask, factory, Transform(rotation=rotation, reflect=not left))

    @classmethod
    def make_hexagon(cls, radius: int, factory: Callable[[], T]) -> "Shape[T]":
        """Hexagon of ``radius`` rings around local cell ``(radius, radius)``."""
        if radius < 0:
            raise ValueError("radius must be >= 0")
        side = 2 * radius + 1
        i, j = np.indices((side, side))
        dq, dr = i - radius, j - radius
        mask = (np.abs(dq) + np.abs(dr) + np.abs(dq + dr)) // 2 <= radius
        return cls._from_mask(mask, factory, Transform())

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    @property
    def shape(self) -> Index:
        return self._hexes.shape

    def get_hexes(self) -> List[Tuple[Index, Optional[T]]]:
        """Every slot as ``((i, j), payload)``, in array order, empty ones included."""
        return [((int(i), int(j)), value) for (i, j), value in np.ndenumerate(self._hexes)]

    def get_hexes_mut(self) -> np.ndarray:
        """The backing array; writes go straight into this shape."""
        return self._hexes

    def populated(self) -> Iterator[Tuple[Index, T]]:
        for index, value in self.get_hexes():
            if value is not None:
                yield index, value

    def local_to_global(self, index: Index) -> CellCoordinate:
        return CellCoordinate(index[0], index[1]).apply_transform(self.transform)

    def coordinates(self) -> List[CellCoordinate]:
        """Grid coordinates covered by the populated slots."""
        return [self.local_to_global(index) for index, _ in self.populated()]

    def __len__(self) -> int:
        return sum(1 for _ in self.populated())

    def __repr__(self) -> str:
        return f"Shape(shape={self.shape}, populated={len(self)}, transform={self.transform})"


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError("size must be >= 0")
