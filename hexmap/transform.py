"""Rigid transforms over axial cell coordinates."""
from __future__ import annotations

from dataclasses import dataclass, field

from .coordinate import CellCoordinate


@dataclass(frozen=True)
class Transform:
    """Reflection, rotation and translation applied in that order.

    ``reflect`` mirrors across the q axis, ``rotation`` counts clockwise
    60 degree steps around the origin (any int, taken mod 6) and
    ``translation`` is added last.
    """

    translation: CellCoordinate = field(default_factory=lambda: CellCoordinate(0, 0))
    rotation: int = 0
    reflect: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "rotation", self.rotation % 6)

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    def apply(self, coord: CellCoordinate) -> CellCoordinate:
        """Map ``coord`` through this transform."""
        if self.reflect:
            coord = coord.reflect_q()
        return coord.rotate(self.rotation) + self.translation

    def then(self, other: "Transform") -> "Transform":
        """Compose so that applying the result equals applying ``self`` then ``other``."""
        # Reflection reverses the sense of any rotation applied before it.
        rotation = self.rotation if not other.reflect else -self.rotation
        return Transform(
            translation=other.apply(self.translation),
            rotation=other.rotation + rotation,
            reflect=self.reflect != other.reflect,
        )

    def inverse(self) -> "Transform":
        """Transform that undoes this one."""
        undo_shift = Transform(translation=-self.translation)
        undo_turn = Transform(rotation=-self.rotation)
        undo_mirror = Transform(reflect=self.reflect)
        return undo_shift.then(undo_turn).then(undo_mirror)
