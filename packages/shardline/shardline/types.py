"""Slot definitions and the row layout."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"


class ColorClass(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True, slots=True)
class Slot:
    direction: Direction
    color_class: ColorClass

    @property
    def is_primary(self) -> bool:
        return self.color_class is ColorClass.PRIMARY


@dataclass(frozen=True)
class SlotLayout:
    """Immutable row of slots.

    ``primary_indices`` and ``secondary_indices`` are derived once on
    construction. A layout must hold at least one PRIMARY slot so that the
    active slot always has a present slot to land on.
    """

    slots: tuple[Slot, ...]
    primary_indices: tuple[int, ...] = field(init=False)
    secondary_indices: tuple[int, ...] = field(init=False)

    def __post_init__(self) -> None:
        if not self.slots:
            raise ValueError("layout must contain at least one slot")
        primary = tuple(i for i, s in enumerate(self.slots) if s.is_primary)
        if not primary:
            raise ValueError("layout must contain at least one PRIMARY slot")
        secondary = tuple(i for i, s in enumerate(self.slots) if not s.is_primary)
        object.__setattr__(self, "slots", tuple(self.slots))
        object.__setattr__(self, "primary_indices", primary)
        object.__setattr__(self, "secondary_indices", secondary)

    def __len__(self) -> int:
        return len(self.slots)

    def __getitem__(self, index: int) -> Slot:
        return self.slots[index]

    def initial_presence(self) -> tuple[bool, ...]:
        """PRIMARY slots present, SECONDARY slots absent."""
        return tuple(s.is_primary for s in self.slots)


_L = Direction.LEFT
_R = Direction.RIGHT
_P = ColorClass.PRIMARY
_S = ColorClass.SECONDARY

# i:    0   1   2   3   4   5   6   7   8
# dir:  <   <   <   <   >   <   <   >   >
# col:  P   S   S   S   P   P   S   P   S
DEFAULT_LAYOUT = SlotLayout(
    (
        Slot(_L, _P),
        Slot(_L, _S),
        Slot(_L, _S),
        Slot(_L, _S),
        Slot(_R, _P),
        Slot(_L, _P),
        Slot(_L, _S),
        Slot(_R, _P),
        Slot(_R, _S),
    )
)
