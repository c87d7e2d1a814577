from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Point = tuple[float, float]

CARD_SIZE = 100.0


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    def contains(self, point: Point) -> bool:
        px, py = point
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h


class Card:
    """A grid cell. Position and value are fixed at construction."""

    def __init__(self, rect: Rect, value: int, revealed: bool = False, matched: bool = False) -> None:
        self._rect = rect
        self._value = value
        self.revealed = revealed
        self.matched = matched

    def __repr__(self) -> str:
        return f"Card(rect={self._rect!r}, value={self._value}, revealed={self.revealed}, matched={self.matched})"

    @property
    def rect(self) -> Rect:
        return self._rect

    @property
    def value(self) -> int:
        return self._value

    @staticmethod
    def at(x: float, y: float, value: int, size: float = CARD_SIZE) -> "Card":
        return Card(rect=Rect(x, y, size, size), value=value)

    @property
    def face_up(self) -> bool:
        return self.revealed or self.matched

    def contains(self, point: Point) -> bool:
        return self.rect.contains(point)

    def flip(self) -> None:
        # matched cards stay put
        if not self.matched:
            self.revealed = not self.revealed

    def is_visible(self) -> bool:
        return self.revealed

    def set_matched(self) -> None:
        self.matched = True

    def value_equals(self, other: "Card") -> bool:
        return self.value == other.value


SelectionPhase = Literal["idle", "one_selected", "two_pending"]


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class OneSelected:
    first: int


@dataclass(frozen=True)
class TwoPending:
    first: int
    second: int
    since: float


Selection = Idle | OneSelected | TwoPending
