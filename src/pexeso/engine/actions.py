from __future__ import annotations

from dataclasses import dataclass

from .types import Point


@dataclass(frozen=True)
class ClickAction:
    x: float
    y: float
    at: float  # monotonic seconds, supplied by the caller

    @property
    def point(self) -> Point:
        return (self.x, self.y)


Action = ClickAction
