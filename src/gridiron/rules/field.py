from __future__ import annotations
from dataclasses import dataclass

from gridiron.constants import (END_ZONE_DEPTH, HEX_FIELD_LENGTH, MAX_YARDLINE,
                                MIN_YARDLINE, START_YARDLINE)


@dataclass(frozen=True)
class FlatField:
    """Single yard line, 0 = own goal line, 100 = opponent goal line."""
    name: str = "flat"
    length: int = MAX_YARDLINE

    def start(self) -> int:
        return START_YARDLINE

    def start_lateral(self) -> int:
        return 0

    def advance(self, pos: int, yards: int) -> int:
        return max(MIN_YARDLINE, min(self.length, pos + yards))

    def is_touchdown(self, pos: int) -> bool:
        return pos >= self.length

    def is_safety(self, pos: int) -> bool:
        return False

    def mirror(self, pos: int) -> int:
        return self.length - pos

    def yard_line(self, pos: int) -> int:
        return pos


@dataclass(frozen=True)
class HexField:
    """Axial (q, r) grid; r runs 0..120 with 10-unit end zones at both ends."""
    name: str = "hex"
    length: int = HEX_FIELD_LENGTH
    end_zone: int = END_ZONE_DEPTH

    @property
    def own_goal(self) -> int:
        return self.end_zone

    @property
    def opp_goal(self) -> int:
        return self.length - self.end_zone

    def start(self) -> int:
        return self.own_goal + START_YARDLINE

    def start_lateral(self) -> int:
        return 0

    def advance(self, pos: int, yards: int) -> int:
        return max(0, min(self.length, pos + yards))

    def is_touchdown(self, pos: int) -> bool:
        return pos >= self.opp_goal

    def is_safety(self, pos: int) -> bool:
        return pos <= self.own_goal

    def mirror(self, pos: int) -> int:
        return self.length - pos

    def yard_line(self, pos: int) -> int:
        return pos - self.end_zone


Field = FlatField | HexField


def make_field(variant: str) -> Field:
    if variant == "flat":
        return FlatField()
    if variant == "hex":
        return HexField()
    raise ValueError(f"Unknown field variant: {variant!r}")
