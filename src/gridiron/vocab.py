"""
Centralized play vocabulary so the strings the UI sends aren't duplicated.
Import from here instead of redefining in multiple modules.
"""
from __future__ import annotations

from enum import Enum


class PlayType(str, Enum):
    RUN_LEFT = "run-left"
    RUN_MIDDLE = "run-middle"
    RUN_RIGHT = "run-right"
    PASS_SHORT = "pass-short"
    PASS_MEDIUM = "pass-medium"
    PASS_DEEP = "pass-deep"

    @classmethod
    def parse(cls, value: "PlayType | str") -> "PlayType":
        """Accept a member, its value ("run-left") or its name ("RUN_LEFT")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-")
            for pt in cls:
                if pt.value == key:
                    return pt
        raise ValueError(f"Unknown play type: {value!r}")

    @property
    def is_run(self) -> bool:
        return self in RUN_PLAYS


RUN_PLAYS = (PlayType.RUN_LEFT, PlayType.RUN_MIDDLE, PlayType.RUN_RIGHT)
PASS_PLAYS = (PlayType.PASS_SHORT, PlayType.PASS_MEDIUM, PlayType.PASS_DEEP)

ORDINAL_SUFFIXES = ("st", "nd", "rd", "th")  # 1st, 2nd, 3rd, 4th+
