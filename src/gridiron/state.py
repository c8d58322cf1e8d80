from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from gridiron.vocab import PlayType


class Possession(str, Enum):
    HOME = "home"
    AWAY = "away"

    @property
    def other(self) -> "Possession":
        return Possession.AWAY if self is Possession.HOME else Possession.HOME

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class GameState:
    home_score: int
    away_score: int
    quarter: int            # tracked, never advanced
    possession: Possession
    down: int               # 1..4
    distance: int           # yards to go, >= 1
    yardline: int           # offense-relative; flat 0..100, hex axial r 0..120
    lateral: int = 0        # hex axial q, -8..8 (display only)
    selected_play: Optional[PlayType] = None

    @property
    def axial(self) -> Tuple[int, int]:
        return (self.lateral, self.yardline)

    def score_for(self, side: Possession) -> int:
        return self.home_score if side is Possession.HOME else self.away_score
