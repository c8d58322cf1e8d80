from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol

from gridiron.vocab import PlayType


class RandomSource(Protocol):
    """Subset of ``numpy.random.Generator`` the play model draws from."""

    def random(self) -> float: ...

    def integers(self, low: int, high: int) -> int: ...  # high exclusive


@dataclass(frozen=True, slots=True)
class PlayResult:
    yards: int
    completed: bool


@dataclass(frozen=True, slots=True)
class YardageRule:
    min_yards: int
    max_yards: int          # inclusive
    fail_below: float       # play fails when u <= fail_below

    @property
    def completion_rate(self) -> float:
        return 1.0 - self.fail_below


POLICY: dict[PlayType, YardageRule] = {
    PlayType.RUN_LEFT: YardageRule(-2, 8, 0.0),
    PlayType.RUN_MIDDLE: YardageRule(-2, 8, 0.0),
    PlayType.RUN_RIGHT: YardageRule(-2, 8, 0.0),
    PlayType.PASS_SHORT: YardageRule(0, 12, 0.3),
    PlayType.PASS_MEDIUM: YardageRule(5, 20, 0.5),
    PlayType.PASS_DEEP: YardageRule(15, 40, 0.7),
}


def resolve_play(play_type: PlayType | str, rng: RandomSource) -> PlayResult:
    """Draw the completion sample, then (runs and completions only) the yardage."""
    pt = PlayType.parse(play_type)
    rule = POLICY[pt]
    u = float(rng.random())
    if not pt.is_run and u <= rule.fail_below:
        return PlayResult(yards=0, completed=False)
    yards = int(rng.integers(rule.min_yards, rule.max_yards + 1))
    return PlayResult(yards=yards, completed=True)
