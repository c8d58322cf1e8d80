from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional

import numpy as np

from gridiron.config import FullConfig
from gridiron.constants import FIRST_AND_TEN_YTG, MAX_DOWN, START_QUARTER, TOUCHDOWN_POINTS
from gridiron.playlog import WELCOME_MESSAGE, PlayLog
from gridiron.rules.field import Field, make_field
from gridiron.rules.outcomes import PlayResult, RandomSource, resolve_play
from gridiron.state import GameState, Possession
from gridiron.vocab import ORDINAL_SUFFIXES, PlayType

logger = logging.getLogger(__name__)


class DriveEvent(str, Enum):
    NO_PLAY = "no_play"
    TOUCHDOWN = "touchdown"
    SAFETY = "safety"
    TURNOVER_ON_DOWNS = "turnover_on_downs"
    FIRST_DOWN = "first_down"
    CONTINUE = "continue"


@dataclass(frozen=True, slots=True)
class PlayOutcome:
    play_type: Optional[PlayType]
    result: Optional[PlayResult]
    event: DriveEvent
    messages: tuple[str, ...]
    state: GameState

    @property
    def message(self) -> str:
        return " ".join(self.messages)


Listener = Callable[[PlayOutcome], None]


def down_text(down: int, distance: int) -> str:
    suffix = ORDINAL_SUFFIXES[min(down, len(ORDINAL_SUFFIXES)) - 1]
    return f"{down}{suffix} & {distance}"


class DriveSimulator:
    """Owns one game's state and resolves selected plays into new state.

    Rendering is someone else's job: adapters call ``select_play`` and
    ``execute_play`` and either read the returned ``PlayOutcome`` or
    ``subscribe`` a callback that receives it after every resolved play.
    """

    def __init__(self, config: Optional[FullConfig] = None,
                 rng: Optional[RandomSource] = None,
                 field: Optional[Field] = None,
                 state: Optional[GameState] = None):
        self.config = config or FullConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self._field = field or make_field(self.config.field.variant)
        self._log = PlayLog(self.config.rules.log_capacity)
        self._listeners: list[Listener] = []
        self._state = state if state is not None else self._initial_state()
        self._log.add(WELCOME_MESSAGE)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def log(self) -> PlayLog:
        return self._log

    @property
    def field(self) -> Field:
        return self._field

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _initial_state(self) -> GameState:
        return GameState(home_score=0, away_score=0, quarter=START_QUARTER,
                         possession=Possession.HOME, down=1,
                         distance=FIRST_AND_TEN_YTG,
                         yardline=self._field.start(),
                         lateral=self._field.start_lateral())

    def reset(self) -> GameState:
        self._state = self._initial_state()
        self._log.clear()
        self._log.add(WELCOME_MESSAGE)
        return self._state

    def select_play(self, play_type: PlayType | str) -> GameState:
        self._state = replace(self._state, selected_play=PlayType.parse(play_type))
        return self._state

    def down_text(self) -> str:
        return down_text(self._state.down, self._state.distance)

    def _new_series(self, s: GameState, **changes) -> GameState:
        return replace(s, down=1, distance=FIRST_AND_TEN_YTG, **changes)

    def execute_play(self, play_type: Optional[PlayType | str] = None) -> PlayOutcome:
        pending = play_type if play_type is not None else self._state.selected_play
        if pending is None:
            return PlayOutcome(None, None, DriveEvent.NO_PLAY, (), self._state)

        pt = PlayType.parse(pending)
        result = resolve_play(pt, self.rng)
        yards = result.yards
        s = replace(self._state, selected_play=None)
        f = self._field
        messages: list[str] = []

        s = replace(s, yardline=f.advance(s.yardline, yards))

        if f.is_touchdown(s.yardline):
            event = DriveEvent.TOUCHDOWN
            team = s.possession
            points = s.score_for(team) + TOUCHDOWN_POINTS
            if team is Possession.HOME:
                s = replace(s, home_score=points)
            else:
                s = replace(s, away_score=points)
            messages.append(f"TOUCHDOWN! {team.label} team scores! (+{TOUCHDOWN_POINTS})")
            s = self._new_series(s, possession=team.other, yardline=f.start(),
                                 lateral=f.start_lateral())
            return self._finish(pt, result, event, messages, s)

        safety = f.is_safety(s.yardline)
        if safety:
            messages.append(f"SAFETY! {s.possession.label} team tackled in its own end zone.")
            s = self._new_series(s, yardline=f.start(), lateral=f.start_lateral())
            if self.config.rules.safety_ends_play:
                return self._finish(pt, result, DriveEvent.SAFETY, messages, s)

        if yards >= s.distance:
            event = DriveEvent.FIRST_DOWN
            s = self._new_series(s)
            messages.append(f"First down! Gained {yards} yards. "
                            f"Ball at {f.yard_line(s.yardline)} yard line.")
        else:
            event = DriveEvent.CONTINUE
            s = replace(s, down=s.down + 1, distance=s.distance - yards)
            dt = down_text(s.down, s.distance)
            if yards > 0:
                messages.append(f"Gained {yards} yards. {dt}")
            elif yards < 0:
                messages.append(f"Loss of {abs(yards)} yards. {dt}")
            else:
                messages.append(f"No gain. {dt}")

        if s.down > MAX_DOWN:
            event = DriveEvent.TURNOVER_ON_DOWNS
            messages.append(f"Turnover on downs! {s.possession.other.label} team takes over.")
            s = self._new_series(s, possession=s.possession.other,
                                 yardline=f.mirror(s.yardline))
        elif safety:
            event = DriveEvent.SAFETY

        return self._finish(pt, result, event, messages, s)

    def _finish(self, pt: PlayType, result: PlayResult, event: DriveEvent,
                messages: list[str], s: GameState) -> PlayOutcome:
        self._state = s
        for m in messages:
            self._log.add(m)
        outcome = PlayOutcome(pt, result, event, tuple(messages), s)
        logger.debug(f"{pt.value}: {result.yards} yds completed={result.completed} -> {event.value}")
        if event in (DriveEvent.TOUCHDOWN, DriveEvent.SAFETY, DriveEvent.TURNOVER_ON_DOWNS):
            logger.info(f"{event.value}: home {s.home_score} - away {s.away_score}, "
                        f"{s.possession.value} ball")
        for listener in list(self._listeners):
            listener(outcome)
        return outcome
