from __future__ import annotations

import argparse
import logging

import numpy as np
import pandas as pd

from gridiron.config import FullConfig, load_config
from gridiron.eval.metrics import event_counts, yardage_summary
from gridiron.rules.fsm import DriveSimulator
from gridiron.state import Possession
from gridiron.vocab import PlayType

PLAY_TYPES = list(PlayType)


def simulate_plays(sim: DriveSimulator, n_plays: int, rng) -> pd.DataFrame:
    """Autoplay ``n_plays`` with a uniform random play caller; one row per play."""
    rows = []
    for i in range(n_plays):
        play_type = PLAY_TYPES[int(rng.integers(0, len(PLAY_TYPES)))]
        sim.select_play(play_type)
        out = sim.execute_play()
        s = out.state
        rows.append(
            {
                "play": i,
                "play_type": play_type.value,
                "yards": out.result.yards,
                "completed": out.result.completed,
                "event": out.event.value,
                "down": s.down,
                "distance": s.distance,
                "yardline": s.yardline,
                "possession": s.possession.value,
                "home_score": s.home_score,
                "away_score": s.away_score,
            }
        )
    return pd.DataFrame(rows)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Autoplay a Gridiron Strategy game.")
    ap.add_argument("--plays", type=int, default=60)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--variant", choices=["flat", "hex"], default=None)
    ap.add_argument("--config", type=str, default=None)
    ap.add_argument("--legacy-safety", action="store_true",
                    help="let a safety fall through into the down checks")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    cfg = load_config(args.config) if args.config else FullConfig()
    if args.seed is not None:
        cfg.seed = args.seed
    if args.variant is not None:
        cfg.field.variant = args.variant
    if args.legacy_safety:
        cfg.rules.safety_ends_play = False

    sim = DriveSimulator(cfg)
    caller = np.random.default_rng(None if cfg.seed is None else cfg.seed + 1)
    sim.subscribe(lambda out: print(f"[{out.play_type.value:>11}] {out.message}"))
    df = simulate_plays(sim, args.plays, caller)

    s = sim.state
    home, away = s.score_for(Possession.HOME), s.score_for(Possession.AWAY)
    print(f"\nFinal: Home {home} - Away {away} "
          f"({s.possession.label} ball, {sim.down_text()})\n")
    print("-- Outcomes by play type --")
    print(yardage_summary(df).to_string())
    print("\n-- Drive events --")
    print(event_counts(df).to_string())


if __name__ == "__main__":
    main()
