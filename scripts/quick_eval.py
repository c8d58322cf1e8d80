from __future__ import annotations

import argparse
import sys

import numpy as np
import pandas as pd

from gridiron.config import FullConfig, FieldCfg
from gridiron.eval.metrics import event_counts, expected_table, yardage_summary
from gridiron.rules.fsm import DriveSimulator
from gridiron.simulate import simulate_plays


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--plays", type=int, default=20_000)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--variant", choices=["flat", "hex"], default="flat")
    args = ap.parse_args()

    cfg = FullConfig(seed=args.seed, field=FieldCfg(variant=args.variant))
    sim = DriveSimulator(cfg)
    sims = simulate_plays(sim, args.plays, np.random.default_rng(args.seed + 1))

    print(f"\n== Quick Eval ==\nPLAYS: {args.plays}  SEED: {args.seed}  FIELD: {args.variant}\n")
    sys.stdout.flush()

    exp = expected_table()
    got = yardage_summary(sims)

    # Completion rate
    cr = pd.DataFrame({"expected": exp["completion_rate"], "sim": got["completion_rate"]})
    cr["abs_diff"] = (cr["sim"] - cr["expected"]).abs()
    print("-- Completion rate (expected vs sim) --")
    print(cr.to_string())
    print("max_abs_diff:", round(cr["abs_diff"].max(), 3), "\n")
    sys.stdout.flush()

    # Yards on completed plays
    yd = pd.DataFrame({
        "exp_mean": exp["mean_yards"],
        "sim_mean": got["mean_yards"],
        "exp_range": exp["min_yards"].astype(str) + ".." + exp["max_yards"].astype(str),
        "sim_range": got["min_yards"].astype(str) + ".." + got["max_yards"].astype(str),
    })
    print("-- Yards on completed plays --")
    print(yd.to_string(), "\n")

    print("-- Drive events --")
    print(event_counts(sims).to_string())
    s = sim.state
    print(f"\nFinal score: Home {s.home_score} - Away {s.away_score}")
    sys.stdout.flush()


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        import traceback

        print("quick_eval error:", e)
        traceback.print_exc()
        sys.exit(1)
