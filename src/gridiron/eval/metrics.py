from __future__ import annotations
import numpy as np
import pandas as pd

from gridiron.rules.outcomes import POLICY

def expected_table() -> pd.DataFrame:
    """Analytic completion rate and yardage per play type from the policy table."""
    rows = []
    for pt, rule in POLICY.items():
        mean = float(np.mean(np.arange(rule.min_yards, rule.max_yards + 1)))
        rows.append({
            "play_type": pt.value,
            "completion_rate": rule.completion_rate,
            "min_yards": rule.min_yards,
            "max_yards": rule.max_yards,
            "mean_yards": mean,
            "expected_yards": rule.completion_rate * mean,
        })
    return pd.DataFrame(rows).set_index("play_type")

def yardage_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Empirical per-play-type stats; yardage columns use completed plays only."""
    if df.empty:
        return pd.DataFrame(columns=["n", "completion_rate", "mean_yards", "min_yards", "max_yards"])
    done = df[df["completed"]]
    g = df.groupby("play_type")
    out = pd.DataFrame({
        "n": g.size(),
        "completion_rate": g["completed"].mean(),
    })
    gy = done.groupby("play_type")["yards"]
    out["mean_yards"] = gy.mean()
    out["min_yards"] = gy.min()
    out["max_yards"] = gy.max()
    return out.reindex([pt.value for pt in POLICY])

def event_counts(df: pd.DataFrame) -> pd.Series:
    if df.empty:
        return pd.Series(dtype="int64", name="count")
    return df["event"].value_counts().rename("count")
