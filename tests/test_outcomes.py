import numpy as np
import pytest

from gridiron.rules.outcomes import POLICY, PlayResult, resolve_play
from gridiron.vocab import PASS_PLAYS, RUN_PLAYS, PlayType


def test_yards_within_policy_bounds():
    rng = np.random.default_rng(0)
    for pt in PlayType:
        rule = POLICY[pt]
        for _ in range(500):
            r = resolve_play(pt, rng)
            if r.completed:
                assert rule.min_yards <= r.yards <= rule.max_yards
            else:
                assert r.yards == 0


def test_runs_always_complete():
    rng = np.random.default_rng(1)
    for pt in RUN_PLAYS:
        assert all(resolve_play(pt, rng).completed for _ in range(300))


def test_run_extremes_reachable():
    rng = np.random.default_rng(2)
    seen = {resolve_play(PlayType.RUN_MIDDLE, rng).yards for _ in range(2000)}
    assert seen == set(range(-2, 9))


def test_pass_thresholds(scripted):
    # u must strictly exceed the failure threshold
    assert resolve_play(PlayType.PASS_SHORT, scripted([0.3])) == PlayResult(0, False)
    assert resolve_play(PlayType.PASS_SHORT, scripted([0.31], [12])) == PlayResult(12, True)
    assert resolve_play(PlayType.PASS_MEDIUM, scripted([0.5])) == PlayResult(0, False)
    assert resolve_play(PlayType.PASS_MEDIUM, scripted([0.51], [5])) == PlayResult(5, True)
    assert resolve_play(PlayType.PASS_DEEP, scripted([0.7])) == PlayResult(0, False)
    assert resolve_play(PlayType.PASS_DEEP, scripted([0.71], [40])) == PlayResult(40, True)


def test_two_independent_draws(scripted):
    rng = scripted([0.9], [7])
    resolve_play(PlayType.PASS_MEDIUM, rng)
    assert rng.calls == ["random", ("integers", 5, 21)]

    rng = scripted([0.0], [-2])
    assert resolve_play(PlayType.RUN_LEFT, rng) == PlayResult(-2, True)
    assert rng.calls == ["random", ("integers", -2, 9)]


def test_incomplete_pass_skips_yardage_draw(scripted):
    for pt in PASS_PLAYS:
        rng = scripted([0.1])
        assert resolve_play(pt, rng) == PlayResult(0, False)
        assert rng.calls == ["random"]


def test_completion_rates_roughly_match():
    rng = np.random.default_rng(3)
    for pt, expected in [(PlayType.PASS_SHORT, 0.7), (PlayType.PASS_MEDIUM, 0.5),
                         (PlayType.PASS_DEEP, 0.3)]:
        rate = np.mean([resolve_play(pt, rng).completed for _ in range(4000)])
        assert abs(rate - expected) < 0.04


def test_unknown_play_type_rejected():
    with pytest.raises(ValueError):
        resolve_play("hail-mary", np.random.default_rng(0))


def test_parse_accepts_names_and_values():
    assert PlayType.parse("RUN_LEFT") is PlayType.RUN_LEFT
    assert PlayType.parse("pass-deep") is PlayType.PASS_DEEP
    assert PlayType.parse(PlayType.RUN_RIGHT) is PlayType.RUN_RIGHT
    with pytest.raises(ValueError):
        PlayType.parse(3)
