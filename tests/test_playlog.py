import pytest

from gridiron.playlog import PlayLog


def test_newest_first_and_capped():
    log = PlayLog()
    for i in range(25):
        log.add(f"msg {i}")
        assert len(log) <= 10
        assert log[0] == f"msg {i}"
    assert log.entries == [f"msg {i}" for i in range(24, 14, -1)]


def test_clear_and_iter():
    log = PlayLog(capacity=2)
    log.add("a")
    log.add("b")
    log.add("c")
    assert list(log) == ["c", "b"]
    log.clear()
    assert len(log) == 0


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        PlayLog(capacity=0)
