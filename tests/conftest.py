import pytest


class ScriptedRng:
    """Replays fixed draws: ``uniforms`` for random(), ``yards`` for integers()."""

    def __init__(self, uniforms=(), yards=()):
        self.uniforms = list(uniforms)
        self.yards = list(yards)
        self.calls = []

    def random(self):
        self.calls.append("random")
        return self.uniforms.pop(0) if self.uniforms else 0.99

    def integers(self, low, high):
        self.calls.append(("integers", low, high))
        y = self.yards.pop(0)
        assert low <= y < high, f"scripted {y} outside [{low}, {high})"
        return y


@pytest.fixture
def scripted():
    return ScriptedRng
