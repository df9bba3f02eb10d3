import pytest

from webtris_session import Session


class ScriptedRandomizer:
    """Hands out piece names from a fixed list, cycling."""

    def __init__(self, names):
        self.names = list(names)
        self.calls = 0

    def next_piece(self):
        name = self.names[self.calls % len(self.names)]
        self.calls += 1
        return name


@pytest.fixture
def make_session():
    def _make(names="I", store=None, start=True):
        session = Session(store=store, rng=ScriptedRandomizer(names), drop_interval=1000)
        if start:
            session.start()
        return session
    return _make
