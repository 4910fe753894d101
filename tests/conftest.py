import pytest


class ScriptedRandom:
    """
    Stand-in for random.Random with a fixed script of draws.

    `randint` returns the scripted ints in order, `random` the scripted floats
    (0.9 once exhausted, i.e. a positive fallback sign), `choice` always picks
    the same index and `shuffle` keeps the order unchanged.
    """

    def __init__(self, ints=(), floats=(), choice_index=0):
        self._ints = list(ints)
        self._floats = list(floats)
        self.choice_index = choice_index

    def randint(self, a, b):
        value = self._ints.pop(0)
        assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
        return value

    def random(self):
        return self._floats.pop(0) if self._floats else 0.9

    def choice(self, seq):
        return seq[self.choice_index]

    def shuffle(self, seq):
        pass


@pytest.fixture
def scripted():
    return ScriptedRandom
