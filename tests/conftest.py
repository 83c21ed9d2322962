import matplotlib

matplotlib.use("Agg")

import pytest


class ScriptedRandomSource:
    """
    RandomSource test double that replays fixed draws and fails loudly when
    asked for a draw it was not given.
    """

    def __init__(self, indices=(), normals=(), coins=()):
        self.indices = list(indices)
        self.normals = list(normals)
        self.coins = list(coins)

    def uniform_index(self, n):
        if not self.indices:
            raise AssertionError("unexpected uniform_index draw")
        i = self.indices.pop(0)
        assert 0 <= i < n
        return i

    def normal(self, mean=0.0, stddev=1.0):
        if not self.normals:
            raise AssertionError("unexpected normal draw")
        return mean + self.normals.pop(0)

    def bernoulli(self, p=0.5):
        if not self.coins:
            raise AssertionError("unexpected bernoulli draw")
        return self.coins.pop(0)

    def exhausted(self):
        return not (self.indices or self.normals or self.coins)


@pytest.fixture
def scripted():
    return ScriptedRandomSource
