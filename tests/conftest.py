import pytest
import torch

from augtasks.generators.base import BaseGenerator


class ScriptedGenerator(BaseGenerator):
    """Replays fixed draws so examples can be checked exactly."""

    def __init__(self, ints=(), bits=()):
        self.ints = list(ints)
        self.bits = [list(b) for b in bits]
        self.seed = None

    def rand_int(self, low: int, high: int) -> int:
        value = self.ints.pop(0)
        assert low <= value < high
        return value

    def random_bits(self, size: int):
        bits = self.bits.pop(0)
        assert len(bits) == size
        return torch.tensor(bits, dtype=torch.long)


@pytest.fixture
def scripted():
    return ScriptedGenerator
