import torch
from augtasks.generators.base import BaseGenerator

class RandomSourceGenerator(BaseGenerator):
    """torch.Generator-backed source. Not thread safe; share one per thread."""

    def __init__(self, seed: int | None = None):
        self._gen = torch.Generator()
        if seed is None:
            self.seed = self._gen.seed()
        else:
            self._gen.manual_seed(seed)
            self.seed = seed

    def rand_int(self, low: int, high: int) -> int:
        return int(torch.randint(low, high, (1,), generator=self._gen).item())

    def random_bits(self, size: int):
        bits = torch.randint(
            low=0,
            high=2,
            size=(size,),
            generator=self._gen,
            dtype=torch.long
        )
        return bits
