from abc import ABC, abstractmethod

class BaseGenerator(ABC):
    """Uniform random source consumed by the tasks."""

    @abstractmethod
    def rand_int(self, low: int, high: int) -> int:
        """
        Returns an int drawn uniformly from [low, high) (high exclusive).
        """
        pass

    @abstractmethod
    def random_bits(self, size: int):
        """
        Returns bits: LongTensor [size] of i.i.d. uniform 0/1 values.
        """
        pass
