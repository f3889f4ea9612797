from abc import ABC, abstractmethod

from augtasks.errors import ConfigurationError
from augtasks.generators.base import BaseGenerator
from augtasks.generators.random import RandomSourceGenerator

class BaseTask(ABC):

    def __init__(self, generator: BaseGenerator | None = None):
        self.generator = generator if generator is not None else RandomSourceGenerator()

    @abstractmethod
    def generate(self, batch_size: int):
        """
        Returns (inputs, labels): two lists of length batch_size,
        each item a float column [n, 1].
        """
        pass

    @staticmethod
    def _check_batch_size(batch_size: int) -> None:
        if batch_size < 1:
            raise ConfigurationError(f"batch size ({batch_size}) is not positive")
