"""
Copy task: present a random bit sequence, then a "go" marker, and expect
the sequence repeated n_repeats times.
"""
import torch
from augtasks.errors import ConfigurationError
from augtasks.tasks.base import BaseTask
from augtasks.registry import register_task


@register_task(
    "copy",
    description="repeat a random bit sequence n_repeats times",
    constructor_params=["max_length", "n_repeats"],
    param_defaults={"max_length": 5, "n_repeats": 2},
)
class CopyTask(BaseTask):
    """
    Input item: [T, 2] steps interleaved into a column of 2T, where
    T = size * (1 + n_repeats). Channel 0 carries the base bits during the
    first `size` steps, channel 1 is the go marker (1 after the base).
    Label item: [T, 1], zeros during presentation then the repeated base.
    """

    def __init__(self, max_length: int, n_repeats: int, generator=None):
        assert max_length > 1, f"CopyTask: max_length ({max_length}) must be > 1"
        if n_repeats < 1:
            raise ConfigurationError(f"CopyTask: repeat count ({n_repeats}) is not positive")
        super().__init__(generator)
        self.max_length = max_length
        self.n_repeats = n_repeats

    def generate(self, batch_size: int):
        self._check_batch_size(batch_size)
        inputs, labels = [], []
        for _ in range(batch_size):
            # uniform length from [2, max_length]
            size = self.generator.rand_int(2, self.max_length + 1)
            base = self.generator.random_bits(size).float()
            repeated = base.repeat(self.n_repeats)
            total = size + repeated.numel()

            x = torch.zeros(total, 2)
            x[:size, 0] = base
            x[size:, 1] = 1.0
            inputs.append(x.reshape(-1, 1))

            y = torch.zeros(total, 1)
            y[size:, 0] = repeated
            labels.append(y)
        return inputs, labels

    @staticmethod
    def split_input(column):
        """View an encoded input column as [T, 2] (value, marker) steps."""
        return column.reshape(-1, 2)
