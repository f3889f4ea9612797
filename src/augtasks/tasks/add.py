"""
Add task: two binary operands separated by a '+' token, target is their sum
in binary. Both sides are one-hot encoded over {0, 1, '+'}.
"""
from augtasks.encoding import (
    bits_to_int,
    decode_column,
    int_to_bits,
    one_hot_column,
    pack_columns,
    pad_column,
)
from augtasks.errors import ConfigurationError, InternalInvariantError
from augtasks.tasks.base import BaseTask
from augtasks.registry import register_task

SEPARATOR = 2
NUM_SYMBOLS = 3


@register_task(
    "add",
    description="binary addition of two random-length operands",
    constructor_params=["bit_len"],
    param_defaults={"bit_len": 8},
)
class AddTask(BaseTask):
    """Input [a bits, '+', b bits] -> target bits of a + b, MSB first."""

    def __init__(self, bit_len: int, generator=None):
        if bit_len <= 0:
            raise ConfigurationError(f"AddTask: binary length ({bit_len}) is not positive")
        super().__init__(generator)
        self.bit_len = bit_len

    def generate(self, batch_size: int, fixed_length: bool = False):
        """
        Ragged batch. Each input column has 3 * (size_a + size_b + 1) rows;
        each label column is zero-padded to the length of its input.
        """
        self._check_batch_size(batch_size)
        sequences, targets = [], []
        size_a = size_b = self.bit_len
        for _ in range(batch_size):
            if not fixed_length:
                # uniform length from [2, bit_len]; collapses to 2 when bit_len == 1
                high = max(self.bit_len, 2) + 1
                size_a = self.generator.rand_int(2, high)
                size_b = self.generator.rand_int(2, high)

            seq = self.generator.random_bits(size_a + size_b + 1)
            seq[size_a] = SEPARATOR
            symbols = [int(v) for v in seq.tolist()]

            a = bits_to_int(symbols[:size_a])
            b = bits_to_int(symbols[size_a + 1:])
            total = a + b
            digits = int_to_bits(total)
            if not digits:
                if total != 0:
                    raise InternalInvariantError(
                        f"AddTask: output sequence is empty but the target sum is not 0 (={total})"
                    )
                digits = [0]
            sequences.append(symbols)
            targets.append(digits)

        inputs = self.binarize(sequences)
        labels = self.binarize(targets)
        if len(inputs) != len(labels):
            raise InternalInvariantError(
                f"AddTask: sequences after binarize are not aligned ({len(inputs)} and {len(labels)})"
            )
        labels = [pad_column(y, x.numel()) for x, y in zip(inputs, labels)]
        return inputs, labels

    def generate_fixed(self, batch_size: int):
        """Dense batch: inputs and labels as [3 * (2 * bit_len + 1), batch_size] matrices."""
        inputs, labels = self.generate(batch_size, fixed_length=True)
        return pack_columns(inputs), pack_columns(labels)

    def binarize(self, sequences):
        """One-hot encode symbol sequences (values in {0, 1, 2}) into columns of 3 * len rows."""
        return [one_hot_column(seq, NUM_SYMBOLS) for seq in sequences]

    @staticmethod
    def decode_example(x, y):
        """Decode an encoded (input, label) pair back into (a, b, target)."""
        symbols = decode_column(x, NUM_SYMBOLS)
        sep = symbols.index(SEPARATOR)
        a = bits_to_int(symbols[:sep])
        b = bits_to_int(symbols[sep + 1:])
        return a, b, bits_to_int(decode_column(y, NUM_SYMBOLS))
