"""
Encoding helpers shared by the tasks.

Encoded items are float32 columns of shape [n, 1]. A one-hot encoded sequence
of length L over k symbols is laid out position by position: the k indicator
values of step 0, then those of step 1, and so on.
"""
from typing import Sequence

import torch
import torch.nn.functional as F
from torch import Tensor


def bits_to_int(bits: Sequence[int]) -> int:
    """Big-endian (MSB first) bits to an integer."""
    value = 0
    for bit in bits:
        value = (value << 1) + int(bit)
    return value


def int_to_bits(value: int) -> list[int]:
    """Binary digits of a non-negative integer, MSB first, without leading zeros.

    Zero has no set bits and yields an empty list; callers decide how to
    represent it.
    """
    bits = []
    while value > 0:
        bits.append(value & 1)
        value >>= 1
    return bits[::-1]


def one_hot_column(sequence, num_symbols: int) -> Tensor:
    """One-hot encode a 1-D sequence of symbol ids into a [num_symbols * len, 1] column."""
    idx = torch.as_tensor(sequence, dtype=torch.long).reshape(-1)
    onehot = F.one_hot(idx, num_classes=num_symbols).float()  # [len, num_symbols]
    return onehot.reshape(-1, 1)


def decode_column(column: Tensor, num_symbols: int) -> list[int]:
    """Recover symbol ids from a one-hot column. Stops at the first all-zero block (padding)."""
    blocks = column.reshape(-1, num_symbols)
    symbols = []
    for block in blocks:
        if not bool(block.any()):
            break
        symbols.append(int(block.argmax().item()))
    return symbols


def pad_column(column: Tensor, length: int) -> Tensor:
    """Flatten to a single column of `length` rows, zero-padding or truncating at the end."""
    flat = column.reshape(-1)
    if flat.numel() >= length:
        return flat[:length].reshape(-1, 1).clone()
    out = torch.zeros(length, dtype=flat.dtype)
    out[: flat.numel()] = flat
    return out.reshape(-1, 1)


def pack_columns(columns: Sequence[Tensor]) -> Tensor:
    """Pack equal-length columns into a dense [width, batch] matrix."""
    widths = {int(c.numel()) for c in columns}
    if len(widths) != 1:
        raise ValueError(f"Cannot pack columns of different lengths: {sorted(widths)}")
    return torch.cat([c.reshape(-1, 1) for c in columns], dim=1)
