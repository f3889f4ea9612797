import pytest
import torch

from augtasks.encoding import (
    bits_to_int,
    decode_column,
    int_to_bits,
    one_hot_column,
    pack_columns,
    pad_column,
)


class TestBinaryHelpers:

    def test_bits_to_int_big_endian(self):
        assert bits_to_int([1, 0, 1, 1]) == 11
        assert bits_to_int([0, 0, 1, 0]) == 2
        assert bits_to_int([]) == 0

    def test_int_to_bits_no_leading_zeros(self):
        assert int_to_bits(13) == [1, 1, 0, 1]
        assert int_to_bits(1) == [1]
        assert int_to_bits(0) == []


class TestOneHot:

    def test_one_hot_column_layout(self):
        """Blocks of num_symbols per position, in sequence order."""
        col = one_hot_column([2, 0, 1], 3)
        assert col.shape == (9, 1)
        expected = torch.tensor([0, 0, 1, 1, 0, 0, 0, 1, 0], dtype=torch.float32)
        assert torch.equal(col.reshape(-1), expected)

    def test_decode_stops_at_padding(self):
        col = pad_column(one_hot_column([1, 0, 1], 3), 15)
        assert col.shape == (15, 1)
        assert decode_column(col, 3) == [1, 0, 1]

    def test_pad_column_keeps_longer_prefix(self):
        col = torch.arange(6, dtype=torch.float32).reshape(-1, 1)
        assert pad_column(col, 4).reshape(-1).tolist() == [0.0, 1.0, 2.0, 3.0]


class TestPackColumns:

    def test_pack_columns_one_column_per_item(self):
        a = torch.tensor([[1.0], [2.0]])
        b = torch.tensor([[3.0], [4.0]])
        packed = pack_columns([a, b])
        assert packed.shape == (2, 2)
        assert packed[:, 1].tolist() == [3.0, 4.0]

    def test_pack_columns_rejects_ragged(self):
        with pytest.raises(ValueError):
            pack_columns([torch.zeros(2, 1), torch.zeros(3, 1)])
