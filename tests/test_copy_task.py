"""
Unit tests for the repeat-copy task.
"""
import pytest
import torch

from augtasks.errors import ConfigurationError
from augtasks.generators.random import RandomSourceGenerator
from augtasks.tasks.copy import CopyTask


class TestConstruction:

    def test_max_length_must_exceed_one(self):
        with pytest.raises(AssertionError):
            CopyTask(1, 2)

    def test_non_positive_repeats_rejected(self):
        with pytest.raises(ConfigurationError):
            CopyTask(5, 0)

    def test_non_positive_batch_size_rejected(self):
        task = CopyTask(5, 2, generator=RandomSourceGenerator(seed=0))
        with pytest.raises(ConfigurationError):
            task.generate(-1)


class TestExample:

    def test_base_repeated_twice(self, scripted):
        """size=3, base 101, two repeats."""
        gen = scripted(ints=[3], bits=[[1, 0, 1]])
        task = CopyTask(5, 2, generator=gen)
        inputs, labels = task.generate(1)

        assert labels[0].reshape(-1).tolist() == [0, 0, 0, 1, 0, 1, 1, 0, 1]
        assert inputs[0].shape == (18, 1)
        steps = task.split_input(inputs[0])
        assert steps[:, 0].tolist() == [1, 0, 1, 0, 0, 0, 0, 0, 0]
        assert steps[:, 1].tolist() == [0, 0, 0, 1, 1, 1, 1, 1, 1]

    def test_channels_interleaved_per_step(self, scripted):
        gen = scripted(ints=[2], bits=[[1, 1]])
        task = CopyTask(2, 1, generator=gen)
        inputs, _ = task.generate(1)
        assert inputs[0].reshape(-1).tolist() == [1, 0, 1, 0, 0, 1, 0, 1]


class TestProperties:

    @pytest.mark.parametrize("n_repeats", [1, 3])
    def test_label_segments_repeat_base(self, n_repeats):
        task = CopyTask(8, n_repeats, generator=RandomSourceGenerator(seed=5))
        inputs, labels = task.generate(32)
        for x, y in zip(inputs, labels):
            steps = task.split_input(x)
            target = y.reshape(-1)
            size = int((steps[:, 1] == 0).sum().item())
            assert 2 <= size <= 8
            assert target.numel() == size * (1 + n_repeats)
            assert steps.shape[0] == target.numel()

            base = steps[:size, 0]
            assert torch.equal(target[:size], torch.zeros(size))
            for r in range(n_repeats):
                start = size * (1 + r)
                assert torch.equal(target[start:start + size], base)

    def test_marker_zero_then_one(self):
        task = CopyTask(6, 2, generator=RandomSourceGenerator(seed=9))
        inputs, _ = task.generate(32)
        for x in inputs:
            marker = task.split_input(x)[:, 1]
            size = marker.numel() // 3
            assert torch.equal(marker[:size], torch.zeros(size))
            assert torch.equal(marker[size:], torch.ones(marker.numel() - size))

    def test_value_channel_silent_after_presentation(self):
        task = CopyTask(6, 2, generator=RandomSourceGenerator(seed=2))
        inputs, _ = task.generate(16)
        for x in inputs:
            steps = task.split_input(x)
            size = steps.shape[0] // 3
            assert steps[size:, 0].sum().item() == 0
