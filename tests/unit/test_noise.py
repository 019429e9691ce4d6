"""Tests for noise sources."""

import io
import threading

import numpy as np
import pytest

from peaksynth.core.noise import EntropySource, NoiseSource, approximate_normal, uniform
from peaksynth.core.shared.exceptions import NoiseSourceError


class TestApproximateNormal:
    """Tests for the Irwin-Hall normal approximation."""

    def test_length_and_support(self):
        values = approximate_normal(1000, seed=1)
        assert values.shape == (1000,)
        assert values.min() >= -6.0
        assert values.max() <= 6.0

    def test_moments(self):
        values = approximate_normal(100_000, seed=42)
        assert abs(values.mean()) < 0.1
        assert values.std() == pytest.approx(1.0, abs=0.02)

    def test_sum_of_twelve_uniforms(self):
        expected = np.random.default_rng(5).random((10, 12)).sum(axis=1) - 6.0
        np.testing.assert_allclose(approximate_normal(10, seed=5), expected)

    def test_reproducible_with_seed(self):
        np.testing.assert_array_equal(approximate_normal(50, seed=3), approximate_normal(50, seed=3))

    def test_accepts_generator(self):
        rng = np.random.default_rng(9)
        first = approximate_normal(5, rng)
        second = approximate_normal(5, rng)
        assert not np.array_equal(first, second)

    def test_zero_length(self):
        assert approximate_normal(0, seed=1).shape == (0,)


class TestEntropySource:
    """Tests for entropy-backed uniform values."""

    def test_uniform_range(self):
        values = uniform(10_000)
        assert values.shape == (10_000,)
        assert values.min() >= 0.0
        assert values.max() < 1.0
        assert values.mean() == pytest.approx(0.5, abs=0.02)

    def test_decodes_little_endian_words(self):
        raw = (0).to_bytes(4, "little") + (2**31).to_bytes(4, "little") + (2**32 - 1).to_bytes(4, "little")
        source = EntropySource(reader=lambda size: raw[:size])
        values = source.uniform(3)
        np.testing.assert_allclose(values, [0.0, 0.5, (2**32 - 1) / 2**32])
        assert values.max() < 1.0

    def test_device_path(self, tmp_path):
        device = tmp_path / "entropy.bin"
        device.write_bytes(bytes(range(256)) * 4)
        values = EntropySource(device).uniform(16)
        assert values.shape == (16,)

    def test_missing_device(self, tmp_path):
        with pytest.raises(NoiseSourceError, match="entropy source"):
            EntropySource(tmp_path / "missing").uniform(4)

    def test_short_read(self, tmp_path):
        device = tmp_path / "short.bin"
        device.write_bytes(b"\x00\x01")
        with pytest.raises(NoiseSourceError, match="Short read"):
            EntropySource(device).uniform(4)

    def test_reader_failure(self):
        def broken(size):
            raise OSError("device unplugged")

        with pytest.raises(NoiseSourceError, match="device unplugged"):
            EntropySource(reader=broken).uniform(1)

    def test_concurrent_reads(self):
        source = EntropySource()
        results = []

        def read():
            results.append(source.uniform(1340))

        threads = [threading.Thread(target=read) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(r.shape == (1340,) and r.min() >= 0.0 and r.max() < 1.0 for r in results)

    def test_zero_values(self):
        source = EntropySource(reader=io.BytesIO(b"").read)
        assert source.uniform(0).shape == (0,)


class TestNoiseSource:
    """Tests for NoiseSource kind/scale selection."""

    def test_normal_scaled(self):
        noise = NoiseSource("normal", scale=2.0)
        values = noise.sample(100, np.random.default_rng(1))
        np.testing.assert_allclose(values, 2.0 * approximate_normal(100, seed=1))

    def test_uniform_scaled(self):
        raw = (2**31).to_bytes(4, "little") * 3
        noise = NoiseSource("uniform", scale=1 / 300, entropy=EntropySource(reader=lambda n: raw[:n]))
        values = noise.sample(3, np.random.default_rng(0))
        np.testing.assert_allclose(values, 0.5 / 300)
