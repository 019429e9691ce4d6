"""Test random and reference ensembles."""

import numpy as np
import pytest

from peaksynth.core.constants import AMPLITUDE_RANGE, STEEPNESS_RANGE, WIDTH_RANGE
from peaksynth.core.ensemble import EnsembleGenerator, PeakDraw, classify, reference_pipeline
from peaksynth.core.lineshapes import Gaussian, Lorentzian, Skew, SkewDirection
from peaksynth.core.pipeline import Pipeline


class TestEnsembleGenerator:
    """Tests for EnsembleGenerator."""

    def setup_method(self):
        self.generator = EnsembleGenerator(channel_count=1340)

    def test_empty_ensemble_is_identity(self, axis):
        pipeline = self.generator.generate(0, seed=99)
        assert len(pipeline) == 0
        for x in [0.0, 670.0, 1339.0]:
            assert pipeline.evaluate(x, 4.5) == 4.5
        np.testing.assert_array_equal(pipeline.evaluate_batch(axis, np.ones_like(axis)), 1.0)

    def test_same_seed_same_draws(self):
        first = self.generator.draws(50, np.random.default_rng(2024))
        second = self.generator.draws(50, np.random.default_rng(2024))
        assert first == second
        assert self.generator.generate(50, seed=2024) == self.generator.generate(50, seed=2024)

    def test_different_seed_different_draws(self):
        assert self.generator.generate(5, seed=1) != self.generator.generate(5, seed=2)

    def test_draw_ranges(self):
        draws = self.generator.draws(2000, np.random.default_rng(0))
        centers = np.array([d.center for d in draws])
        amplitudes = np.array([d.amplitude for d in draws])
        widths = np.array([d.width for d in draws])
        steepness = np.array([d.steepness for d in draws])

        assert centers.min() >= 0.0
        assert centers.max() < 1340.0
        assert amplitudes.min() >= AMPLITUDE_RANGE[0]
        assert amplitudes.max() < AMPLITUDE_RANGE[1]
        assert widths.min() >= WIDTH_RANGE[0]
        assert widths.max() < WIDTH_RANGE[1]
        assert steepness.min() >= STEEPNESS_RANGE[0]
        assert steepness.max() < STEEPNESS_RANGE[1]

    def test_all_shape_classes_drawn(self):
        draws = self.generator.draws(400, np.random.default_rng(5))
        classes = {(d.shape, d.direction) for d in draws}
        assert len(classes) == 4
        counts = [sum(1 for d in draws if (d.shape, d.direction) == c) for c in classes]
        assert min(counts) > 60

    def test_draw_order(self):
        """Each peak consumes five uniforms: center, amplitude, width, steepness, class."""
        rng = np.random.default_rng(11)
        u = np.random.default_rng(11).random(5)
        draw = self.generator.draw(rng)
        assert draw.center == pytest.approx(1340.0 * u[0])
        assert draw.amplitude == pytest.approx(100.0 + 1000.0 * u[1])
        assert draw.width == pytest.approx(1.0 + 25.0 * u[2])
        assert draw.steepness == pytest.approx(0.1 * u[3])
        assert (draw.shape, draw.direction) == classify(u[4])

    def test_generated_members_are_skewed(self):
        pipeline = self.generator.generate(10, seed=3)
        assert isinstance(pipeline, Pipeline)
        assert all(isinstance(peak, Skew) for peak in pipeline)
        assert all(isinstance(peak.inner, Gaussian | Lorentzian) for peak in pipeline)

    def test_generate_from_consumes_stream(self):
        rng = np.random.default_rng(8)
        first = self.generator.generate_from(3, rng)
        second = self.generator.generate_from(3, rng)
        assert first != second

    def test_custom_ranges(self):
        generator = EnsembleGenerator(100, center_range=(40.0, 60.0), width_range=(5.0, 6.0))
        for draw in generator.draws(100, np.random.default_rng(1)):
            assert 40.0 <= draw.center < 60.0
            assert 5.0 <= draw.width < 6.0


class TestClassify:
    """Tests for the categorical shape draw."""

    @pytest.mark.parametrize(
        ("u", "expected"),
        [
            (0.0, ("gaussian", SkewDirection.LEFT)),
            (0.2499, ("gaussian", SkewDirection.LEFT)),
            (0.25, ("gaussian", SkewDirection.RIGHT)),
            (0.5, ("lorentzian", SkewDirection.LEFT)),
            (0.75, ("lorentzian", SkewDirection.RIGHT)),
            (0.9999, ("lorentzian", SkewDirection.RIGHT)),
        ],
    )
    def test_cut_points(self, u, expected):
        assert classify(u) == expected

    def test_build(self):
        draw = PeakDraw(10.0, 200.0, 3.0, 0.05, "lorentzian", SkewDirection.LEFT)
        assert draw.build() == Skew.left(Lorentzian(10.0, 200.0, 3.0), 0.05)


class TestReferencePipeline:
    """Tests for the built-in reference ensemble."""

    def test_composition(self):
        pipeline = reference_pipeline()
        assert len(pipeline) == 20
        gaussians = [p for p in pipeline if isinstance(p.inner, Gaussian)]
        lorentzians = [p for p in pipeline if isinstance(p.inner, Lorentzian)]
        assert len(gaussians) == 10
        assert len(lorentzians) == 10
        assert all(p.direction is SkewDirection.LEFT for p in gaussians)
        assert all(p.direction is SkewDirection.RIGHT for p in lorentzians)

    def test_first_members(self):
        pipeline = reference_pipeline()
        assert pipeline[0].inner == Gaussian(1000.0, 6.0, 110.0)
        assert pipeline[0].steepness == pytest.approx(0.18)
        assert pipeline[10].inner == Lorentzian(200.0, 6.0, 50.0)
        assert pipeline[19].inner == Lorentzian(380.0, 10.5, 95.0)
        assert pipeline[19].steepness == pytest.approx(0.028)

    def test_centers(self):
        centers = sorted(p.center for p in reference_pipeline())
        assert centers[:10] == [200.0 + 20.0 * i for i in range(10)]
        assert centers[10:] == [800.0 + 50.0 * i for i in range(10)]
