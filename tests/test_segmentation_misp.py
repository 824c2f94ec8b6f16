# -*- coding: utf-8 -*-
"""
Tests for the MixtureSuperpixels processor and its iteration control.

Dependencies
------------
pytest

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

import numpy as np
import pytest

from sarmix import MixtureSuperpixels, SegmentationState
from sarmix.data_prep import GridPartitioner
from sarmix.exceptions import UncoveredPixelWarning, ValidationError
from sarmix.image_processing.segmentation.misp import compute_amplitude
from sarmix.image_processing.segmentation.regions import RegionSet
from sarmix.vocabulary import ImageModality, ProcessorCategory


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

class TestScenarios:
    """End-to-end behavior on small synthetic images."""

    def test_uniform_4x4_initial_regions(self):
        misp = MixtureSuperpixels(region_size=2)
        state = misp.initialize(np.full((4, 4), 9.0))
        assert state.n_regions == 4
        np.testing.assert_array_equal(state.regions.counts, [4, 4, 4, 4])
        np.testing.assert_allclose(state.proportions, [0.25] * 4)

    def test_uniform_4x4_blocks_stable_after_one_iteration(self):
        misp = MixtureSuperpixels(region_size=2)
        image = np.full((4, 4), 9.0)
        state = misp.iterate(misp.initialize(image))
        expected = GridPartitioner(4, 4, 2).label_map()
        np.testing.assert_array_equal(state.labels, expected)
        assert state.n_regions == 4
        assert state.uncovered_counts == [0]

    def test_uniform_4x4_blocks_stable_after_full_run(self):
        labels = MixtureSuperpixels(region_size=2).apply(np.full((4, 4), 9.0))
        np.testing.assert_array_equal(
            labels, GridPartitioner(4, 4, 2).label_map(),
        )

    def test_region_size_equal_to_image_gives_single_region(self,
                                                           speckle_image):
        rows, cols = speckle_image.shape
        misp = MixtureSuperpixels(region_size=max(rows, cols))
        state = misp.segment(speckle_image)
        assert state.region_counts[0] == 1
        assert state.n_regions == 1
        assert np.all(state.labels == 1)

    def test_two_halves_do_not_mix(self, two_region_image):
        misp = MixtureSuperpixels(region_size=5)
        labels = misp.apply(two_region_image)
        right = np.zeros(labels.shape, dtype=bool)
        right[:, 20:] = True
        purity = []
        for k in np.unique(labels):
            members = right[labels == k]
            frac = members.mean()
            purity.append(max(frac, 1.0 - frac))
        assert np.mean(purity) > 0.95

    def test_alfa_one_gives_empirical_proportions(self, speckle_image):
        state = MixtureSuperpixels(region_size=6, alfa=1.0,
                                   max_iterations=3).segment(speckle_image)
        np.testing.assert_allclose(
            state.proportions, state.regions.counts / speckle_image.size,
        )

    def test_zero_iterations_returns_grid(self, speckle_image):
        labels = MixtureSuperpixels(region_size=7,
                                    max_iterations=0).apply(speckle_image)
        rows, cols = speckle_image.shape
        np.testing.assert_array_equal(
            labels, GridPartitioner(rows, cols, 7).label_map(),
        )


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------

class TestInvariants:
    """Properties that hold after every round."""

    def test_round_invariants(self, speckle_image):
        misp = MixtureSuperpixels(region_size=4)
        state = misp.initialize(speckle_image)
        n_pixels = speckle_image.size
        previous = state.n_regions
        for _ in range(8):
            misp.iterate(state)
            assert state.regions.counts.sum() == n_pixels
            assert np.all(state.regions.counts > 0)
            assert state.proportions.sum() == pytest.approx(1.0)
            assert state.n_regions <= previous
            previous = state.n_regions
            for region in state.regions:
                np.testing.assert_allclose(region.covariance,
                                           region.covariance.T)
                assert np.all(np.linalg.eigvalsh(region.covariance) > 0)
        assert state.iteration == 8
        assert len(state.region_counts) == 9

    def test_labels_cover_1_to_k(self, speckle_image):
        state = MixtureSuperpixels(region_size=5).segment(speckle_image)
        unique = np.unique(state.labels)
        np.testing.assert_array_equal(unique,
                                      np.arange(1, state.n_regions + 1))
        assert state.labels.shape == speckle_image.shape
        assert np.issubdtype(state.labels.dtype, np.integer)

    def test_label_map_matches_region_members(self, speckle_image):
        state = MixtureSuperpixels(region_size=5,
                                   max_iterations=4).segment(speckle_image)
        for region_id, region in state.regions.items():
            assert np.all(state.labels[region.rows, region.cols] == region_id)

    def test_deterministic(self, speckle_image):
        misp = MixtureSuperpixels(region_size=5)
        np.testing.assert_array_equal(misp.apply(speckle_image),
                                      misp.apply(speckle_image.copy()))

    def test_region_count_history_non_increasing(self, speckle_image):
        state = MixtureSuperpixels(region_size=3).segment(speckle_image)
        counts = state.region_counts
        assert len(counts) == 21
        assert all(b <= a for a, b in zip(counts, counts[1:]))


# ---------------------------------------------------------------------------
# Uncovered pixels
# ---------------------------------------------------------------------------

class TestUncoveredPixels:
    """Pixels outside every window keep their label and raise a warning."""

    def test_warns_and_keeps_previous_labels(self):
        misp = MixtureSuperpixels(region_size=2)
        state = misp.initialize(np.full((10, 10), 4.0))
        state.labels = np.ones((10, 10), dtype=np.int64)
        state.regions = RegionSet.from_label_map(state.labels, 1)
        state.regions.estimate_parameters(state.amplitude)
        state.regions[1].centroid = np.array([0.0, 0.0])
        state.proportions = np.array([1.0])

        with pytest.warns(UncoveredPixelWarning, match="91 pixel"):
            misp.iterate(state)
        assert state.uncovered_counts == [91]
        assert np.all(state.labels == 1)
        assert state.n_regions == 1


# ---------------------------------------------------------------------------
# One-pixel-thick images
# ---------------------------------------------------------------------------

class TestStripImages:
    """Thin regions have ill-conditioned but positive-definite covariances."""

    def test_long_row_single_region(self):
        misp = MixtureSuperpixels(region_size=9000, max_iterations=1)
        labels = misp.apply(np.full((1, 9000), 4.0))
        assert labels.shape == (1, 9000)
        assert np.all(labels == 1)

    def test_row_strip_many_regions(self, speckle_image):
        strip = speckle_image[:1, :].copy()
        state = MixtureSuperpixels(region_size=5).segment(strip)
        assert state.region_counts[0] == 6
        np.testing.assert_array_equal(np.unique(state.labels),
                                      np.arange(1, state.n_regions + 1))

    def test_column_strip(self):
        image = np.full((40, 1), 2.0)
        labels = MixtureSuperpixels(region_size=10,
                                    max_iterations=3).apply(image)
        np.testing.assert_array_equal(labels.ravel(),
                                      np.repeat([1, 2, 3, 4], 10))


# ---------------------------------------------------------------------------
# Output modes, progress and metadata
# ---------------------------------------------------------------------------

class TestProcessorInterface:
    """Test apply/segment surface."""

    def test_mean_output_of_flat_image(self, flat_image):
        result = MixtureSuperpixels(region_size=5,
                                    output='mean').apply(flat_image)
        np.testing.assert_allclose(result, flat_image)

    def test_mean_output_matches_labels(self, speckle_image):
        misp = MixtureSuperpixels(region_size=6, max_iterations=5)
        state = misp.segment(speckle_image)
        mean = state.mean_image()
        for region_id, region in state.regions.items():
            expected = speckle_image[region.rows, region.cols].mean()
            assert mean[region.rows[0], region.cols[0]] == \
                pytest.approx(expected)

    def test_runtime_override(self, speckle_image):
        misp = MixtureSuperpixels(region_size=6)
        state = misp.segment(speckle_image, region_size=12, max_iterations=2)
        assert state.region_counts[0] == 2 * 3
        assert state.iteration == 2
        assert misp.region_size == 6

    def test_segment_returns_state(self, speckle_image):
        state = MixtureSuperpixels(max_iterations=1).segment(speckle_image)
        assert isinstance(state, SegmentationState)
        np.testing.assert_allclose(state.amplitude,
                                   np.sqrt(speckle_image) + 0.01)

    def test_progress_callback(self, speckle_image):
        fractions = []
        MixtureSuperpixels(region_size=6, max_iterations=4).apply(
            speckle_image, progress_callback=fractions.append,
        )
        assert fractions == [0.0, 0.25, 0.5, 0.75, 1.0]

    def test_integer_image_accepted(self):
        image = np.full((6, 6), 3, dtype=np.uint8)
        labels = MixtureSuperpixels(region_size=3).apply(image)
        assert labels.shape == (6, 6)

    def test_bool_image_read_as_intensity(self):
        image = np.ones((6, 6), dtype=bool)
        result = MixtureSuperpixels(region_size=3,
                                    output='mean').apply(image)
        np.testing.assert_allclose(result, 1.0)

    def test_numpy_scalar_overrides(self, speckle_image):
        misp = MixtureSuperpixels(region_size=np.int64(6), alfa=np.float64(1.0))
        state = misp.segment(speckle_image, max_iterations=np.int64(2),
                             nu_max=np.float64(50.0),
                             covariance_jitter=np.float32(0.01))
        assert state.iteration == 2
        assert state.region_counts[0] == 4 * 5

    def test_version_and_tags(self):
        assert MixtureSuperpixels.__processor_version__ == '1.0.0'
        tags = MixtureSuperpixels.__processor_tags__
        assert tags['category'] is ProcessorCategory.SEGMENTATION
        assert ImageModality.SAR in tags['modalities']

    def test_compute_amplitude(self):
        np.testing.assert_allclose(
            compute_amplitude(np.array([[0.0, 4.0]])), [[0.01, 2.01]],
        )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestValidation:
    """Invalid input is rejected before any iteration."""

    @pytest.mark.parametrize('region_size', [0, -3])
    def test_non_positive_region_size(self, region_size):
        with pytest.raises(ValidationError, match="region_size"):
            MixtureSuperpixels(region_size=region_size)

    def test_float_region_size(self):
        with pytest.raises(ValidationError, match="integer"):
            MixtureSuperpixels(region_size=2.5)

    def test_region_size_override_validated(self, speckle_image):
        with pytest.raises(ValidationError, match="region_size"):
            MixtureSuperpixels().apply(speckle_image, region_size=0)

    def test_float_region_size_override(self, speckle_image):
        with pytest.raises(ValidationError, match="integer"):
            MixtureSuperpixels().apply(speckle_image, region_size=2.5)

    def test_alfa_override_validated(self, speckle_image):
        with pytest.raises(ValidationError, match="alfa"):
            MixtureSuperpixels().apply(speckle_image, alfa=-1.0)

    def test_non_positive_alfa(self):
        with pytest.raises(ValidationError, match="alfa"):
            MixtureSuperpixels(alfa=0.0)

    def test_invalid_output(self):
        with pytest.raises(ValueError, match="choices"):
            MixtureSuperpixels(output='contours')

    def test_negative_iterations(self):
        with pytest.raises(ValueError, match="minimum"):
            MixtureSuperpixels(max_iterations=-1)

    def test_empty_image(self):
        with pytest.raises(ValidationError, match="empty"):
            MixtureSuperpixels().apply(np.zeros((0, 5)))

    def test_non_2d_image(self):
        with pytest.raises(ValidationError, match="2D"):
            MixtureSuperpixels().apply(np.ones((3, 8, 8)))

    def test_nan_image(self):
        image = np.ones((8, 8))
        image[2, 3] = np.nan
        with pytest.raises(ValidationError, match="non-finite"):
            MixtureSuperpixels().apply(image)

    def test_negative_image(self):
        image = np.ones((8, 8))
        image[0, 0] = -1.0
        with pytest.raises(ValidationError, match="non-negative"):
            MixtureSuperpixels().apply(image)

    def test_complex_image(self):
        with pytest.raises(ValidationError, match="complex"):
            MixtureSuperpixels().apply(np.ones((8, 8), dtype=np.complex64))

    def test_not_an_array(self):
        with pytest.raises(ValidationError, match="ndarray"):
            MixtureSuperpixels().apply([[1.0, 2.0], [3.0, 4.0]])
