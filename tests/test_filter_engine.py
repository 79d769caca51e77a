"""Tests for the SpatialFilterEngine core."""

import cv2
import numpy as np
import pytest

from spatial_filter.exceptions import KernelTooLargeForImage
from spatial_filter.models.filter_engine import SpatialFilterEngine
from spatial_filter.models.image import Image
from spatial_filter.models.kernel import (
    GAUSSIAN_5X5,
    LAPLACE_5X5,
    FilterSpec,
    FilterType,
    Kernel,
    filter_spec,
)

engine = SpatialFilterEngine()

ALL_SPECS = [filter_spec(t, m) for t in FilterType for m in (3, 5)]


def _custom(weights, divisor=1) -> FilterSpec:
    return FilterSpec(FilterType.GAUSSIAN, Kernel(np.array(weights), divisor=divisor))


@pytest.mark.parametrize("spec", ALL_SPECS, ids=lambda s: s.name)
def test_output_keeps_input_size(spec: FilterSpec, rng) -> None:
    img = Image.from_pixels(rng.integers(0, 256, size=(11, 17), dtype=np.uint8), stride=20)
    out = engine.apply(img, spec)

    assert (out.width, out.height) == (17, 11)
    assert out.stride == out.width
    assert not np.shares_memory(out.buffer, img.buffer)


@pytest.mark.parametrize("mask", [3, 5])
@pytest.mark.parametrize("value", [0, 1, 137, 255])
def test_gaussian_is_identity_on_uniform_image(mask: int, value: int) -> None:
    img = Image.from_pixels(np.full((9, 12), value, dtype=np.uint8))
    out = engine.apply(img, filter_spec("gaussian", mask))

    np.testing.assert_array_equal(out.pixels, img.pixels)


@pytest.mark.parametrize("mask", [3, 5])
@pytest.mark.parametrize("value", [0, 1, 137, 255])
def test_laplace_vanishes_on_uniform_image(mask: int, value: int) -> None:
    img = Image.from_pixels(np.full((9, 12), value, dtype=np.uint8))
    out = engine.apply(img, filter_spec("laplace", mask))

    assert not out.pixels.any()


def test_replicate_border_on_single_row() -> None:
    # Only tap i=0 is live, i.e. output(x) = input(x - 2) clamped to the row
    img = Image.from_pixels(np.array([[10, 20, 30, 40, 50]], dtype=np.uint8))
    out = engine.apply(img, _custom([[1, 0, 0, 0, 0]]))

    np.testing.assert_array_equal(out.pixels, [[10, 10, 10, 20, 30]])


def test_replicate_border_on_single_column() -> None:
    # Only tap j=4 is live, i.e. output(y) = input(y + 2) clamped to the column
    img = Image.from_pixels(np.array([[10], [20], [30], [40], [50]], dtype=np.uint8))
    out = engine.apply(img, _custom([[0], [0], [0], [0], [1]]))

    np.testing.assert_array_equal(out.pixels.ravel(), [30, 40, 50, 50, 50])


def test_replicate_border_at_corners() -> None:
    # A 3x3 box sum at the top-left corner sees the corner sample four times
    pixels = np.zeros((4, 4), dtype=np.uint8)
    pixels[0, 0] = 9
    out = engine.apply(Image.from_pixels(pixels), _custom(np.ones((3, 3)), divisor=9))

    assert out.at(0, 0) == 4  # 9 * 4 / 9
    assert out.at(1, 1) == 1
    assert out.at(2, 2) == 0


def test_results_saturate_instead_of_wrapping() -> None:
    img = Image.from_pixels(np.array([[200, 100, 0]], dtype=np.uint8))

    doubled = engine.apply(img, _custom([[2]]))
    negated = engine.apply(img, _custom([[-1]]))

    np.testing.assert_array_equal(doubled.pixels, [[255, 200, 0]])
    np.testing.assert_array_equal(negated.pixels, [[0, 0, 0]])


def test_division_rounds_to_nearest() -> None:
    img = Image.from_pixels(np.array([[1, 2, 3, 5]], dtype=np.uint8))
    out = engine.apply(img, _custom([[1]], divisor=4))

    # 0.25 -> 0, 0.5 -> 0 (half to even), 0.75 -> 1, 1.25 -> 1
    np.testing.assert_array_equal(out.pixels, [[0, 0, 1, 1]])


def test_gaussian_spreads_bright_spot_over_mask(bright_spot) -> None:
    out = engine.apply(Image.from_pixels(bright_spot), filter_spec("gaussian", 5)).pixels

    window = out[3:8, 3:8]
    expected = np.rint(255 * GAUSSIAN_5X5.weights / GAUSSIAN_5X5.divisor)
    np.testing.assert_array_equal(window, expected)
    assert (window > 0).all()
    assert out[5, 5] == window.max() == 57

    outside = out.copy()
    outside[3:8, 3:8] = 0
    assert not outside.any()
    np.testing.assert_array_equal(out, out.T)


def test_laplace_marks_bright_spot_edges(bright_spot) -> None:
    out = engine.apply(Image.from_pixels(bright_spot), filter_spec("laplace", 5)).pixels

    # Positive taps saturate high, negative taps clamp to zero
    expected = np.where(LAPLACE_5X5.weights > 0, 255, 0)
    np.testing.assert_array_equal(out[3:8, 3:8], expected)
    assert out[5, 5] == 255
    assert out[5, 4] == 255 and out[5, 3] == 0

    outside = out.copy()
    outside[3:8, 3:8] = 0
    assert not outside.any()


def test_laplace_response_on_grey_background() -> None:
    pixels = np.full((10, 10), 100, dtype=np.uint8)
    pixels[5, 5] = 101
    out = engine.apply(Image.from_pixels(pixels), filter_spec("laplace", 5)).pixels

    # Unit step: the raw response is the mask itself, clamped at zero
    np.testing.assert_array_equal(out[3:8, 3:8], np.clip(LAPLACE_5X5.weights, 0, 255))
    assert out[0, 0] == 0


@pytest.mark.parametrize("shape", [(3, 3), (3, 10), (10, 4)])
def test_kernel_too_large_for_image(shape) -> None:
    img = Image.from_pixels(np.zeros(shape, dtype=np.uint8))

    with pytest.raises(KernelTooLargeForImage) as exc_info:
        engine.apply(img, filter_spec("gaussian", 5))

    assert exc_info.value.kernel_size == (5, 5)
    assert exc_info.value.image_size == (shape[1], shape[0])


def test_kernel_exactly_fits_image() -> None:
    img = Image.from_pixels(np.full((5, 5), 42, dtype=np.uint8))
    out = engine.apply(img, filter_spec("gaussian", 5))

    assert (out.pixels == 42).all()


def test_stride_padding_does_not_leak_into_result(rng) -> None:
    pixels = rng.integers(0, 256, size=(8, 9), dtype=np.uint8)
    spec = filter_spec("laplace", 5)

    tight = engine.apply(Image.from_pixels(pixels), spec)
    padded = engine.apply(Image.from_pixels(pixels, stride=16), spec)

    np.testing.assert_array_equal(tight.pixels, padded.pixels)


@pytest.mark.parametrize("spec", ALL_SPECS, ids=lambda s: s.name)
def test_matches_opencv_filter2d_with_replicate_border(spec: FilterSpec, rng) -> None:
    pixels = rng.integers(0, 256, size=(24, 32), dtype=np.uint8)
    out = engine.apply(Image.from_pixels(pixels), spec)

    reference = cv2.filter2D(
        pixels.astype(np.float64),
        cv2.CV_64F,
        spec.kernel.weights / spec.kernel.divisor,
        borderType=cv2.BORDER_REPLICATE,
    )
    reference = np.clip(np.rint(reference), 0, 255)

    # Float summation order may move an exact .5 tie by one step
    assert np.abs(out.pixels.astype(int) - reference.astype(int)).max() <= 1
