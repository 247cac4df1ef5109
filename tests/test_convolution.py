"""ConvolutionFilter tests."""

import numpy as np
import pytest

from pixelbatch.models.kernel import EDGE_DETECT_KERNEL, SHARPEN_KERNEL, Kernel
from pixelbatch.services.convolution_service import ConvolutionFilter
from tests.conftest import make_image, paint


@pytest.fixture
def edge_filter():
    return ConvolutionFilter(EDGE_DETECT_KERNEL)


@pytest.fixture
def sharpen_filter():
    return ConvolutionFilter(SHARPEN_KERNEL)


class TestKernels:

    def test_edge_weights_sum_to_zero(self):
        assert EDGE_DETECT_KERNEL.as_array().sum() == 0

    def test_sharpen_weights_sum_to_one(self):
        assert SHARPEN_KERNEL.as_array().sum() == 1

    def test_kernel_must_be_3x3(self):
        with pytest.raises(ValueError):
            Kernel(name="bad", weights=((1, 1), (1, 1)))


class TestConvolution:

    def test_mid_gray_edge_detect_is_black(self, edge_filter):
        img = make_image(5, 5, (128, 128, 128, 255))
        out = edge_filter.apply(img)
        assert out.pixels.shape == img.pixels.shape
        assert (out.pixels[:, :, :3] == 0).all()
        assert (out.pixels[:, :, 3] == 255).all()

    def test_sharpen_keeps_uniform_image(self, sharpen_filter):
        img = make_image(4, 6, (10, 120, 240, 255))
        out = sharpen_filter.apply(img)
        np.testing.assert_array_equal(out.pixels, img.pixels)

    def test_single_bright_pixel(self, edge_filter):
        img = paint(make_image(3, 3), 1, 1, 2, 2, (200, 0, 0, 255))
        out = edge_filter.apply(img)
        # centre: -8 * 200 clamps to 0; every neighbour sees the pixel once
        assert tuple(out.pixels[1, 1]) == (0, 0, 0, 255)
        assert tuple(out.pixels[0, 0]) == (200, 0, 0, 255)
        assert tuple(out.pixels[2, 1]) == (200, 0, 0, 255)

    def test_sums_above_255_are_clamped(self, sharpen_filter):
        img = paint(make_image(3, 3, (100, 100, 100, 255)), 1, 1, 2, 2, (200, 200, 200, 255))
        out = sharpen_filter.apply(img)
        # 5 * 200 - 4 * 100 = 600
        assert tuple(out.pixels[1, 1]) == (255, 255, 255, 255)

    def test_alpha_is_preserved(self, edge_filter):
        img = make_image(4, 4, (50, 60, 70, 0))
        img.pixels[:, :, 3] = np.arange(16, dtype=np.uint8).reshape(4, 4) * 10
        out = edge_filter.apply(img)
        np.testing.assert_array_equal(out.pixels[:, :, 3], img.pixels[:, :, 3])

    def test_kernel_is_not_flipped(self):
        # only the east neighbour is weighted
        east = ConvolutionFilter(Kernel(name="east", weights=((0, 0, 0), (0, 0, 1), (0, 0, 0))))
        img = paint(make_image(3, 1), 2, 0, 3, 1, (90, 0, 0, 255))
        out = east.apply(img)
        assert out.pixels[0, 1, 0] == 90
        assert out.pixels[0, 0, 0] == 0

    def test_source_untouched_and_deterministic(self, edge_filter, square_image):
        before = square_image.pixels.copy()
        first = edge_filter.apply(square_image.clone())
        second = edge_filter.apply(square_image.clone())
        assert first.pixels.tobytes() == second.pixels.tobytes()
        np.testing.assert_array_equal(square_image.pixels, before)
