"""Compositor tests."""

import numpy as np
import pytest

from pixelbatch.services.composite_service import Compositor
from tests.conftest import make_image, paint

BASE = (50, 60, 70, 255)
RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


@pytest.fixture
def compositor():
    return Compositor()


@pytest.fixture
def original():
    return make_image(120, 10, BASE)


@pytest.fixture
def red_layer():
    return paint(make_image(70, 10, (0, 0, 0, 0)), 3, 2, 4, 3, RED)


@pytest.fixture
def blue_layer():
    layer = make_image(70, 10, (0, 0, 0, 0))
    paint(layer, 3, 2, 4, 3, BLUE)
    return paint(layer, 5, 5, 6, 6, BLUE)


class TestCompositor:

    def test_dimensions(self, compositor, original, red_layer, blue_layer):
        out = compositor.compose(original, blue=blue_layer, red=red_layer)
        assert (out.width, out.height) == (70, 10)

    def test_red_wins_over_blue(self, compositor, original, red_layer, blue_layer):
        out = compositor.compose(original, blue=blue_layer, red=red_layer)
        assert tuple(out.pixels[2, 3]) == RED
        assert tuple(out.pixels[5, 5]) == BLUE

    def test_transparent_pixels_keep_base(self, compositor, original, red_layer, blue_layer):
        out = compositor.compose(original, blue=blue_layer, red=red_layer)
        rest = out.pixels.copy()
        rest[2, 3] = BASE
        rest[5, 5] = BASE
        assert (rest == BASE).all()

    def test_original_is_not_mutated(self, compositor, original, red_layer, blue_layer):
        before = original.pixels.copy()
        compositor.compose(original, blue=blue_layer, red=red_layer)
        np.testing.assert_array_equal(original.pixels, before)

    def test_layer_larger_than_base_is_clipped(self):
        base = np.zeros((2, 2, 4), dtype=np.uint8)
        layer = np.full((4, 5, 4), 255, dtype=np.uint8)
        out = Compositor._compose(base, layer, 1, 1)
        assert out.shape == (2, 2, 4)
        assert tuple(out[1, 1]) == (255, 255, 255, 255)
        assert tuple(out[0, 0]) == (0, 0, 0, 0)

    def test_half_transparent_layer_blends(self):
        base = np.zeros((1, 1, 4), dtype=np.uint8)
        base[...] = (0, 0, 0, 255)
        layer = np.zeros((1, 1, 4), dtype=np.uint8)
        layer[...] = (255, 255, 255, 51)
        out = Compositor._compose(base, layer)
        assert tuple(out[0, 0]) == (51, 51, 51, 255)
