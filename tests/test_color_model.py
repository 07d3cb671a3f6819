import numpy as np
import pytest

from imagemanip.color_model import (
    HSL,
    hsl_array_to_rgb,
    hsl_to_rgb,
    rgb_array_to_hsl,
    rgb_to_hsl,
)


@pytest.mark.parametrize(
    "rgb, hue",
    [
        ((255, 0, 0), 0.0),
        ((255, 255, 0), 60.0),
        ((0, 255, 0), 120.0),
        ((0, 255, 255), 180.0),
        ((0, 0, 255), 240.0),
        ((255, 0, 255), 300.0),
    ],
)
def test_primary_and_secondary_hues(rgb, hue):
    h, s, l = rgb_to_hsl(rgb)
    assert h == pytest.approx(hue)
    assert s == pytest.approx(1.0)
    assert l == pytest.approx(0.5)


def test_achromatic_has_zero_saturation():
    h, s, l = rgb_to_hsl((128, 128, 128))
    assert h == 0.0
    assert s == 0.0
    assert l == pytest.approx(128 / 255)


def test_black_and_white_lightness():
    assert rgb_to_hsl((0, 0, 0)).lightness == 0.0
    assert rgb_to_hsl((255, 255, 255)).lightness == 1.0


def test_hsl_to_rgb_cyan():
    assert hsl_to_rgb(HSL(180.0, 1.0, 0.5)) == (0, 255, 255)


def test_hue_is_cyclic():
    assert hsl_to_rgb((360.0, 1.0, 0.5)) == hsl_to_rgb((0.0, 1.0, 0.5))
    assert hsl_to_rgb((-120.0, 1.0, 0.5)) == (0, 0, 255)


def test_round_trip_within_one(all_colors):
    h, s, l = rgb_array_to_hsl(all_colors)
    back = hsl_array_to_rgb(h, s, l)
    diff = np.abs(back.astype(np.int32) - all_colors.astype(np.int32))
    assert diff.max() <= 1


def test_single_pixel_matches_array_path(all_colors):
    for value in all_colors[:50]:
        expected = tuple(int(c) for c in hsl_array_to_rgb(*rgb_array_to_hsl(value[None, :]))[0])
        assert hsl_to_rgb(rgb_to_hsl(value)) == expected


def test_array_hue_range(all_colors):
    h, s, l = rgb_array_to_hsl(all_colors)
    assert (h >= 0).all() and (h < 360).all()
    assert (s >= 0).all() and (s <= 1).all()
    assert (l >= 0).all() and (l <= 1).all()
