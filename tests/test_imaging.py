"""Tests for glyphfit.core.imaging — pulse, greyscale and conversions."""

import pytest
from glyphfit.core.imaging import (
    apply_brightness_pulse,
    bytes_to_rgb,
    bytes_to_rgba,
    greyscale_image,
    pulse_factor,
    rgb_to_rgba,
    rgba_to_rgb,
    scale_image,
    to_greyscale,
)
from PIL import Image


class TestPulseFactor:
    def test_midpoint_at_zero(self):
        assert pulse_factor(0.0) == pytest.approx(0.55)

    def test_peak_and_trough(self):
        assert pulse_factor(0.375) == pytest.approx(1.0)
        assert pulse_factor(1.125) == pytest.approx(0.1)

    def test_period(self):
        for t in (0.1, 0.7, 1.2):
            assert pulse_factor(t) == pytest.approx(pulse_factor(t + 1.5))

    def test_range(self):
        for i in range(300):
            assert 0.1 - 1e-9 <= pulse_factor(i * 0.01) <= 1.0 + 1e-9


class TestApplyBrightnessPulse:
    def test_full_brightness_keeps_pixels(self):
        img = Image.new('RGBA', (2, 2), (100, 150, 200, 128))
        out = apply_brightness_pulse(img, 0.375)
        assert out.getpixel((0, 0)) == (100, 150, 200, 128)

    def test_dims_rgb_keeps_alpha(self):
        img = Image.new('RGBA', (2, 2), (100, 200, 250, 77))
        out = apply_brightness_pulse(img, 1.125)
        assert out.getpixel((1, 1)) == (10, 20, 25, 77)

    def test_does_not_modify_input(self):
        img = Image.new('RGB', (1, 1), (200, 200, 200))
        apply_brightness_pulse(img, 1.125)
        assert img.getpixel((0, 0)) == (200, 200, 200)


class TestToGreyscale:
    def test_black(self):
        assert to_greyscale(0, 0, 0) == 0

    def test_white(self):
        assert to_greyscale(255, 255, 255) == 255

    def test_red(self):
        # 0.299 * 255 ≈ 76
        assert 70 < to_greyscale(255, 0, 0) < 80

    def test_green(self):
        # 0.587 * 255 ≈ 150
        assert 145 < to_greyscale(0, 255, 0) < 155

    def test_image(self):
        img = Image.new('RGBA', (1, 1), (0, 255, 0, 99))
        r, g, b, a = greyscale_image(img).getpixel((0, 0))
        assert r == g == b
        assert 145 < r < 155
        assert a == 99

    def test_image_matches_scalar(self):
        samples = [(v, v, v) for v in range(256)]
        samples += [(r, g, b) for r in range(0, 256, 51) for g in range(0, 256, 51) for b in range(0, 256, 17)]
        img = Image.new('RGB', (len(samples), 1))
        img.putdata(samples)
        grey = greyscale_image(img)
        for x, (r, g, b) in enumerate(samples):
            assert grey.getpixel((x, 0))[0] == to_greyscale(r, g, b), (r, g, b)

    def test_low_greys_survive(self):
        assert to_greyscale(1, 1, 1) == 1
        assert to_greyscale(8, 8, 8) == 8


class TestConversions:
    def test_rgb_to_rgba_preserves_colors(self):
        rgba = rgb_to_rgba(Image.new('RGB', (2, 2), (100, 150, 200)))
        assert rgba.size == (2, 2)
        assert rgba.getpixel((0, 0)) == (100, 150, 200, 255)

    def test_rgba_to_rgb_discards_alpha(self):
        rgb = rgba_to_rgb(Image.new('RGBA', (2, 2), (100, 150, 200, 128)))
        assert rgb.mode == 'RGB'
        assert rgb.getpixel((0, 0)) == (100, 150, 200)

    def test_bytes_to_rgb(self):
        data = bytes([255, 0, 0, 0, 255, 0, 0, 0, 255, 128, 128, 128])
        img = bytes_to_rgb(2, 2, data)
        assert img.getpixel((0, 0)) == (255, 0, 0)
        assert img.getpixel((1, 0)) == (0, 255, 0)
        assert img.getpixel((0, 1)) == (0, 0, 255)
        assert img.getpixel((1, 1)) == (128, 128, 128)

    def test_bytes_short_buffer_pads_black(self):
        img = bytes_to_rgb(2, 1, bytes([10, 20, 30, 40]))
        assert img.getpixel((0, 0)) == (10, 20, 30)
        assert img.getpixel((1, 0)) == (0, 0, 0)

    def test_bytes_extra_data_ignored(self):
        img = bytes_to_rgb(1, 1, bytes([1, 2, 3, 4, 5, 6]))
        assert img.getpixel((0, 0)) == (1, 2, 3)

    def test_bytes_to_rgba(self):
        img = bytes_to_rgba(1, 2, bytes([9, 8, 7]))
        assert img.getpixel((0, 0)) == (9, 8, 7, 255)
        assert img.getpixel((0, 1)) == (0, 0, 0, 255)


class TestScaleImage:
    def test_same_size_returns_copy(self):
        img = Image.new('RGB', (10, 10), (100, 100, 100))
        scaled = scale_image(img, 10, 10)
        assert scaled.size == (10, 10)
        assert scaled is not img

    def test_resizes(self):
        img = Image.new('RGB', (10, 10), (100, 100, 100))
        scaled = scale_image(img, 20, 20)
        assert scaled.size == (20, 20)
        assert scaled.getpixel((10, 10)) == (100, 100, 100)
