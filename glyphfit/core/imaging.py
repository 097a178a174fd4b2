"""Image effects and format conversions.

Stateless helpers around Pillow images and raw RGB buffers. The brightness
pulse takes the sample time as an argument so callers decide the clock.
"""

import logging
import math

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

PULSE_PERIOD = 1.5  # seconds per full cycle
PULSE_MIN = 0.1
PULSE_MAX = 1.0


def pulse_factor(seconds: float) -> float:
    """Brightness multiplier at time `seconds`: a sine between 0.1 and 1.0."""
    amplitude = (PULSE_MAX - PULSE_MIN) / 2.0
    midpoint = PULSE_MIN + amplitude
    return math.sin(seconds * math.tau / PULSE_PERIOD) * amplitude + midpoint


def apply_brightness_pulse(image: Image.Image, seconds: float) -> Image.Image:
    """Return an RGBA copy with RGB scaled by pulse_factor(seconds). Alpha is kept."""
    factor = pulse_factor(seconds)
    logger.debug('apply_brightness_pulse factor=%.3f', factor)
    arr = np.array(image.convert('RGBA'), dtype=np.float32)
    arr[..., :3] *= factor
    return Image.fromarray(arr.astype(np.uint8), 'RGBA')


_LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float32)


def _luma(rgb: np.ndarray) -> np.ndarray:
    """Luminosity of an (..., 3) float32 array, truncated to uint8."""
    w = _LUMA_WEIGHTS
    return (rgb[..., 0] * w[0] + rgb[..., 1] * w[1] + rgb[..., 2] * w[2]).astype(np.uint8)


def to_greyscale(r: int, g: int, b: int) -> int:
    """Luminosity method: 0.299*R + 0.587*G + 0.114*B in float32, truncated."""
    return int(_luma(np.array([r, g, b], dtype=np.float32)))


def greyscale_image(image: Image.Image) -> Image.Image:
    """Apply to_greyscale to every pixel; alpha is kept."""
    arr = np.array(image.convert('RGBA'), dtype=np.float32)
    grey = _luma(arr[..., :3])
    out = np.stack([grey, grey, grey, arr[..., 3].astype(np.uint8)], axis=-1)
    return Image.fromarray(out, 'RGBA')


def rgb_to_rgba(image: Image.Image) -> Image.Image:
    """Fully opaque RGBA copy."""
    return image.convert('RGB').convert('RGBA')


def rgba_to_rgb(image: Image.Image) -> Image.Image:
    """Drop alpha without compositing."""
    arr = np.array(image.convert('RGBA'))
    return Image.fromarray(np.ascontiguousarray(arr[..., :3]), 'RGB')


def _rgb_buffer(width: int, height: int, data: bytes) -> np.ndarray:
    """Packed RGB bytes as an (h, w, 3) array; missing pixels are black."""
    needed = width * height * 3
    buf = np.zeros(needed, dtype=np.uint8)
    usable = min(len(data), needed)
    # a trailing partial pixel stays black
    usable -= usable % 3
    buf[:usable] = np.frombuffer(bytes(data[:usable]), dtype=np.uint8)
    return buf.reshape(height, width, 3)


def bytes_to_rgb(width: int, height: int, data: bytes) -> Image.Image:
    """Raw RGB bytes (width * height * 3) to an RGB image."""
    return Image.fromarray(_rgb_buffer(width, height, data), 'RGB')


def bytes_to_rgba(width: int, height: int, data: bytes) -> Image.Image:
    """Raw RGB bytes (width * height * 3) to a fully opaque RGBA image."""
    rgb = _rgb_buffer(width, height, data)
    alpha = np.full((height, width, 1), 255, dtype=np.uint8)
    return Image.fromarray(np.concatenate([rgb, alpha], axis=-1), 'RGBA')


def scale_image(image: Image.Image, width: int, height: int) -> Image.Image:
    """Resize with Lanczos. Same size returns a copy."""
    if image.size == (width, height):
        return image.copy()
    return image.resize((width, height), Image.Resampling.LANCZOS)
