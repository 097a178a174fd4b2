"""glyphfit: colour resolution and text fitting for small raster widgets.

- colours: CSS named colours and #RGB / #RRGGBB / #RRGGBBAA notation
- fonts: compute-once font byte cache (fontconfig lookup by default)
- text: largest-fitting font scale and centred line layout, drawn with Pillow
- imaging: brightness pulse, greyscale and buffer/image conversions

Example:
    >>> from PIL import Image
    >>> from glyphfit import FontCache, PixelColor, draw_centered_text, get_or_default, resolve_many
    >>> colours = resolve_many({'fg': 'white', 'bg': '#1e1e2e'})
    >>> fg = get_or_default(colours, 'fg', PixelColor(255, 255, 255))
    >>> img = Image.new('RGBA', (72, 72), colours['bg'].rgba)
    >>> draw_centered_text(img, 'Hello', fg, 0.1, fonts=FontCache())
"""

from glyphfit.core.colors import get_or_default, resolve, resolve_many
from glyphfit.core.fonts import FontCache, default_font_cache, system_monospace_font
from glyphfit.core.hexcodec import hex_literal, parse_hex
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
from glyphfit.core.metrics import FontMetrics, measure_text_width
from glyphfit.core.palette import NAMED_COLORS, lookup_named, nearest_named
from glyphfit.core.text import (
    draw_centered_text,
    draw_centered_text_with_reserved,
    find_optimal_scale,
    layout_centered_block,
    layout_reserved,
)
from glyphfit.core.types import (
    FontParseError,
    GlyphfitError,
    LayoutBox,
    LineLayout,
    PixelColor,
    ResolvedLayout,
)

__version__ = '0.1.0'

__all__ = [
    # Colours
    'PixelColor',
    'NAMED_COLORS',
    'get_or_default',
    'hex_literal',
    'lookup_named',
    'nearest_named',
    'parse_hex',
    'resolve',
    'resolve_many',
    # Fonts
    'FontCache',
    'FontMetrics',
    'default_font_cache',
    'measure_text_width',
    'system_monospace_font',
    # Text
    'LayoutBox',
    'LineLayout',
    'ResolvedLayout',
    'draw_centered_text',
    'draw_centered_text_with_reserved',
    'find_optimal_scale',
    'layout_centered_block',
    'layout_reserved',
    # Image utilities
    'apply_brightness_pulse',
    'bytes_to_rgb',
    'bytes_to_rgba',
    'greyscale_image',
    'pulse_factor',
    'rgb_to_rgba',
    'rgba_to_rgb',
    'scale_image',
    'to_greyscale',
    # Exceptions
    'GlyphfitError',
    'FontParseError',
    '__version__',
]
