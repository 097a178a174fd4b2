"""Text fitting and centred layout onto raster images.

find_optimal_scale() measures every line once at the natural scale and
picks the largest uniform scale at which the widest line and the stacked
block both fit, clamped to [MIN_SCALE, MAX_SCALE].

layout_centered_block() and layout_reserved() turn that scale into draw
origins without touching pixels. draw_centered_text() and
draw_centered_text_with_reserved() do the layout and draw each line with
Pillow.

Drawing is best effort: no font, an unparsable font, or text with no
lines draws nothing and returns an empty ResolvedLayout.
"""

import logging
import math
from collections.abc import Sequence

from PIL import Image, ImageDraw

from glyphfit.core.fonts import FontCache, default_font_cache
from glyphfit.core.metrics import FontMetrics, cached_metrics, measure_text_width
from glyphfit.core.types import FontParseError, LayoutBox, LineLayout, PixelColor, ResolvedLayout

logger = logging.getLogger(__name__)

MIN_SCALE = 8.0
MAX_SCALE = 96.0
MAX_PADDING = 0.4


def split_lines(text: str) -> list[str]:
    """Split on LF and CRLF only. A trailing line break adds no empty line."""
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def clamp_padding(padding: float) -> float:
    if not math.isfinite(padding):
        return 0.0
    return min(max(padding, 0.0), MAX_PADDING)


def find_optimal_scale(font: FontMetrics, lines: Sequence[str], target_width: float, target_height: float) -> float:
    """Largest scale at which all lines fit target_width x target_height, clamped."""
    num_lines = max(len(lines), 1)
    max_line_width = max((measure_text_width(font, line) for line in lines), default=0.0)
    natural_height = num_lines * font.line_height(1.0)

    scale_for_width = target_width / max_line_width if max_line_width > 0 else target_height
    scale_for_height = target_height / natural_height if natural_height > 0 else target_width

    return min(max(min(scale_for_width, scale_for_height), MIN_SCALE), MAX_SCALE)


def _stack(font: FontMetrics, lines: Sequence[str], scale: float, width: float, start_y: float) -> ResolvedLayout:
    """Centre each line horizontally and stack lines from start_y."""
    line_height = font.line_height(scale)
    placed = []
    for i, line in enumerate(lines):
        line_width = font.text_width(line, scale)
        # overflowing lines are pinned to the left edge
        x = int(max((width - line_width) / 2.0, 0.0))
        y = int(start_y + i * line_height)
        placed.append(LineLayout(text=line, x=x, y=y, width=line_width))
    return ResolvedLayout(scale=scale, line_height=line_height, lines=placed)


def layout_centered_block(
    font: FontMetrics,
    lines: Sequence[str],
    width: float,
    height: float,
    padding: float,
) -> ResolvedLayout:
    """Fit lines inside the padded image and centre the block."""
    if not lines:
        return ResolvedLayout()
    content = 1.0 - 2.0 * clamp_padding(padding)
    scale = find_optimal_scale(font, lines, width * content, height * content)
    total_height = len(lines) * font.line_height(scale)
    return _stack(font, lines, scale, width, (height - total_height) / 2.0)


def layout_reserved(font: FontMetrics, text: str, box: LayoutBox, padding: float) -> ResolvedLayout:
    """Fit text between the reserved bands of box, centre it there, then shift by box.y_offset."""
    lines = split_lines(text)
    if not lines:
        return ResolvedLayout()
    available = box.available_height
    content = 1.0 - 2.0 * clamp_padding(padding)
    scale = find_optimal_scale(font, lines, box.width * content, available * content)
    total_height = len(lines) * font.line_height(scale)
    start_y = box.reserved_top + (available - total_height) / 2.0 + box.y_offset
    return _stack(font, lines, scale, box.width, start_y)


def _load_metrics(fonts: FontCache | None) -> FontMetrics | None:
    data = (fonts if fonts is not None else default_font_cache()).get()
    if data is None:
        logger.debug('No font available; skipping text draw')
        return None
    try:
        return cached_metrics(data)
    except FontParseError as e:
        logger.debug('Font unusable; skipping text draw: %s', e)
        return None


def draw_layout(image: Image.Image, font: FontMetrics, layout: ResolvedLayout, colour: PixelColor) -> None:
    """Draw every line of layout onto image in colour."""
    pil_font = font.pillow_font(layout.scale)
    fill = colour.rgba if 'A' in image.getbands() else colour.rgb
    draw = ImageDraw.Draw(image)
    for line in layout.lines:
        draw.text((line.x, line.y), line.text, fill=fill, font=pil_font)


def draw_centered_text(
    image: Image.Image,
    text: str,
    colour: PixelColor,
    padding: float,
    fonts: FontCache | None = None,
) -> ResolvedLayout:
    """Draw (possibly multi-line) text centred on image.

    Args:
        image: Pillow image to draw on, modified in place
        text: Text to draw; split on line breaks
        colour: Foreground colour
        padding: Fraction of each dimension kept clear on every side (0.0 to 0.4)
        fonts: Font source; the environment-configured default when omitted

    Returns:
        The layout that was drawn (empty when nothing was drawn).
    """
    font = _load_metrics(fonts)
    if font is None:
        return ResolvedLayout()
    layout = layout_centered_block(font, split_lines(text), image.width, image.height, padding)
    if layout:
        draw_layout(image, font, layout, colour)
    return layout


def draw_centered_text_with_reserved(
    image: Image.Image,
    text: str,
    colour: PixelColor,
    padding: float,
    reserved_top: float,
    reserved_bottom: float,
    y_offset: float = 0.0,
    fonts: FontCache | None = None,
) -> ResolvedLayout:
    """Draw text centred between reserved bands at the top and bottom of image.

    Useful when other UI elements (phase indicators, progress dots) own
    those bands. Padding applies to the space between the bands.
    """
    font = _load_metrics(fonts)
    if font is None:
        return ResolvedLayout()
    box = LayoutBox(
        width=image.width,
        height=image.height,
        reserved_top=reserved_top,
        reserved_bottom=reserved_bottom,
        y_offset=y_offset,
    )
    layout = layout_reserved(font, text, box, padding)
    if layout:
        draw_layout(image, font, layout, colour)
    return layout
