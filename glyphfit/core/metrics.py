"""Glyph metrics for one loaded font, at any scale.

Scale is the pixel line height: at scale s, ascent - descent spans s
pixels and every advance width is multiplied by s / (ascent - descent).
Metrics are linear in scale, so natural (scale 1.0) measurements can be
multiplied out instead of re-measured.

Unit metrics come from fontTools (hhea, hmtx, cmap). Drawing uses a
Pillow FreeTypeFont sized so its em matches the same scale.
"""

from functools import lru_cache
from io import BytesIO

from fontTools.ttLib import TTFont
from PIL import ImageFont

from glyphfit.core.types import FontParseError


class FontMetrics:
    """Advance-width and line-height queries for one font."""

    def __init__(self, data: bytes, ttfont: TTFont):
        self._data = data
        self._font = ttfont
        self.units_per_em: int = ttfont['head'].unitsPerEm
        hhea = ttfont['hhea']
        self.ascent_units: int = hhea.ascent
        self.descent_units: int = hhea.descent
        self.height_units: int = hhea.ascent - hhea.descent
        if self.height_units <= 0:
            raise FontParseError(f'font has non-positive line height ({self.height_units} units)')
        self._cmap: dict[int, str] = ttfont.getBestCmap() or {}
        self._hmtx = ttfont['hmtx']
        self._notdef = ttfont.getGlyphOrder()[0]

    @classmethod
    def from_bytes(cls, data: bytes) -> 'FontMetrics':
        """Parse font bytes. Raises FontParseError if fontTools cannot read them."""
        try:
            ttfont = TTFont(BytesIO(data))
            return cls(data, ttfont)
        except FontParseError:
            raise
        except Exception as e:
            raise FontParseError(f'cannot parse font: {e}') from e

    def _to_pixels(self, units: float, scale: float) -> float:
        return units * scale / self.height_units

    def advance_units(self, ch: str) -> int:
        """Advance width of ch in font units; unmapped characters use glyph 0."""
        glyph = self._cmap.get(ord(ch), self._notdef)
        advance, _lsb = self._hmtx[glyph]
        return advance

    def advance_width(self, ch: str, scale: float) -> float:
        return self._to_pixels(self.advance_units(ch), scale)

    def text_width(self, text: str, scale: float) -> float:
        """Sum of advances, no kerning."""
        return self._to_pixels(sum(self.advance_units(ch) for ch in text), scale)

    def line_height(self, scale: float) -> float:
        return self._to_pixels(self.height_units, scale)

    def ascent(self, scale: float) -> float:
        return self._to_pixels(self.ascent_units, scale)

    def pillow_font(self, scale: float) -> ImageFont.FreeTypeFont:
        """A Pillow font whose line height at this scale matches line_height(scale)."""
        return _pillow_font(self._data, scale * self.units_per_em / self.height_units)


@lru_cache(maxsize=32)
def _pillow_font(data: bytes, em_size: float) -> ImageFont.FreeTypeFont:
    return ImageFont.truetype(BytesIO(data), size=em_size, layout_engine=ImageFont.Layout.BASIC)


@lru_cache(maxsize=8)
def cached_metrics(data: bytes) -> FontMetrics:
    """FontMetrics.from_bytes, parsed once per distinct font."""
    return FontMetrics.from_bytes(data)


def measure_text_width(font: FontMetrics, text: str) -> float:
    """Width of text at the font's natural scale (1.0)."""
    return font.text_width(text, 1.0)
