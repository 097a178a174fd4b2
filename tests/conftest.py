"""Shared fixtures: a tiny deterministic TrueType font built in memory.

Metrics of the test font (1000 units per em, ascent 800, descent -200):
  .notdef  400    space  250    A  600    a  500    W  900
so at scale 1.0 the line height is exactly 1.0 and 'a' advances 0.5.
Every inked glyph is a box from x=50 to advance-50, y=0 to 700.
"""

from io import BytesIO

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from glyphfit.core.fonts import FontCache
from glyphfit.core.metrics import FontMetrics

UNITS_PER_EM = 1000
ASCENT = 800
DESCENT = -200

# glyph name -> (codepoint, advance width)
TEST_GLYPHS: dict[str, tuple[int | None, int]] = {
    '.notdef': (None, 400),
    'space': (0x20, 250),
    'A': (0x41, 600),
    'a': (0x61, 500),
    'W': (0x57, 900),
}


def _box_glyph(advance: int):
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((advance - 50, 700))
    pen.lineTo((advance - 50, 0))
    pen.closePath()
    return pen.glyph()


def build_test_font() -> bytes:
    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(list(TEST_GLYPHS))
    fb.setupCharacterMap({cp: name for name, (cp, _adv) in TEST_GLYPHS.items() if cp is not None})
    glyphs = {
        name: TTGlyphPen(None).glyph() if name == 'space' else _box_glyph(adv)
        for name, (_cp, adv) in TEST_GLYPHS.items()
    }
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics(
        {name: (adv, 0 if name == 'space' else 50) for name, (_cp, adv) in TEST_GLYPHS.items()}
    )
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable({'familyName': 'Glyphfit Test', 'styleName': 'Regular'})
    fb.setupOS2(sTypoAscender=ASCENT, sTypoDescender=DESCENT, usWinAscent=ASCENT, usWinDescent=-DESCENT)
    fb.setupPost()
    buf = BytesIO()
    fb.save(buf)
    return buf.getvalue()


@pytest.fixture(scope='session')
def font_bytes() -> bytes:
    return build_test_font()


@pytest.fixture
def font(font_bytes: bytes) -> FontMetrics:
    return FontMetrics.from_bytes(font_bytes)


@pytest.fixture
def font_cache(font_bytes: bytes) -> FontCache:
    return FontCache(lambda: font_bytes)


@pytest.fixture
def no_font_cache() -> FontCache:
    return FontCache(lambda: None)
