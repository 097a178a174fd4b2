"""Compute the text layout for an image size without drawing anything.

Finds the largest font scale (clamped to 8..96 px line height) at which
every line fits the padded image, then reports the top-left origin of
each centred line.

With --reserved-top/--reserved-bottom/--y-offset the text is centred in
the band left between the reserved areas, then shifted by the offset.

The font comes from GLYPHFIT_FONT, or fontconfig's match for
GLYPHFIT_FONT_FAMILY (default: monospace).

Example:
    glyphfit fit "Hello\\nWorld" --size 72x72
    glyphfit fit "42" --size 72x72 --reserved-top 12 --reserved-bottom 8 --json
"""

import sys

from glyphfit.commands._options import add_layout_arguments, padding_for, unescape, uses_reserved
from glyphfit.core.config import Settings
from glyphfit.core.fonts import default_font_cache
from glyphfit.core.metrics import FontMetrics, cached_metrics
from glyphfit.core.text import layout_centered_block, layout_reserved, split_lines
from glyphfit.core.types import Command, FontParseError, LayoutBox, Report, ResolvedLayout

command = Command(
    name='fit',
    help='Report the fitted scale and line origins for text in a WxH image.',
)


def load_font_or_fail(report: Report) -> FontMetrics | None:
    """Font metrics from the default cache; reports the failure and returns None otherwise."""
    data = default_font_cache().get()
    if data is None:
        print('Error: no font available (set GLYPHFIT_FONT or install fontconfig)', file=sys.stderr)
        report.fail()
        return None
    try:
        return cached_metrics(data)
    except FontParseError as e:
        print(f'Error: {e}', file=sys.stderr)
        report.fail()
        return None


def compute_layout(font: FontMetrics, args, settings: Settings) -> ResolvedLayout:
    width, height = args.size
    text = unescape(args.text)
    padding = padding_for(args, settings)
    if uses_reserved(args):
        box = LayoutBox(width, height, args.reserved_top, args.reserved_bottom, args.y_offset)
        return layout_reserved(font, text, box, padding)
    return layout_centered_block(font, split_lines(text), width, height, padding)


@command.arguments
def add_arguments(parser) -> None:
    add_layout_arguments(parser)


@command.run
def run(report: Report, args) -> None:
    font = load_font_or_fail(report)
    if font is None:
        return
    layout = compute_layout(font, args, Settings.from_env())
    width, height = args.size
    report.add(f'{width}x{height}', layout.to_dict())
