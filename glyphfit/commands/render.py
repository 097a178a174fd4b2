"""Render centred text onto a solid background and save it as PNG.

Same layout as `fit`, then draws each line with the resolved foreground
colour. Colours accept CSS names or #RGB/#RRGGBB/#RRGGBBAA.

Optional post-processing:
  --pulse-at S   scale brightness by the 1.5 s pulse sampled at S seconds
  --greyscale    convert to luminosity greyscale (alpha kept)

If no font is available the background is still written and the
command exits 1.

Example:
    glyphfit render out.png "42" --size 72x72 --fg white --bg navy
    glyphfit render out.png "REC" --size 96x96 --fg red --bg black --pulse-at 0.375
"""

import sys

from PIL import Image

from glyphfit.commands._options import add_layout_arguments
from glyphfit.commands.fit import compute_layout, load_font_or_fail
from glyphfit.core.colors import resolve_many
from glyphfit.core.config import Settings
from glyphfit.core.imaging import apply_brightness_pulse, greyscale_image
from glyphfit.core.text import draw_layout
from glyphfit.core.types import Command, Report

command = Command(
    name='render',
    help='Draw fitted, centred text onto a WxH PNG.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('output', help='Path of the PNG to write')
    add_layout_arguments(parser)
    parser.add_argument('--fg', default='white', metavar='COLOUR', help='Text colour (default: white)')
    parser.add_argument('--bg', default='black', metavar='COLOUR', help='Background colour (default: black)')
    parser.add_argument('--pulse-at', type=float, default=None, metavar='S', help='Apply brightness pulse at time S')
    parser.add_argument('--greyscale', action='store_true', help='Convert the result to greyscale')


@command.run
def run(report: Report, args) -> None:
    requested = {'fg': args.fg, 'bg': args.bg}
    colours = resolve_many(requested)
    for label, value in requested.items():
        if label not in colours:
            report.skip(label, value, 'not a named colour or #RGB/#RRGGBB/#RRGGBBAA')
    if report.skipped:
        report.fail()
        return

    width, height = args.size
    image = Image.new('RGBA', (width, height), colours['bg'].rgba)

    font = load_font_or_fail(report)
    if font is not None:
        layout = compute_layout(font, args, Settings.from_env())
        if layout:
            draw_layout(image, font, layout, colours['fg'])
        report.add(f'{width}x{height}', layout.to_dict())

    if args.pulse_at is not None:
        image = apply_brightness_pulse(image, args.pulse_at)
    if args.greyscale:
        image = greyscale_image(image)

    image.save(args.output, format='PNG')
    print(f'glyphfit: wrote {args.output}', file=sys.stderr)
