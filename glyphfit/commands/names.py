"""List the named colour palette, or find the name closest to a colour.

Without --near, prints all 148 CSS named colours with their values.
With --near COLOUR, prints the closest named colour by RGB distance;
--threshold N turns matches further than N into a miss (exit code 1).

Example:
    glyphfit names
    glyphfit names --near "#4680b0"
    glyphfit names --near "#4680b0" --threshold 5
"""

from glyphfit.core.colors import resolve
from glyphfit.core.palette import NAMED_COLORS, nearest_named
from glyphfit.core.types import Command, Report

command = Command(
    name='names',
    help='List named colours or find the nearest name for a colour.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('--near', metavar='COLOUR', help='Colour to match against the palette')
    parser.add_argument('--threshold', type=float, default=None, metavar='N', help='Max RGB distance for --near')


@command.run
def run(report: Report, args) -> None:
    if args.near is None:
        for name in sorted(NAMED_COLORS):
            colour = NAMED_COLORS[name]
            report.add(name, {'hex': colour.to_hex(), 'rgba': list(colour.rgba)})
        return

    target = resolve(args.near)
    if target is None:
        report.skip('near', args.near, 'not a named colour or #RGB/#RRGGBB/#RRGGBBAA')
        report.fail()
        return

    name, dist = nearest_named(target, threshold=args.threshold)
    if name is None:
        report.skip('near', args.near, f'no named colour within {args.threshold} (closest Δ={dist:.1f})')
        report.fail()
        return

    colour = NAMED_COLORS[name]
    report.add(name, {'hex': colour.to_hex(), 'rgba': list(colour.rgba), 'distance': round(dist, 1)})
