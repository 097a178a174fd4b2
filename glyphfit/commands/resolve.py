"""Resolve colour strings to RGBA values.

Each argument is either LABEL=COLOUR or a bare COLOUR (labelled by itself).
COLOUR is a CSS named colour (case-insensitive) or #RGB, #RRGGBB, #RRGGBBAA.

For every resolved colour the report shows the canonical hex form, the
RGBA channels and the nearest named colour with its RGB distance.
Invalid entries are listed as skipped and the exit code is 1.

Example:
    glyphfit resolve fg=white bg=#1e1e2e accent=SteelBlue
    glyphfit resolve --json "#ff6b3580"
"""

from glyphfit.core.colors import resolve_many
from glyphfit.core.palette import nearest_named
from glyphfit.core.types import Command, Report

command = Command(
    name='resolve',
    help='Resolve named/hex colour strings to RGBA.',
)


def _split_label(arg: str) -> tuple[str, str]:
    label, sep, value = arg.partition('=')
    if not sep or not label:
        return arg, arg
    return label, value


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('colours', nargs='+', metavar='[LABEL=]COLOUR', help='Colours to resolve')


@command.run
def run(report: Report, args) -> None:
    requested = dict(_split_label(arg) for arg in args.colours)
    resolved = resolve_many(requested)

    for label, value in requested.items():
        colour = resolved.get(label)
        if colour is None:
            report.skip(label, value, 'not a named colour or #RGB/#RRGGBB/#RRGGBBAA')
            report.fail()
            continue
        name, dist = nearest_named(colour)
        report.add(
            label,
            {
                'input': value,
                'hex': colour.to_hex(),
                'rgba': list(colour.rgba),
                'nearest': name,
                'distance': round(dist, 1),
            },
        )
