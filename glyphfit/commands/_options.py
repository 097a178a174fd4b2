"""Argument helpers shared by the layout commands."""

import argparse

from glyphfit.core.config import Settings


def parse_size(value: str) -> tuple[int, int]:
    """'72x72' -> (72, 72)."""
    width, sep, height = value.lower().partition('x')
    try:
        size = (int(width), int(height))
    except ValueError:
        size = (0, 0)
    if not sep or size[0] <= 0 or size[1] <= 0:
        raise argparse.ArgumentTypeError(f'expected WIDTHxHEIGHT, got {value!r}')
    return size


def unescape(text: str) -> str:
    """Shell-friendly line breaks: a literal backslash-n becomes a newline."""
    return text.replace('\\n', '\n')


def add_layout_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('text', help='Text to lay out; "\\n" starts a new line')
    parser.add_argument('-s', '--size', type=parse_size, required=True, metavar='WxH', help='Image size in pixels')
    parser.add_argument(
        '--padding',
        type=float,
        default=None,
        help='Padding fraction per side, 0.0 to 0.4 (default: GLYPHFIT_PADDING or 0.1)',
    )
    parser.add_argument('--reserved-top', type=float, default=0.0, metavar='PX', help='Pixels reserved at top')
    parser.add_argument('--reserved-bottom', type=float, default=0.0, metavar='PX', help='Pixels reserved at bottom')
    parser.add_argument('--y-offset', type=float, default=0.0, metavar='PX', help='Extra vertical shift')


def uses_reserved(args: argparse.Namespace) -> bool:
    return bool(args.reserved_top or args.reserved_bottom or args.y_offset)


def padding_for(args: argparse.Namespace, settings: Settings) -> float:
    return settings.padding if args.padding is None else args.padding
