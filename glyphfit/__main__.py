"""glyphfit — resolve colours and fit text onto raster images.

Usage: glyphfit [--env-file PATH] [-v] <command> [options]

Commands are auto-discovered from glyphfit/commands/.
Each command module's docstring is its documentation.
Run `glyphfit help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, glyphfit looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.

  GLYPHFIT_FONT, GLYPHFIT_FONT_FAMILY, GLYPHFIT_PADDING
"""

import argparse
import logging
import sys

from glyphfit import registry
from glyphfit.core.config import load_env
from glyphfit.core.report import format_json, format_text
from glyphfit.core.types import Report


def _short_doc(name: str, fallback: str) -> str:
    doc = (registry.command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  glyphfit resolve fg=red bg=#1e1e2e accent=#ff6b3580\n'
        '  glyphfit names --near "#4680b0"\n'
        '  glyphfit fit "Hello\\nWorld" --size 72x72 --padding 0.1\n'
        '  glyphfit render out.png "42" --size 72x72 --fg white --bg navy\n'
        '  glyphfit help render\n'
    )
    parser = argparse.ArgumentParser(
        prog='glyphfit',
        description='Resolve colours and fit text onto raster images.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging on stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(registry.all_commands().items()):
        p = sub.add_parser(name, help=_short_doc(name, cmd.help))
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        cmd.add_arguments(p)

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_doc(name, cmd.help)}')
        print('\nRun: glyphfit help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.command_module(topic).__doc__ or '').strip()
    print(doc if doc else f'(No module docs for {topic!r})')


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        logging.getLogger('glyphfit').debug('loaded %s', env_path)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    report = Report(command=args.command)
    registry.get(args.command).execute(report, args)

    if args.json:
        print(format_json(report))
    else:
        text = format_text(report)
        if text:
            print(text)

    if report.exit_code:
        sys.exit(report.exit_code)


if __name__ == '__main__':
    main()
