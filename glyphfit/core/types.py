"""Shared types for glyphfit: PixelColor, layout records, Command, Report, errors."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


class GlyphfitError(Exception):
    """Base class for glyphfit errors."""


class FontParseError(GlyphfitError):
    """Font bytes could not be parsed into glyph metrics."""


@dataclass(frozen=True)
class PixelColor:
    """Four 8-bit channels. Alpha defaults to fully opaque."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ('red', 'green', 'blue', 'alpha'):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f'{name} channel out of range: {value!r}')

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        """#rrggbb when opaque, #rrggbbaa otherwise."""
        if self.alpha == 255:
            return f'#{self.red:02x}{self.green:02x}{self.blue:02x}'
        return f'#{self.red:02x}{self.green:02x}{self.blue:02x}{self.alpha:02x}'


@dataclass(frozen=True)
class LayoutBox:
    """Target region in pixels, with optional reserved bands and a vertical shift."""

    width: float
    height: float
    reserved_top: float = 0.0
    reserved_bottom: float = 0.0
    y_offset: float = 0.0

    @property
    def available_height(self) -> float:
        return self.height - self.reserved_top - self.reserved_bottom


@dataclass
class LineLayout:
    """One line of text and its top-left draw origin."""

    text: str
    x: int
    y: int
    width: float  # rendered width at the resolved scale


@dataclass
class ResolvedLayout:
    """Shared scale plus per-line positions for one draw call."""

    scale: float = 0.0
    line_height: float = 0.0
    lines: list[LineLayout] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.lines

    def __bool__(self) -> bool:
        return not self.empty

    def to_dict(self) -> dict[str, Any]:
        return {
            'scale': round(self.scale, 3),
            'line_height': round(self.line_height, 3),
            'lines': [
                {'text': ln.text, 'x': ln.x, 'y': ln.y, 'width': round(ln.width, 3)} for ln in self.lines
            ],
        }


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='resolve', help='Resolve colour strings')

        @command.arguments
        def add_arguments(parser):
            parser.add_argument('colours', nargs='+')

        @command.run
        def run(report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse setup function."""
        self._args_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(report, args)


@dataclass
class Report:
    """Accumulates command results for text/JSON output."""

    command: str = ''
    items: dict[str, dict[str, Any]] = field(default_factory=dict)
    skipped: list[dict[str, str]] = field(default_factory=list)
    exit_code: int = 0

    def add(self, label: str, data: dict[str, Any]) -> None:
        """Add (or extend) the result for one label."""
        self.items.setdefault(label, {}).update(data)

    def skip(self, label: str, value: str, reason: str) -> None:
        self.skipped.append({'label': label, 'value': value, 'reason': reason})

    def fail(self, code: int = 1) -> None:
        self.exit_code = code
