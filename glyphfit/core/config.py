"""Settings for glyphfit, read from the environment.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file found by walking up from cwd, stopping at .git (file or dir).

Variables:
  GLYPHFIT_FONT          path to a font file; skips fontconfig lookup
  GLYPHFIT_FONT_FAMILY   fontconfig pattern (default: monospace)
  GLYPHFIT_PADDING       default padding fraction for the CLI (default: 0.1)
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_FAMILY = 'monospace'
DEFAULT_PADDING = 0.1


def find_env_file(start: Path) -> Path | None:
    """Nearest .env at or above start, never crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def read_env_file(path: Path) -> dict[str, str]:
    """KEY=value lines; blank lines, comments and lines without '=' are ignored."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env entries into os.environ for keys not already set.

    Returns the file that was loaded, or None.
    """
    path = Path(env_file) if env_file else find_env_file(Path.cwd())
    if path is None or not path.is_file():
        return None
    for key, value in read_env_file(path).items():
        os.environ.setdefault(key, value)
    return path


@dataclass(frozen=True)
class Settings:
    font_path: str | None = None
    font_family: str = DEFAULT_FAMILY
    padding: float = DEFAULT_PADDING

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> 'Settings':
        env = os.environ if environ is None else environ
        padding = DEFAULT_PADDING
        raw_padding = env.get('GLYPHFIT_PADDING')
        if raw_padding:
            try:
                padding = float(raw_padding)
            except ValueError:
                logger.warning('Ignoring GLYPHFIT_PADDING=%r: not a number', raw_padding)
        return cls(
            font_path=env.get('GLYPHFIT_FONT') or None,
            font_family=env.get('GLYPHFIT_FONT_FAMILY') or DEFAULT_FAMILY,
            padding=padding,
        )
