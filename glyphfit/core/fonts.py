"""Font byte sources and the single-initialization font cache.

FontCache wraps a provider callable that returns font bytes or None. The
provider runs at most once per cache; whatever it returns (including None)
is kept for the lifetime of the cache. Concurrent first callers block on a
lock until the value is settled and all see the same result.

system_monospace_font() is the default provider: an explicit file path,
or whatever `fc-match` reports for the requested family.
"""

import logging
import subprocess
import threading
from collections.abc import Callable
from functools import partial
from pathlib import Path

from glyphfit.core.config import Settings

logger = logging.getLogger(__name__)

FontProvider = Callable[[], bytes | None]


def _match_font_with_fc(family: str) -> Path | None:
    """Ask fontconfig for the best file matching family."""
    try:
        result = subprocess.run(
            ['fc-match', '--format=%{file}', family],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug('fc-match unavailable: %s', e)
        return None
    if result.returncode != 0 or not result.stdout.strip():
        return None
    path = Path(result.stdout.strip())
    return path if path.is_file() else None


def system_monospace_font(family: str = 'monospace', path: str | None = None) -> bytes | None:
    """Read font bytes from path, or from fontconfig's match for family."""
    font_path = Path(path) if path else _match_font_with_fc(family)
    if font_path is None:
        logger.debug('No font found for family %r', family)
        return None
    try:
        data = font_path.read_bytes()
    except OSError as e:
        logger.debug('Cannot read font %s: %s', font_path, e)
        return None
    logger.debug('Loaded font %s (%d bytes)', font_path, len(data))
    return data


class FontCache:
    """Compute-once holder for one font's bytes."""

    def __init__(self, provider: FontProvider = system_monospace_font):
        self._provider = provider
        self._lock = threading.Lock()
        self._settled = False
        self._data: bytes | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> 'FontCache':
        return cls(partial(system_monospace_font, family=settings.font_family, path=settings.font_path))

    @property
    def settled(self) -> bool:
        return self._settled

    def get(self) -> bytes | None:
        """Font bytes, loading on first call. None means no font, permanently."""
        if self._settled:
            return self._data
        with self._lock:
            if not self._settled:
                try:
                    self._data = self._provider()
                except OSError as e:
                    logger.warning('Font provider failed: %s', e)
                    self._data = None
                self._settled = True
        return self._data


_default_cache: FontCache | None = None
_default_lock = threading.Lock()


def default_font_cache() -> FontCache:
    """Process-wide cache configured from the environment, created on first use."""
    global _default_cache
    with _default_lock:
        if _default_cache is None:
            _default_cache = FontCache.from_settings(Settings.from_env())
        return _default_cache
