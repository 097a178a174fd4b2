"""Colour resolution: named palette first, then hex notation.

resolve()         one string -> PixelColor or None
resolve_many()    label -> string mapping; bad entries are logged and dropped
get_or_default()  plain lookup with fallback, no parsing
"""

import logging
from collections.abc import Mapping

from glyphfit.core.hexcodec import parse_hex
from glyphfit.core.palette import lookup_named
from glyphfit.core.types import PixelColor

logger = logging.getLogger(__name__)


def resolve(s: str) -> PixelColor | None:
    """Resolve a colour string. Case-insensitive; None when unrecognised."""
    if not isinstance(s, str):
        return None
    named = lookup_named(s)
    if named is not None:
        return named
    return parse_hex(s)


def resolve_many(colours: Mapping[str, str]) -> dict[str, PixelColor]:
    """Resolve every value independently, keeping the original labels.

    Entries that do not resolve are omitted and reported as a warning.
    """
    parsed: dict[str, PixelColor] = {}
    for label, value in colours.items():
        colour = resolve(value)
        if colour is None:
            logger.warning('Invalid color format: %s=%r', label, value)
            continue
        parsed[label] = colour
    return parsed


def get_or_default(colours: Mapping[str, PixelColor], key: str, default: PixelColor) -> PixelColor:
    return colours.get(key, default)
