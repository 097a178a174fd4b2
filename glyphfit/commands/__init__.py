"""glyphfit subcommands: fit, names, render and resolve.

Each module here exposes a `command` (see glyphfit.core.types.Command)
whose module docstring is what `glyphfit help <name>` prints. The layout
commands share their size and padding options through _options.

Frozen builds cannot list this package, so every command is imported
below; glyphfit.registry._COMMAND_MODULES mirrors the same names.
"""

import glyphfit.commands.fit as _fit  # noqa: F401
import glyphfit.commands.names as _names  # noqa: F401
import glyphfit.commands.render as _render  # noqa: F401
import glyphfit.commands.resolve as _resolve  # noqa: F401
