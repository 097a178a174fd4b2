"""Name -> Command lookup for the glyphfit CLI.

__main__ builds one subparser per entry here and dispatches the parsed
arguments to it; `help` reads the docstring of the module behind a name.
Commands are the modules under glyphfit/commands/ that define `command`.
In a frozen binary the package cannot be listed and _COMMAND_MODULES is used.
"""

import importlib
import pkgutil

from glyphfit.core.types import Command

_registry: dict[str, Command] = {}

# Kept in step with the imports in glyphfit/commands/__init__.py
_COMMAND_MODULES = [
    'fit',
    'names',
    'render',
    'resolve',
]


def command_module(name: str) -> object:
    """The raw module behind a command (for docstring access)."""
    return importlib.import_module(f'glyphfit.commands.{name}')


def discover() -> dict[str, Command]:
    """Import all command modules and return the registry."""
    if _registry:
        return _registry

    import glyphfit.commands as pkg

    found = [modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')]
    if not found:
        found = _COMMAND_MODULES

    for modname in found:
        module = command_module(modname)
        cmd = getattr(module, 'command', None)
        if isinstance(cmd, Command):
            _registry[cmd.name] = cmd

    return _registry


def get(name: str) -> Command:
    """Get a command by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_commands() -> dict[str, Command]:
    """Return all registered commands."""
    return discover()
