"""
flag_console – debug-shell command for runtime feature flags.

Import path convention::

    from flag_console.command import FlagCommand
    from flag_console.flags import Flag, FlagRegistry, InMemoryFlagStore
    from flag_console.errors import ArgumentError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
