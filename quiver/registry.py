"""
Global option registry.

These options are accepted under every subcommand, and before any subcommand has been
identified (e.g. `tmsu --help`). The registry is built once at import time and is
immutable thereafter; pass it explicitly where an alternate set is needed.
"""
from .options import Option, Options

VERBOSE = Option("-v", "--verbose", "show verbose messages")
HELP = Option("-h", "--help", "show help and exit")
VERSION = Option("-V", "--version", "show version information and exit")

GLOBAL_OPTIONS = Options((VERBOSE, HELP, VERSION))


__all__ = (
    "VERBOSE",
    "HELP",
    "VERSION",
    "GLOBAL_OPTIONS",
)
