"""Public package surface for tfselect.

Exports ``main`` for programmatic CLI invocation.
Most implementation lives in submodules under ``tfselect``.
"""

from __future__ import annotations

from .version import __version__


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["__version__", "main"]
