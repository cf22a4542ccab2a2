"""Module entrypoint for ``python -m tfselect``.

All argument parsing and runtime setup happen in ``tfselect.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
