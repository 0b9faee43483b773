"""Module entrypoint for ``python -m ledit``.

All argument parsing and runtime setup happen in ``ledit.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
