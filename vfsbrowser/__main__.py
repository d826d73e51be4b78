"""Module entrypoint for ``python -m vfsbrowser``.

All argument parsing and runtime setup happen in ``vfsbrowser.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
