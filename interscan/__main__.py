"""Module entrypoint for ``python -m interscan``.

Prompting, parsing and rendering all happen in ``interscan.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
