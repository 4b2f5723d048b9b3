"""`pattern-catalog` console script.

`python -m main` from inside `src/` runs the same CLI without installing.
"""

from __future__ import annotations

import sys

from cli.main import run


def _utf8_console() -> None:
    # Windows consoles default to cp1252; interpreter examples print ∧ and ∨.
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding="utf-8")


def main() -> None:
    if sys.platform == "win32":
        _utf8_console()
    run()


if __name__ == "__main__":
    main()
