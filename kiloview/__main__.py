"""Kiloview CLI entry point.

Allows running via `python -m kiloview` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys

from .errors import KiloviewError, NotATerminal


def main(argv: list[str] | None = None) -> int:
    # Single optional positional argument: the file to view
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else None

    from .editor import Editor
    editor = Editor()
    try:
        editor.run(path)
    except NotATerminal as e:
        print(e, file=sys.stderr)
        return 0
    except KiloviewError as e:
        # The session has already restored the terminal by now
        print(f"kiloview: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"kiloview: I/O error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
