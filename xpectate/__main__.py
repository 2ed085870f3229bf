"""Module entry point for ``python -m xpectate``."""

from xpectate.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
