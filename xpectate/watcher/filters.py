"""
Xpectate Extension Filter.

Decides whether a raw event touches a file we care about.
Requires Python 3.11+.
"""

from collections.abc import Iterable, Sequence
from pathlib import Path


def extension_of(path: Path | str) -> str | None:
    """Return the text after the final dot of the file name, or None without a dot."""
    name = Path(path).name
    if "." not in name:
        return None
    return name.rsplit(".", 1)[1]


def is_relevant(paths: Iterable[Path | str], extensions: Sequence[str] | None) -> bool:
    """
    Check a raw event's paths against an extension allow-list.

    Matching is case-sensitive and any single path is enough.

    Args:
        paths: Every path carried by the raw event
        extensions: Bare extensions without a leading dot, or None to accept all

    Returns:
        True if the event should be processed
    """
    if extensions is None:
        return True

    allowed = set(extensions)
    return any(extension_of(path) in allowed for path in paths)
