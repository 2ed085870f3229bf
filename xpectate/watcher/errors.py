"""
Xpectate Watcher Errors.

Requires Python 3.11+.
"""


class XpectateError(Exception):
    """Base class for all watcher errors."""


class SetupError(XpectateError):
    """The watch could not be established; the loop never starts."""


class SourceError(XpectateError):
    """A notification from the event source could not be used."""


class ClassificationError(SourceError):
    """A successful notification carried no path."""


class CommandError(XpectateError):
    """The configured command could not be spawned."""
