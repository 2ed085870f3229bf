"""
Xpectate Watcher Events.

Raw notifications produced by an event source and their normalized form.
Requires Python 3.11+.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from xpectate.watcher.errors import ClassificationError


class EventKind(str, Enum):
    """Normalized kind of a filesystem change."""

    ACCESS = "Access"
    CREATE = "Create"
    MODIFY = "Modify"
    REMOVE = "Remove"
    OTHER = "Other"
    UNKNOWN = "Unknown"


# Structural kinds a source may report, keyed to their normalized label
_KIND_LABELS: dict[str, EventKind] = {
    "access": EventKind.ACCESS,
    "create": EventKind.CREATE,
    "modify": EventKind.MODIFY,
    "remove": EventKind.REMOVE,
    "other": EventKind.OTHER,
}


@dataclass
class RawEvent:
    """A successful notification: one structural kind and the paths it touched."""

    kind: str
    paths: list[Path] = field(default_factory=list)


@dataclass
class RawError:
    """A failed notification from the event source."""

    message: str
    path: Path | None = None


RawNotification = RawEvent | RawError


@dataclass(frozen=True)
class NormalizedEvent:
    """A classified event reduced to its kind and first path."""

    kind: EventKind
    path: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.path}"


def classify(raw: RawEvent) -> NormalizedEvent:
    """
    Map a raw notification to its normalized form.

    Args:
        raw: Successful notification from the event source

    Returns:
        NormalizedEvent with the kind label and the first path

    Raises:
        ClassificationError: If the notification carries no path
    """
    if not raw.paths:
        raise ClassificationError(f"'{raw.kind}' event carries no path")

    kind = _KIND_LABELS.get(raw.kind, EventKind.UNKNOWN)
    return NormalizedEvent(kind=kind, path=str(raw.paths[0]))
