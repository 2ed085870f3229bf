"""
Tests for event classification and the extension filter.

Requires Python 3.11+.
"""

from pathlib import Path

import pytest

from xpectate.watcher.errors import ClassificationError, SourceError
from xpectate.watcher.events import EventKind, NormalizedEvent, RawEvent, classify
from xpectate.watcher.filters import extension_of, is_relevant


class TestClassify:
    """Test cases for classify."""

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            ("access", EventKind.ACCESS),
            ("create", EventKind.CREATE),
            ("modify", EventKind.MODIFY),
            ("remove", EventKind.REMOVE),
            ("other", EventKind.OTHER),
            ("any", EventKind.UNKNOWN),
            ("", EventKind.UNKNOWN),
        ],
    )
    def test_kind_labels(self, kind: str, expected: EventKind):
        """Known structural kinds map 1:1, everything else is Unknown."""
        event = classify(RawEvent(kind=kind, paths=[Path("/tmp/x/a.css")]))
        assert event.kind is expected

    def test_uses_first_path(self):
        """Only the first path is reported."""
        raw = RawEvent(kind="modify", paths=[Path("/tmp/x/a.css"), Path("/tmp/x/b.js")])
        assert classify(raw) == NormalizedEvent(kind=EventKind.MODIFY, path=str(Path("/tmp/x/a.css")))

    def test_empty_paths_raise(self):
        """An event without paths cannot be classified."""
        with pytest.raises(ClassificationError):
            classify(RawEvent(kind="create", paths=[]))

    def test_classification_error_is_source_error(self):
        """Classification failures are recoverable source errors."""
        assert issubclass(ClassificationError, SourceError)

    def test_str(self):
        """Display form joins the label and the path."""
        event = NormalizedEvent(kind=EventKind.REMOVE, path="app.css")
        assert str(event) == "Remove: app.css"


class TestExtensionFilter:
    """Test cases for is_relevant."""

    def test_no_allow_list_accepts_everything(self):
        """Without an allow-list every event is relevant."""
        assert is_relevant([Path("/tmp/x/app.js")], None) is True
        assert is_relevant([], None) is True

    def test_matching_extension(self):
        """A path with an allowed extension passes."""
        assert is_relevant([Path("/tmp/x/app.css")], ["css"]) is True

    def test_non_matching_extension(self):
        """A path with another extension is filtered out."""
        assert is_relevant([Path("/tmp/x/app.js")], ["css"]) is False

    def test_any_path_matches(self):
        """One matching path among several is enough."""
        paths = [Path("/tmp/x/app.js"), Path("/tmp/x/app.css")]
        assert is_relevant(paths, ["css"]) is True

    def test_case_sensitive(self):
        """Extensions are compared exactly."""
        assert is_relevant([Path("/tmp/x/APP.CSS")], ["css"]) is False

    def test_leading_dot_does_not_match(self):
        """Allow-list entries are bare extensions."""
        assert is_relevant([Path("/tmp/x/app.css")], [".css"]) is False

    def test_only_final_extension_counts(self):
        """The extension is whatever follows the last dot."""
        assert is_relevant([Path("/tmp/x/bundle.min.js")], ["min.js"]) is False
        assert is_relevant([Path("/tmp/x/bundle.min.js")], ["js"]) is True

    def test_no_extension(self):
        """Files without a dot never match an allow-list."""
        assert is_relevant([Path("/tmp/x/Makefile")], ["css"]) is False
        assert extension_of("/tmp/x/Makefile") is None

    def test_empty_allow_list_rejects(self):
        """An empty allow-list accepts nothing."""
        assert is_relevant([Path("/tmp/x/app.css")], []) is False

    def test_idempotent(self):
        """Calling the filter twice gives the same answer and leaves inputs alone."""
        paths = [Path("/tmp/x/app.css")]
        extensions = ["css"]
        first = is_relevant(paths, extensions)
        second = is_relevant(paths, extensions)
        assert first == second is True
        assert paths == [Path("/tmp/x/app.css")]
        assert extensions == ["css"]
