"""Unit tests for CommentPath."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from remark.domain.value import CommentId, CommentPath


def _ids(n: int) -> list[CommentId]:
    return [CommentId(uuid4()) for _ in range(n)]


class TestCommentPath:
    """Tests for the materialized path value object."""

    def test_root_path_is_empty(self):
        """A root comment's path has no segments and renders as ''."""
        path = CommentPath(())

        assert path.is_root
        assert path.depth == 0
        assert path.root_id is None
        assert str(path) == ""

    def test_child_path_appends_parent(self):
        """A child's path is its parent's path plus the parent's id."""
        a, b = _ids(2)

        path_b = CommentPath.child_path(a, CommentPath(()))
        path_c = CommentPath.child_path(b, path_b)

        assert path_b.root == (a,)
        assert path_c.root == (a, b)
        assert path_c.depth == 2
        assert path_c.root_id == a
        assert str(path_c) == f"{a}.{b}"

    def test_parse_round_trips_stored_text(self):
        """Stored dot-separated text parses back to the same path."""
        a, b = _ids(2)
        path = CommentPath((a, b))

        assert CommentPath.parse(str(path)) == path
        assert CommentPath.parse("") == CommentPath(())
        assert CommentPath.parse(None) == CommentPath(())

    def test_parse_rejects_malformed_segment(self):
        """Segments must be UUIDs."""
        with pytest.raises(ValueError):
            CommentPath.parse("not-a-uuid")

    def test_duplicate_ancestor_rejected(self):
        """A path cannot contain the same ancestor twice."""
        (a,) = _ids(1)

        with pytest.raises(ValidationError, match="repeat an ancestor"):
            CommentPath((a, a))

    def test_is_prefix_of_matches_whole_segments(self):
        """Prefix matching works on segments, not characters."""
        a, b, c = _ids(3)
        prefix = CommentPath((a, b))

        assert prefix.is_prefix_of(CommentPath((a, b)))
        assert prefix.is_prefix_of(CommentPath((a, b, c)))
        assert not prefix.is_prefix_of(CommentPath((a,)))
        assert not prefix.is_prefix_of(CommentPath((a, c)))
        assert CommentPath(()).is_prefix_of(CommentPath((c,)))

    def test_path_is_immutable(self):
        """Paths are frozen value objects."""
        (a,) = _ids(1)
        path = CommentPath((a,))

        with pytest.raises(ValidationError):
            path.root = ()
