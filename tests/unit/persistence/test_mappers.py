"""Unit tests for comment row mapping."""

from remark.persistence.mappers import comment_to_dict, row_to_comment
from tests.conftest import make_comment


def _row(comment, **extra):
    row = comment_to_dict(comment)
    row.update(extra)
    return row


class TestCommentMapping:
    """Tests for comment row <-> domain conversion."""

    def test_author_username_read_from_joined_row(self):
        comment = make_comment()

        mapped = row_to_comment(_row(comment, author_username="ada"))

        assert mapped.author_username == "ada"
        assert mapped.author_id == comment.author_id

    def test_author_username_missing_when_user_row_absent(self):
        mapped = row_to_comment(_row(make_comment(), author_username=None))

        assert mapped.author_username is None

    def test_author_username_never_written(self):
        comment = make_comment().model_copy(update={"author_username": "ada"})

        assert "author_username" not in comment_to_dict(comment)
