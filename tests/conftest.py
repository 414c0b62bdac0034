"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from remark.domain.model.comment import Comment
from remark.domain.value import CommentId, CommentPath, UserId

T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Controllable time source for window tests."""

    def __init__(self, now: datetime = T0) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


def make_comment(
    *,
    author_id: UserId | None = None,
    parent: Comment | None = None,
    content: str = "A comment",
    created_at: datetime = T0,
    **overrides,
) -> Comment:
    """Build a comment, deriving depth and path from ``parent``."""
    fields = dict(
        id=CommentId(uuid4()),
        author_id=author_id or UserId(uuid4()),
        content=content,
        parent_id=parent.id if parent else None,
        depth=parent.depth + 1 if parent else 0,
        path=parent.descendant_prefix() if parent else CommentPath(()),
        created_at=created_at,
        updated_at=created_at,
    )
    fields.update(overrides)
    return Comment(**fields)
