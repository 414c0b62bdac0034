"""Unit tests for ListCommentsUseCase."""

from uuid import uuid4

import pytest

from remark.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestBuildFilter:
    """Tests for request to filter translation."""

    def test_parent_filter_left_unset(self):
        filters = ListCommentsUseCase.build_filter(ListCommentsRequest())

        assert filters.filters_by_parent is False

    def test_roots_only(self):
        filters = ListCommentsUseCase.build_filter(
            ListCommentsRequest(roots_only=True, parent_id=str(uuid4()))
        )

        assert filters.filters_by_parent is True
        assert filters.parent_id is None

    def test_parent_id(self):
        parent_id = uuid4()

        filters = ListCommentsUseCase.build_filter(
            ListCommentsRequest(parent_id=str(parent_id), page=3, limit=5)
        )

        assert filters.filters_by_parent is True
        assert filters.parent_id == parent_id
        assert filters.offset == 10


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_list_with_filters(self, unit_env):
        create = await unit_env.get(CreateCommentUseCase)
        use_case = await unit_env.get(ListCommentsUseCase)
        author_id = str(uuid4())

        root = await create.execute(
            CreateCommentRequest(content="Root", author_id=author_id)
        )
        reply = await create.execute(
            CreateCommentRequest(
                content="Reply",
                author_id=str(uuid4()),
                parent_id=root.comment.comment_id,
            )
        )

        roots = await use_case.execute(ListCommentsRequest(roots_only=True))
        children = await use_case.execute(
            ListCommentsRequest(parent_id=root.comment.comment_id)
        )
        by_author = await use_case.execute(ListCommentsRequest(author_id=author_id))
        everything = await use_case.execute(ListCommentsRequest())

        assert [c.comment_id for c in roots.items] == [root.comment.comment_id]
        assert [c.comment_id for c in children.items] == [reply.comment.comment_id]
        assert [c.comment_id for c in by_author.items] == [root.comment.comment_id]
        assert everything.total == 2
        assert everything.page == 1
        assert everything.limit == 10
