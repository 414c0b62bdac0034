"""Unit tests for CreateCommentUseCase."""

from uuid import UUID, uuid4

import pytest

from remark.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from remark.domain.error import NotFoundError
from remark.domain.repository import CommentRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_root_comment(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        author_id = str(uuid4())

        # Act
        response = await use_case.execute(
            CreateCommentRequest(content="First!", author_id=author_id)
        )

        # Assert
        assert response.comment.content == "First!"
        assert response.comment.author_id == author_id
        assert response.comment.parent_id is None
        assert response.comment.depth == 0
        assert response.comment.path == ""

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        root = await use_case.execute(
            CreateCommentRequest(content="Root", author_id=str(uuid4()))
        )

        # Act
        reply = await use_case.execute(
            CreateCommentRequest(
                content="Reply",
                author_id=str(uuid4()),
                parent_id=root.comment.comment_id,
            )
        )

        # Assert
        assert reply.comment.parent_id == root.comment.comment_id
        assert reply.comment.depth == 1
        assert reply.comment.path == root.comment.comment_id

        stored_root = await comment_repo.find_by_id(UUID(root.comment.comment_id))
        assert stored_root.children_count == 1

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    content="Reply",
                    author_id=str(uuid4()),
                    parent_id=str(uuid4()),
                )
            )

    @pytest.mark.asyncio
    async def test_invalid_author_id(self, unit_env):
        """Malformed ids surface as ValueError."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(
                CreateCommentRequest(content="Hi", author_id="not-a-uuid")
            )
