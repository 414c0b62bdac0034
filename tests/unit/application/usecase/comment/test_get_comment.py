"""Unit tests for GetCommentUseCase, thread and subtree retrieval."""

from uuid import uuid4

import pytest

from remark.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentSubtreeRequest,
    GetCommentSubtreeUseCase,
    GetCommentThreadRequest,
    GetCommentThreadUseCase,
    GetCommentUseCase,
)
from remark.application.usecase.comment.item import CommentItem
from remark.domain.error import NotFoundError
from remark.domain.model.comment import DELETED_PLACEHOLDER
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _create(unit_env, content, author_id=None, parent_id=None):
    use_case = await unit_env.get(CreateCommentUseCase)
    response = await use_case.execute(
        CreateCommentRequest(
            content=content,
            author_id=author_id or str(uuid4()),
            parent_id=parent_id,
        )
    )
    return response.comment


class TestGetCommentUseCase:
    """Tests for GetCommentUseCase."""

    @pytest.mark.asyncio
    async def test_returns_parent_and_children(self, unit_env):
        root = await _create(unit_env, "Root")
        reply = await _create(unit_env, "Reply", parent_id=root.comment_id)
        child = await _create(unit_env, "Child", parent_id=reply.comment_id)
        use_case = await unit_env.get(GetCommentUseCase)

        response = await use_case.execute(
            GetCommentRequest(comment_id=reply.comment_id)
        )

        assert response.comment.comment_id == reply.comment_id
        assert response.comment.children_count == 1
        assert response.parent.comment_id == root.comment_id
        assert [c.comment_id for c in response.children] == [child.comment_id]

    @pytest.mark.asyncio
    async def test_root_has_no_parent(self, unit_env):
        root = await _create(unit_env, "Root")
        use_case = await unit_env.get(GetCommentUseCase)

        response = await use_case.execute(GetCommentRequest(comment_id=root.comment_id))

        assert response.parent is None
        assert response.children == []

    @pytest.mark.asyncio
    async def test_deleted_comment_is_masked(self, unit_env):
        """Deleted comments are returned with placeholder text."""
        author_id = str(uuid4())
        comment = await _create(unit_env, "Secret", author_id=author_id)
        delete = await unit_env.get(DeleteCommentUseCase)
        await delete.execute(
            DeleteCommentRequest(comment_id=comment.comment_id, user_id=author_id)
        )
        use_case = await unit_env.get(GetCommentUseCase)

        response = await use_case.execute(
            GetCommentRequest(comment_id=comment.comment_id)
        )

        assert response.comment.is_deleted is True
        assert response.comment.content == DELETED_PLACEHOLDER

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        use_case = await unit_env.get(GetCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentRequest(comment_id=str(uuid4())))


class TestThreadAndSubtreeUseCases:
    """Tests for GetCommentThreadUseCase and GetCommentSubtreeUseCase."""

    @pytest.mark.asyncio
    async def test_thread_from_leaf(self, unit_env):
        root = await _create(unit_env, "A")
        middle = await _create(unit_env, "B", parent_id=root.comment_id)
        leaf = await _create(unit_env, "C", parent_id=middle.comment_id)
        use_case = await unit_env.get(GetCommentThreadUseCase)

        response = await use_case.execute(
            GetCommentThreadRequest(comment_id=leaf.comment_id)
        )

        assert response.root_id == root.comment_id
        assert response.total == 3
        assert [c.comment_id for c in response.comments] == [
            root.comment_id,
            middle.comment_id,
            leaf.comment_id,
        ]

    @pytest.mark.asyncio
    async def test_subtree_is_nested(self, unit_env):
        root = await _create(unit_env, "A")
        middle = await _create(unit_env, "B", parent_id=root.comment_id)
        leaf = await _create(unit_env, "C", parent_id=middle.comment_id)
        use_case = await unit_env.get(GetCommentSubtreeUseCase)

        response = await use_case.execute(
            GetCommentSubtreeRequest(comment_id=root.comment_id)
        )

        assert response.total == 3
        assert response.tree.comment.comment_id == root.comment_id
        (middle_node,) = response.tree.children
        assert middle_node.comment.comment_id == middle.comment_id
        assert middle_node.children[0].comment.comment_id == leaf.comment_id
        assert middle_node.children[0].children == []


class TestCommentItem:
    """Tests for the shared comment response model."""

    def test_carries_author_username(self):
        comment = make_comment(author_username="ada")

        item = CommentItem.from_domain(comment)

        assert item.author_id == str(comment.author_id)
        assert item.author_username == "ada"

    def test_author_username_optional(self):
        assert CommentItem.from_domain(make_comment()).author_username is None
