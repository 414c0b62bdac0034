"""Unit tests for ListNotificationsUseCase."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from remark.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsUseCase,
)
from remark.domain.service import BackgroundJobs, CommentService
from remark.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListNotificationsUseCase:
    """Tests for ListNotificationsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_reply_notifications(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        parent_author = UserId(uuid4())
        replier = UserId(uuid4())
        parent = await comment_service.create_comment("Parent", parent_author)
        reply = await comment_service.create_comment(
            "Reply", replier, parent_id=parent.id
        )
        await (await unit_env.get(BackgroundJobs)).drain()
        use_case = await unit_env.get(ListNotificationsUseCase)

        response = await use_case.execute(
            ListNotificationsRequest(user_id=str(parent_author))
        )

        assert len(response.items) == 1
        item = response.items[0]
        assert item.type == "comment_reply"
        assert item.comment_id == str(reply.id)
        assert item.triggered_by_id == str(replier)
        assert item.metadata == {"comment_id": str(reply.id)}

    @pytest.mark.asyncio
    async def test_other_users_see_nothing(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        parent = await comment_service.create_comment("Parent", UserId(uuid4()))
        await comment_service.create_comment(
            "Reply", UserId(uuid4()), parent_id=parent.id
        )
        await (await unit_env.get(BackgroundJobs)).drain()
        use_case = await unit_env.get(ListNotificationsUseCase)

        response = await use_case.execute(
            ListNotificationsRequest(user_id=str(uuid4()))
        )

        assert response.items == []

    @pytest.mark.asyncio
    async def test_invalid_user_id(self, unit_env):
        use_case = await unit_env.get(ListNotificationsUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(ListNotificationsRequest(user_id="not-a-uuid"))

    def test_limit_bounds(self):
        with pytest.raises(ValidationError):
            ListNotificationsRequest(user_id=str(uuid4()), limit=0)
        with pytest.raises(ValidationError):
            ListNotificationsRequest(user_id=str(uuid4()), offset=-1)
