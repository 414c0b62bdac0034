"""Integration tests for PostgresCommentRepository.

Requires a migrated PostgreSQL database at ``DATABASE__URL``.
"""

import asyncio
import os
from datetime import timedelta
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from remark.domain.error import NotFoundError
from remark.domain.repository import CommentFilter, CommentRepository
from remark.domain.value import UserId
from remark.persistence.repository import PostgresCommentRepository
from remark.persistence.tables import users_table
from tests.conftest import T0, make_comment
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.getenv("DATABASE__URL"), reason="DATABASE__URL not set"
)

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


async def _create_user(session: AsyncSession) -> UserId:
    user_id = UserId(uuid4())
    await session.execute(
        users_table.insert().values(id=user_id, username=f"user-{user_id.hex[:12]}")
    )
    return user_id


class TestPostgresCommentRepository:
    """Tests against a real database."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_path_prefix(self, integration_env):
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        author_id = await _create_user(session)

        root = await repo.save(make_comment(author_id=author_id))
        reply = await repo.save(
            make_comment(
                parent=root, author_id=author_id, created_at=T0 + timedelta(seconds=1)
            )
        )
        leaf = await repo.save(
            make_comment(
                parent=reply, author_id=author_id, created_at=T0 + timedelta(seconds=2)
            )
        )

        descendants = await repo.find_by_path_prefix(root.descendant_prefix())

        assert [c.id for c in descendants] == [reply.id, leaf.id]
        assert leaf.path == reply.descendant_prefix()

    @pytest.mark.asyncio
    async def test_update_does_not_touch_counter(self, integration_env):
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        author_id = await _create_user(session)
        parent = await repo.save(make_comment(author_id=author_id))
        await repo.increment_children_count(parent.id)

        await repo.save(parent.model_copy(update={"content": "Changed"}))

        stored = await repo.find_by_id(parent.id)
        assert stored.content == "Changed"
        assert stored.children_count == 1

    @pytest.mark.asyncio
    async def test_roots_filter(self, integration_env):
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        author_id = await _create_user(session)
        root = await repo.save(make_comment(author_id=author_id))
        await repo.save(make_comment(parent=root, author_id=author_id))

        page = await repo.find_many(CommentFilter(author_id=author_id, parent_id=None))

        assert [c.id for c in page.items] == [root.id]
        assert page.total == 1

    @pytest.mark.asyncio
    async def test_concurrent_increments(self, integration_env):
        """Increments from separate sessions are never lost."""
        session = await integration_env.get(AsyncSession)
        session_factory = await integration_env.get(async_sessionmaker[AsyncSession])
        repo = await integration_env.get(CommentRepository)
        author_id = await _create_user(session)
        parent = await repo.save(make_comment(author_id=author_id))
        await session.commit()

        async def bump() -> None:
            async with session_factory() as other:
                await PostgresCommentRepository(other).increment_children_count(
                    parent.id
                )
                await other.commit()

        await asyncio.gather(*(bump() for _ in range(10)))

        session.expire_all()
        stored = await repo.find_by_id(parent.id)
        assert stored.children_count == 10

    @pytest.mark.asyncio
    async def test_reads_include_author_username(self, integration_env):
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        author_id = await _create_user(session)
        root = await repo.save(make_comment(author_id=author_id))
        await repo.save(make_comment(parent=root, author_id=author_id))

        stored = await repo.find_by_id(root.id)
        children = await repo.find_children(root.id)

        assert stored.author_username == f"user-{author_id.hex[:12]}"
        assert children[0].author_username == stored.author_username

    @pytest.mark.asyncio
    async def test_unknown_author_is_not_found(self, integration_env):
        session_factory = await integration_env.get(async_sessionmaker[AsyncSession])
        comment = make_comment()

        async with session_factory() as other:
            with pytest.raises(NotFoundError) as exc_info:
                await PostgresCommentRepository(other).save(comment)
            await other.rollback()

        assert exc_info.value.resource == "User"
        assert exc_info.value.identifier == str(comment.author_id)
