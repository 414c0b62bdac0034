"""PostgreSQL implementation of Comment repository."""

from datetime import datetime, timezone
from typing import List, Optional

import logfire
from sqlalchemy import desc, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.error import ConflictError, DomainError, NotFoundError
from remark.domain.model import Comment, CommentPage, CommentStats
from remark.domain.repository import CommentFilter, CommentRepository
from remark.domain.value import PATH_SEPARATOR, CommentId, CommentPath
from remark.persistence.mappers import comment_to_dict, row_to_comment
from remark.persistence.tables import comments_table, users_table

# Written once at creation, never part of an UPDATE
_WRITE_ONCE = {"id", "author_id", "parent_id", "depth", "path", "created_at"}
# Maintained only through increment_children_count
_COUNTERS = {"children_count"}
# SQLSTATE for a foreign key violation
_FOREIGN_KEY_VIOLATION = "23503"
# Foreign key column -> resource reported as missing
_REFERENCED = {"author_id": "User", "parent_id": "Parent comment"}


def _select_comments():
    """Select comment columns plus the author's username."""
    return select(
        comments_table, users_table.c.username.label("author_username")
    ).select_from(
        comments_table.outerjoin(
            users_table, users_table.c.id == comments_table.c.author_id
        )
    )


def integrity_error_to_domain(error: IntegrityError, comment: Comment) -> DomainError:
    """Translate a rejected comment write into a domain error.

    A foreign key violation means the author or parent does not exist and
    maps to NotFoundError. Anything else is a ConflictError.
    """
    driver_error = error.orig
    cause = getattr(driver_error, "__cause__", None)
    sqlstate = getattr(driver_error, "sqlstate", None) or getattr(
        cause, "sqlstate", None
    )
    constraint = (
        getattr(driver_error, "constraint_name", None)
        or getattr(cause, "constraint_name", None)
        or ""
    )

    if sqlstate == _FOREIGN_KEY_VIOLATION:
        for column, resource in _REFERENCED.items():
            if column in constraint:
                return NotFoundError(resource, str(getattr(comment, column)))

    return ConflictError(f"Comment {comment.id} conflicts with stored data")


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = _select_comments().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    def _apply_filters(self, stmt, filters: CommentFilter):
        if not filters.include_deleted:
            stmt = stmt.where(comments_table.c.is_deleted.is_(False))

        if filters.author_id is not None:
            stmt = stmt.where(comments_table.c.author_id == filters.author_id)

        if filters.filters_by_parent:
            if filters.parent_id is None:
                stmt = stmt.where(comments_table.c.parent_id.is_(None))
            else:
                stmt = stmt.where(comments_table.c.parent_id == filters.parent_id)

        return stmt

    async def find_many(self, filters: CommentFilter) -> CommentPage:
        """Find a page of comments, newest first."""
        count_stmt = self._apply_filters(
            select(func.count()).select_from(comments_table), filters
        )
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            self._apply_filters(_select_comments(), filters)
            .order_by(desc(comments_table.c.created_at))
            .limit(filters.limit)
            .offset(filters.offset)
        )
        result = await self.session.execute(stmt)

        return CommentPage(
            items=[row_to_comment(row._asdict()) for row in result.fetchall()],
            total=total,
            page=filters.page,
            limit=filters.limit,
        )

    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct child comments of a parent comment."""
        stmt = (
            _select_comments()
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_path_prefix(self, prefix: CommentPath) -> List[Comment]:
        """Find every comment whose path starts with ``prefix``.

        Matches the exact prefix or the prefix followed by the separator, so a
        sibling whose id merely shares leading characters is never included.
        """
        text_prefix = str(prefix)
        stmt = _select_comments()
        if text_prefix:
            stmt = stmt.where(
                or_(
                    comments_table.c.path == text_prefix,
                    comments_table.c.path.startswith(
                        text_prefix + PATH_SEPARATOR, autoescape=True
                    ),
                )
            )
        stmt = stmt.order_by(comments_table.c.created_at)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)

        try:
            if existing:
                values = {
                    k: v
                    for k, v in comment_to_dict(comment).items()
                    if k not in _WRITE_ONCE | _COUNTERS
                }
                stmt = (
                    comments_table.update()
                    .where(comments_table.c.id == comment.id)
                    .values(**values)
                )
            else:
                stmt = comments_table.insert().values(**comment_to_dict(comment))
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            domain_error = integrity_error_to_domain(e, comment)
            logfire.warn(
                "Comment write rejected",
                comment_id=str(comment.id),
                error=str(domain_error),
            )
            raise domain_error from e

        return await self.find_by_id(comment.id) or comment

    async def increment_children_count(self, comment_id: CommentId) -> None:
        """Atomically increment children_count by 1."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(
                children_count=comments_table.c.children_count + 1,
                updated_at=datetime.now(timezone.utc),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def get_stats(self) -> CommentStats:
        """Compute aggregate counters over all stored comments."""
        stmt = select(
            func.count().label("total_comments"),
            func.count(comments_table.c.parent_id).label("total_replies"),
            func.count().filter(comments_table.c.is_deleted.is_(True)).label(
                "total_deleted"
            ),
            func.coalesce(func.avg(comments_table.c.depth), 0).label("average_depth"),
        ).select_from(comments_table)
        row = (await self.session.execute(stmt)).one()

        return CommentStats(
            total_comments=row.total_comments,
            total_replies=row.total_replies,
            total_deleted=row.total_deleted,
            average_depth=float(row.average_depth),
        )
