"""List comments use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from remark.domain.repository import CommentFilter
from remark.domain.service import CommentService
from remark.domain.value import CommentId, UserId

from .item import CommentItem


class ListCommentsRequest(BaseModel):
    """List comments request.

    ``roots_only`` selects comments without a parent and takes precedence
    over ``parent_id``.
    """

    author_id: str | None = None
    parent_id: str | None = None
    roots_only: bool = False
    include_deleted: bool = False
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class ListCommentsResponse(BaseModel):
    """List comments response."""

    items: list[CommentItem]
    total: int
    page: int
    limit: int


class ListCommentsUseCase:
    """Use case for listing comments newest first with pagination."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    @staticmethod
    def build_filter(request: ListCommentsRequest) -> CommentFilter:
        """Translate the request into a domain filter.

        The parent filter is only set when asked for, so an unset parent
        means "any parent".
        """
        fields: dict = {
            "author_id": UserId(UUID(request.author_id)) if request.author_id else None,
            "include_deleted": request.include_deleted,
            "page": request.page,
            "limit": request.limit,
        }
        if request.roots_only:
            fields["parent_id"] = None
        elif request.parent_id:
            fields["parent_id"] = CommentId(UUID(request.parent_id))
        return CommentFilter(**fields)

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Args:
            request: Filters and pagination

        Returns:
            Page of comments with total count for the filter set
        """
        result = await self.comment_service.list_comments(self.build_filter(request))

        return ListCommentsResponse(
            items=[CommentItem.from_domain(comment) for comment in result.items],
            total=result.total,
            page=result.page,
            limit=result.limit,
        )
