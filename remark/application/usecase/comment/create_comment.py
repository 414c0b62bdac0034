"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from remark.domain.service import CommentService
from remark.domain.value import CommentId, UserId

from .item import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    content: str = Field(min_length=1)
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for creating a comment or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        The comment service validates the parent, stores the comment, bumps
        the parent's reply count and notifies the parent's author.

        Args:
            request: Create comment request

        Returns:
            Create comment response with the stored comment

        Raises:
            NotFoundError: If the parent comment does not exist
            ContentDeletedException: If the parent comment is deleted
        """
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None

        comment = await self.comment_service.create_comment(
            content=request.content,
            author_id=UserId(UUID(request.author_id)),
            parent_id=parent_id,
        )

        return CreateCommentResponse(comment=CommentItem.from_domain(comment))
