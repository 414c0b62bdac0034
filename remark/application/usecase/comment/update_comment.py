"""Edit comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from remark.domain.service import CommentService
from remark.domain.value import CommentId, UserId

from .item import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str = Field(min_length=1)  # New text content


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase:
    """Use case for editing a comment's text within the edit window."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID, user ID, and new text

        Returns:
            Updated comment details

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If user doesn't own the comment
            ContentDeletedException: If the comment is deleted
            MutationWindowClosedError: If the edit window has elapsed
        """
        comment = await self.comment_service.edit_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            requester_id=UserId(UUID(request.user_id)),
            content=request.content,
        )

        return UpdateCommentResponse(comment=CommentItem.from_domain(comment))
