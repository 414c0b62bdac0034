"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.service import CommentService
from remark.domain.value import CommentId, UserId

from .item import CommentItem


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment: CommentItem


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment within the delete window."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If user doesn't own the comment
            InvalidStateError: If the comment is already deleted
            MutationWindowClosedError: If the delete window has elapsed
        """
        comment = await self.comment_service.delete_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            requester_id=UserId(UUID(request.user_id)),
        )

        return DeleteCommentResponse(comment=CommentItem.from_domain(comment))
