"""Get comment thread use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.service import CommentService
from remark.domain.value import CommentId

from .item import CommentItem


class GetCommentThreadRequest(BaseModel):
    """Get comment thread request."""

    comment_id: str  # Any comment in the thread


class GetCommentThreadResponse(BaseModel):
    """Get comment thread response."""

    root_id: str
    comments: list[CommentItem]
    total: int


class GetCommentThreadUseCase:
    """Use case for getting the whole thread around a comment as a flat list."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment thread use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: GetCommentThreadRequest
    ) -> GetCommentThreadResponse:
        """Execute get thread flow.

        Args:
            request: Get thread request

        Returns:
            Root comment and all of its descendants, oldest first

        Raises:
            NotFoundError: If the comment does not exist
        """
        thread = await self.comment_service.get_thread(
            CommentId(UUID(request.comment_id))
        )
        root = next(comment for comment in thread if comment.is_root)

        return GetCommentThreadResponse(
            root_id=str(root.id),
            comments=[CommentItem.from_domain(comment) for comment in thread],
            total=len(thread),
        )
