"""Get comment use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.service import CommentService
from remark.domain.value import CommentId

from .item import CommentItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string


class GetCommentResponse(BaseModel):
    """Get comment response with parent and direct replies."""

    comment: CommentItem
    parent: CommentItem | None
    children: list[CommentItem]


class GetCommentUseCase:
    """Use case for getting a single comment with its neighbours."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Execute get comment flow.

        Args:
            request: Get comment request

        Returns:
            The comment, its parent (if any) and its direct replies

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_service.get_comment(
            CommentId(UUID(request.comment_id))
        )

        parent = (
            await self.comment_service.get_comment_by_id(comment.parent_id)
            if comment.parent_id
            else None
        )
        children = await self.comment_service.get_children(comment.id)

        return GetCommentResponse(
            comment=CommentItem.from_domain(comment),
            parent=CommentItem.from_domain(parent) if parent else None,
            children=[CommentItem.from_domain(child) for child in children],
        )
