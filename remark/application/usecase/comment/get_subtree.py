"""Get comment subtree use case."""

from uuid import UUID

from pydantic import BaseModel

from remark.domain.service import CommentService
from remark.domain.value import CommentId

from .item import CommentTreeItem


class GetCommentSubtreeRequest(BaseModel):
    """Get comment subtree request."""

    comment_id: str  # UUID string


class GetCommentSubtreeResponse(BaseModel):
    """Get comment subtree response."""

    tree: CommentTreeItem
    total: int  # Comments in the tree, including the top one


class GetCommentSubtreeUseCase:
    """Use case for getting a comment with all replies nested beneath it."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment subtree use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: GetCommentSubtreeRequest
    ) -> GetCommentSubtreeResponse:
        """Execute get subtree flow.

        Args:
            request: Get subtree request

        Returns:
            Nested tree with replies in chronological order

        Raises:
            NotFoundError: If the comment does not exist
        """
        tree = await self.comment_service.get_subtree(
            CommentId(UUID(request.comment_id))
        )

        return GetCommentSubtreeResponse(
            tree=CommentTreeItem.from_domain(tree),
            total=tree.size(),
        )
