"""Get comment stats use case."""

from pydantic import BaseModel

from remark.domain.service import CommentService


class GetCommentStatsResponse(BaseModel):
    """Comment stats response."""

    total_comments: int
    total_replies: int
    total_deleted: int
    average_depth: float


class GetCommentStatsUseCase:
    """Use case for aggregate comment counters."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self) -> GetCommentStatsResponse:
        """Execute get stats flow."""
        stats = await self.comment_service.get_stats()

        return GetCommentStatsResponse(
            total_comments=stats.total_comments,
            total_replies=stats.total_replies,
            total_deleted=stats.total_deleted,
            average_depth=stats.average_depth,
        )
