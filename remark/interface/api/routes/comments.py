"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Query, status
from pydantic import BaseModel, Field

from remark.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentStatsResponse,
    GetCommentStatsUseCase,
    GetCommentSubtreeRequest,
    GetCommentSubtreeResponse,
    GetCommentSubtreeUseCase,
    GetCommentThreadRequest,
    GetCommentThreadResponse,
    GetCommentThreadUseCase,
    GetCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    RestoreCommentRequest,
    RestoreCommentResponse,
    RestoreCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from remark.domain.error import DomainError
from remark.interface.error import to_http_exception

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)

# Literal value of ?parent_id= that selects root comments
ROOTS_ONLY = "null"


def require_user(x_user_id: str | None, action: str) -> str:
    """Return the authenticated requester id set by the upstream auth layer.

    Raises:
        HTTPException: 401 if missing, 400 if not a UUID
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    try:
        UUID(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid user id",
        )
    return x_user_id


def _bad_request(error: ValueError) -> HTTPException:
    logfire.warn("Comment request validation error", error=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Parent comment ID for replies


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    x_user_id: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Create a comment or reply to another comment.

    Requires authentication.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        x_user_id: Authenticated user ID

    Returns:
        Created comment details
    """
    user_id = require_user(x_user_id, "create comments")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                content=request.content,
                author_id=user_id,
                parent_id=request.parent_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise _bad_request(e)


@router.get("", response_model=ListCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    author_id: str | None = None,
    parent_id: str | None = Query(
        default=None, description=f"Parent comment ID, or '{ROOTS_ONLY}' for roots"
    ),
    include_deleted: bool = False,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
) -> ListCommentsResponse:
    """List comments newest first.

    Args:
        list_comments_use_case: List comments use case from DI
        author_id: Only comments by this user
        parent_id: Only replies to this comment, or roots when 'null'
        include_deleted: Whether to include soft-deleted comments
        page: 1-based page number
        limit: Page size

    Returns:
        Page of comments with total count
    """
    roots_only = parent_id == ROOTS_ONLY
    try:
        return await list_comments_use_case.execute(
            ListCommentsRequest(
                author_id=author_id,
                parent_id=None if roots_only else parent_id,
                roots_only=roots_only,
                include_deleted=include_deleted,
                page=page,
                limit=limit,
            )
        )
    except ValueError as e:
        raise _bad_request(e)


@router.get("/stats", response_model=GetCommentStatsResponse)
async def get_comment_stats(
    get_comment_stats_use_case: FromDishka[GetCommentStatsUseCase],
) -> GetCommentStatsResponse:
    """Get aggregate comment counters."""
    return await get_comment_stats_use_case.execute()


@router.get("/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> GetCommentResponse:
    """Get a comment with its parent and direct replies."""
    try:
        return await get_comment_use_case.execute(
            GetCommentRequest(comment_id=comment_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise _bad_request(e)


@router.get("/{comment_id}/tree", response_model=GetCommentSubtreeResponse)
async def get_comment_subtree(
    comment_id: str,
    get_comment_subtree_use_case: FromDishka[GetCommentSubtreeUseCase],
) -> GetCommentSubtreeResponse:
    """Get a comment with every reply nested beneath it."""
    try:
        return await get_comment_subtree_use_case.execute(
            GetCommentSubtreeRequest(comment_id=comment_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise _bad_request(e)


@router.get("/{comment_id}/thread", response_model=GetCommentThreadResponse)
async def get_comment_thread(
    comment_id: str,
    get_comment_thread_use_case: FromDishka[GetCommentThreadUseCase],
) -> GetCommentThreadResponse:
    """Get the whole thread containing a comment, oldest first."""
    try:
        return await get_comment_thread_use_case.execute(
            GetCommentThreadRequest(comment_id=comment_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise _bad_request(e)


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1, max_length=10000)


@router.patch("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    x_user_id: str | None = Header(default=None),
) -> UpdateCommentResponse:
    """Edit a comment's text.

    Only the author can edit, and only within the edit window.
    """
    user_id = require_user(x_user_id, "edit comments")

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id,
                user_id=user_id,
                content=request.content,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise _bad_request(e)


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    x_user_id: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Soft-delete a comment.

    Only the author can delete, and only within the delete window.
    """
    user_id = require_user(x_user_id, "delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise _bad_request(e)


@router.post("/{comment_id}/restore", response_model=RestoreCommentResponse)
async def restore_comment(
    comment_id: str,
    restore_comment_use_case: FromDishka[RestoreCommentUseCase],
    x_user_id: str | None = Header(default=None),
) -> RestoreCommentResponse:
    """Restore a soft-deleted comment.

    Only the author can restore, and only within the restore window.
    """
    user_id = require_user(x_user_id, "restore comments")

    try:
        return await restore_comment_use_case.execute(
            RestoreCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise _bad_request(e)
