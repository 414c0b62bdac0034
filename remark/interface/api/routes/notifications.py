"""Notification routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Query, status

from remark.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
)
from remark.interface.api.routes.comments import require_user

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    limit: int = Query(default=30, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    x_user_id: str | None = Header(default=None),
) -> ListNotificationsResponse:
    """List the requester's notifications, newest first.

    Requires authentication.

    Args:
        list_notifications_use_case: List notifications use case from DI
        limit: Page size
        offset: Number of notifications to skip
        x_user_id: Authenticated user ID

    Returns:
        The requester's notifications
    """
    user_id = require_user(x_user_id, "read notifications")

    try:
        return await list_notifications_use_case.execute(
            ListNotificationsRequest(user_id=user_id, limit=limit, offset=offset)
        )
    except ValueError as e:
        logfire.warn("Notification request validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
