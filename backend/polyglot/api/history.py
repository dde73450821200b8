"""
History API - read-only access to the user's activity log
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from polyglot.api.auth import get_current_user
from polyglot.api.errors import to_http_exception
from polyglot.models.activity import ActivityKind
from polyglot.models.database import get_db
from polyglot.models.user import User
from polyglot.schemas.history import HistoryPageResponse, HistoryEntry
from polyglot.services.activity.history import get_history_page
from polyglot.services.exceptions import PolyglotError

router = APIRouter()


@router.get("/history/{kind}", response_model=HistoryPageResponse)
async def get_history(
    kind: ActivityKind,
    cursor: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Newest-first page of the user's history for one activity kind.

    Pass ``next_cursor`` from the previous page as ``cursor`` to continue.
    """
    try:
        page = await get_history_page(db, current_user.id, kind, cursor=cursor)
    except PolyglotError as e:
        raise to_http_exception(e)

    return HistoryPageResponse(
        entries=[HistoryEntry(**entry.to_dict()) for entry in page.entries],
        next_cursor=page.next_cursor,
        has_more=page.has_more,
    )
