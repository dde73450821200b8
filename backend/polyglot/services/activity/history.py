"""
Activity History

Cursor-paginated, newest-first reads of a user's activity log.
"""
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from polyglot.config.constants import HISTORY_PAGE_SIZE
from polyglot.models.activity import ActivityLogEntry, ActivityKind
from polyglot.services.exceptions import InvalidInputError


@dataclass
class HistoryPage:
    entries: List[ActivityLogEntry]
    next_cursor: Optional[str]
    has_more: bool


def _parse_cursor(cursor: Optional[str]) -> Optional[int]:
    if cursor is None or cursor == "":
        return None
    try:
        return int(cursor)
    except ValueError:
        raise InvalidInputError(f"Invalid history cursor: {cursor!r}")


async def get_history_page(
    db: AsyncSession,
    user_id: str,
    kind: ActivityKind,
    cursor: Optional[str] = None,
    limit: int = HISTORY_PAGE_SIZE
) -> HistoryPage:
    """
    Get one page of a user's history for a single activity kind.

    Args:
        db: Database session
        user_id: Owner of the history
        kind: Which log to read
        cursor: Id of the last entry of the previous page, if any
        limit: Page size

    Returns:
        HistoryPage with entries newest first. ``has_more`` is true when the
        page came back full, so a final empty page is possible.
    """
    after_id = _parse_cursor(cursor)

    query = select(ActivityLogEntry).where(
        ActivityLogEntry.user_id == user_id,
        ActivityLogEntry.kind == kind,
    )
    if after_id is not None:
        query = query.where(ActivityLogEntry.id < after_id)
    query = query.order_by(ActivityLogEntry.id.desc()).limit(limit)

    result = await db.execute(query)
    entries = list(result.scalars().all())

    next_cursor = str(entries[-1].id) if entries else None
    return HistoryPage(
        entries=entries,
        next_cursor=next_cursor,
        has_more=len(entries) == limit,
    )
