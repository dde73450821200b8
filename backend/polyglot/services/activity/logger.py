"""
Activity Logger - best-effort, append-only history of user operations.

``record`` performs one insert and reports the outcome as a ``LogResult``
instead of raising. ``submit`` schedules ``record`` as a detached task so the
caller can return its primary result immediately; failures are routed to
the log stream and the ``activity_log_writes_total`` metric.

Usage:
    activity_logger = ActivityLogger(AsyncSessionLocal)
    activity_logger.submit(user.id, ActivityKind.TRANSLATION, {...})
    ...
    await activity_logger.drain()   # on shutdown
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Set

from sqlalchemy.ext.asyncio import AsyncSession

from polyglot.models.activity import ActivityLogEntry, ActivityKind
from polyglot.services.metrics import activity_log_writes

logger = logging.getLogger(__name__)


@dataclass
class LogResult:
    success: bool
    id: Optional[str] = None
    error: Optional[str] = None


class ActivityLogger:
    """Appends ActivityLogEntry rows without ever failing the caller."""

    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self._session_factory = session_factory
        self._pending: Set[asyncio.Task] = set()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def record(self, user_id: str, kind: ActivityKind, payload: Dict[str, Any]) -> LogResult:
        """Insert one entry for ``user_id`` under ``kind``."""
        try:
            async with self._session_factory() as db:
                entry = ActivityLogEntry(user_id=user_id, kind=kind, payload=payload)
                db.add(entry)
                await db.commit()
                await db.refresh(entry)
        except Exception as e:
            logger.error(f"[ActivityLogger] Failed to log {kind.value} for user {user_id}: {e}")
            activity_log_writes.labels(kind=kind.value, status="error").inc()
            return LogResult(success=False, error=str(e) or f"Failed to log {kind.value}.")

        activity_log_writes.labels(kind=kind.value, status="success").inc()
        return LogResult(success=True, id=str(entry.id))

    def submit(self, user_id: str, kind: ActivityKind, payload: Dict[str, Any]) -> asyncio.Task:
        """Schedule ``record`` without awaiting it."""
        task = asyncio.create_task(self.record(user_id, kind, payload))
        self._pending.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            logger.warning("[ActivityLogger] Log write cancelled before completion")
            return
        result = task.result()
        if not result.success:
            logger.warning(f"History logging failed: {result.error}")

    async def drain(self) -> None:
        """Wait for every in-flight write; used on application shutdown."""
        if self._pending:
            logger.info(f"[ActivityLogger] Waiting for {len(self._pending)} pending log writes")
            await asyncio.gather(*list(self._pending), return_exceptions=True)
