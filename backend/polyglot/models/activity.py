"""
ActivityLogEntry Model - per-user activity history

One row per completed user operation. Rows are only ever inserted:
there is no update or delete path anywhere in the service. The integer
primary key follows insert order and doubles as the pagination cursor.
"""
import enum

from sqlalchemy import Column, Integer, String, DateTime, JSON, Enum, ForeignKey, Index, func

from .database import Base


class ActivityKind(str, enum.Enum):
    TRANSLATION = "translation"
    SUMMARY = "summary"
    VOICE_TO_TEXT = "voice_to_text"
    TEXT_TO_SPEECH = "text_to_speech"


class ActivityLogEntry(Base):
    """Append-only record of a completed translation, summary, transcription or synthesis"""
    __tablename__ = "activity_log"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    kind = Column(Enum(ActivityKind, name="activity_kind"), nullable=False)

    # Variant-specific fields, e.g. original_text/translated_text for translations
    payload = Column(JSON, nullable=False, default=dict)

    # Assigned by the database on insert
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_activity_log_user_kind", "user_id", "kind", "id"),
    )

    def to_dict(self):
        return {
            "id": str(self.id),
            "user_id": self.user_id,
            "kind": self.kind.value if self.kind else None,
            **(self.payload or {}),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
