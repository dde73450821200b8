"""
User Model - account behind every logged activity.
"""
from sqlalchemy import Column, String, DateTime, CheckConstraint
from datetime import datetime
import uuid

from .database import Base


class User(Base):
    """User model for authentication and profile"""
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))

    email = Column(String(255), unique=True, nullable=False, index=True)
    full_name = Column(String(255), nullable=False)
    hashed_password = Column(String(255), nullable=False)

    # Default language selected in the translator UI
    preferred_language = Column(String(10), nullable=False, default='en')

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint(
            "preferred_language IN ('en', 'tw', 'ga', 'dag', 'ee')",
            name='ck_user_preferred_language',
        ),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "full_name": self.full_name,
            "preferred_language": self.preferred_language,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<User {self.email or self.id[:8]}>"
