"""
Database Models Package

Tables:
1. users - accounts
2. activity_log - append-only per-user activity history
"""

from .database import (
    engine,
    AsyncSessionLocal,
    Base,
    init_db,
    get_db,
)

from .user import User
from .activity import ActivityLogEntry, ActivityKind

__all__ = [
    "engine",
    "AsyncSessionLocal",
    "Base",
    "init_db",
    "get_db",

    "User",
    "ActivityLogEntry",
    "ActivityKind",
]
