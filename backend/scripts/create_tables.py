import asyncio
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from polyglot.models import database
from polyglot.models.user import User  # noqa: F401
from polyglot.models.activity import ActivityLogEntry  # noqa: F401


async def create_tables():
    """Create all database tables"""
    print("Creating database tables...")
    for table in database.Base.metadata.sorted_tables:
        print(f"  - {table.name}")

    await database.init_db()
    await database.engine.dispose()

    print("✅ All tables created successfully!")


if __name__ == "__main__":
    asyncio.run(create_tables())
