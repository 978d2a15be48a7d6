# vibespecs/db/__init__.py
"""
Database module.
"""
from typing import Optional

from vibespecs.core.config import StorageSettings
from vibespecs.core.logging import log

# Motor client instance
_client = None
_db = None
_connection_error: Optional[str] = None


async def connect_db(storage: StorageSettings):
    """
    Connect to MongoDB and initialise the Beanie ODM.

    If MongoDB is not available, stores the error for later retrieval.
    Store operations then fail with StorageError instead of hanging.
    """
    global _client, _db, _connection_error
    try:
        from motor.motor_asyncio import AsyncIOMotorClient

        _client = AsyncIOMotorClient(storage.mongodb_url, serverSelectionTimeoutMS=5000, tz_aware=True)
        _db = _client[storage.mongodb_db]

        # Fail fast if MongoDB is not running
        await _client.admin.command("ping")
        log("DB", "Connected to MongoDB")

        from beanie import init_beanie
        from vibespecs.models import ProjectRecord, UserRecord, TemplateRecord

        await init_beanie(
            database=_db,
            document_models=[ProjectRecord, UserRecord, TemplateRecord]
        )
        log("DB", "Beanie ODM initialised")
        _connection_error = None
    except Exception as e:
        error_msg = str(e)
        log("DB", f"MongoDB not available: {error_msg}")
        log("DB", f"Store operations will fail until {storage.mongodb_url} is reachable")
        _client = None
        _db = None
        _connection_error = error_msg


async def disconnect_db():
    """Disconnect from MongoDB."""
    global _client, _db
    if _client:
        _client.close()
        log("DB", "Disconnected from MongoDB")
    _client = None
    _db = None


def is_connected() -> bool:
    """Check if database is connected."""
    return _db is not None


def get_connection_error() -> Optional[str]:
    """Get connection error message if connection failed."""
    return _connection_error
