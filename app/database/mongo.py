'''
NOTE:

1.MongoDB holds one collection here: error_logs. Users, carts and orders are mock in-memory data (see mock_store.py).
2.The client is created on first use and reused by every route (get_client()), closed on shutdown (close_client()).
3.Without MONGO_URI, error records are printed to the console instead of stored.
Refer:
https://pymongo.readthedocs.io/en/4.13.0/async-tutorial.html

'''
from pymongo import AsyncMongoClient
from app.core.config import settings
from datetime import datetime, timezone
from typing import Optional, Dict, Any
import traceback

ERROR_LOGS_COLLECTION = "error_logs"

#Client and db are created once and shared
client: AsyncMongoClient | None = None
db = None


def is_mongo_configured() -> bool:
    return bool(settings.MONGO_URI)


async def get_client() -> AsyncMongoClient:
    """
    Get or create the MongoDB client (pinged on creation).

    Raises:
        RuntimeError: If MONGO_URI is not configured
    """
    global client
    if client is not None:
        return client

    if not is_mongo_configured():
        raise RuntimeError("MONGO_URI is not configured")

    new_client = AsyncMongoClient(
        settings.MONGO_URI,
        serverSelectionTimeoutMS=5000,
        connectTimeoutMS=5000,
        maxPoolSize=50,
        retryWrites=True
    )
    try:
        await new_client.admin.command('ping')
    except Exception as e:
        print(f"❌ MongoDB unreachable: {str(e)}")
        await new_client.close()
        raise

    client = new_client
    print(f"🍃 MongoDB connected ({settings.MONGO_DB_NAME})")
    return client


async def get_db():
    global db
    if db is None:
        db = (await get_client())[settings.MONGO_DB_NAME]
    return db


async def close_client():
    """Close the shared client, if one was opened."""
    global client, db
    if client is not None:
        await client.close()
        print("🍃 MongoDB connection closed")
    client = None
    db = None


def build_error_record(error: Exception, location: str, additional_info: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Error log document.

    Args:
        error: The exception that occurred
        location: "<package>/<file>.py - <function>"
        additional_info: Request context worth keeping (no secrets or raw images)
    """
    return {
        "timestamp": datetime.now(timezone.utc),
        "error_type": type(error).__name__,
        "error_message": str(error),
        "location": location,
        "traceback": "".join(traceback.format_exception(type(error), error, error.__traceback__)),
        "additional_info": additional_info or {}
    }


def print_error_record(record: Dict[str, Any]):
    print(f"❌ [{record['location']}] {record['error_type']}: {record['error_message']}")
    if record["additional_info"]:
        print(f"   additional info: {record['additional_info']}")


async def log_error(error: Exception, location: str, additional_info: Optional[Dict[str, Any]] = None):
    """
    Record an error in error_logs, or on the console when MongoDB is not available.
    Never raises.
    """
    record = build_error_record(error, location, additional_info)

    if not is_mongo_configured():
        print_error_record(record)
        return

    try:
        database = await get_db()
        await database[ERROR_LOGS_COLLECTION].insert_one(record)
    except Exception as e:
        print(f"Failed to log error to MongoDB: {str(e)}")
        print_error_record(record)
