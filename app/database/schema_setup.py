from .mongo import get_db, is_mongo_configured, ERROR_LOGS_COLLECTION

async def setup_error_log_indexes():
    """
    Set up indexes on the error_logs collection.
    Skipped when MongoDB is not configured (console logging only).
    """
    if not is_mongo_configured():
        print("ℹ️ MONGO_URI not set, error logs will be printed to the console")
        return

    try:
        db = await get_db()
        error_logs = db[ERROR_LOGS_COLLECTION]

        await error_logs.create_index([("timestamp", -1)], name="timestamp_desc")
        await error_logs.create_index([("location", 1), ("timestamp", -1)], name="location_timestamp")

        print("✅ error_logs indexes ready")

    except Exception as e:
        print(f"❌ Failed to setup error_logs indexes: {e}")
        raise
