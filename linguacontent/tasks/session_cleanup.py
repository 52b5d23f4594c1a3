# tasks/session_cleanup.py

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from linguacontent.auth.refresh_token_handler import PurgeExpiredTokensRepository
from linguacontent.database.setup import SessionLocal
from linguacontent.logging_config import setup_logger

logger = setup_logger(__name__, "session.log")


async def cleanup_expired_sessions(db: Optional[AsyncSession] = None) -> dict:
    """
    Delete refresh tokens whose expiry has passed.

    Uses the given session when there is one, otherwise opens its own.
    """
    owns_session = db is None
    if owns_session:
        db = SessionLocal()

    try:
        logger.info("Starting expired session cleanup...")
        deleted = await PurgeExpiredTokensRepository(db).purge_expired_tokens()

        if deleted > 0:
            logger.info(f"Cleanup completed. Deleted {deleted} expired refresh tokens")
        else:
            logger.info("Cleanup completed. No expired refresh tokens to delete.")

        return {"total_deleted": deleted}

    except Exception as e:
        logger.error(f"Session cleanup failed: {str(e)}")
        return {"total_deleted": 0, "error": str(e)}
    finally:
        if owns_session:
            await db.close()
