from datetime import datetime, timezone
from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException

from sqlalchemy.ext.asyncio import AsyncSession

from linguacontent.auth.dependencies import require_admin
from linguacontent.database.setup import get_db
from linguacontent.models.user_model import UserModel
from linguacontent.repositories.admin_repository import (
    PendingArticlesRepository, ModerateArticleRepository, MessageRepository
)
from linguacontent.repositories.seed_repository import SeedRepository
from linguacontent.schemas.content_schema import ArticleOut
from linguacontent.schemas.user_schema import MessageOut
from linguacontent.tasks.background_worker import worker

from linguacontent.logging_config import setup_logger
logger = setup_logger(__name__, "admin.log")

router = APIRouter()


@router.get('/pending-articles', status_code=200, response_model=List[ArticleOut])
async def get_pending_articles(admin: Annotated[UserModel, Depends(require_admin)],
                               db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        return await PendingArticlesRepository(db).list_pending()
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error fetching pending articles: {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch pending articles")


@router.post('/articles/{article_id}/approve', status_code=200)
async def approve_article(article_id: int,
                          admin: Annotated[UserModel, Depends(require_admin)],
                          db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        return await ModerateArticleRepository(db, article_id, admin.id).approve()
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error approving article {article_id}: {ex}")
        raise HTTPException(status_code=500, detail="Failed to approve article")


@router.post('/articles/{article_id}/reject', status_code=200)
async def reject_article(article_id: int,
                         admin: Annotated[UserModel, Depends(require_admin)],
                         db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        return await ModerateArticleRepository(db, article_id, admin.id).reject()
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error rejecting article {article_id}: {ex}")
        raise HTTPException(status_code=500, detail="Failed to reject article")


@router.get('/messages', status_code=200, response_model=List[MessageOut])
async def get_messages(admin: Annotated[UserModel, Depends(require_admin)],
                       db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        return await MessageRepository(db).list_messages()
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error fetching admin messages: {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch messages")


@router.post('/seed', status_code=200)
async def seed_content(admin: Annotated[UserModel, Depends(require_admin)],
                       db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        inserted = await SeedRepository(db).seed()
        logger.info(f"Admin {admin.id} ran the seed: {inserted}")
        return {"inserted": inserted}
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error seeding content: {ex}")
        raise HTTPException(status_code=500, detail="Failed to seed content")


@router.get("/cleanup/status")
async def get_cleanup_status(admin: Annotated[UserModel, Depends(require_admin)]):
    """Get detailed status of the cleanup worker"""
    status = worker.get_status()

    status["server_time"] = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    status["server_time_utc"] = datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S UTC')
    return status


@router.post("/cleanup/run-now")
async def run_cleanup_now(admin: Annotated[UserModel, Depends(require_admin)],
                          db: Annotated[AsyncSession, Depends(get_db)]):
    """Manually trigger cleanup now"""
    result = await worker.run_once(db)

    if result.get("error"):
        logger.error(f"Manual cleanup by admin {admin.id} failed: {result['error']}")
        raise HTTPException(status_code=500, detail="Cleanup failed")

    logger.info(f"Manual cleanup by admin {admin.id} deleted {result['deleted_count']} tokens")
    return {
        "success": True,
        "message": f"Cleanup completed in {result['duration_seconds']:.2f} seconds",
        **{key: value for key, value in result.items() if key != "error"},
    }
