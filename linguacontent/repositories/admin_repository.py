from datetime import datetime, timezone
from typing import List

from fastapi import HTTPException, status

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from linguacontent.models.content_model import Article, ArticleStatus
from linguacontent.models.user_model import MessageModel, UserModel
from linguacontent.repositories.content_repository import ArticleAssembler, LanguageRepository, DEFAULT_LANGUAGE

from linguacontent.logging_config import setup_logger
logger = setup_logger(__name__, "admin.log")


class PendingArticlesRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_pending(self) -> List[dict]:
        # Moderators always review in the default language
        language = await LanguageRepository(self.db).require(DEFAULT_LANGUAGE)
        result = await self.db.execute(
            select(Article)
            .where(Article.status == ArticleStatus.PENDING.value)
            .order_by(Article.created_at, Article.id)
        )
        return await ArticleAssembler(self.db, language).assemble(list(result.scalars().all()))


class ModerateArticleRepository:

    def __init__(self, db: AsyncSession, article_id: int, admin_id: int):
        self.db = db
        self.article_id = article_id
        self.admin_id = admin_id

    async def _get(self) -> Article:
        article = await self.db.get(Article, self.article_id)
        if article is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
        return article

    async def approve(self) -> dict:
        article = await self._get()
        try:
            article.status = ArticleStatus.APPROVED.value
            article.published_at = datetime.now(timezone.utc)
            await self.db.commit()
            logger.info(f"Admin {self.admin_id} approved article {article.id} ({article.slug})")
            return {"id": article.id, "slug": article.slug, "status": article.status}
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to approve article {self.article_id}: {str(e)}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to approve article")

    async def reject(self) -> dict:
        article = await self._get()
        try:
            article.status = ArticleStatus.REJECTED.value
            await self.db.commit()
            logger.info(f"Admin {self.admin_id} rejected article {article.id} ({article.slug})")
            return {"id": article.id, "slug": article.slug, "status": article.status}
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to reject article {self.article_id}: {str(e)}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to reject article")


class MessageRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_messages(self) -> List[dict]:
        result = await self.db.execute(
            select(MessageModel, UserModel.username)
            .outerjoin(UserModel, UserModel.id == MessageModel.user_id)
            .order_by(MessageModel.created_at.desc(), MessageModel.id.desc())
        )
        return [
            {
                "id": message.id,
                "user_id": message.user_id,
                "content": message.content,
                "created_at": message.created_at,
                "user": {"id": message.user_id, "username": username} if username else {"id": 0, "username": "Unknown"},
            }
            for message, username in result.all()
        ]

    async def create_message(self, user: UserModel, content: str) -> dict:
        try:
            message = MessageModel(user_id=user.id, content=content)
            self.db.add(message)
            await self.db.commit()
            await self.db.refresh(message)
            logger.info(f"Message {message.id} received from user {user.id}")
            return {
                "id": message.id,
                "user_id": message.user_id,
                "content": message.content,
                "created_at": message.created_at,
                "user": {"id": user.id, "username": user.username},
            }
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to store message from user {user.id}: {str(e)}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to send message")
