from typing import List, Dict, Optional

from fastapi import HTTPException, status

from sqlalchemy import select, delete, func
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from linguacontent.models.content_model import Article, ArticleStatus
from linguacontent.models.interaction_model import Comment, Like, SavedArticle
from linguacontent.models.user_model import UserModel
from linguacontent.repositories.content_repository import (
    ArticleAssembler, LanguageRepository, find_article_by_id, find_article_by_slug
)

from linguacontent.logging_config import setup_logger
logger = setup_logger(__name__, "interaction.log")


UNKNOWN_USER = {"id": 0, "username": "Unknown"}


class CommentRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _usernames(self, user_ids: set) -> Dict[int, dict]:
        if not user_ids:
            return {}
        result = await self.db.execute(
            select(UserModel.id, UserModel.username).where(UserModel.id.in_(user_ids))
        )
        return {row.id: {"id": row.id, "username": row.username} for row in result.all()}

    async def list_for_article(self, article_id: int) -> List[dict]:
        """
        Return the comment tree of an article.

        Top-level comments come first in creation order, each carrying its
        replies (recursively) in creation order.
        """
        await find_article_by_id(self.db, article_id)

        result = await self.db.execute(
            select(Comment).where(Comment.article_id == article_id).order_by(Comment.created_at, Comment.id)
        )
        comments = list(result.scalars().all())
        users = await self._usernames({c.user_id for c in comments})

        nodes: Dict[int, dict] = {}
        for comment in comments:
            nodes[comment.id] = {
                "id": comment.id,
                "article_id": comment.article_id,
                "user_id": comment.user_id,
                "content": comment.content,
                "parent_id": comment.parent_id,
                "created_at": comment.created_at,
                "user": users.get(comment.user_id, UNKNOWN_USER),
                "replies": [],
            }

        roots = []
        for comment in comments:
            node = nodes[comment.id]
            parent = nodes.get(comment.parent_id) if comment.parent_id else None
            if parent is not None:
                parent["replies"].append(node)
            else:
                roots.append(node)
        return roots

    async def list_for_slug(self, slug: str) -> List[dict]:
        article = await find_article_by_slug(self.db, slug)
        return await self.list_for_article(article.id)

    async def create(self, user_id: int, article_id: int, content: str, parent_id: Optional[int] = None) -> Comment:
        await find_article_by_id(self.db, article_id)

        if parent_id is not None:
            parent = await self.db.get(Comment, parent_id)
            if parent is None:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Parent comment not found")
            if parent.article_id != article_id:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Parent comment belongs to another article"
                )

        try:
            comment = Comment(article_id=article_id, user_id=user_id, content=content, parent_id=parent_id)
            self.db.add(comment)
            await self.db.commit()
            await self.db.refresh(comment)
            logger.info(f"User {user_id} commented on article {article_id} (comment {comment.id})")
            return comment
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to create comment on article {article_id}: {str(e)}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create comment")

    async def create_for_slug(self, user_id: int, slug: str, content: str, parent_id: Optional[int] = None) -> Comment:
        article = await find_article_by_slug(self.db, slug)
        return await self.create(user_id, article.id, content, parent_id)


class LikeRepository:

    def __init__(self, db: AsyncSession, user_id: int):
        self.db = db
        self.user_id = user_id

    async def _find(self, article_id: int) -> Optional[Like]:
        result = await self.db.execute(
            select(Like).where(Like.article_id == article_id, Like.user_id == self.user_id)
        )
        return result.scalar_one_or_none()

    async def like(self, article_id: int) -> Like:
        await find_article_by_id(self.db, article_id)

        existing = await self._find(article_id)
        if existing is not None:
            return existing

        try:
            like = Like(article_id=article_id, user_id=self.user_id)
            self.db.add(like)
            await self.db.commit()
            await self.db.refresh(like)
            logger.info(f"User {self.user_id} liked article {article_id}")
            return like
        except IntegrityError:
            # A concurrent request inserted the same pair first
            await self.db.rollback()
            existing = await self._find(article_id)
            if existing is None:
                raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to like article")
            return existing

    async def unlike(self, article_id: int) -> None:
        await self.db.execute(
            delete(Like).where(Like.article_id == article_id, Like.user_id == self.user_id)
        )
        await self.db.commit()
        logger.info(f"User {self.user_id} unliked article {article_id}")

    async def is_liked(self, article_id: int) -> bool:
        return await self._find(article_id) is not None

    async def status_for_slug(self, slug: str) -> dict:
        article = await find_article_by_slug(self.db, slug)
        like_count = (await self.db.execute(
            select(func.count(Like.id)).where(Like.article_id == article.id)
        )).scalar_one()
        return {
            "liked": await self.is_liked(article.id),
            "like_count": like_count,
        }


class SavedArticleRepository:

    def __init__(self, db: AsyncSession, user_id: int):
        self.db = db
        self.user_id = user_id

    async def _find(self, article_id: int) -> Optional[SavedArticle]:
        result = await self.db.execute(
            select(SavedArticle).where(SavedArticle.article_id == article_id, SavedArticle.user_id == self.user_id)
        )
        return result.scalar_one_or_none()

    async def save(self, article_id: int) -> SavedArticle:
        await find_article_by_id(self.db, article_id)

        existing = await self._find(article_id)
        if existing is not None:
            return existing

        try:
            saved = SavedArticle(article_id=article_id, user_id=self.user_id)
            self.db.add(saved)
            await self.db.commit()
            await self.db.refresh(saved)
            logger.info(f"User {self.user_id} saved article {article_id}")
            return saved
        except IntegrityError:
            await self.db.rollback()
            existing = await self._find(article_id)
            if existing is None:
                raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to save article")
            return existing

    async def unsave(self, article_id: int) -> None:
        await self.db.execute(
            delete(SavedArticle).where(SavedArticle.article_id == article_id, SavedArticle.user_id == self.user_id)
        )
        await self.db.commit()
        logger.info(f"User {self.user_id} removed article {article_id} from saved")

    async def is_saved(self, article_id: int) -> bool:
        return await self._find(article_id) is not None

    async def status_for_slug(self, slug: str) -> dict:
        article = await find_article_by_slug(self.db, slug)
        return {"saved": await self.is_saved(article.id)}

    async def list_saved(self, language_code: str) -> List[dict]:
        language = await LanguageRepository(self.db).require(language_code)

        result = await self.db.execute(
            select(Article)
            .join(SavedArticle, SavedArticle.article_id == Article.id)
            .where(SavedArticle.user_id == self.user_id, Article.status == ArticleStatus.APPROVED.value)
            .order_by(SavedArticle.created_at, SavedArticle.id)
        )
        return await ArticleAssembler(self.db, language).assemble(list(result.scalars().all()))
