from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response

from sqlalchemy.ext.asyncio import AsyncSession

from linguacontent.auth.dependencies import get_current_user, get_optional_user
from linguacontent.database.setup import get_db
from linguacontent.models.user_model import UserModel
from linguacontent.repositories.content_repository import DEFAULT_LANGUAGE
from linguacontent.repositories.interaction_repository import (
    CommentRepository, LikeRepository, SavedArticleRepository
)
from linguacontent.schemas.content_schema import ArticleOut
from linguacontent.schemas.interaction_schema import (
    CommentBody, CommentCreateSchema, CommentOut, CommentWithUserOut,
    ArticleActionSchema, LikeOut, SavedArticleOut, LikeStatusOut, SaveStatusOut
)

from linguacontent.logging_config import setup_logger
logger = setup_logger(__name__, "interaction.log")

router = APIRouter()


@router.get('/articles/{slug}/comments', status_code=200, response_model=List[CommentWithUserOut])
async def get_comments(slug: str, db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        return await CommentRepository(db).list_for_slug(slug)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error fetching comments of article '{slug}': {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch comments")


@router.post('/comments', status_code=201, response_model=CommentOut)
async def create_comment(data: CommentCreateSchema,
                         user: Annotated[UserModel, Depends(get_current_user)],
                         db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        return await CommentRepository(db).create(user.id, data.article_id, data.content, data.parent_id)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error creating comment for user {user.id}: {ex}")
        raise HTTPException(status_code=500, detail="Failed to create comment")


@router.post('/articles/{slug}/comments', status_code=201, response_model=CommentOut)
async def create_comment_for_article(slug: str,
                                     data: CommentBody,
                                     user: Annotated[UserModel, Depends(get_current_user)],
                                     db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        return await CommentRepository(db).create_for_slug(user.id, slug, data.content, data.parent_id)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error creating comment on '{slug}' for user {user.id}: {ex}")
        raise HTTPException(status_code=500, detail="Failed to create comment")


@router.post('/articles/like', status_code=201, response_model=LikeOut)
async def like_article(data: ArticleActionSchema,
                       user: Annotated[UserModel, Depends(get_current_user)],
                       db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        return await LikeRepository(db, user.id).like(data.article_id)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error liking article {data.article_id} for user {user.id}: {ex}")
        raise HTTPException(status_code=500, detail="Failed to like article")


@router.delete('/articles/{article_id}/like', status_code=204)
async def unlike_article(article_id: int,
                         user: Annotated[UserModel, Depends(get_current_user)],
                         db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        await LikeRepository(db, user.id).unlike(article_id)
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error unliking article {article_id} for user {user.id}: {ex}")
        raise HTTPException(status_code=500, detail="Failed to unlike article")


@router.get('/articles/{slug}/like', status_code=200, response_model=LikeStatusOut)
async def get_like_status(slug: str,
                          user: Annotated[Optional[UserModel], Depends(get_optional_user)],
                          db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        # Anonymous readers still see the count, never a like of their own
        return await LikeRepository(db, user.id if user else 0).status_for_slug(slug)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error fetching like status of '{slug}': {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch like status")


@router.post('/articles/save', status_code=201, response_model=SavedArticleOut)
async def save_article(data: ArticleActionSchema,
                       user: Annotated[UserModel, Depends(get_current_user)],
                       db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        return await SavedArticleRepository(db, user.id).save(data.article_id)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error saving article {data.article_id} for user {user.id}: {ex}")
        raise HTTPException(status_code=500, detail="Failed to save article")


@router.delete('/articles/{article_id}/save', status_code=204)
async def unsave_article(article_id: int,
                         user: Annotated[UserModel, Depends(get_current_user)],
                         db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        await SavedArticleRepository(db, user.id).unsave(article_id)
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error unsaving article {article_id} for user {user.id}: {ex}")
        raise HTTPException(status_code=500, detail="Failed to unsave article")


@router.get('/articles/{slug}/save', status_code=200, response_model=SaveStatusOut)
async def get_save_status(slug: str,
                          user: Annotated[Optional[UserModel], Depends(get_optional_user)],
                          db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        return await SavedArticleRepository(db, user.id if user else 0).status_for_slug(slug)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error fetching save status of '{slug}': {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch save status")


@router.get('/user/saved-articles', status_code=200, response_model=List[ArticleOut])
async def get_saved_articles(user: Annotated[UserModel, Depends(get_current_user)],
                             db: Annotated[AsyncSession, Depends(get_db)],
                             lang: str = DEFAULT_LANGUAGE):
    try:
        return await SavedArticleRepository(db, user.id).list_saved(lang)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error fetching saved articles of user {user.id}: {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch saved articles")
