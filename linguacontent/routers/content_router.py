from typing import Annotated, List, Literal

from fastapi import APIRouter, Depends, HTTPException, Query

from sqlalchemy.ext.asyncio import AsyncSession

from linguacontent.auth.dependencies import get_current_user
from linguacontent.database.setup import get_db
from linguacontent.models.user_model import UserModel
from linguacontent.repositories.content_repository import (
    LanguageRepository, CategoryRepository, SubjectRepository, ArticleRepository,
    SubmitArticleRepository, DEFAULT_LANGUAGE
)
from linguacontent.schemas.content_schema import (
    LanguageOut, CategoryOut, SubjectOut, ArticleOut, ArticleTranslationOut,
    DualViewOut, ArticleSubmitSchema, ArticleSubmittedOut
)

from linguacontent.logging_config import setup_logger
logger = setup_logger(__name__, "content.log")

router = APIRouter()


@router.get('/languages', status_code=200, response_model=List[LanguageOut])
async def get_languages(db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        return await LanguageRepository(db).list_languages()
    except Exception as ex:
        logger.error(f"Error fetching languages: {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch languages")


@router.get('/categories', status_code=200, response_model=List[CategoryOut])
async def get_categories(db: Annotated[AsyncSession, Depends(get_db)], lang: str = DEFAULT_LANGUAGE):
    try:
        return await CategoryRepository(db, lang).list_categories()
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error fetching categories for '{lang}': {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch categories")


@router.get('/categories/{slug}', status_code=200, response_model=CategoryOut)
async def get_category(slug: str, db: Annotated[AsyncSession, Depends(get_db)], lang: str = DEFAULT_LANGUAGE):
    try:
        return await CategoryRepository(db, lang).get_category(slug)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error fetching category '{slug}': {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch category")


@router.get('/categories/{slug}/subjects', status_code=200, response_model=List[SubjectOut])
async def get_subjects_by_category(slug: str, db: Annotated[AsyncSession, Depends(get_db)],
                                   lang: str = DEFAULT_LANGUAGE):
    try:
        return await SubjectRepository(db, lang).list_by_category(slug)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error fetching subjects of category '{slug}': {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch subjects")


@router.get('/subjects/{slug}', status_code=200, response_model=SubjectOut)
async def get_subject(slug: str, db: Annotated[AsyncSession, Depends(get_db)], lang: str = DEFAULT_LANGUAGE):
    try:
        return await SubjectRepository(db, lang).get_subject(slug)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error fetching subject '{slug}': {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch subject")


@router.get('/subjects/{slug}/articles', status_code=200, response_model=List[ArticleOut])
async def get_articles_by_subject(slug: str, db: Annotated[AsyncSession, Depends(get_db)],
                                  lang: str = DEFAULT_LANGUAGE):
    try:
        return await ArticleRepository(db, lang).list_by_subject(slug)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error fetching articles of subject '{slug}': {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch articles")


@router.post('/articles', status_code=201, response_model=ArticleSubmittedOut)
async def submit_article(data: ArticleSubmitSchema,
                         user: Annotated[UserModel, Depends(get_current_user)],
                         db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        return await SubmitArticleRepository(db, user.id, data).submit()
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error submitting article '{data.slug}': {ex}")
        raise HTTPException(status_code=500, detail="Failed to submit article")


# Declared before /articles/{slug} so "popular" is not taken for a slug
@router.get('/articles/popular', status_code=200, response_model=List[ArticleOut])
async def get_popular_articles(db: Annotated[AsyncSession, Depends(get_db)],
                               lang: str = DEFAULT_LANGUAGE,
                               limit: int = Query(10, ge=1, le=50)):
    try:
        return await ArticleRepository(db, lang).list_popular(limit)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error fetching popular articles: {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch articles")


@router.get('/articles/{slug}', status_code=200, response_model=ArticleOut)
async def get_article(slug: str, db: Annotated[AsyncSession, Depends(get_db)], lang: str = DEFAULT_LANGUAGE):
    try:
        return await ArticleRepository(db, lang).get_article(slug)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error fetching article '{slug}': {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch article")


@router.get('/articles/{slug}/translations', status_code=200, response_model=List[ArticleTranslationOut])
async def get_article_translations(slug: str, db: Annotated[AsyncSession, Depends(get_db)]):
    try:
        return await ArticleRepository(db).get_translations(slug)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error fetching translations of article '{slug}': {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch article translations")


@router.get('/articles/{slug}/dual', status_code=200, response_model=DualViewOut)
async def get_article_dual_view(slug: str,
                                db: Annotated[AsyncSession, Depends(get_db)],
                                secondary: str,
                                lang: str = DEFAULT_LANGUAGE,
                                mode: Literal['dual', 'toggle'] = 'dual'):
    try:
        return await ArticleRepository(db, lang).get_dual_view(slug, secondary, mode)
    except HTTPException:
        raise
    except Exception as ex:
        logger.error(f"Error building dual view of article '{slug}': {ex}")
        raise HTTPException(status_code=500, detail="Failed to fetch article")
