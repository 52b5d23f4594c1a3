from typing import List, Dict, Optional, Iterable

from fastapi import HTTPException, status

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from linguacontent.models.content_model import (
    Category, CategoryTranslation, Subject, SubjectTranslation,
    Article, ArticleTranslation, ArticleStatus
)
from linguacontent.models.interaction_model import Like
from linguacontent.models.language_model import Language
from linguacontent.models.user_model import UserModel
from linguacontent.schemas.content_schema import ArticleSubmitSchema

from linguacontent.logging_config import setup_logger
logger = setup_logger(__name__, "content.log")


DEFAULT_LANGUAGE = "en"


def language_payload(language: Language) -> dict:
    return {
        "id": language.id,
        "code": language.code,
        "name": language.name,
        "native_name": language.native_name,
        "rtl": language.rtl,
    }


def category_payload(category: Category, translation: Optional[CategoryTranslation]) -> dict:
    return {
        "id": category.id,
        "slug": category.slug,
        "created_at": category.created_at,
        "name": translation.name if translation else f"Category {category.id}",
        "description": translation.description if translation else None,
    }


def subject_payload(subject: Subject, translation: Optional[SubjectTranslation], category: dict) -> dict:
    return {
        "id": subject.id,
        "slug": subject.slug,
        "category_id": subject.category_id,
        "created_at": subject.created_at,
        "name": translation.name if translation else f"Subject {subject.id}",
        "description": translation.description if translation else None,
        "category": category,
    }


class LanguageRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_languages(self) -> List[Language]:
        result = await self.db.execute(select(Language).order_by(Language.id))
        return list(result.scalars().all())

    async def get_by_code(self, code: str) -> Optional[Language]:
        if not code:
            return None
        result = await self.db.execute(select(Language).where(Language.code == code.lower()))
        return result.scalar_one_or_none()

    async def require(self, code: str) -> Language:
        language = await self.get_by_code(code)
        if language is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Language not found")
        return language


class TranslationResolver:
    """
    Resolves (entity, language) pairs to their translation rows.

    Every lookup works on a batch of parent ids and returns a mapping
    parent_id -> translation row; ids without a row for the language are
    simply absent, and the payload helpers substitute the default text.
    """

    def __init__(self, db: AsyncSession, language: Language):
        self.db = db
        self.language = language

    async def category_translations(self, category_ids: Iterable[int]) -> Dict[int, CategoryTranslation]:
        ids = list(set(category_ids))
        if not ids:
            return {}
        result = await self.db.execute(
            select(CategoryTranslation).where(
                CategoryTranslation.category_id.in_(ids),
                CategoryTranslation.language_id == self.language.id,
            )
        )
        return {row.category_id: row for row in result.scalars().all()}

    async def subject_translations(self, subject_ids: Iterable[int]) -> Dict[int, SubjectTranslation]:
        ids = list(set(subject_ids))
        if not ids:
            return {}
        result = await self.db.execute(
            select(SubjectTranslation).where(
                SubjectTranslation.subject_id.in_(ids),
                SubjectTranslation.language_id == self.language.id,
            )
        )
        return {row.subject_id: row for row in result.scalars().all()}

    async def article_translations(self, article_ids: Iterable[int]) -> Dict[int, ArticleTranslation]:
        ids = list(set(article_ids))
        if not ids:
            return {}
        result = await self.db.execute(
            select(ArticleTranslation).where(
                ArticleTranslation.article_id.in_(ids),
                ArticleTranslation.language_id == self.language.id,
            )
        )
        return {row.article_id: row for row in result.scalars().all()}

    async def categories(self, categories: List[Category]) -> Dict[int, dict]:
        translations = await self.category_translations(c.id for c in categories)
        return {c.id: category_payload(c, translations.get(c.id)) for c in categories}

    async def subjects(self, subjects: List[Subject]) -> Dict[int, dict]:
        category_ids = {s.category_id for s in subjects}
        categories = []
        if category_ids:
            result = await self.db.execute(select(Category).where(Category.id.in_(category_ids)))
            categories = list(result.scalars().all())
        category_payloads = await self.categories(categories)

        translations = await self.subject_translations(s.id for s in subjects)
        return {
            s.id: subject_payload(s, translations.get(s.id), category_payloads[s.category_id])
            for s in subjects
        }


class ArticleAssembler:
    """Turns Article rows into ArticleWithTranslation payloads for one language."""

    def __init__(self, db: AsyncSession, language: Language):
        self.db = db
        self.language = language
        self.resolver = TranslationResolver(db, language)

    async def _subjects(self, subject_ids: set) -> Dict[int, dict]:
        if not subject_ids:
            return {}
        result = await self.db.execute(select(Subject).where(Subject.id.in_(subject_ids)))
        return await self.resolver.subjects(list(result.scalars().all()))

    async def _authors(self, author_ids: set) -> Dict[int, dict]:
        if not author_ids:
            return {}
        result = await self.db.execute(
            select(UserModel.id, UserModel.username).where(UserModel.id.in_(author_ids))
        )
        return {row.id: {"id": row.id, "username": row.username} for row in result.all()}

    async def _like_counts(self, article_ids: List[int]) -> Dict[int, int]:
        if not article_ids:
            return {}
        result = await self.db.execute(
            select(Like.article_id, func.count(Like.id))
            .where(Like.article_id.in_(article_ids))
            .group_by(Like.article_id)
        )
        return {article_id: count for article_id, count in result.all()}

    async def _available_languages(self, article_ids: List[int]) -> Dict[int, List[str]]:
        if not article_ids:
            return {}
        result = await self.db.execute(
            select(ArticleTranslation.article_id, Language.code)
            .join(Language, Language.id == ArticleTranslation.language_id)
            .where(ArticleTranslation.article_id.in_(article_ids))
            .order_by(Language.id)
        )
        available: Dict[int, List[str]] = {}
        for article_id, code in result.all():
            available.setdefault(article_id, []).append(code)
        return available

    async def assemble(self, articles: List[Article]) -> List[dict]:
        if not articles:
            return []

        article_ids = [a.id for a in articles]
        translations = await self.resolver.article_translations(article_ids)
        subjects = await self._subjects({a.subject_id for a in articles})
        authors = await self._authors({a.author_id for a in articles if a.author_id})
        like_counts = await self._like_counts(article_ids)
        available = await self._available_languages(article_ids)

        payloads = []
        for article in articles:
            translation = translations.get(article.id)
            payloads.append({
                "id": article.id,
                "slug": article.slug,
                "subject_id": article.subject_id,
                "author_id": article.author_id,
                "status": article.status,
                "published_at": article.published_at,
                "created_at": article.created_at,
                "updated_at": article.updated_at,
                "title": translation.title if translation else f"Article {article.id}",
                "content": translation.content if translation else "",
                "notes": translation.notes if translation else None,
                "author": authors.get(article.author_id) if article.author_id else None,
                "subject": subjects[article.subject_id],
                "like_count": like_counts.get(article.id, 0),
                "available_languages": available.get(article.id, []),
            })
        return payloads

    async def assemble_one(self, article: Article) -> dict:
        payloads = await self.assemble([article])
        return payloads[0]


async def find_article_by_slug(db: AsyncSession, slug: str, approved_only: bool = True) -> Article:
    stmt = select(Article).where(Article.slug == slug)
    if approved_only:
        stmt = stmt.where(Article.status == ArticleStatus.APPROVED.value)
    article = (await db.execute(stmt)).scalar_one_or_none()
    if article is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
    return article


async def find_article_by_id(db: AsyncSession, article_id: int, approved_only: bool = True) -> Article:
    article = await db.get(Article, article_id)
    if article is None or (approved_only and article.status != ArticleStatus.APPROVED.value):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
    return article


class CategoryRepository:

    def __init__(self, db: AsyncSession, language_code: str = DEFAULT_LANGUAGE):
        self.db = db
        self.language_code = language_code
        self.languages = LanguageRepository(db)

    async def list_categories(self) -> List[dict]:
        language = await self.languages.get_by_code(self.language_code)
        if language is None:
            logger.info(f"Categories requested for unknown language '{self.language_code}'")
            return []

        result = await self.db.execute(select(Category).order_by(Category.id))
        categories = list(result.scalars().all())
        payloads = await TranslationResolver(self.db, language).categories(categories)
        return [payloads[c.id] for c in categories]

    async def get_category(self, slug: str) -> dict:
        language = await self.languages.get_by_code(self.language_code)
        category = (await self.db.execute(select(Category).where(Category.slug == slug))).scalar_one_or_none()
        if language is None or category is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")

        payloads = await TranslationResolver(self.db, language).categories([category])
        return payloads[category.id]


class SubjectRepository:

    def __init__(self, db: AsyncSession, language_code: str = DEFAULT_LANGUAGE):
        self.db = db
        self.language_code = language_code
        self.languages = LanguageRepository(db)

    async def list_by_category(self, category_slug: str) -> List[dict]:
        language = await self.languages.get_by_code(self.language_code)
        category = (await self.db.execute(
            select(Category).where(Category.slug == category_slug)
        )).scalar_one_or_none()
        if language is None or category is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")

        result = await self.db.execute(
            select(Subject).where(Subject.category_id == category.id).order_by(Subject.id)
        )
        subjects = list(result.scalars().all())
        payloads = await TranslationResolver(self.db, language).subjects(subjects)
        return [payloads[s.id] for s in subjects]

    async def get_subject(self, slug: str) -> dict:
        language = await self.languages.get_by_code(self.language_code)
        subject = (await self.db.execute(select(Subject).where(Subject.slug == slug))).scalar_one_or_none()
        if language is None or subject is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found")

        payloads = await TranslationResolver(self.db, language).subjects([subject])
        return payloads[subject.id]


class ArticleRepository:

    def __init__(self, db: AsyncSession, language_code: str = DEFAULT_LANGUAGE):
        self.db = db
        self.language_code = language_code
        self.languages = LanguageRepository(db)

    async def list_by_subject(self, subject_slug: str) -> List[dict]:
        language = await self.languages.get_by_code(self.language_code)
        subject = (await self.db.execute(select(Subject).where(Subject.slug == subject_slug))).scalar_one_or_none()
        if language is None or subject is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found")

        result = await self.db.execute(
            select(Article)
            .where(Article.subject_id == subject.id, Article.status == ArticleStatus.APPROVED.value)
            .order_by(Article.id)
        )
        return await ArticleAssembler(self.db, language).assemble(list(result.scalars().all()))

    async def get_article(self, slug: str) -> dict:
        language = await self.languages.get_by_code(self.language_code)
        if language is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
        article = await find_article_by_slug(self.db, slug)
        return await ArticleAssembler(self.db, language).assemble_one(article)

    async def list_popular(self, limit: int = 10) -> List[dict]:
        language = await self.languages.require(self.language_code)

        like_count = func.count(Like.id).label("like_count")
        result = await self.db.execute(
            select(Article, like_count)
            .outerjoin(Like, Like.article_id == Article.id)
            .where(Article.status == ArticleStatus.APPROVED.value)
            .group_by(Article.id)
            .order_by(like_count.desc(), Article.id)
            .limit(limit)
        )
        articles = [row[0] for row in result.all()]
        return await ArticleAssembler(self.db, language).assemble(articles)

    async def get_translations(self, slug: str) -> List[dict]:
        article = await find_article_by_slug(self.db, slug)

        result = await self.db.execute(
            select(ArticleTranslation, Language)
            .join(Language, Language.id == ArticleTranslation.language_id)
            .where(ArticleTranslation.article_id == article.id)
            .order_by(Language.id)
        )
        return [
            {
                "id": translation.id,
                "article_id": article.id,
                "language_id": language.id,
                "title": translation.title,
                "content": translation.content,
                "notes": translation.notes,
                "language": language_payload(language),
            }
            for translation, language in result.all()
        ]

    async def get_dual_view(self, slug: str, secondary_code: str, view_mode: str = "dual") -> dict:
        if secondary_code.lower() == self.language_code.lower():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Primary and secondary languages must differ"
            )

        primary = await self.languages.require(self.language_code)
        secondary = await self.languages.require(secondary_code)
        article = await find_article_by_slug(self.db, slug)

        primary_translation = (await TranslationResolver(self.db, primary).article_translations([article.id])).get(article.id)
        secondary_translation = (await TranslationResolver(self.db, secondary).article_translations([article.id])).get(article.id)
        available = await ArticleAssembler(self.db, primary)._available_languages([article.id])

        return {
            "article_id": article.id,
            "slug": article.slug,
            "view_mode": view_mode,
            "primary": {
                "language": language_payload(primary),
                "title": primary_translation.title if primary_translation else f"Article {article.id}",
                "content": primary_translation.content if primary_translation else "",
                "notes": primary_translation.notes if primary_translation else None,
            },
            "secondary": {
                "language": language_payload(secondary),
                "title": secondary_translation.title,
                "content": secondary_translation.content,
                "notes": secondary_translation.notes,
            } if secondary_translation else None,
            "available_languages": available.get(article.id, []),
        }


class SubmitArticleRepository:

    def __init__(self, db: AsyncSession, user_id: int, data: ArticleSubmitSchema):
        self.db = db
        self.user_id = user_id
        self.data = data

    async def _resolve_languages(self) -> Dict[str, Language]:
        codes = [code.lower() for code in self.data.translations.keys()]
        duplicates = sorted({code for code in codes if codes.count(code) > 1})
        if duplicates:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Duplicate language code(s): {', '.join(duplicates)}"
            )

        result = await self.db.execute(select(Language).where(Language.code.in_(codes)))
        languages = {language.code: language for language in result.scalars().all()}

        unknown = sorted(set(codes) - set(languages))
        if unknown:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown language code(s): {', '.join(unknown)}"
            )
        return languages

    async def submit(self) -> dict:
        try:
            existing = (await self.db.execute(
                select(Article.id).where(Article.slug == self.data.slug)
            )).scalar_one_or_none()
            if existing is not None:
                raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="This slug already exists")

            subject = (await self.db.execute(
                select(Subject).where(Subject.slug == self.data.subject_slug)
            )).scalar_one_or_none()
            if subject is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found")

            languages = await self._resolve_languages()

            article = Article(
                slug=self.data.slug,
                subject_id=subject.id,
                author_id=self.user_id,
                status=ArticleStatus.PENDING.value,
            )
            self.db.add(article)
            await self.db.flush()

            for code, translation in self.data.translations.items():
                self.db.add(ArticleTranslation(
                    article_id=article.id,
                    language_id=languages[code.lower()].id,
                    title=translation.title,
                    content=translation.content,
                    notes=translation.notes,
                ))

            await self.db.commit()
            logger.info(f"Article '{article.slug}' submitted by user {self.user_id} for review")

            return {
                "id": article.id,
                "slug": article.slug,
                "status": article.status,
                "languages": sorted(languages),
            }

        except HTTPException:
            raise
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Integrity error submitting article '{self.data.slug}': {str(e)}")
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Article conflicts with existing data")
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Database error submitting article: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Database error while submitting article"
            )
