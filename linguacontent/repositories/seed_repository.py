from datetime import datetime, timezone
from typing import Dict

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from linguacontent.constants.seed_data import LANGUAGES, CATEGORIES, SUBJECTS, ARTICLES
from linguacontent.models.content_model import (
    Category, CategoryTranslation, Subject, SubjectTranslation,
    Article, ArticleTranslation, ArticleStatus
)
from linguacontent.models.language_model import Language

from linguacontent.logging_config import setup_logger
logger = setup_logger(__name__, "content.log")


class SeedRepository:
    """
    Loads the built-in catalogue. Rows are matched by code or slug, so running
    the seed again only inserts what is missing.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.counts = {"languages": 0, "categories": 0, "subjects": 0, "articles": 0}

    async def _languages(self) -> Dict[str, int]:
        result = await self.db.execute(select(Language))
        existing = {language.code: language for language in result.scalars().all()}

        for data in LANGUAGES:
            if data["code"] not in existing:
                language = Language(**data)
                self.db.add(language)
                existing[data["code"]] = language
                self.counts["languages"] += 1

        await self.db.flush()
        return {code: language.id for code, language in existing.items()}

    async def _category(self, data: dict, languages: Dict[str, int]) -> Category:
        category = (await self.db.execute(
            select(Category).where(Category.slug == data["slug"])
        )).scalar_one_or_none()
        if category is not None:
            return category

        category = Category(slug=data["slug"])
        self.db.add(category)
        await self.db.flush()
        for code, translation in data["translations"].items():
            self.db.add(CategoryTranslation(category_id=category.id, language_id=languages[code], **translation))
        self.counts["categories"] += 1
        return category

    async def _subject(self, data: dict, category_id: int, languages: Dict[str, int]) -> Subject:
        subject = (await self.db.execute(
            select(Subject).where(Subject.slug == data["slug"])
        )).scalar_one_or_none()
        if subject is not None:
            return subject

        subject = Subject(slug=data["slug"], category_id=category_id)
        self.db.add(subject)
        await self.db.flush()
        for code, translation in data["translations"].items():
            self.db.add(SubjectTranslation(subject_id=subject.id, language_id=languages[code], **translation))
        self.counts["subjects"] += 1
        return subject

    async def _article(self, data: dict, subject_id: int, languages: Dict[str, int]) -> None:
        existing = (await self.db.execute(
            select(Article.id).where(Article.slug == data["slug"])
        )).scalar_one_or_none()
        if existing is not None:
            return

        article = Article(
            slug=data["slug"],
            subject_id=subject_id,
            status=ArticleStatus.APPROVED.value,
            published_at=datetime.now(timezone.utc),
        )
        self.db.add(article)
        await self.db.flush()
        for code, translation in data["translations"].items():
            self.db.add(ArticleTranslation(article_id=article.id, language_id=languages[code], **translation))
        self.counts["articles"] += 1

    async def seed(self) -> dict:
        try:
            languages = await self._languages()

            for category_data in CATEGORIES:
                category = await self._category(category_data, languages)
                for subject_data in SUBJECTS.get(category_data["slug"], []):
                    subject = await self._subject(subject_data, category.id, languages)
                    for article_data in ARTICLES.get(subject_data["slug"], []):
                        await self._article(article_data, subject.id, languages)

            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Seeding failed: {str(e)}")
            raise

        logger.info(f"Seed finished, inserted {self.counts}")
        return dict(self.counts)
