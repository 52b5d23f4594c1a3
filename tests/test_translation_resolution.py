import pytest
from fastapi import HTTPException

from linguacontent.models.content_model import (
    Article, ArticleTranslation, ArticleStatus, Subject, SubjectTranslation
)
from linguacontent.repositories.content_repository import (
    ArticleRepository, CategoryRepository, LanguageRepository, SubjectRepository, TranslationResolver
)


pytestmark = pytest.mark.usefixtures("seeded")


async def _english_only_article(db, slug="english-only"):
    english = await LanguageRepository(db).require("en")
    subject = Subject(slug=f"{slug}-subject", category_id=1)
    db.add(subject)
    await db.flush()
    db.add(SubjectTranslation(subject_id=subject.id, language_id=english.id, name="English Only"))

    article = Article(slug=slug, subject_id=subject.id, status=ArticleStatus.APPROVED.value)
    db.add(article)
    await db.flush()
    db.add(ArticleTranslation(article_id=article.id, language_id=english.id,
                              title="Only in English", content="Body"))
    await db.commit()
    return article


async def test_language_lookup_is_case_insensitive(db):
    language = await LanguageRepository(db).get_by_code("FR")

    assert language is not None
    assert language.code == "fr"


async def test_require_unknown_language(db):
    with pytest.raises(HTTPException) as exc:
        await LanguageRepository(db).require("xx")

    assert exc.value.status_code == 404


async def test_resolver_skips_entities_without_a_row(db):
    german = await LanguageRepository(db).require("de")
    categories = await CategoryRepository(db, "en").list_categories()
    ids = [c["id"] for c in categories]

    translations = await TranslationResolver(db, german).category_translations(ids)

    # the two dialect categories are only written in English and Arabic
    assert len(translations) == len(ids) - 2


async def test_levantine_category_in_french_uses_placeholder(db):
    categories = await CategoryRepository(db, "fr").list_categories()

    levantine = next(c for c in categories if c["slug"] == "levantine-dialect")
    assert levantine["name"] == f"Category {levantine['id']}"

    arabic = await CategoryRepository(db, "ar").get_category("levantine-dialect")
    assert arabic["name"] == "اللهجة الشامية"


async def test_missing_subject_translation_uses_placeholder(db):
    article = await _english_only_article(db)

    subject = await SubjectRepository(db, "es").get_subject("english-only-subject")

    assert subject["id"] == article.subject_id
    assert subject["name"] == f"Subject {article.subject_id}"
    assert subject["description"] is None


async def test_missing_article_translation_uses_placeholder(db):
    article = await _english_only_article(db)

    payload = await ArticleRepository(db, "fr").get_article("english-only")

    assert payload["title"] == f"Article {article.id}"
    assert payload["content"] == ""
    assert payload["notes"] is None
    assert payload["available_languages"] == ["en"]


async def test_dual_view_secondary_missing(db):
    await _english_only_article(db)

    view = await ArticleRepository(db, "en").get_dual_view("english-only", "de")

    assert view["primary"]["title"] == "Only in English"
    assert view["secondary"] is None
    assert view["view_mode"] == "dual"


async def test_pending_article_hidden_from_readers(db):
    article = await _english_only_article(db, slug="waiting-for-review")
    article.status = ArticleStatus.PENDING.value
    await db.commit()

    with pytest.raises(HTTPException) as exc:
        await ArticleRepository(db, "en").get_article("waiting-for-review")

    assert exc.value.status_code == 404
