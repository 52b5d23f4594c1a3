"""Catalogue reads: categories, subjects, articles and their translations."""

import pytest


pytestmark = pytest.mark.usefixtures("seeded")


async def test_languages_are_listed_in_insertion_order(client):
    response = await client.get("/api/languages")

    assert response.status_code == 200
    codes = [language["code"] for language in response.json()]
    assert codes == ["en", "ar", "fr", "es", "de"]
    arabic = response.json()[1]
    assert arabic["rtl"] is True
    assert arabic["native_name"] == "العربية"


async def test_categories_resolve_names_in_requested_language(client):
    response = await client.get("/api/categories", params={"lang": "fr"})

    assert response.status_code == 200
    by_slug = {category["slug"]: category for category in response.json()}
    assert by_slug["travel-guide"]["name"] == "Guide de Voyage"
    assert by_slug["travel-guide"]["description"] == "Phrases essentielles pour les voyageurs"


async def test_categories_default_to_english(client):
    response = await client.get("/api/categories")

    by_slug = {category["slug"]: category for category in response.json()}
    assert by_slug["food-and-cuisine"]["name"] == "Food and Cuisine"


async def test_category_without_translation_gets_placeholder_name(client):
    response = await client.get("/api/categories", params={"lang": "de"})

    levantine = next(c for c in response.json() if c["slug"] == "levantine-dialect")
    assert levantine["name"] == f"Category {levantine['id']}"
    assert levantine["description"] is None


async def test_unknown_language_yields_no_categories(client):
    response = await client.get("/api/categories", params={"lang": "xx"})

    assert response.status_code == 200
    assert response.json() == []


async def test_single_category_lookup(client):
    response = await client.get("/api/categories/travel-guide", params={"lang": "es"})

    assert response.status_code == 200
    assert response.json()["name"] == "Guía de Viaje"


@pytest.mark.parametrize("path, params", [
    ("/api/categories/does-not-exist", {}),
    ("/api/categories/travel-guide", {"lang": "xx"}),
])
async def test_category_lookup_not_found(client, path, params):
    response = await client.get(path, params=params)

    assert response.status_code == 404
    assert response.json()["detail"] == "Category not found"


async def test_subjects_of_category_embed_their_category(client):
    response = await client.get("/api/categories/travel-guide/subjects", params={"lang": "de"})

    assert response.status_code == 200
    subjects = response.json()
    assert [s["slug"] for s in subjects] == ["at-the-airport", "public-transportation"]
    assert subjects[0]["name"] == "Am Flughafen"
    assert subjects[0]["category"]["slug"] == "travel-guide"
    assert subjects[0]["category"]["name"] == "Reiseführer"


async def test_subjects_of_unknown_category(client):
    response = await client.get("/api/categories/nowhere/subjects")

    assert response.status_code == 404
    assert response.json()["detail"] == "Category not found"


async def test_category_without_subjects_returns_empty_list(client):
    response = await client.get("/api/categories/egyptian-dialect/subjects")

    assert response.status_code == 200
    assert response.json() == []


async def test_single_subject_lookup(client):
    response = await client.get("/api/subjects/popular-dishes", params={"lang": "ar"})

    assert response.status_code == 200
    assert response.json()["name"] == "الأطباق الشعبية"


async def test_unknown_subject(client):
    response = await client.get("/api/subjects/nothing-here")

    assert response.status_code == 404
    assert response.json()["detail"] == "Subject not found"


async def test_articles_of_subject(client):
    response = await client.get("/api/subjects/business-meetings/articles", params={"lang": "fr"})

    assert response.status_code == 200
    articles = response.json()
    assert len(articles) == 1
    article = articles[0]
    assert article["slug"] == "effective-presentations"
    assert article["title"] == "Présentations d'Affaires Efficaces"
    assert article["author"] is None
    assert article["subject"]["slug"] == "business-meetings"
    assert article["subject"]["category"]["slug"] == "business-communication"


async def test_articles_of_unknown_subject(client):
    response = await client.get("/api/subjects/nothing-here/articles")

    assert response.status_code == 404
    assert response.json()["detail"] == "Subject not found"


async def test_article_reports_languages_and_like_count(client):
    response = await client.get("/api/articles/airport-navigation", params={"lang": "es"})

    assert response.status_code == 200
    article = response.json()
    assert article["title"] == "Navegando por aeropuertos: Vocabulario esencial"
    assert article["status"] == "approved"
    assert article["like_count"] == 0
    assert article["available_languages"] == ["en", "ar", "fr", "es", "de"]


async def test_unknown_article(client):
    response = await client.get("/api/articles/no-such-article")

    assert response.status_code == 404
    assert response.json()["detail"] == "Article not found"


async def test_article_translations_embed_language(client):
    response = await client.get("/api/articles/global-holidays/translations")

    assert response.status_code == 200
    translations = response.json()
    assert [t["language"]["code"] for t in translations] == ["en", "ar", "fr", "es", "de"]
    arabic = translations[1]
    assert arabic["title"] == "الأعياد الرئيسية حول العالم"
    assert arabic["language"]["rtl"] is True


async def test_translations_of_unknown_article(client):
    response = await client.get("/api/articles/no-such-article/translations")

    assert response.status_code == 404


async def test_dual_view_returns_both_sides(client):
    response = await client.get(
        "/api/articles/restaurant-phrases/dual",
        params={"lang": "en", "secondary": "ar", "mode": "toggle"},
    )

    assert response.status_code == 200
    view = response.json()
    assert view["view_mode"] == "toggle"
    assert view["primary"]["language"]["code"] == "en"
    assert view["primary"]["title"] == "How to Order Food in a Restaurant"
    assert view["secondary"]["language"]["code"] == "ar"
    assert view["secondary"]["title"] == "كيفية طلب الطعام في مطعم"


async def test_dual_view_rejects_identical_languages(client):
    response = await client.get("/api/articles/restaurant-phrases/dual", params={"lang": "fr", "secondary": "fr"})

    assert response.status_code == 400


async def test_dual_view_with_unknown_secondary_language(client):
    response = await client.get("/api/articles/restaurant-phrases/dual", params={"secondary": "xx"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Language not found"


async def test_popular_articles_follow_like_count(client, register_user):
    first = await register_user("first")
    second = await register_user("second")

    article = (await client.get("/api/articles/bargaining-phrases")).json()
    other = (await client.get("/api/articles/global-holidays")).json()

    await client.post("/api/articles/like", json={"article_id": article["id"]}, headers=first["headers"])
    await client.post("/api/articles/like", json={"article_id": article["id"]}, headers=second["headers"])
    await client.post("/api/articles/like", json={"article_id": other["id"]}, headers=first["headers"])

    response = await client.get("/api/articles/popular", params={"limit": 3})

    assert response.status_code == 200
    popular = response.json()
    assert [a["slug"] for a in popular[:2]] == ["bargaining-phrases", "global-holidays"]
    assert popular[0]["like_count"] == 2
    assert len(popular) == 3
