from sqlalchemy import select, func, inspect

from linguacontent.database.init_db import create_tables, drop_tables
from linguacontent.models.content_model import Article, ArticleStatus, ArticleTranslation
from linguacontent.repositories.seed_repository import SeedRepository


async def test_seed_inserts_catalogue(seeded):
    assert seeded == {"languages": 5, "categories": 8, "subjects": 12, "articles": 12}


async def test_second_seed_inserts_nothing(seeded, db):
    again = await SeedRepository(db).seed()

    assert again == {"languages": 0, "categories": 0, "subjects": 0, "articles": 0}


async def test_seeded_articles_are_published_in_every_language(seeded, db):
    articles = (await db.execute(select(Article))).scalars().all()

    assert all(a.status == ArticleStatus.APPROVED.value for a in articles)
    assert all(a.published_at is not None for a in articles)

    translation_count = (await db.execute(select(func.count(ArticleTranslation.id)))).scalar_one()
    assert translation_count == 12 * 5


async def test_drop_tables_clears_schema(engine):
    async with engine.connect() as conn:
        before = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    assert {"languages", "articles", "comments"} <= set(before)

    await drop_tables(engine)
    async with engine.connect() as conn:
        after = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    assert after == []

    # leave the schema in place for the fixture teardown
    await create_tables(engine)
