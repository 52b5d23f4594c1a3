from sqlalchemy.ext.asyncio import AsyncEngine

from linguacontent.database.setup import engine as default_engine
from linguacontent.models.base_model import Base

# Imported for their side effect of registering tables on Base.metadata
from linguacontent.models import language_model, user_model, content_model, interaction_model  # noqa: F401


async def create_tables(engine: AsyncEngine = default_engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_tables(engine: AsyncEngine = default_engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
