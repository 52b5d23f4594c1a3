import os
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DB_USER = os.getenv('DB_USER')
DB_PASSWORD = os.getenv('DB_PASSWORD')
DB_HOST = os.getenv('DB_HOST', 'localhost')
DB_PORT = os.getenv('DB_PORT', '5432')
DB_NAME = os.getenv('DB_NAME', 'linguacontent')


def build_connection_string() -> str:
    database_url = os.getenv('DATABASE_URL')
    if database_url:
        return database_url
    if DB_USER:
        return f'postgresql+asyncpg://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}'
    # local development without a postgres server
    return 'sqlite+aiosqlite:///./linguacontent.db'


connection_string = build_connection_string()

engine_options = {
    'echo': os.getenv('DB_ECHO', 'false').lower() == 'true',
    'pool_pre_ping': True,
}
if connection_string.startswith('postgresql'):
    engine_options.update(pool_size=5, max_overflow=5)

engine = create_async_engine(connection_string, **engine_options)

# Session factory
SessionLocal = async_sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)


async def get_db():
    async with SessionLocal() as session:
        try:
            yield session
        except Exception as e:
            await session.rollback()
            raise e
        finally:
            await session.close()
