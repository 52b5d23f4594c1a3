# main.py

import os
from contextlib import asynccontextmanager
from datetime import datetime

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import select, func

load_dotenv()

from linguacontent.database.init_db import create_tables
from linguacontent.database.setup import SessionLocal
from linguacontent.models.language_model import Language
from linguacontent.repositories.seed_repository import SeedRepository
from linguacontent.repositories.user_repository import BootstrapAdminRepository
from linguacontent.routers import (user_router, content_router, interaction_router, admin_router,
                                   i18n_router)
from linguacontent.tasks.background_worker import worker

from linguacontent.logging_config import setup_logger
logger = setup_logger(__name__, "session.log")


def seed_on_startup() -> bool:
    return os.getenv("SEED_ON_STARTUP", "true").lower() == "true"


async def prepare_database() -> None:
    await create_tables()

    async with SessionLocal() as db:
        if seed_on_startup():
            language_count = (await db.execute(select(func.count(Language.id)))).scalar_one()
            if language_count == 0:
                await SeedRepository(db).seed()

        admin = await BootstrapAdminRepository(db).ensure_admin()
        if admin:
            logger.info(f"Admin account available: {admin.username}")


@asynccontextmanager
async def lifespan(app: FastAPI):

    await prepare_database()

    try:
        worker.start()
        status = worker.get_status()
        logger.info(f"Cleanup worker running, next run: {status['next_run']}")
    except Exception as e:
        logger.warning(f"Could not start background worker: {e}")

    yield

    logger.info(f"Shutting down application at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}...")
    worker.stop()


app = FastAPI(title="LinguaContent", lifespan=lifespan)

origins = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)


# Include Routers
app.include_router(router=user_router.router, prefix='/api', tags=['User'])
app.include_router(router=content_router.router, prefix='/api', tags=['Content'])
app.include_router(router=interaction_router.router, prefix='/api', tags=['Interaction'])
app.include_router(router=admin_router.router, prefix='/api/admin', tags=['Admin'])
app.include_router(router=i18n_router.router, prefix='/api/i18n', tags=['I18n'])


@app.get("/health")
async def health_check():
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}
