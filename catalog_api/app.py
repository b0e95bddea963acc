from contextlib import asynccontextmanager

from fastapi import FastAPI

from catalog_api.infrastructure.config.settings import Settings
from catalog_api.infrastructure.logging.logger import Logger, setup_logging
from catalog_api.infrastructure.persistence.database import dispose_engine, get_engine, get_session_factory, set_engine
from catalog_api.infrastructure.persistence.seed import create_tables, seed_catalog
from catalog_api.presentation.routers import catalog_items, catalog_lookups, health

setup_logging()

logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()
    if settings.USE_ONLY_IN_MEMORY_DATABASE:
        logger.info("Using the in-memory catalog store")
        yield
        return

    set_engine(get_engine())
    try:
        if settings.SEED_DATABASE:
            session_factory = get_session_factory()
            await create_tables(session_factory)
            await seed_catalog(session_factory)
        yield
    finally:
        await dispose_engine()


app = FastAPI(title="Catalog API", lifespan=lifespan)

app.include_router(health.router)
app.include_router(catalog_items.router)
app.include_router(catalog_lookups.router)
