from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from catalog_api.domain.exceptions import ConfigurationError
from catalog_api.infrastructure.config.settings import Settings


class _EngineStore:
    engine: Optional[AsyncEngine] = None


def set_engine(engine: AsyncEngine) -> None:
    _EngineStore.engine = engine


def get_engine() -> AsyncEngine:
    if _EngineStore.engine is None:
        settings = Settings()
        if not settings.DATABASE_URL:
            raise ConfigurationError(
                "Missing catalog database URL. Set DATABASE_URL (or enable USE_ONLY_IN_MEMORY_DATABASE)."
            )
        _EngineStore.engine = create_async_engine(settings.DATABASE_URL)
    return _EngineStore.engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(get_engine(), expire_on_commit=False)


async def dispose_engine() -> None:
    if _EngineStore.engine is not None:
        await _EngineStore.engine.dispose()
        _EngineStore.engine = None
