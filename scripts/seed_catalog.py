import argparse
import asyncio
import sys

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from catalog_api.infrastructure.config.settings import Settings
from catalog_api.infrastructure.logging.logger import setup_logging
from catalog_api.infrastructure.persistence.seed import create_tables, seed_catalog


async def run(database_url: str, create: bool) -> int:
    engine = create_async_engine(database_url)
    try:
        session_factory = async_sessionmaker(engine, expire_on_commit=False)
        if create:
            await create_tables(session_factory)
        return await seed_catalog(session_factory)
    finally:
        await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the catalog database with the default brands, types and items")
    parser.add_argument("--database_url", type=str, default=None)
    parser.add_argument("--create_tables", action="store_true")
    args = parser.parse_args()

    setup_logging()
    database_url = args.database_url or Settings().DATABASE_URL
    if not database_url:
        print("No database URL: pass --database_url or set DATABASE_URL", file=sys.stderr)
        sys.exit(1)

    inserted = asyncio.run(run(database_url, args.create_tables))
    print(f"Inserted {inserted} catalog items")


if __name__ == "__main__":
    main()
