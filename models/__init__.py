from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, AsyncAttrs
from sqlalchemy.orm import declarative_base, sessionmaker
from config import DATABASE_URL

# Create async engine
engine = create_async_engine(DATABASE_URL)

# Create async session factory
async_session = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)

# Create declarative base; AsyncAttrs gives `awaitable_attrs` for lazy collections
Base = declarative_base(cls=AsyncAttrs)

async def get_session() -> AsyncSession:
    """Function to get a DB session"""
    async with async_session() as session:
        yield session

async def create_tables(bind=engine):
    """Create all tables that don't exist yet"""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

# Register mappers
from .film import Film, film_directors  # noqa: E402
from .person import Person  # noqa: E402
from .role import Role  # noqa: E402

__all__ = [
    "Base",
    "engine",
    "async_session",
    "get_session",
    "create_tables",
    "Film",
    "film_directors",
    "Person",
    "Role",
]
