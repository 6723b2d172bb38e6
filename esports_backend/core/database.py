from sqlmodel import SQLModel, Session
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy import create_engine as create_sync_engine

from esports_backend.core.config import DATABASE_PATH, SQL_ECHO

# --- Database URLs ---
DATABASE_URL = f"sqlite+aiosqlite:///{DATABASE_PATH}"    # Async engine (startup)
SYNC_DATABASE_URL = f"sqlite:///{DATABASE_PATH}"         # Sync engine (routes/seeding)

# --- Engines ---
engine = create_async_engine(DATABASE_URL, echo=SQL_ECHO, future=True)        # Async
sync_engine = create_sync_engine(
    SYNC_DATABASE_URL,
    echo=SQL_ECHO,
    future=True,
    connect_args={"check_same_thread": False},  # FastAPI runs sync routes in a threadpool
)


# --- Initialize DB tables ---
async def init_db():
    """Create tables asynchronously if they don't exist."""
    # Register every table on SQLModel.metadata before create_all
    from esports_backend import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


# --- Request-scoped sync session (used in routes) ---
def get_session():
    with Session(sync_engine) as session:
        yield session
