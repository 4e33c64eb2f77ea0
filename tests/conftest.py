import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENV", "test")

import pytest_asyncio  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402

from dentalize.core.db import build_engine, build_session_maker  # noqa: E402
from dentalize.models import Client, Service, User  # noqa: E402


@pytest_asyncio.fixture
async def engine(tmp_path):
    # A file database so concurrent sessions get their own connections.
    engine = build_engine(f"sqlite:///{tmp_path / 'calendar.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(engine):
    return build_session_maker(engine)


@pytest_asyncio.fixture
async def session(session_maker):
    async with session_maker() as session:
        yield session


async def add_row(session_maker, row):
    async with session_maker() as session:
        session.add(row)
        await session.commit()
    return row


@pytest_asyncio.fixture
async def owner(session_maker) -> User:
    return await add_row(
        session_maker, User(email="demo@dentalize.com", name="Dr. Demo", hashed_password="not-a-hash")
    )


@pytest_asyncio.fixture
async def other_owner(session_maker) -> User:
    return await add_row(
        session_maker, User(email="other@dentalize.com", name="Dr. Other", hashed_password="not-a-hash")
    )


@pytest_asyncio.fixture
async def cleaning(session_maker) -> Service:
    return await add_row(
        session_maker,
        Service(name="Cleaning", description="Full dental cleaning", duration=45, price=150.0, color="#10B981"),
    )


@pytest_asyncio.fixture
async def patient(session_maker) -> Client:
    return await add_row(session_maker, Client(name="Maria Silva", email="maria@example.com", phone="555-0101"))
