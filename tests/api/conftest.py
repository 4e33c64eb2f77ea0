import httpx
import pytest_asyncio

from dentalize.api.deps import get_current_user
from dentalize.core.db import get_session
from dentalize.main import app


@pytest_asyncio.fixture
async def api_client(session_maker, owner):
    async def _get_session():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_current_user] = lambda: owner
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
