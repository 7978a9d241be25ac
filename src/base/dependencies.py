import logging
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.base.db import async_session

logger = logging.getLogger(__name__)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """Request-scoped session, committed when the handler returns normally."""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception as exc:
            logger.debug("Rolling back session after %s", type(exc).__name__)
            await session.rollback()
            raise
