import os

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

DATABASE_URI = os.environ["STI_DATABASE_URI"]
DATABASE_ECHO = os.environ.get("STI_DATABASE_ECHO", "").lower() == "true"

engine = create_async_engine(DATABASE_URI, echo=DATABASE_ECHO, pool_pre_ping=True)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
