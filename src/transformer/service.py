import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from src.base.db import async_session
from src.inspection.repository import find_transformer_by_no
from src.transformer.models import Transformer

logger = logging.getLogger(__name__)


class TransformerExistsError(Exception):
    pass


async def add_transformer(
    transformer_no: str,
    *,
    region: str | None = None,
    pole_no: str | None = None,
    transformer_type: str | None = None,
    location: str | None = None,
) -> Transformer:
    async with async_session() as session:
        if await find_transformer_by_no(session, transformer_no) is not None:
            raise TransformerExistsError(transformer_no)

        transformer = Transformer(
            transformer_no=transformer_no,
            region=region,
            pole_no=pole_no,
            transformer_type=transformer_type,
            location=location,
        )
        session.add(transformer)
        try:
            await session.commit()
        except IntegrityError as exc:
            await session.rollback()
            raise TransformerExistsError(transformer_no) from exc

    logger.info("Added transformer %s", transformer_no)
    return transformer


async def list_transformers() -> list[Transformer]:
    async with async_session() as session:
        stmt = select(Transformer).order_by(Transformer.transformer_no)
        return list((await session.execute(stmt)).scalars().all())
