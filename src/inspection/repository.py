import logging

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.base.models import is_valid_id
from src.inspection.models import Inspection
from src.transformer.models import Transformer

logger = logging.getLogger(__name__)


async def find_transformer_by_no(
    session: AsyncSession, transformer_no: str
) -> Transformer | None:
    stmt = select(Transformer).where(Transformer.transformer_no == transformer_no)
    return (await session.execute(stmt)).scalar_one_or_none()


async def find_inspection(
    session: AsyncSession, inspection_id: int
) -> Inspection | None:
    if not is_valid_id(inspection_id):
        return None
    return await session.get(Inspection, inspection_id)


async def list_inspections(
    session: AsyncSession, transformer: Transformer
) -> list[Inspection]:
    """Return the transformer's inspections, newest ``inspected_at`` first."""
    stmt = (
        select(Inspection)
        .where(Inspection.transformer_id == transformer.id)
        .order_by(Inspection.inspected_at.desc())
    )
    return list((await session.execute(stmt)).scalars().all())


async def save_inspection(session: AsyncSession, inspection: Inspection) -> Inspection:
    """Insert or update. The caller is responsible for committing the session."""
    session.add(inspection)
    await session.flush()
    return inspection


async def inspection_exists(session: AsyncSession, inspection_id: int) -> bool:
    if not is_valid_id(inspection_id):
        return False
    stmt = select(exists().where(Inspection.id == inspection_id))
    return bool((await session.execute(stmt)).scalar())


async def delete_inspection(session: AsyncSession, inspection_id: int) -> None:
    await session.execute(delete(Inspection).where(Inspection.id == inspection_id))
    logger.info("Deleted inspection %s", inspection_id)
