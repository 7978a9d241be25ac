import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import AwareDatetime, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.ext.asyncio import AsyncSession

from src.base.dependencies import get_session
from src.base.errors import NotFoundError
from src.base.models import utcnow
from src.base.schemas import BaseDTO, CamelModel
from src.inspection import repository
from src.inspection.models import Inspection, InspectionStatus
from src.inspection.parsing import (
    is_blank,
    parse_bool,
    parse_instant,
    parse_status,
    to_text,
)
from src.transformer.models import Transformer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


class InspectionCreate(CamelModel):
    inspected_at: AwareDatetime | None = None
    maintenance_date: AwareDatetime | None = None
    status: InspectionStatus | None = None
    notes: str | None = None
    # Anything but a JSON true counts as not starred.
    starred: Any = None


class InspectionPatch(BaseModel):
    """Untyped partial update.

    Values are kept raw and interpreted per field; only keys present in the
    request (``model_fields_set``) are applied. Only the camelCase keys are
    recognised; anything else is ignored.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=False)

    status: Any = None
    notes: Any = None
    starred: Any = None
    inspected_at: Any = None
    maintenance_date: Any = None


class InspectionResponse(BaseDTO):
    transformer_id: int
    inspected_at: datetime
    maintenance_at: datetime | None
    status: InspectionStatus
    notes: str | None
    starred: bool


async def _get_transformer(transformer_no: str, session: AsyncSession) -> Transformer:
    transformer = await repository.find_transformer_by_no(session, transformer_no)
    if transformer is None:
        raise NotFoundError("Transformer", transformer_no)
    return transformer


async def _get_inspection(inspection_id: int, session: AsyncSession) -> Inspection:
    inspection = await repository.find_inspection(session, inspection_id)
    if inspection is None:
        raise NotFoundError("Inspection", inspection_id)
    return inspection


def _as_utc(value: datetime | None) -> datetime | None:
    return None if value is None else value.astimezone(timezone.utc)


def apply_patch(inspection: Inspection, body: InspectionPatch) -> None:
    fields = body.model_fields_set

    if "status" in fields:
        status = parse_status(body.status)
        if status is not None:
            inspection.status = status

    if "notes" in fields:
        inspection.notes = to_text(body.notes)

    # Unlike status, an unrecognised value still assigns (as false).
    if "starred" in fields:
        inspection.starred = parse_bool(body.starred)

    if "inspected_at" in fields:
        inspected_at = parse_instant(body.inspected_at)
        if inspected_at is not None:
            inspection.inspected_at = inspected_at

    if "maintenance_date" in fields:
        if is_blank(body.maintenance_date):
            inspection.maintenance_at = None
        else:
            maintenance_at = parse_instant(body.maintenance_date)
            if maintenance_at is not None:
                inspection.maintenance_at = maintenance_at


@router.post(
    "/transformers/{transformer_no}/inspections",
    response_model=InspectionResponse,
)
async def create_inspection(
    transformer_no: str,
    body: InspectionCreate,
    session: AsyncSession = Depends(get_session),
) -> Inspection:
    transformer = await _get_transformer(transformer_no, session)

    inspection = Inspection(
        transformer_id=transformer.id,
        inspected_at=_as_utc(body.inspected_at) or utcnow(),
        maintenance_at=_as_utc(body.maintenance_date),
        status=body.status or InspectionStatus.IN_PROGRESS,
        notes=body.notes,
        starred=body.starred is True,
    )
    inspection = await repository.save_inspection(session, inspection)
    logger.info(
        "Created inspection %s for transformer %s", inspection.id, transformer_no
    )
    return inspection


@router.get(
    "/transformers/{transformer_no}/inspections",
    response_model=list[InspectionResponse],
)
async def list_inspections(
    transformer_no: str,
    session: AsyncSession = Depends(get_session),
) -> list[Inspection]:
    transformer = await _get_transformer(transformer_no, session)
    return await repository.list_inspections(session, transformer)


@router.get("/inspections/{inspection_id}", response_model=InspectionResponse)
async def get_inspection(
    inspection_id: int,
    session: AsyncSession = Depends(get_session),
) -> Inspection:
    return await _get_inspection(inspection_id, session)


@router.patch("/inspections/{inspection_id}", response_model=InspectionResponse)
async def update_inspection(
    inspection_id: int,
    body: InspectionPatch,
    session: AsyncSession = Depends(get_session),
) -> Inspection:
    inspection = await _get_inspection(inspection_id, session)
    apply_patch(inspection, body)
    return await repository.save_inspection(session, inspection)


@router.delete("/inspections/{inspection_id}", status_code=204)
async def delete_inspection(
    inspection_id: int,
    session: AsyncSession = Depends(get_session),
) -> None:
    if not await repository.inspection_exists(session, inspection_id):
        raise NotFoundError("Inspection", inspection_id)
    await repository.delete_inspection(session, inspection_id)
