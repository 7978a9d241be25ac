from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from src.inspection import repository
from src.inspection.models import Inspection, InspectionStatus
from src.transformer.models import Transformer


async def _make_transformer(
    session: AsyncSession, transformer_no: str = "AZ-8890"
) -> Transformer:
    transformer = Transformer(transformer_no=transformer_no)
    session.add(transformer)
    await session.flush()
    return transformer


def _make_inspection(transformer: Transformer, inspected_at: datetime) -> Inspection:
    return Inspection(
        transformer_id=transformer.id,
        inspected_at=inspected_at,
        status=InspectionStatus.IN_PROGRESS,
        starred=False,
    )


class TestFindTransformerByNo:
    async def test_finds_by_business_key(self, db_session: AsyncSession) -> None:
        transformer = await _make_transformer(db_session)

        found = await repository.find_transformer_by_no(db_session, "AZ-8890")

        assert found is not None
        assert found.id == transformer.id

    async def test_none_for_unknown(self, db_session: AsyncSession) -> None:
        assert await repository.find_transformer_by_no(db_session, "NOPE") is None


class TestSaveInspection:
    async def test_assigns_id_and_defaults(self, db_session: AsyncSession) -> None:
        transformer = await _make_transformer(db_session)

        saved = await repository.save_inspection(
            db_session,
            Inspection(
                transformer_id=transformer.id,
                inspected_at=datetime.now(timezone.utc),
            ),
        )

        assert saved.id is not None
        assert saved.status is InspectionStatus.IN_PROGRESS
        assert saved.starred is False
        assert saved.created_at is not None


class TestListInspections:
    async def test_newest_first(self, db_session: AsyncSession) -> None:
        transformer = await _make_transformer(db_session)
        now = datetime.now(timezone.utc)
        older = _make_inspection(transformer, now - timedelta(hours=2))
        newer = _make_inspection(transformer, now)
        db_session.add_all([older, newer])
        await db_session.flush()

        result = await repository.list_inspections(db_session, transformer)

        assert [i.id for i in result] == [newer.id, older.id]

    async def test_scoped_to_transformer(self, db_session: AsyncSession) -> None:
        first = await _make_transformer(db_session, "AZ-1")
        second = await _make_transformer(db_session, "AZ-2")
        db_session.add(_make_inspection(first, datetime.now(timezone.utc)))
        await db_session.flush()

        assert await repository.list_inspections(db_session, second) == []


class TestDeleteInspection:
    async def test_exists_then_deleted(self, db_session: AsyncSession) -> None:
        transformer = await _make_transformer(db_session)
        inspection = _make_inspection(transformer, datetime.now(timezone.utc))
        db_session.add(inspection)
        await db_session.flush()
        inspection_id = inspection.id

        assert await repository.inspection_exists(db_session, inspection_id)

        await repository.delete_inspection(db_session, inspection_id)

        assert not await repository.inspection_exists(db_session, inspection_id)
        assert await repository.find_inspection(db_session, inspection_id) is None

    async def test_out_of_range_ids_are_missing(
        self, db_session: AsyncSession
    ) -> None:
        for inspection_id in (0, 2**31, 2**63):
            assert not await repository.inspection_exists(db_session, inspection_id)
            assert await repository.find_inspection(db_session, inspection_id) is None
