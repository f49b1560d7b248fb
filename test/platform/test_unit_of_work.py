from unittest.mock import AsyncMock, Mock

import pytest

from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork


@pytest.fixture
def session() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def uow(session: AsyncMock) -> SqlAlchemyUnitOfWork:
    database = Mock()
    database.new_session.return_value = session
    return SqlAlchemyUnitOfWork(database=database)


@pytest.mark.unit
class TestSqlAlchemyUnitOfWork:
    @pytest.mark.asyncio
    async def test_commit_outside_block_raises(self, uow: SqlAlchemyUnitOfWork) -> None:
        with pytest.raises(RuntimeError, match='outside of "async with"'):
            await uow.commit()

    @pytest.mark.asyncio
    async def test_repo_session_outside_block_raises(self, uow: SqlAlchemyUnitOfWork) -> None:
        with pytest.raises(RuntimeError):
            async with uow._shared_session():
                pass

    @pytest.mark.asyncio
    async def test_commit_then_close(self, uow: SqlAlchemyUnitOfWork, session: AsyncMock) -> None:
        async with uow:
            await uow.commit()

        session.commit.assert_awaited_once()
        session.close.assert_awaited_once()
        assert uow.session is None

    @pytest.mark.asyncio
    async def test_leaving_without_commit_rolls_back(
        self, uow: SqlAlchemyUnitOfWork, session: AsyncMock
    ) -> None:
        async with uow:
            pass

        session.commit.assert_not_awaited()
        session.rollback.assert_awaited_once()
        session.close.assert_awaited_once()
