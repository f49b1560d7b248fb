"""
Integration tests for the reservation repositories on PostgreSQL

- table conflicts use an inclusive window of reservation + buffer on both sides
- soft-deleted rows and the reservation being edited never count as conflicts
- deleting a user detaches and soft deletes their reservations in one transaction
"""

from datetime import datetime, timedelta

import pytest

from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.service.restaurant.app.command.user_command_use_case import UserCommandUseCase
from src.service.restaurant.domain.entity.dining_table_entity import DiningTable
from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.domain.entity.user_entity import UserEntity
from src.service.restaurant.domain.value_object.business_hours import BusinessHours
from src.service.restaurant.driven_adapter.model.user_model import UserModel
from src.service.restaurant.driven_adapter.repo.dining_table_repo_impl import DiningTableRepoImpl
from src.service.restaurant.driven_adapter.repo.reservation_command_repo_impl import (
    ReservationCommandRepoImpl,
)
from src.service.restaurant.driven_adapter.repo.reservation_query_repo_impl import (
    ReservationQueryRepoImpl,
)
from src.service.restaurant.driven_adapter.repo.user_command_repo_impl import (
    UserCommandRepoImpl,
)
from src.service.restaurant.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.restaurant.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


DINNER = datetime(2030, 6, 1, 18, 0)
HOURS = BusinessHours()
GUEST_EMAIL = 'jane@example.com'


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher()


@pytest.fixture
def reservation_command_repo(database: Database) -> ReservationCommandRepoImpl:
    return ReservationCommandRepoImpl(session_factory=database.session)


@pytest.fixture
def reservation_query_repo(database: Database) -> ReservationQueryRepoImpl:
    return ReservationQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def user_command_repo(database: Database) -> UserCommandRepoImpl:
    return UserCommandRepoImpl(session_factory=database.session)


@pytest.fixture
async def table(database: Database) -> DiningTable:
    repo = DiningTableRepoImpl(session_factory=database.session)
    return await repo.create(DiningTable.create(number=1, capacity=4))


@pytest.fixture
async def user(
    user_command_repo: UserCommandRepoImpl, password_hasher: BcryptPasswordHasher
) -> UserEntity:
    entity = UserEntity.create(email='john@example.com', name='John')
    entity.set_password('P@ssw0rd', password_hasher)
    return await user_command_repo.create(entity)


@pytest.fixture
async def dinner(
    table: DiningTable, user: UserEntity, reservation_command_repo: ReservationCommandRepoImpl
) -> Reservation:
    return await reservation_command_repo.create(
        Reservation.create(
            table_id=table.id, reservation_time=DINNER, number_of_guests=2, user_id=user.id
        )
    )


async def _load_user(database: Database, user: UserEntity) -> UserModel:
    async with database.session() as session:
        model = await session.get(UserModel, user.id)
        assert model is not None
        return model


@pytest.mark.integration
class TestTableConflictWindow:
    @pytest.mark.parametrize(
        'offset',
        [timedelta(hours=2, minutes=30), -timedelta(hours=2, minutes=30), timedelta(0)],
        ids=['edge_after', 'edge_before', 'same_slot'],
    )
    async def test_inside_window_conflicts(
        self,
        reservation_query_repo: ReservationQueryRepoImpl,
        dinner: Reservation,
        offset: timedelta,
    ) -> None:
        start, end = HOURS.conflict_window(DINNER + offset)

        assert await reservation_query_repo.exists_for_table_between(
            table_id=dinner.table_id, start=start, end=end
        )

    @pytest.mark.parametrize(
        'offset',
        [timedelta(hours=2, minutes=31), -timedelta(hours=2, minutes=31)],
        ids=['after', 'before'],
    )
    async def test_outside_window_is_free(
        self,
        reservation_query_repo: ReservationQueryRepoImpl,
        dinner: Reservation,
        offset: timedelta,
    ) -> None:
        start, end = HOURS.conflict_window(DINNER + offset)

        assert not await reservation_query_repo.exists_for_table_between(
            table_id=dinner.table_id, start=start, end=end
        )

    async def test_other_table_is_free(
        self,
        database: Database,
        reservation_query_repo: ReservationQueryRepoImpl,
        dinner: Reservation,
    ) -> None:
        other = await DiningTableRepoImpl(session_factory=database.session).create(
            DiningTable.create(number=2, capacity=4)
        )
        start, end = HOURS.conflict_window(DINNER)

        assert not await reservation_query_repo.exists_for_table_between(
            table_id=other.id, start=start, end=end
        )


@pytest.mark.integration
class TestIgnoredReservations:
    async def test_soft_deleted_reservation_is_ignored(
        self,
        reservation_command_repo: ReservationCommandRepoImpl,
        reservation_query_repo: ReservationQueryRepoImpl,
        dinner: Reservation,
        user: UserEntity,
    ) -> None:
        dinner.soft_delete()
        await reservation_command_repo.update(dinner)
        start, end = HOURS.conflict_window(DINNER)

        assert not await reservation_query_repo.exists_for_table_between(
            table_id=dinner.table_id, start=start, end=end
        )
        assert not await reservation_query_repo.exists_for_user_at(
            user_id=user.id, reservation_time=DINNER
        )
        assert await reservation_query_repo.get_by_id(dinner.id) is None

    async def test_excluded_reservation_is_ignored(
        self,
        reservation_query_repo: ReservationQueryRepoImpl,
        dinner: Reservation,
        user: UserEntity,
    ) -> None:
        start, end = HOURS.conflict_window(DINNER)

        assert not await reservation_query_repo.exists_for_table_between(
            table_id=dinner.table_id, start=start, end=end, exclude_id=dinner.id
        )
        assert not await reservation_query_repo.exists_for_user_at(
            user_id=user.id, reservation_time=DINNER, exclude_id=dinner.id
        )
        assert await reservation_query_repo.exists_for_user_at(
            user_id=user.id, reservation_time=DINNER
        )

    async def test_guest_email_checks_skip_deleted_and_excluded(
        self,
        table: DiningTable,
        reservation_command_repo: ReservationCommandRepoImpl,
        reservation_query_repo: ReservationQueryRepoImpl,
    ) -> None:
        guest = await reservation_command_repo.create(
            Reservation.create(
                table_id=table.id,
                reservation_time=DINNER,
                number_of_guests=2,
                guest_name='Jane',
                guest_email=GUEST_EMAIL,
            )
        )

        assert await reservation_query_repo.exists_for_guest_email_at(
            guest_email=GUEST_EMAIL, reservation_time=DINNER
        )
        assert not await reservation_query_repo.exists_for_guest_email_at(
            guest_email=GUEST_EMAIL, reservation_time=DINNER, exclude_id=guest.id
        )

        guest.soft_delete()
        await reservation_command_repo.update(guest)

        assert not await reservation_query_repo.exists_for_guest_email_at(
            guest_email=GUEST_EMAIL, reservation_time=DINNER
        )


@pytest.mark.integration
class TestDeleteUserCascade:
    @pytest.fixture
    def use_case(
        self,
        database: Database,
        user_command_repo: UserCommandRepoImpl,
        password_hasher: BcryptPasswordHasher,
    ) -> UserCommandUseCase:
        return UserCommandUseCase(
            user_command_repo=user_command_repo,
            user_query_repo=UserQueryRepoImpl(
                session_factory=database.session, password_hasher=password_hasher
            ),
            password_hasher=password_hasher,
            uow=SqlAlchemyUnitOfWork(database),
        )

    async def test_delete_detaches_and_soft_deletes_reservations(
        self,
        database: Database,
        use_case: UserCommandUseCase,
        reservation_command_repo: ReservationCommandRepoImpl,
        reservation_query_repo: ReservationQueryRepoImpl,
        table: DiningTable,
        user: UserEntity,
        dinner: Reservation,
    ) -> None:
        lunch = await reservation_command_repo.create(
            Reservation.create(
                table_id=table.id,
                reservation_time=DINNER - timedelta(hours=6),
                number_of_guests=2,
                user_id=user.id,
            )
        )

        await use_case.delete_user(user_id=user.id)

        assert (await _load_user(database, user)).deleted is True
        stored = {r.id: r for r in await reservation_query_repo.list_all()}
        for reservation_id in (dinner.id, lunch.id):
            assert stored[reservation_id].user_id is None
            assert stored[reservation_id].deleted is True
        assert await reservation_query_repo.list_by_user(user.id) == []

    async def test_failed_detach_keeps_user(
        self,
        database: Database,
        use_case: UserCommandUseCase,
        reservation_query_repo: ReservationQueryRepoImpl,
        user: UserEntity,
        dinner: Reservation,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        async def failing_detach(self, *, user_id):
            raise RuntimeError('connection lost')

        monkeypatch.setattr(ReservationCommandRepoImpl, 'detach_user', failing_detach)

        with pytest.raises(RuntimeError, match='connection lost'):
            await use_case.delete_user(user_id=user.id)

        assert (await _load_user(database, user)).deleted is False
        stored = await reservation_query_repo.get_by_id(dinner.id)
        assert stored is not None
        assert stored.user_id == user.id

    async def test_delete_unknown_user(self, use_case: UserCommandUseCase, table: DiningTable):
        with pytest.raises(NotFoundError):
            await use_case.delete_user(user_id=table.id)
