"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.restaurant.app.command.reservation_admission import ReservationAdmission
from src.service.restaurant.domain.reservation_conflict_checker import (
    ReservationConflictChecker,
)
from src.service.restaurant.domain.reservation_validator import ReservationValidator
from src.service.restaurant.domain.value_object.business_hours import BusinessHours
from src.service.restaurant.driven_adapter.oauth2.httpx_oauth2_provider import (
    HttpxOAuth2Provider,
)
from src.service.restaurant.driven_adapter.repo.bill_repo_impl import BillRepoImpl
from src.service.restaurant.driven_adapter.repo.dining_table_repo_impl import DiningTableRepoImpl
from src.service.restaurant.driven_adapter.repo.menu_item_repo_impl import MenuItemRepoImpl
from src.service.restaurant.driven_adapter.repo.menu_repo_impl import MenuRepoImpl
from src.service.restaurant.driven_adapter.repo.reservation_command_repo_impl import (
    ReservationCommandRepoImpl,
)
from src.service.restaurant.driven_adapter.repo.reservation_query_repo_impl import (
    ReservationQueryRepoImpl,
)
from src.service.restaurant.driven_adapter.repo.transaction_repo_impl import TransactionRepoImpl
from src.service.restaurant.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.restaurant.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.restaurant.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.restaurant.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)
    business_hours = providers.Singleton(BusinessHours.from_settings, config_service)

    # Database
    database = providers.Singleton(Database)

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth, settings=config_service)
    oauth2_provider = providers.Singleton(HttpxOAuth2Provider, settings=config_service)

    # Repositories (stateless - use session_factory per-request)
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl,
        session_factory=database.provided.session,
        password_hasher=password_hasher,
    )
    dining_table_repo = providers.Singleton(
        DiningTableRepoImpl, session_factory=database.provided.session
    )
    reservation_command_repo = providers.Singleton(
        ReservationCommandRepoImpl, session_factory=database.provided.session
    )
    reservation_query_repo = providers.Singleton(
        ReservationQueryRepoImpl, session_factory=database.provided.session
    )
    menu_repo = providers.Singleton(MenuRepoImpl, session_factory=database.provided.session)
    menu_item_repo = providers.Singleton(
        MenuItemRepoImpl, session_factory=database.provided.session
    )
    bill_repo = providers.Singleton(BillRepoImpl, session_factory=database.provided.session)
    transaction_repo = providers.Singleton(
        TransactionRepoImpl, session_factory=database.provided.session
    )

    # Multi-repository writes (new session per use)
    unit_of_work = providers.Factory(SqlAlchemyUnitOfWork, database=database)

    # Reservation domain services
    reservation_validator = providers.Singleton(
        ReservationValidator, business_hours=business_hours
    )
    reservation_conflict_checker = providers.Singleton(
        ReservationConflictChecker,
        reservation_query_repo=reservation_query_repo,
        business_hours=business_hours,
    )
    reservation_admission = providers.Singleton(
        ReservationAdmission,
        validator=reservation_validator,
        conflict_checker=reservation_conflict_checker,
        dining_table_repo=dining_table_repo,
        user_query_repo=user_query_repo,
    )


container = Container()
