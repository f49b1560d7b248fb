"""Application layer interfaces (Ports)"""

from src.service.restaurant.app.interface.i_bill_repo import IBillRepo
from src.service.restaurant.app.interface.i_dining_table_repo import IDiningTableRepo
from src.service.restaurant.app.interface.i_menu_item_repo import IMenuItemRepo
from src.service.restaurant.app.interface.i_menu_repo import IMenuRepo
from src.service.restaurant.app.interface.i_oauth2_provider import IOAuth2Provider
from src.service.restaurant.app.interface.i_password_hasher import IPasswordHasher
from src.service.restaurant.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.restaurant.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.restaurant.app.interface.i_transaction_repo import ITransactionRepo
from src.service.restaurant.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.restaurant.app.interface.i_user_query_repo import IUserQueryRepo

__all__ = [
    'IBillRepo',
    'IDiningTableRepo',
    'IMenuItemRepo',
    'IMenuRepo',
    'IOAuth2Provider',
    'IPasswordHasher',
    'IReservationCommandRepo',
    'IReservationQueryRepo',
    'ITransactionRepo',
    'IUserCommandRepo',
    'IUserQueryRepo',
]
