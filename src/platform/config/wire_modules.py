"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.restaurant.app.command import (
    bill_command_use_case,
    create_reservation_use_case,
    create_transaction_use_case,
    delete_reservation_use_case,
    dining_table_command_use_case,
    menu_command_use_case,
    oauth2_login_use_case,
    update_reservation_use_case,
    user_command_use_case,
)
from src.service.restaurant.app.query import (
    bill_query_use_case,
    dining_table_query_use_case,
    menu_query_use_case,
    reservation_query_use_case,
    transaction_query_use_case,
    user_query_use_case,
)
from src.service.restaurant.driving_adapter.http_controller import auth_controller
from src.service.restaurant.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    # Commands
    create_reservation_use_case,
    update_reservation_use_case,
    delete_reservation_use_case,
    user_command_use_case,
    dining_table_command_use_case,
    menu_command_use_case,
    bill_command_use_case,
    create_transaction_use_case,
    oauth2_login_use_case,
    # Queries
    reservation_query_use_case,
    user_query_use_case,
    dining_table_query_use_case,
    menu_query_use_case,
    bill_query_use_case,
    transaction_query_use_case,
    # HTTP
    auth_controller,
    role_auth,
]
