"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.restaurant.driven_adapter.model.bill_model import BillModel
from src.service.restaurant.driven_adapter.model.dining_table_model import DiningTableModel
from src.service.restaurant.driven_adapter.model.menu_model import MenuItemModel, MenuModel
from src.service.restaurant.driven_adapter.model.reservation_model import ReservationModel
from src.service.restaurant.driven_adapter.model.transaction_model import TransactionModel
from src.service.restaurant.driven_adapter.model.user_model import UserModel

__all__ = [
    'BillModel',
    'DiningTableModel',
    'MenuItemModel',
    'MenuModel',
    'ReservationModel',
    'TransactionModel',
    'UserModel',
]
