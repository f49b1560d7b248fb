"""Application layer DTOs"""

from src.service.restaurant.app.dto.oauth2_dto import OAuth2LoginResult, OAuth2UserInfo
from src.service.restaurant.app.dto.reservation_dto import ReservationDto
from src.service.restaurant.app.dto.user_dto import CreateUserDto, UpdateUserDto

__all__ = [
    'CreateUserDto',
    'OAuth2LoginResult',
    'OAuth2UserInfo',
    'ReservationDto',
    'UpdateUserDto',
]
