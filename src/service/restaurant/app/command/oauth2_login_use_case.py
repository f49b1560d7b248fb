"""
OAuth2 login

state: authorize issues a random value the browser keeps in a cookie; the callback
must echo the same value or it is treated as a failure
success handler: find-or-create the local user by email, issue a JWT and
redirect to OAUTH2_REDIRECT_URI?token=<jwt>
failure handler: redirect to OAUTH2_REDIRECT_URI?error=<message>
"""

import secrets
from typing import Self
from urllib.parse import urlencode

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError, CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.dto.oauth2_dto import (
    OAuth2AuthorizationRequest,
    OAuth2LoginResult,
    OAuth2UserInfo,
)
from src.service.restaurant.app.interface.i_oauth2_provider import IOAuth2Provider
from src.service.restaurant.app.interface.i_password_hasher import IPasswordHasher
from src.service.restaurant.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.restaurant.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.restaurant.domain.entity.user_entity import UserEntity, UserRole
from src.service.restaurant.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class OAuth2LoginUseCase:
    def __init__(
        self,
        *,
        oauth2_provider: IOAuth2Provider,
        user_query_repo: IUserQueryRepo,
        user_command_repo: IUserCommandRepo,
        password_hasher: IPasswordHasher,
        jwt_auth: JwtAuth,
        settings: Settings,
    ) -> None:
        self.oauth2_provider = oauth2_provider
        self.user_query_repo = user_query_repo
        self.user_command_repo = user_command_repo
        self.password_hasher = password_hasher
        self.jwt_auth = jwt_auth
        self.redirect_uri = settings.OAUTH2_REDIRECT_URI

    @classmethod
    @inject
    def depends(
        cls,
        oauth2_provider: IOAuth2Provider = Depends(Provide[Container.oauth2_provider]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
        jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            oauth2_provider=oauth2_provider,
            user_query_repo=user_query_repo,
            user_command_repo=user_command_repo,
            password_hasher=password_hasher,
            jwt_auth=jwt_auth,
            settings=settings,
        )

    def authorization_url(self, *, provider: str) -> OAuth2AuthorizationRequest:
        self._ensure_provider(provider)
        state = secrets.token_urlsafe(16)
        return OAuth2AuthorizationRequest(
            url=self.oauth2_provider.authorization_url(state=state), state=state
        )

    def _ensure_provider(self, provider: str) -> None:
        if provider != self.oauth2_provider.name:
            raise AuthenticationError(f'Unsupported OAuth2 provider: {provider}')

    @staticmethod
    def _state_matches(state: str | None, expected_state: str | None) -> bool:
        if not (state and expected_state):
            return False
        return secrets.compare_digest(state.encode(), expected_state.encode())

    def _redirect(self, **params: str) -> str:
        return f'{self.redirect_uri}?{urlencode(params)}'

    @Logger.io
    async def handle_callback(
        self,
        *,
        provider: str,
        code: str | None,
        state: str | None = None,
        expected_state: str | None = None,
        error: str | None = None,
    ) -> OAuth2LoginResult:
        try:
            self._ensure_provider(provider)
            if error:
                raise AuthenticationError(error)
            if not self._state_matches(state, expected_state):
                raise AuthenticationError('Invalid OAuth2 state')
            if not code:
                raise AuthenticationError('Missing authorization code')

            user_info = await self.oauth2_provider.fetch_user_info(code=code)
            return await self.on_success(user_info)
        except CustomBaseError as e:
            return self.on_failure(e.message)

    @Logger.io
    async def on_success(self, user_info: OAuth2UserInfo) -> OAuth2LoginResult:
        user = await self.user_query_repo.get_by_email(user_info.email)
        if user is None:
            if await self.user_query_repo.exists_by_email(user_info.email):
                # Email belongs to a deleted account
                raise AuthenticationError('LOGIN_BAD_CREDENTIALS')
            user = UserEntity.create(
                email=user_info.email, name=user_info.name, role=UserRole.CUSTOMER
            )
            # Never used for password login, the account signs in through the provider
            user.set_password(secrets.token_urlsafe(32), self.password_hasher)
            user = await self.user_command_repo.create(user)
            Logger.base.info(f'👤 [OAUTH2] Registered {user.id} via {user_info.provider}')

        user.validate_active()
        token = self.jwt_auth.create_jwt_token(user)
        return OAuth2LoginResult(redirect_url=self._redirect(token=token), token=token)

    def on_failure(self, message: str) -> OAuth2LoginResult:
        Logger.base.warning(f'⚠️ [OAUTH2] Login failed: {message}')
        return OAuth2LoginResult(redirect_url=self._redirect(error=message), error=message)
