from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import RedirectResponse

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.command.oauth2_login_use_case import OAuth2LoginUseCase
from src.service.restaurant.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.restaurant.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.restaurant.driving_adapter.http_controller.schema.user_schema import (
    LoginRequest,
    TokenResponse,
)


router = APIRouter()


def _set_token_cookie(response: Response, *, jwt_auth: JwtAuth, token: str) -> None:
    response.set_cookie(
        key=jwt_auth.cookie_name,
        value=token,
        max_age=int(jwt_auth.token_expire.total_seconds()),
        httponly=True,
        samesite='lax',
        secure=False,  # Set to True in production
    )


@router.post('/login', response_model=TokenResponse)
@Logger.io
@inject
async def login(
    response: Response,
    request: LoginRequest,
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> TokenResponse:
    user_entity = await jwt_auth.authenticate_user(
        user_query_repo=user_query_repo,
        email=request.email,
        password=request.password.get_secret_value(),
    )

    token = jwt_auth.create_jwt_token(user_entity)
    _set_token_cookie(response, jwt_auth=jwt_auth, token=token)

    return TokenResponse(access_token=token)


@router.get('/oauth2/authorize/{provider}')
@Logger.io
@inject
async def oauth2_authorize(
    provider: str,
    use_case: OAuth2LoginUseCase = Depends(OAuth2LoginUseCase.depends),
    settings: Settings = Depends(Provide[Container.config_service]),
) -> RedirectResponse:
    authorization = use_case.authorization_url(provider=provider)

    redirect = RedirectResponse(authorization.url, status_code=302)
    redirect.set_cookie(
        key=settings.OAUTH2_STATE_COOKIE,
        value=authorization.state,
        max_age=settings.OAUTH2_STATE_MAX_AGE_SECONDS,
        path='/api/auth/oauth2',
        httponly=True,
        samesite='lax',
        secure=False,  # Set to True in production
    )
    return redirect


@router.get('/oauth2/callback/{provider}')
@Logger.io
@inject
async def oauth2_callback(
    request: Request,
    provider: str,
    code: Optional[str] = None,
    state: Optional[str] = None,
    error: Optional[str] = None,
    use_case: OAuth2LoginUseCase = Depends(OAuth2LoginUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    settings: Settings = Depends(Provide[Container.config_service]),
) -> RedirectResponse:
    result = await use_case.handle_callback(
        provider=provider,
        code=code,
        state=state,
        expected_state=request.cookies.get(settings.OAUTH2_STATE_COOKIE),
        error=error,
    )

    redirect = RedirectResponse(result.redirect_url, status_code=302)
    redirect.delete_cookie(settings.OAUTH2_STATE_COOKIE, path='/api/auth/oauth2')
    if result.token:
        _set_token_cookie(redirect, jwt_auth=jwt_auth, token=result.token)
    return redirect
