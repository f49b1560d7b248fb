"""
OAuth2 authorization-code client over plain HTTP (httpx)

Flow:
1. authorization_url() -> browser is redirected to the provider consent page
2. provider redirects back to OAUTH2_CALLBACK_URL with ?code=...&state=...
3. fetch_user_info(code) -> POST token endpoint, GET userinfo endpoint
"""

from typing import Any, Dict
from urllib.parse import urlencode

import httpx

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import AuthenticationError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.dto.oauth2_dto import OAuth2UserInfo
from src.service.restaurant.app.interface.i_oauth2_provider import IOAuth2Provider


class HttpxOAuth2Provider(IOAuth2Provider):
    def __init__(self, settings: Settings) -> None:
        self.name = settings.OAUTH2_PROVIDER_NAME
        self.client_id = settings.OAUTH2_CLIENT_ID
        self.client_secret = settings.OAUTH2_CLIENT_SECRET.get_secret_value()
        self.authorize_endpoint = settings.OAUTH2_AUTHORIZATION_URL
        self.token_endpoint = settings.OAUTH2_TOKEN_URL
        self.userinfo_endpoint = settings.OAUTH2_USERINFO_URL
        self.scope = settings.OAUTH2_SCOPE
        self.callback_url = settings.OAUTH2_CALLBACK_URL
        self.timeout = settings.OAUTH2_HTTP_TIMEOUT

    def authorization_url(self, *, state: str) -> str:
        query = urlencode(
            {
                'response_type': 'code',
                'client_id': self.client_id,
                'redirect_uri': self.callback_url,
                'scope': self.scope,
                'state': state,
            }
        )
        return f'{self.authorize_endpoint}?{query}'

    @Logger.io
    async def fetch_user_info(self, *, code: str) -> OAuth2UserInfo:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                token_response = await client.post(
                    self.token_endpoint,
                    data={
                        'grant_type': 'authorization_code',
                        'code': code,
                        'redirect_uri': self.callback_url,
                        'client_id': self.client_id,
                        'client_secret': self.client_secret,
                    },
                    headers={'Accept': 'application/json'},
                )
                token_response.raise_for_status()
                access_token = token_response.json().get('access_token')
                if not access_token:
                    raise AuthenticationError('OAuth2 provider returned no access token')

                userinfo_response = await client.get(
                    self.userinfo_endpoint,
                    headers={'Authorization': f'Bearer {access_token}'},
                )
                userinfo_response.raise_for_status()
                profile: Dict[str, Any] = userinfo_response.json()
            except (httpx.HTTPError, ValueError) as e:
                raise AuthenticationError(f'OAuth2 provider request failed: {e}') from e

        email = profile.get('email')
        if not email:
            raise AuthenticationError('OAuth2 provider did not share an email address')

        return OAuth2UserInfo(
            email=email,
            name=profile.get('name') or email.split('@')[0],
            provider=self.name,
            subject=str(profile['sub']) if profile.get('sub') is not None else None,
        )
