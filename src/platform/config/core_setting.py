from datetime import time
from pathlib import Path
from typing import List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Restaurant Management System'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Database
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'restaurant'
    POSTGRES_PASSWORD: SecretStr = SecretStr('restaurant')
    POSTGRES_DB: str = 'restaurant_db'
    POSTGRES_PORT: int = 5432

    # Connection pool
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return (
            f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}'
            f'@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )

    # Security
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    ALGORITHM: str = 'HS256'
    ACCESS_TOKEN_COOKIE: str = 'access_token'

    # First admin, created at startup when both are set
    FIRST_ADMIN_EMAIL: str | None = None
    FIRST_ADMIN_PASSWORD: SecretStr | None = None

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # Reservation rules
    RESTAURANT_TIMEZONE: str = 'UTC'
    OPENING_TIME: time = time(10, 0)
    CLOSING_TIME: time = time(22, 0)
    RESERVATION_DURATION_MINUTES: int = 120
    BUFFER_DURATION_MINUTES: int = 30

    # OAuth2 login (authorization code flow)
    OAUTH2_PROVIDER_NAME: str = 'google'
    OAUTH2_CLIENT_ID: str = ''
    OAUTH2_CLIENT_SECRET: SecretStr = SecretStr('')
    OAUTH2_AUTHORIZATION_URL: str = 'https://accounts.google.com/o/oauth2/v2/auth'
    OAUTH2_TOKEN_URL: str = 'https://oauth2.googleapis.com/token'
    OAUTH2_USERINFO_URL: str = 'https://openidconnect.googleapis.com/v1/userinfo'
    OAUTH2_SCOPE: str = 'openid email profile'
    OAUTH2_CALLBACK_URL: str = 'http://localhost:8000/api/auth/oauth2/callback/google'
    OAUTH2_REDIRECT_URI: str = 'http://localhost:3000/oauth2/redirect'
    OAUTH2_HTTP_TIMEOUT: float = 10.0
    OAUTH2_STATE_COOKIE: str = 'oauth2_state'
    OAUTH2_STATE_MAX_AGE_SECONDS: int = 600


settings = Settings()  # type: ignore
