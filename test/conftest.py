"""
Test Configuration

Environment setup MUST happen before any application import: settings and the
log sinks are built at import time.

Layout:
- Unit tests (test/**/unit/): use cases and domain services with AsyncMock repositories
- API tests (test/**/api/): the FastAPI app with in-memory repositories behind the DI container
- Integration tests (test/**/integration/): SQL repositories against PostgreSQL
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['POSTGRES_DB'] = 'restaurant_test_db'
    os.environ['SECRET_KEY'] = 'test_secret_key'
    os.environ['RESTAURANT_TIMEZONE'] = 'UTC'
    os.environ['OPENING_TIME'] = '10:00'
    os.environ['CLOSING_TIME'] = '22:00'
    os.environ['RESERVATION_DURATION_MINUTES'] = '120'
    os.environ['BUFFER_DURATION_MINUTES'] = '30'
    os.environ['OAUTH2_PROVIDER_NAME'] = 'google'
    os.environ['OAUTH2_REDIRECT_URI'] = 'http://frontend.test/oauth2/redirect'
    os.environ.pop('FIRST_ADMIN_EMAIL', None)
    os.environ.pop('FIRST_ADMIN_PASSWORD', None)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from datetime import datetime, time, timedelta  # noqa: E402

import pytest  # noqa: E402

from src.service.restaurant.domain.value_object.business_hours import BusinessHours  # noqa: E402


@pytest.fixture
def business_hours() -> BusinessHours:
    return BusinessHours()


@pytest.fixture
def reservation_day(business_hours: BusinessHours):
    """A day safely in the future, so the next-day rule never flips during a run"""
    return business_hours.today() + timedelta(days=2)


@pytest.fixture
def dinner_time(reservation_day) -> datetime:
    """Evening start that ends (duration + buffer) before closing"""
    return datetime.combine(reservation_day, time(19, 0))
