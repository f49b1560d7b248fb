from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

import attrs


if TYPE_CHECKING:
    from src.platform.config.core_setting import Settings


@attrs.frozen
class BusinessHours:
    """
    Opening hours and reservation timing of the restaurant.

    Reservation times are restaurant-local wall clock values (naive datetimes).
    A reservation occupies its table for `reservation_duration`, plus
    `buffer_duration` for turnover.
    """

    opening_time: time = time(10, 0)
    closing_time: time = time(22, 0)
    reservation_duration: timedelta = timedelta(hours=2)
    buffer_duration: timedelta = timedelta(minutes=30)
    timezone: str = 'UTC'

    @classmethod
    def from_settings(cls, settings: 'Settings') -> 'BusinessHours':
        return cls(
            opening_time=settings.OPENING_TIME,
            closing_time=settings.CLOSING_TIME,
            reservation_duration=timedelta(minutes=settings.RESERVATION_DURATION_MINUTES),
            buffer_duration=timedelta(minutes=settings.BUFFER_DURATION_MINUTES),
            timezone=settings.RESTAURANT_TIMEZONE,
        )

    @property
    def occupied_duration(self) -> timedelta:
        return self.reservation_duration + self.buffer_duration

    def now(self) -> datetime:
        return datetime.now(ZoneInfo(self.timezone)).replace(tzinfo=None)

    def today(self) -> date:
        return self.now().date()

    def to_local(self, value: datetime) -> datetime:
        """Aware datetimes are converted to restaurant time; naive ones are kept as-is."""
        if value.tzinfo is None:
            return value
        return value.astimezone(ZoneInfo(self.timezone)).replace(tzinfo=None)

    def service_end(self, start: datetime) -> datetime:
        return start + self.occupied_duration

    def closing_on(self, day: date) -> datetime:
        return datetime.combine(day, self.closing_time)

    def conflict_window(self, start: datetime) -> tuple[datetime, datetime]:
        """Existing reservations starting inside this window collide with `start`."""
        return start - self.occupied_duration, start + self.occupied_duration
