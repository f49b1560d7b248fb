from datetime import date, datetime
from typing import Callable, Optional

from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.domain.value_object.business_hours import BusinessHours


NOT_NEXT_DAY_MESSAGE = 'Reservation time must be at least the next day.'
OUTSIDE_BUSINESS_HOURS_MESSAGE = 'Reservation time is outside business hours.'


class ReservationValidator:
    """
    Business-rule gate for a candidate reservation. Rules run in order and the
    first violated rule's message is returned:

    1. the reservation date is strictly after today (restaurant time zone)
    2. the start is inside [opening, closing) and start + duration + buffer
       does not run past closing time
    """

    def __init__(
        self,
        *,
        business_hours: BusinessHours,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self.business_hours = business_hours
        self._today = today or business_hours.today

    def validate(self, reservation: Reservation) -> Optional[str]:
        start: datetime = reservation.reservation_time
        reservation_date = start.date()

        if not reservation_date > self._today():
            return NOT_NEXT_DAY_MESSAGE

        opening = datetime.combine(reservation_date, self.business_hours.opening_time)
        closing = self.business_hours.closing_on(reservation_date)
        if start < opening or start >= closing:
            return OUTSIDE_BUSINESS_HOURS_MESSAGE
        if self.business_hours.service_end(start) > closing:
            return OUTSIDE_BUSINESS_HOURS_MESSAGE

        return None
