from datetime import date, datetime

import pytz

from config import HOTEL_TIMEZONE

HOTEL_TZ = pytz.timezone(HOTEL_TIMEZONE)


def get_hotel_now() -> datetime:
    """Returns current time in Hotel Timezone"""
    return datetime.now(HOTEL_TZ)


def get_operational_date() -> date:
    """Fecha de hoy en la zona horaria del establecimiento"""
    return get_hotel_now().date()
