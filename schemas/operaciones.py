from typing import List
from datetime import date
from pydantic import BaseModel

from schemas.reservas import DailyReservation


class DailyOperationsCounts(BaseModel):
    arrivals: int
    departures: int
    stayovers: int
    staying: int


class DailyOperationsResponse(BaseModel):
    date: date
    arrivals: List[DailyReservation]
    departures: List[DailyReservation]
    stayovers: List[DailyReservation]
    staying: List[DailyReservation]
    counts: DailyOperationsCounts
