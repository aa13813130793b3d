"""
Rango de fechas (noches de habitación) y regla de solapamiento

Dos reglas conviven y NO deben unificarse:
- Conflicto entre asignaciones: semiabierta. El día de checkout de una
  estadía puede ser el día de check-in de la siguiente.
- Contención en la reserva y grilla del timeline: inclusiva en ambos extremos.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator, Union

DateLike = Union[str, date, datetime]


def parse_to_date(value: DateLike) -> date:
    """
    Convierte string / datetime / date a date, descartando la hora.
    Lanza error claro si no puede.
    """
    if value is None:
        raise ValueError("Date value is None")

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        try:
            # ISO completo (con o sin Z)
            return datetime.fromisoformat(value.replace('Z', '+00:00')).date()
        except ValueError:
            try:
                return datetime.strptime(value[:10], '%Y-%m-%d').date()
            except ValueError:
                raise ValueError(f"Invalid date format: {value}")

    raise TypeError(f"Unsupported date type: {type(value)}")


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    @classmethod
    def of(cls, start: DateLike, end: DateLike) -> "DateRange":
        return cls(parse_to_date(start), parse_to_date(end))

    @property
    def is_reversed(self) -> bool:
        return self.end < self.start

    def overlaps(self, other: "DateRange") -> bool:
        return overlaps(self, other)

    def contains(self, other: "DateRange") -> bool:
        """Contención inclusiva: el checkout de la reserva es un día válido de asignación"""
        return self.start <= other.start and other.end <= self.end

    def covers_day(self, day: date) -> bool:
        """Regla de la grilla: el día de salida se muestra en la fila"""
        return self.start <= day <= self.end

    def touches(self, other: "DateRange") -> bool:
        """Intersección inclusiva (sirve para recortar al período del timeline)"""
        return self.start <= other.end and self.end >= other.start

    def __str__(self) -> str:
        return f"{self.start.isoformat()} -> {self.end.isoformat()}"


def overlaps(a: DateRange, b: DateRange) -> bool:
    """a.start < b.end AND a.end > b.start (rangos que se tocan no chocan)"""
    return a.start < b.end and a.end > b.start


def window(start: date, num_days: int) -> DateRange:
    """Ventana inclusiva de num_days días a partir de start"""
    return DateRange(start, start + timedelta(days=num_days - 1))


def iter_days(start: date, num_days: int) -> Iterator[date]:
    for offset in range(num_days):
        yield start + timedelta(days=offset)
