"""
Política de ventana de fechas para los reportes.

"Último mes" es siempre el mes calendario completo anterior al mes del
momento de la consulta, nunca una ventana móvil de 30 días. Ambos
reportes (transferencias y adhesiones) usan esta misma función.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class DateRange:
    """Intervalo cerrado [start, end]."""

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


def last_month_date_range(now: datetime) -> DateRange:
    """
    Calcula la ventana del mes anterior a `now`.

    Conserva el tzinfo de `now` en ambos límites.

    Args:
        now: Momento de referencia

    Returns:
        DateRange con start al inicio del primer día del mes anterior y
        end en el último instante (23:59:59.999) de su último día

    Example:
        last_month_date_range(datetime(2025, 10, 15))
        # DateRange(start=2025-09-01 00:00:00, end=2025-09-30 23:59:59.999000)
    """
    first_of_current_month = now.replace(
        day=1, hour=0, minute=0, second=0, microsecond=0
    )
    end = first_of_current_month - timedelta(milliseconds=1)
    start = end.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    return DateRange(start=start, end=end)
