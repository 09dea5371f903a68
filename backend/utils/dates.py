from datetime import date, datetime, time, timedelta
from typing import Tuple


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """Half-open [start, end) range of naive local datetimes covering one calendar day."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)
