"""
Hackathon Rule.

The company hackathon is always the Tuesday, Wednesday and Thursday of the
week containing the first Tuesday of February.
"""

from datetime import date as date_type, timedelta
from typing import List

from models import HackathonOccurrence

TUESDAY = 1
HACKATHON_DAYS = 3


def hackathon_dates_for_year(year: int) -> List[date_type]:
    february_first = date_type(year, 2, 1)
    days_to_tuesday = (TUESDAY - february_first.weekday()) % 7
    first_tuesday = february_first + timedelta(days=days_to_tuesday)
    return [first_tuesday + timedelta(days=offset) for offset in range(HACKATHON_DAYS)]


def hackathon_in_range(start: date_type, end: date_type) -> List[HackathonOccurrence]:
    """Hackathon days falling within [start, end], in date order."""
    occurrences = []
    for year in range(start.year, end.year + 1):
        for day in hackathon_dates_for_year(year):
            if start <= day <= end:
                occurrences.append(HackathonOccurrence(
                    date=day,
                    reason=f"Hackathon Day ({day.strftime('%b')} {day.day})"
                ))
    return occurrences


def is_hackathon_day(day: date_type) -> bool:
    return day in hackathon_dates_for_year(day.year)
