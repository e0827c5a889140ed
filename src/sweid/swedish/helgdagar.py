"""
Swedish public holidays (helgdagar).

Each year has 13 official public holidays (röda dagar) and 3 eves
(helgdagsaftnar) that are de facto days off: Midsommarafton, Julafton
and Nyårsafton.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Optional


class HolidayType(str, Enum):
    ROD_DAG = "rod_dag"
    AFTON = "afton"


@dataclass(frozen=True)
class Holiday:
    date: date
    name: str
    type: HolidayType


def easter(year: int) -> date:
    """
    Calculate Easter Sunday using the Anonymous Gregorian algorithm.

    Valid for years 1583 and later.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = (h + l - 7 * m + 114) % 31 + 1
    return date(year, month, day)


def _saturday_on_or_after(start: date) -> date:
    # Saturday is weekday 5
    return start + timedelta(days=(5 - start.weekday()) % 7)


def holidays(year: int) -> list[Holiday]:
    """Return all Swedish holidays and eves for a year, sorted by date."""
    easter_sunday = easter(year)
    midsommardagen = _saturday_on_or_after(date(year, 6, 20))
    alla_helgons_dag = _saturday_on_or_after(date(year, 10, 31))

    rod = HolidayType.ROD_DAG
    result = [
        # Fixed röda dagar
        Holiday(date(year, 1, 1), "Nyårsdagen", rod),
        Holiday(date(year, 1, 6), "Trettondedag jul", rod),
        Holiday(date(year, 5, 1), "Första maj", rod),
        Holiday(date(year, 6, 6), "Sveriges nationaldag", rod),
        Holiday(date(year, 12, 25), "Juldagen", rod),
        Holiday(date(year, 12, 26), "Annandag jul", rod),
        # Easter-dependent röda dagar
        Holiday(easter_sunday - timedelta(days=2), "Långfredagen", rod),
        Holiday(easter_sunday, "Påskdagen", rod),
        Holiday(easter_sunday + timedelta(days=1), "Annandag påsk", rod),
        Holiday(easter_sunday + timedelta(days=39), "Kristi himmelsfärdsdag", rod),
        Holiday(easter_sunday + timedelta(days=49), "Pingstdagen", rod),
        # Moveable röda dagar
        Holiday(midsommardagen, "Midsommardagen", rod),
        Holiday(alla_helgons_dag, "Alla helgons dag", rod),
        # Helgdagsaftnar
        Holiday(midsommardagen - timedelta(days=1), "Midsommarafton", HolidayType.AFTON),
        Holiday(date(year, 12, 24), "Julafton", HolidayType.AFTON),
        Holiday(date(year, 12, 31), "Nyårsafton", HolidayType.AFTON),
    ]
    result.sort(key=lambda holiday: holiday.date)
    return result


def is_holiday(day: date) -> Optional[Holiday]:
    """Return the holiday falling on ``day``, or None."""
    for holiday in holidays(day.year):
        if holiday.date == day:
            return holiday
    return None


def is_business_day(day: date) -> bool:
    """A business day is a weekday that is neither a röd dag nor an afton."""
    if day.weekday() >= 5:
        return False
    return is_holiday(day) is None
