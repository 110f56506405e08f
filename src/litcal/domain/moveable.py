"""Easter-relative (moveable) feast dates.

Every date here is Easter plus a fixed day offset. Easter is always a
Sunday, so Easter - 46 days is always a Wednesday (40 days of Lent plus the
6 Sundays that are not counted). No weekday correction is applied anywhere:
a result on the wrong weekday is reported as an invariant failure.
"""

from __future__ import annotations

from datetime import date

from litcal.domain.dates import SUNDAY, WEDNESDAY, WEEKDAY_NAMES, add_days, weekday
from litcal.domain.errors import CalendarInvariantError

ASH_WEDNESDAY_OFFSET = -46
PALM_SUNDAY_OFFSET = -7
MAUNDY_THURSDAY_OFFSET = -3
GOOD_FRIDAY_OFFSET = -2
HOLY_SATURDAY_OFFSET = -1
ASCENSION_OFFSET = 39
PENTECOST_OFFSET = 49
TRINITY_AFTER_PENTECOST = 7
CHRIST_THE_KING_BEFORE_ADVENT = 7


def _expect_weekday(d: date, expected: int, invariant: str, label: str) -> date:
    if weekday(d) != expected:
        raise CalendarInvariantError(
            invariant,
            f"{label} {d.isoformat()} fell on {WEEKDAY_NAMES[weekday(d)]}, "
            f"expected {WEEKDAY_NAMES[expected]}",
            date=d.isoformat(),
        )
    return d


def _require_sunday(easter: date) -> date:
    return _expect_weekday(easter, SUNDAY, "easter_sunday", "Easter")


def calculate_ash_wednesday(easter: date) -> date:
    """Easter - 46 days. Raises if the result is not a Wednesday."""
    ash_wednesday = add_days(_require_sunday(easter), ASH_WEDNESDAY_OFFSET)
    return _expect_weekday(ash_wednesday, WEDNESDAY, "ash_wednesday", "Ash Wednesday")


def calculate_palm_sunday(easter: date) -> date:
    return add_days(_require_sunday(easter), PALM_SUNDAY_OFFSET)


def calculate_maundy_thursday(easter: date) -> date:
    return add_days(_require_sunday(easter), MAUNDY_THURSDAY_OFFSET)


def calculate_good_friday(easter: date) -> date:
    return add_days(_require_sunday(easter), GOOD_FRIDAY_OFFSET)


def calculate_holy_saturday(easter: date) -> date:
    return add_days(_require_sunday(easter), HOLY_SATURDAY_OFFSET)


def calculate_ascension(easter: date) -> date:
    """Ascension Day: the fortieth day of Easter, counting Easter Sunday as the first."""
    return add_days(_require_sunday(easter), ASCENSION_OFFSET)


def calculate_pentecost(easter: date) -> date:
    """Pentecost: seven weeks after Easter."""
    return add_days(_require_sunday(easter), PENTECOST_OFFSET)


def calculate_trinity_sunday(pentecost: date) -> date:
    _expect_weekday(pentecost, SUNDAY, "pentecost_sunday", "Pentecost")
    return add_days(pentecost, TRINITY_AFTER_PENTECOST)


def calculate_sunday_after_pentecost(pentecost: date, week_number: int) -> date:
    """The *week_number*-th Sunday after Pentecost (1 = Trinity Sunday)."""
    if week_number < 1:
        msg = f"week_number must be >= 1, got {week_number}"
        raise ValueError(msg)
    _expect_weekday(pentecost, SUNDAY, "pentecost_sunday", "Pentecost")
    return add_days(pentecost, 7 * week_number)


def calculate_christ_the_king(next_advent1: date) -> date:
    """Reign of Christ: the last Sunday before the next Advent."""
    return add_days(next_advent1, -CHRIST_THE_KING_BEFORE_ADVENT)
