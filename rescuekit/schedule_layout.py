"""Calendar layout and summaries for a week of shifts."""

from __future__ import annotations

import random as _random
from collections.abc import Iterable
from dataclasses import dataclass

from rescuekit.shift import Day, Shift

STANDARD_HOURS = 30
LOW_WEIGHT = 0
HIGH_WEIGHT = 99 // 8

ALL_DAYS: tuple[Day, ...] = tuple(Day)

STANDARD_SHIFTS: frozenset[Shift] = frozenset(
    [
        Shift(Day.SUNDAY, 8, 14),
        Shift(Day.SUNDAY, 12, 18),
        *(
            Shift(day, start, end)
            for day in (Day.MONDAY, Day.TUESDAY, Day.WEDNESDAY, Day.THURSDAY, Day.FRIDAY)
            for start, end in ((8, 12), (12, 16), (16, 20), (8, 16), (12, 20))
        ),
        Shift(Day.SATURDAY, 8, 14),
        Shift(Day.SATURDAY, 12, 18),
    ]
)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float


def expand(rect: Rectangle, delta: float) -> Rectangle:
    """Grow ``rect`` by ``delta`` on every side (shrink if negative)."""
    return Rectangle(rect.x - delta, rect.y - delta, rect.width + 2 * delta, rect.height + 2 * delta)


def hour_to_string(hour: int) -> str:
    """Return a readable form such as ``"12AM"`` or ``"3PM"``."""
    hour %= 24
    if hour == 0:
        return "12AM"
    if hour < 12:
        return f"{hour}AM"
    if hour == 12:
        return "12PM"
    return f"{hour - 12}PM"


def cell_bounding_boxes(bounds: Rectangle, low_hour: int, high_hour: int) -> list[Rectangle]:
    """Split ``bounds`` into equal rows, one per hour from ``low_hour`` to ``high_hour``."""
    cell_height = bounds.height / (high_hour - low_hour + 1)
    return [
        Rectangle(bounds.x, bounds.y + cell_height * (hour - low_hour), bounds.width, cell_height)
        for hour in range(low_hour, high_hour + 1)
    ]


def assign_subcolumns(shifts: Iterable[Shift]) -> dict[Shift, int]:
    """Place each shift of one day in the first subcolumn where it fits.

    Shifts are taken in sorted order, which sorts them by start time, so this
    greedy placement uses the fewest subcolumns possible.
    """
    bottoms: list[int] = []
    result: dict[Shift, int] = {}
    for shift in sorted(shifts):
        column = next((i for i, bottom in enumerate(bottoms) if bottom <= shift.start_hour), None)
        if column is None:
            column = len(bottoms)
            bottoms.append(shift.end_hour)
        else:
            bottoms[column] = shift.end_hour
        result[shift] = column
    return result


def shifts_by_day(shifts: Iterable[Shift]) -> dict[Day, set[Shift]]:
    """Group shifts by the day they fall on."""
    result: dict[Day, set[Shift]] = {}
    for shift in shifts:
        result.setdefault(shift.day, set()).add(shift)
    return dict(sorted(result.items()))


def hour_range(shifts: Iterable[Shift]) -> tuple[int, int]:
    """Return the earliest start and latest end, or midnight to midnight if empty."""
    shift_list = list(shifts)
    if not shift_list:
        return 0, 24
    return min(s.start_hour for s in shift_list), max(s.end_hour for s in shift_list)


def total_profit(shifts: Iterable[Shift]) -> int:
    """Return the combined value of the shifts."""
    return sum(shift.profit() for shift in shifts)


def total_length(shifts: Iterable[Shift]) -> int:
    """Return the combined number of hours of the shifts."""
    return sum(shift.length() for shift in shifts)


def randomize_values(
    shifts: Iterable[Shift],
    rng: _random.Random | None = None,
    low: int = LOW_WEIGHT,
    high: int = HIGH_WEIGHT,
) -> set[Shift]:
    """Give each shift a random per-hour rate in [low, high] times its length."""
    generator = rng if rng is not None else _random.Random()
    return {
        Shift(shift.day, shift.start_hour, shift.end_hour, generator.randint(low, high) * shift.length())
        for shift in sorted(shifts)
    }


def solution_description(chosen: Iterable[Shift], available_hours: int = STANDARD_HOURS) -> str:
    """Summarise the value and hours used by a chosen schedule."""
    chosen_list = list(chosen)
    return (
        f"Best solution produces {total_profit(chosen_list)} value, using "
        f"{total_length(chosen_list)} of {available_hours} available hours."
    )