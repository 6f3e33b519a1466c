"""Domain enumerations."""

import enum


class SortBy(str, enum.Enum):
    DISTANCE = "distance"
    NAME = "name"
    PRICE = "price"


class Weekday(str, enum.Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


# datetime.weekday() index -> Weekday
WEEKDAYS: tuple[Weekday, ...] = tuple(Weekday)
