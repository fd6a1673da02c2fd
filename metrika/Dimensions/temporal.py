from metrika.core import LinearUnit, Measurement


class TimeUnit(LinearUnit):
    """Units of time. The base unit is the second; a year is the Julian year of 365.25 days."""

    Second = ("s", 1.0, 1.0)
    Millisecond = ("ms", 1.0, 1000.0)
    Microsecond = ("μs", 1.0, 1_000_000.0)
    Nanosecond = ("ns", 1.0, 1_000_000_000.0)
    Minute = ("min", 60.0, 1.0)
    Hour = ("h", 3600.0, 1.0)
    Day = ("d", 86400.0, 1.0)
    Week = ("wk", 604800.0, 1.0)
    Year = ("yr", 31_557_600.0, 1.0)

    @classmethod
    def base_unit(cls) -> "TimeUnit":
        return cls.Second


Time = Measurement[TimeUnit]

Second = TimeUnit.Second  # Base unit
Millisecond = TimeUnit.Millisecond
Microsecond = TimeUnit.Microsecond
Nanosecond = TimeUnit.Nanosecond
Minute = TimeUnit.Minute
Hour = TimeUnit.Hour
Day = TimeUnit.Day
Week = TimeUnit.Week
Year = TimeUnit.Year
