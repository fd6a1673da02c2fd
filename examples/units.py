from metrika.units import (
    Celsius,
    Fahrenheit,
    Gibibyte,
    Gigabyte,
    Hour,
    Kelvin,
    Kilometer,
    Meter,
    Mile,
    Minute,
    Pound,
    Kilogram,
)
from metrika.utils.logging import Debug, EnableConsoleLogging

EnableConsoleLogging()

Debug(f"Distance: {Kilometer(1) + Meter(500)}")
Debug(f"Marathon: {Kilometer(42.195).converted(Mile)}")
Debug(f"Commute: {Hour(2) - Minute(30)}")
Debug(f"Weight: {Pound(150).converted(Kilogram)}")

Debug(f"Freezing point: {Celsius(0).converted(Fahrenheit)}")
Debug(f"Absolute zero: {Kelvin(0).converted(Celsius)}")

Debug(f"Disk: {Gigabyte(500).converted(Gibibyte)}")
Debug(f"1 GiB > 1 GB: {Gibibyte(1) > Gigabyte(1)}")
