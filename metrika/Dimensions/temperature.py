from metrika.core import Measurement, Unit


class TemperatureUnit(Unit):
    """
    Units of temperature, with the kelvin as base unit.

    Celsius and Fahrenheit have their zero away from absolute zero, so converting them is
    affine rather than a pure scaling: each unit carries its own pair of formulas instead of a
    single factor.
    """

    Kelvin = "K"
    Celsius = "°C"
    Fahrenheit = "°F"
    Rankine = "°R"

    @classmethod
    def base_unit(cls) -> "TemperatureUnit":
        return cls.Kelvin

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def allows_negative_base(self) -> bool:
        # Nothing is colder than absolute zero.
        return False

    def to_base(self, value: float) -> float:
        match self:
            case TemperatureUnit.Kelvin:
                return value
            case TemperatureUnit.Celsius:
                return value + 273.15
            case TemperatureUnit.Fahrenheit:
                return (value - 32.0) * 5.0 / 9.0 + 273.15
            case TemperatureUnit.Rankine:
                return value * 5.0 / 9.0

    def from_base(self, value: float) -> float:
        match self:
            case TemperatureUnit.Kelvin:
                return value
            case TemperatureUnit.Celsius:
                return value - 273.15
            case TemperatureUnit.Fahrenheit:
                return (value - 273.15) * 9.0 / 5.0 + 32.0
            case TemperatureUnit.Rankine:
                return value * 9.0 / 5.0


Temperature = Measurement[TemperatureUnit]

Kelvin = TemperatureUnit.Kelvin  # Base unit
Celsius = TemperatureUnit.Celsius
Fahrenheit = TemperatureUnit.Fahrenheit
Rankine = TemperatureUnit.Rankine
