from enum import Enum


class Dimension(Enum):
    """Enum for the base physical dimensions known to metrika.

    Purely descriptive: unit descriptors do not reference it and no conversion depends on it.
    """

    Length = "length"
    Mass = "mass"
    Time = "time"
    Temperature = "temperature"
    Amount = "amount"
    Current = "current"
    Luminosity = "luminosity"
    Information = "information"

    @property
    def display_name(self) -> str:
        """The lowercase name of the dimension, e.g. ``"length"``."""
        return self.value

    @property
    def base_symbol(self) -> str:
        """The symbol of the SI base unit for the dimension, e.g. ``"kg"`` for mass."""
        return _BASE_SYMBOLS[self]

    def __str__(self) -> str:
        return self.value


_BASE_SYMBOLS = {
    Dimension.Length: "m",
    Dimension.Mass: "kg",
    Dimension.Time: "s",
    Dimension.Temperature: "K",
    Dimension.Amount: "mol",
    Dimension.Current: "A",
    Dimension.Luminosity: "cd",
    Dimension.Information: "B",
}
