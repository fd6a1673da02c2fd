from metrika.core import LinearUnit, Measurement


class LengthUnit(LinearUnit):
    """Units of length. The base unit is the meter."""

    Meter = ("m", 1.0, 1.0)
    Kilometer = ("km", 1000.0, 1.0)
    Centimeter = ("cm", 1.0, 100.0)
    Millimeter = ("mm", 1.0, 1000.0)
    Feet = ("ft", 0.3048, 1.0)
    Mile = ("mi", 1609.344, 1.0)
    Inch = ("in", 0.0254, 1.0)
    Yard = ("yd", 0.9144, 1.0)
    NauticalMile = ("nmi", 1852.0, 1.0)

    @classmethod
    def base_unit(cls) -> "LengthUnit":
        return cls.Meter


Length = Measurement[LengthUnit]

Meter = LengthUnit.Meter  # Base unit
Kilometer = LengthUnit.Kilometer
Centimeter = LengthUnit.Centimeter
Millimeter = LengthUnit.Millimeter
Feet = LengthUnit.Feet
Mile = LengthUnit.Mile
Inch = LengthUnit.Inch
Yard = LengthUnit.Yard
NauticalMile = LengthUnit.NauticalMile
