from metrika.core import LinearUnit, Measurement


class MassUnit(LinearUnit):
    """Units of mass, with the kilogram as base unit. :attr:`Ton` is the US short ton of 2000 pounds."""

    Kilogram = ("kg", 1.0, 1.0)
    Gram = ("g", 1.0, 1000.0)
    Milligram = ("mg", 1.0, 1_000_000.0)
    MetricTon = ("t", 1000.0, 1.0)
    Pound = ("lb", 0.45359237, 1.0)
    Ounce = ("oz", 0.028349523125, 1.0)
    Ton = ("ton", 907.18474, 1.0)
    Stone = ("st", 6.35029318, 1.0)

    @classmethod
    def base_unit(cls) -> "MassUnit":
        return cls.Kilogram

    @property
    def allows_negative_base(self) -> bool:
        return False


Mass = Measurement[MassUnit]

Kilogram = MassUnit.Kilogram  # Base unit
Gram = MassUnit.Gram
Milligram = MassUnit.Milligram
MetricTon = MassUnit.MetricTon
Pound = MassUnit.Pound
Ounce = MassUnit.Ounce
Ton = MassUnit.Ton
Stone = MassUnit.Stone
