import math
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from metrika.core import EQUALITY_TOLERANCE, Measurement, Unit, convert
from metrika.errors import InvalidConversionError
from metrika.Dimensions.spatial import LengthUnit
from metrika.Dimensions.mass import MassUnit
from metrika.Dimensions.temperature import TemperatureUnit
from metrika.Dimensions.information import DataUnit


@pytest.fixture
def meter_unit():
    return LengthUnit.Meter


@pytest.fixture
def km_unit():
    return LengthUnit.Kilometer


@pytest.fixture
def kg_unit():
    return MassUnit.Kilogram


class TestUnit:
    def test_symbol(self, meter_unit, km_unit):
        assert meter_unit.symbol == "m"
        assert km_unit.symbol == "km"
        assert str(km_unit) == "km"
        assert km_unit.description == "km"
        assert f"{km_unit}" == "km"

    def test_repr(self, km_unit):
        assert repr(km_unit) == "LengthUnit.Kilometer"

    def test_base_unit(self, meter_unit, km_unit):
        assert LengthUnit.base_unit() is meter_unit
        assert meter_unit.is_base_unit
        assert not km_unit.is_base_unit

    def test_units_are_enum_members(self, km_unit):
        assert isinstance(km_unit, Unit)
        assert LengthUnit["Kilometer"] is km_unit
        assert km_unit in set(LengthUnit)

    def test_convert(self, meter_unit, km_unit):
        assert km_unit.convert(1.0, meter_unit) == 1000.0
        assert convert(1500.0, meter_unit, km_unit) == 1.5

    def test_convert_rejects_other_kinds(self, meter_unit, kg_unit):
        with pytest.raises(InvalidConversionError) as info:
            convert(1.0, meter_unit, kg_unit)
        assert str(info.value) == "Cannot convert from m to kg"

    def test_call_creates_measurement(self, km_unit):
        m = km_unit(2)
        assert isinstance(m, Measurement)
        assert m.value == 2.0
        assert m.unit is km_unit


class TestMeasurement:
    def test_initialization(self, meter_unit):
        m = Measurement(10, meter_unit)
        assert m.value == 10.0
        assert isinstance(m.value, float)
        assert m.unit is meter_unit
        assert m.symbol == "m"

    def test_rejects_non_unit(self):
        with pytest.raises(TypeError):
            Measurement(1.0, "m")

    def test_is_immutable(self, meter_unit):
        m = Measurement(10, meter_unit)
        with pytest.raises(AttributeError):
            m.value = 5.0
        with pytest.raises(AttributeError):
            m.unit = LengthUnit.Feet

    def test_base_value(self, km_unit):
        assert Measurement(5.0, km_unit).base_value == 5000.0

    def test_conversion(self, meter_unit, km_unit):
        m = Measurement(1, km_unit)
        as_meters = m.converted(meter_unit)
        assert as_meters.value == 1000.0
        assert as_meters.unit is meter_unit
        # the original is left untouched
        assert m.value == 1.0
        assert m.to(meter_unit) == as_meters

    def test_conversion_to_other_kind(self, meter_unit, kg_unit):
        with pytest.raises(InvalidConversionError):
            Measurement(1, meter_unit).converted(kg_unit)

    def test_display(self, km_unit):
        assert str(Measurement(5.5, km_unit)) == "5.5 km"
        assert Measurement(1, km_unit).description == "1.0 km"
        assert repr(Measurement(5.5, km_unit)) == "Measurement(5.5, LengthUnit.Kilometer)"

    def test_display_keeps_stored_unit(self, meter_unit, km_unit):
        assert str(Measurement(1000, meter_unit)) == "1000.0 m"
        assert str(Measurement(1000, meter_unit).converted(km_unit)) == "1.0 km"

    def test_display_switches_to_exponent_at_1e16(self):
        assert str(Measurement(10, DataUnit.Petabyte).converted(DataUnit.Byte)) == "1e+16 B"
        assert str(Measurement(1, DataUnit.Petabyte).converted(DataUnit.Byte)) == "1000000000000000.0 B"

    def test_equality_across_units(self, meter_unit, km_unit):
        assert Measurement(1000.0, meter_unit) == Measurement(1.0, km_unit)
        assert Measurement(999.0, meter_unit) != Measurement(1.0, km_unit)

    def test_equality_tolerance(self, meter_unit):
        assert EQUALITY_TOLERANCE == 1e-10
        assert Measurement(1.0, meter_unit) == Measurement(1.0 + 1e-11, meter_unit)
        assert Measurement(1.0, meter_unit) != Measurement(1.0 + 1e-9, meter_unit)

    def test_hash_uses_base_value(self, meter_unit, km_unit):
        a = Measurement(1000.0, meter_unit)
        b = Measurement(1.0, km_unit)
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_hash_is_exact_while_equality_is_tolerant(self):
        inches = Measurement(12, LengthUnit.Inch)
        foot = Measurement(1, LengthUnit.Feet)
        assert inches == foot
        assert inches.base_value != foot.base_value
        assert len({inches, foot}) == 2

    def test_ordering(self, meter_unit, km_unit):
        small = Measurement(999.0, meter_unit)
        big = Measurement(1.0, km_unit)
        assert small < big
        assert big > small
        assert small <= big
        assert big >= small
        assert big <= Measurement(1000.0, meter_unit)
        assert big >= Measurement(1000.0, meter_unit)
        assert not big < Measurement(1000.0, meter_unit)

    def test_sorting(self, meter_unit, km_unit):
        values = [Measurement(2, km_unit), Measurement(10, meter_unit), Measurement(1, km_unit)]
        assert [m.value for m in sorted(values)] == [10.0, 1.0, 2.0]

    def test_add_compatible_unit(self, meter_unit, km_unit):
        m = Measurement(1000, meter_unit) + Measurement(1, km_unit)
        assert m.value == 2000.0
        assert m.unit is meter_unit

    def test_sub(self, meter_unit):
        m = Measurement(10, meter_unit) - Measurement(5, meter_unit)
        assert m.value == 5.0

    def test_mul_scalar(self, meter_unit):
        m = Measurement(10, meter_unit)
        assert (m * 2).value == 20.0
        assert (3 * m).value == 30.0
        assert (m * 2).unit is meter_unit

    def test_mul_numpy_scalar(self, meter_unit):
        m = Measurement(3, meter_unit)
        result = np.float64(2.0) * m
        assert isinstance(result, Measurement)
        assert result.value == 6.0

    def test_div_scalar(self, meter_unit):
        assert (Measurement(10, meter_unit) / 4).value == 2.5

    def test_div_by_zero_follows_ieee(self, meter_unit):
        assert (Measurement(1, meter_unit) / 0).value == math.inf
        assert (Measurement(-1, meter_unit) / 0.0).value == -math.inf
        assert math.isnan((Measurement(0, meter_unit) / 0).value)

    def test_incompatible_addition(self, meter_unit, kg_unit):
        with pytest.raises(TypeError):
            _ = Measurement(1, meter_unit) + Measurement(1, kg_unit)
        with pytest.raises(TypeError):
            _ = Measurement(1, meter_unit) - Measurement(1, kg_unit)

    def test_incompatible_comparison(self, meter_unit, kg_unit):
        length = Measurement(1, meter_unit)
        mass = Measurement(1, kg_unit)
        assert length != mass
        with pytest.raises(TypeError):
            _ = length < mass
        with pytest.raises(TypeError):
            _ = length >= mass

    def test_scalar_addition_is_rejected(self, meter_unit):
        with pytest.raises(TypeError):
            _ = Measurement(1, meter_unit) + 1.0

    def test_shared_across_threads(self, km_unit, meter_unit):
        m = Measurement(1.5, km_unit)
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda _: m.converted(meter_unit).value, range(16)))
        assert results == [1500.0] * 16
        assert m.value == 1.5

    def test_temperature_measurements(self):
        boiling = Measurement(100.0, TemperatureUnit.Celsius)
        assert boiling.converted(TemperatureUnit.Kelvin).value == pytest.approx(373.15)
