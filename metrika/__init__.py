"""Typed measurements with safe conversion between units of the same kind."""

from metrika.core import EQUALITY_TOLERANCE, LinearUnit, Measurement, Unit, convert
from metrika.dimension import Dimension
from metrika.config import DEFAULT_POLICY, LENIENT_POLICY, STRICT_POLICY, ValidationPolicy
from metrika.errors import (
    DivisionByZeroError,
    ErrorKind,
    InvalidConversionError,
    InvalidValueError,
    MetrikaError,
    NegativeValueError,
    OverflowValueError,
    UnderflowValueError,
)
from metrika.Dimensions.spatial import Length, LengthUnit
from metrika.Dimensions.mass import Mass, MassUnit
from metrika.Dimensions.temporal import Time, TimeUnit
from metrika.Dimensions.temperature import Temperature, TemperatureUnit
from metrika.Dimensions.information import DataSize, DataUnit

__version__ = "0.1.0"
