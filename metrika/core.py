from enum import Enum
from numbers import Real
from typing import Generic, Optional, TypeVar, TYPE_CHECKING
import numpy as np

from metrika.errors import InvalidConversionError, Report

if TYPE_CHECKING:
    from metrika.config import ValidationPolicy

EQUALITY_TOLERANCE = 1e-10
"""Absolute tolerance, in base units, under which two measurements compare equal."""


class Unit(Enum):
    """
    Base class of every unit descriptor.

    A descriptor is an enum whose members are the units of one physical dimension. Each member
    knows its symbol and how to move a value to and from the dimension's base unit; conversion
    between any two members always goes through the base unit. Subclasses must implement
    :meth:`base_unit`, :attr:`symbol`, :meth:`to_base` and :meth:`from_base`.
    """

    @classmethod
    def base_unit(cls) -> "Unit":
        """Returns the canonical unit of the dimension."""
        raise NotImplementedError

    @property
    def symbol(self) -> str:
        raise NotImplementedError

    def to_base(self, value: float) -> float:
        raise NotImplementedError

    def from_base(self, value: float) -> float:
        raise NotImplementedError

    @property
    def is_base_unit(self) -> bool:
        return self is type(self).base_unit()

    @property
    def allows_negative_base(self) -> bool:
        """Whether a negative value in the base unit is physically meaningful."""
        return True

    @property
    def description(self) -> str:
        return self.symbol

    def convert(self, value: float, other: "Unit") -> float:
        """Converts a value expressed in this unit into another unit of the same kind.

        :param value: The value in this unit.
        :type value: float
        :param other: The unit to convert into.
        :type other: :class:`Unit`
        :return: The value expressed in ``other``.
        :rtype: float
        """
        return convert(value, self, other)

    def __call__(self, value: float) -> "Measurement":
        """Creates a new :class:`Measurement` of the given value in this unit."""
        return Measurement(value, self)

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"


class LinearUnit(Unit):
    """
    A unit descriptor whose members are pure scale factors of the base unit.

    Members are declared as ``(symbol, multiplier, divisor)``, so that a value converts to the
    base unit as ``value * multiplier / divisor``. Prefixes smaller than the base unit divide,
    larger ones multiply, and the base unit itself is ``(symbol, 1.0, 1.0)``, which leaves
    values untouched.
    """

    def __init__(self, symbol: str, multiplier: float, divisor: float) -> None:
        self._symbol = symbol
        self._multiplier = multiplier
        self._divisor = divisor

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def multiplier(self) -> float:
        return self._multiplier

    @property
    def divisor(self) -> float:
        return self._divisor

    def to_base(self, value: float) -> float:
        return value * self._multiplier / self._divisor

    def from_base(self, value: float) -> float:
        return value * self._divisor / self._multiplier


U = TypeVar("U", bound=Unit)


def convert(value: float, from_unit: U, to_unit: U) -> float:
    """Converts a value between two units of the same kind, by way of the base unit.

    :param value: The value, expressed in ``from_unit``.
    :type value: float
    :param from_unit: The unit the value is expressed in.
    :type from_unit: :class:`Unit`
    :param to_unit: The unit to express the value in.
    :type to_unit: :class:`Unit`
    :raises InvalidConversionError: If the units describe different kinds of quantity.
    :return: The converted value.
    :rtype: float
    """
    if type(from_unit) is not type(to_unit):
        raise Report(
            InvalidConversionError(_symbol_of(from_unit), _symbol_of(to_unit))
        )
    return to_unit.from_base(from_unit.to_base(value))


def _symbol_of(unit) -> str:
    return unit.symbol if isinstance(unit, Unit) else str(unit)


class Measurement(Generic[U]):
    """
    A value paired with a unit.

    Measurements are immutable; every operation returns a new one. Two measurements of the same
    unit kind are commensurable whatever member each uses: they add, subtract, compare and hash
    through their value in the base unit. Measurements of different kinds never combine, and
    the operators report this by deferring to Python's ``TypeError``.

    Equality allows a tolerance of :data:`EQUALITY_TOLERANCE` but the hash is taken from the exact
    base value, so ``Inch(12) == Feet(1)`` holds while their hashes differ. Do not rely on sets
    or dict keys to merge measurements that are only equal within the tolerance.

    :param value: The magnitude of the measurement, in ``unit``.
    :type value: float
    :param unit: The unit of the measurement.
    :type unit: :class:`Unit`
    """

    __slots__ = ("_value", "_unit")

    # Let numpy scalars defer to the reflected operators below.
    __array_ufunc__ = None

    def __init__(self, value: float, unit: U) -> None:
        if not isinstance(unit, Unit):
            raise TypeError(f"Expected a unit, got {type(unit).__name__}")
        self._value = float(value)
        self._unit = unit

    @classmethod
    def validated(
        cls, value: float, unit: U, policy: Optional["ValidationPolicy"] = None
    ) -> "Measurement[U]":
        """Creates a measurement after checking the value against a validation policy.

        :raises MetrikaError: If the value violates ``policy``.
        """
        from metrika.validation import validate

        return cls(validate(value, unit, policy), unit)

    @property
    def value(self) -> float:
        return self._value

    @property
    def unit(self) -> U:
        return self._unit

    @property
    def base_value(self) -> float:
        return self._unit.to_base(self._value)

    @property
    def symbol(self) -> str:
        return self._unit.symbol

    @property
    def description(self) -> str:
        return f"{self._value} {self._unit.symbol}"

    def converted(self, target_unit: U) -> "Measurement[U]":
        """Returns this measurement expressed in another unit of the same kind.

        :param target_unit: The unit to convert into.
        :type target_unit: :class:`Unit`
        :raises InvalidConversionError: If ``target_unit`` is of another kind.
        """
        return Measurement(convert(self._value, self._unit, target_unit), target_unit)

    to = converted

    def _commensurable(self, other: object) -> bool:
        return isinstance(other, Measurement) and type(other._unit) is type(self._unit)

    # --- Arithmetic Operations ---

    def __add__(self, other: object) -> "Measurement[U]":
        if not self._commensurable(other):
            return NotImplemented
        return Measurement(self._value + other.converted(self._unit)._value, self._unit)

    def __sub__(self, other: object) -> "Measurement[U]":
        if not self._commensurable(other):
            return NotImplemented
        return Measurement(self._value - other.converted(self._unit)._value, self._unit)

    def __mul__(self, other: object) -> "Measurement[U]":
        if not isinstance(other, Real):
            return NotImplemented
        return Measurement(self._value * other, self._unit)

    def __rmul__(self, other: object) -> "Measurement[U]":
        if not isinstance(other, Real):
            return NotImplemented
        return Measurement(other * self._value, self._unit)

    def __truediv__(self, other: object) -> "Measurement[U]":
        if not isinstance(other, Real):
            return NotImplemented
        # IEEE-754 semantics: x/0 is inf or nan, never ZeroDivisionError
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            value = float(np.divide(self._value, other))
        return Measurement(value, self._unit)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not self._commensurable(other):
            return NotImplemented
        return abs(self.base_value - other.base_value) < EQUALITY_TOLERANCE

    def __hash__(self) -> int:
        return hash(self.base_value)

    def __lt__(self, other: object) -> bool:
        if not self._commensurable(other):
            return NotImplemented
        return self.base_value < other.base_value

    def __gt__(self, other: object) -> bool:
        if not self._commensurable(other):
            return NotImplemented
        return other.base_value < self.base_value

    def __le__(self, other: object) -> bool:
        if not self._commensurable(other):
            return NotImplemented
        return not (other.base_value < self.base_value)

    def __ge__(self, other: object) -> bool:
        if not self._commensurable(other):
            return NotImplemented
        return not (self.base_value < other.base_value)

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"Measurement({self._value!r}, {self._unit!r})"
