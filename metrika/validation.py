"""
Validating counterparts of the measurement operations.

The operators on :class:`~metrika.core.Measurement` are total: they follow IEEE-754 and never
raise. The functions here apply a :class:`~metrika.config.ValidationPolicy` on top of the same
arithmetic and raise the matching :mod:`metrika.errors` error, logged, when the policy is
violated.
"""

from numbers import Real
from typing import Iterable, Optional

import numpy as np

from metrika.config import DEFAULT_POLICY, ValidationPolicy
from metrika.core import LinearUnit, Measurement, U, Unit
from metrika.errors import (
    DivisionByZeroError,
    InvalidValueError,
    NegativeValueError,
    OverflowValueError,
    Report,
    UnderflowValueError,
)
from metrika.utils.logging import Debug

SMALLEST_NORMAL = float(np.finfo(np.float64).tiny)


def _policy(policy: Optional[ValidationPolicy]) -> ValidationPolicy:
    return DEFAULT_POLICY if policy is None else policy


def _underflowed(operands: Iterable[float], result: float) -> bool:
    """True when non-zero operands produced a zero or subnormal result."""
    return all(op != 0.0 for op in operands) and abs(result) < SMALLEST_NORMAL


def validate(value: float, unit: Unit, policy: Optional[ValidationPolicy] = None) -> float:
    """Checks a value about to be measured in ``unit``.

    :param value: The value, expressed in ``unit``.
    :type value: float
    :param unit: The unit the value is expressed in.
    :type unit: :class:`~metrika.core.Unit`
    :param policy: The checks to apply. Defaults to :data:`~metrika.config.DEFAULT_POLICY`.
    :type policy: :class:`~metrika.config.ValidationPolicy`, optional
    :raises InvalidValueError: If the value is NaN or infinite.
    :raises OverflowValueError: If the value overflows when converted to the base unit.
    :raises UnderflowValueError: If a non-zero value vanishes when scaled to the base unit.
    :raises NegativeValueError: If the base value is negative and the unit forbids it.
    :return: The value as a float.
    :rtype: float
    """
    policy = _policy(policy)
    value = float(value)

    if not np.isfinite(value):
        if not policy.allow_non_finite:
            raise Report(InvalidValueError(value))
        Debug(f"Accepting non-finite value {value} {unit.symbol}")
        return value

    base = unit.to_base(value)
    if policy.check_range:
        if not np.isfinite(base):
            raise Report(OverflowValueError())
        # Affine units may legitimately land on zero, e.g. -273.15 °C.
        if isinstance(unit, LinearUnit) and _underflowed((value,), base):
            raise Report(UnderflowValueError())

    if base < 0.0 and not unit.allows_negative_base:
        if not policy.allow_negative:
            raise Report(NegativeValueError(value))
        Debug(f"Accepting negative value {value} {unit.symbol}")
    return value


def validated(measurement: Measurement[U], policy: Optional[ValidationPolicy] = None) -> Measurement[U]:
    """Checks an existing measurement, returning it unchanged when it passes."""
    validate(measurement.value, measurement.unit, policy)
    return measurement


def _checked(
    value: float, unit: U, operands: Iterable[float], policy: ValidationPolicy, scaled: bool
) -> Measurement[U]:
    operands = tuple(operands)
    if policy.check_range and all(np.isfinite(operands)):
        if not np.isfinite(value):
            raise Report(OverflowValueError())
        if scaled and _underflowed(operands, value):
            raise Report(UnderflowValueError())
    return Measurement(validate(value, unit, policy), unit)


def _require_measurement(obj: object) -> None:
    if not isinstance(obj, Measurement):
        raise TypeError(f"Expected a measurement, got {type(obj).__name__}")


def checked_add(
    lhs: Measurement[U], rhs: Measurement[U], policy: Optional[ValidationPolicy] = None
) -> Measurement[U]:
    """Adds two measurements like ``lhs + rhs`` and validates the sum.

    :raises InvalidConversionError: If the measurements are of different kinds.
    """
    _require_measurement(lhs)
    _require_measurement(rhs)
    other = rhs.converted(lhs.unit).value
    return _checked(lhs.value + other, lhs.unit, (lhs.value, other), _policy(policy), scaled=False)


def checked_subtract(
    lhs: Measurement[U], rhs: Measurement[U], policy: Optional[ValidationPolicy] = None
) -> Measurement[U]:
    """Subtracts two measurements like ``lhs - rhs`` and validates the difference.

    :raises InvalidConversionError: If the measurements are of different kinds.
    """
    _require_measurement(lhs)
    _require_measurement(rhs)
    other = rhs.converted(lhs.unit).value
    return _checked(lhs.value - other, lhs.unit, (lhs.value, other), _policy(policy), scaled=False)


def checked_multiply(
    measurement: Measurement[U], factor: Real, policy: Optional[ValidationPolicy] = None
) -> Measurement[U]:
    _require_measurement(measurement)
    result = measurement * factor
    return _checked(result.value, result.unit, (measurement.value, factor), _policy(policy), scaled=True)


def checked_divide(
    measurement: Measurement[U], divisor: Real, policy: Optional[ValidationPolicy] = None
) -> Measurement[U]:
    """Divides a measurement by a scalar like ``measurement / divisor``.

    :raises DivisionByZeroError: If ``divisor`` is zero and the policy guards division.
    """
    _require_measurement(measurement)
    policy = _policy(policy)
    if divisor == 0:
        if policy.guard_division:
            raise Report(DivisionByZeroError())
        Debug(f"Dividing {measurement} by zero")
        result = measurement / divisor
        return Measurement(validate(result.value, result.unit, policy), result.unit)
    result = measurement / divisor
    return _checked(result.value, result.unit, (measurement.value, divisor), policy, scaled=True)
