"""
Errors raised by metrika.

The set is closed: every error carries one of the six :class:`ErrorKind` members. The plain
measurement operators never raise them; they are raised by :mod:`metrika.validation` and by
:meth:`metrika.core.Measurement.converted` when handed a unit of another kind.
"""

from enum import Enum
from typing import Optional, Tuple

from metrika.utils.logging import Error


class ErrorKind(Enum):
    """The kinds of failure metrika can report."""

    InvalidConversion = "invalid_conversion"
    DivisionByZero = "division_by_zero"
    InvalidValue = "invalid_value"
    NegativeValue = "negative_value"
    Overflow = "overflow"
    Underflow = "underflow"


class MetrikaError(Exception):
    """Base class of every metrika error.

    Errors compare and hash by kind and payload, so two independently raised errors describing
    the same failure are equal.
    """

    kind: Optional[ErrorKind] = None

    def __init__(self, *payload) -> None:
        self._payload: Tuple = payload
        super().__init__(self.describe())

    @property
    def payload(self) -> Tuple:
        return self._payload

    def __reduce__(self):
        return (type(self), self._payload)

    def describe(self) -> str:
        raise NotImplementedError

    @property
    def description(self) -> str:
        return self.describe()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MetrikaError):
            return NotImplemented
        return self.kind is other.kind and self._payload == other._payload

    def __hash__(self) -> int:
        return hash((self.kind, self._payload))


class InvalidConversionError(MetrikaError, TypeError):
    """Raised when converting between units of incompatible kinds."""

    kind = ErrorKind.InvalidConversion

    def __init__(self, from_symbol: str, to_symbol: str) -> None:
        super().__init__(from_symbol, to_symbol)

    @property
    def from_symbol(self) -> str:
        return self._payload[0]

    @property
    def to_symbol(self) -> str:
        return self._payload[1]

    def describe(self) -> str:
        return f"Cannot convert from {self.from_symbol} to {self.to_symbol}"


class DivisionByZeroError(MetrikaError, ZeroDivisionError):
    kind = ErrorKind.DivisionByZero

    def __init__(self) -> None:
        super().__init__()

    def describe(self) -> str:
        return "Division by zero"


class InvalidValueError(MetrikaError, ValueError):
    """Raised for values that cannot be measured at all, such as NaN or infinity."""

    kind = ErrorKind.InvalidValue

    def __init__(self, value: float) -> None:
        super().__init__(float(value))

    @property
    def value(self) -> float:
        return self._payload[0]

    def describe(self) -> str:
        return f"Invalid value: {self.value}"


class NegativeValueError(MetrikaError, ValueError):
    """Raised for a negative value where the quantity only admits non-negative ones."""

    kind = ErrorKind.NegativeValue

    def __init__(self, value: float) -> None:
        super().__init__(float(value))

    @property
    def value(self) -> float:
        return self._payload[0]

    def describe(self) -> str:
        return f"Negative value not allowed: {self.value}"


class OverflowValueError(MetrikaError, OverflowError):
    kind = ErrorKind.Overflow

    def __init__(self) -> None:
        super().__init__()

    def describe(self) -> str:
        return "Overflow occurred during calculation"


class UnderflowValueError(MetrikaError, ArithmeticError):
    kind = ErrorKind.Underflow

    def __init__(self) -> None:
        super().__init__()

    def describe(self) -> str:
        return "Underflow occurred during calculation"


def Report(error: MetrikaError) -> MetrikaError:
    """Logs an error to the ``metrika`` logger and hands it back so it can be raised.

    :param error: The error about to be raised.
    :type error: :class:`MetrikaError`
    :return: The same error.
    :rtype: :class:`MetrikaError`
    """
    Error(f"{error.kind.value}: {error}")
    return error
