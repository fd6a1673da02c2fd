"""
Configuration classes for metrika's validating mode.
"""
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ValidationPolicy:
    """Which checks :mod:`metrika.validation` applies to a value.

    The plain measurement operators ignore policies entirely; a policy only matters to code
    that asks for validation.

    :param allow_non_finite: If True, NaN and infinite values are accepted.
    :param allow_negative: If True, negative base values are accepted even for units that
        do not admit them (masses, absolute temperatures, data sizes).
    :param guard_division: If True, dividing by zero raises instead of producing inf/NaN.
    :param check_range: If True, conversions that overflow to infinity or underflow below
        the smallest normal float are rejected.
    """
    allow_non_finite: bool = False
    allow_negative: bool = False
    guard_division: bool = True
    check_range: bool = True

    def with_overrides(self, **changes) -> "ValidationPolicy":
        """Returns a copy of the policy with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_POLICY = ValidationPolicy()
STRICT_POLICY = DEFAULT_POLICY
LENIENT_POLICY = ValidationPolicy(
    allow_non_finite=True,
    allow_negative=True,
    guard_division=False,
    check_range=False,
)
