"""
Error types for the availability engine and its collaborators.

Arithmetic edge cases (zero-length periods, zero-day cycles) are not errors;
the calculators return 0 for them.
"""


class CapacityPlannerError(Exception):
    """Base exception for planner errors."""

    pass


class ValidationError(CapacityPlannerError):
    """Raised when milestone dates are out of order (hard stop, no retry).

    Attributes:
        violations: ConstraintViolation records, one per broken ordering rule
    """

    def __init__(self, violations) -> None:
        self.violations = list(violations)
        super().__init__("; ".join(v.reason for v in self.violations) or "Invalid milestone dates")

    @property
    def pairs(self):
        """(earlier_field, later_field) for every violated ordering rule."""
        return [(v.earlier_field, v.later_field) for v in self.violations]


class HolidaySourceError(CapacityPlannerError):
    """Raised when the holiday source fails, times out or returns bad data.

    Distinct from an empty holiday list so that a source outage is never
    counted as "no holidays".
    """

    def __init__(self, year: int, region: str, reason: str) -> None:
        self.year = year
        self.region = region
        self.reason = reason
        super().__init__(f"Holiday data unavailable for {region} {year}: {reason}")


class FreezeStoreError(CapacityPlannerError):
    """Raised when the baseline persistence backend fails."""

    def __init__(self, key: str, operation: str, original_error: Exception) -> None:
        self.key = key
        self.operation = operation
        self.original_error = original_error
        super().__init__(f"Baseline {operation} failed for '{key}': {original_error}")
