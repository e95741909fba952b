from dataclasses import dataclass
from fractions import Fraction
from typing import Sequence
from .interpolation import polynomial_through
from .shares import Point

# exact arithmetic makes every consistent point differ by exactly 0,
# the epsilon only matters for callers validating over-determined share sets
DEFAULT_TOLERANCE = 1e-10


@dataclass(frozen=True)
class PointCheck:
    point: Point
    predicted_y: Fraction
    difference: Fraction
    valid: bool


@dataclass(frozen=True)
class ValidationReport:
    results: tuple[PointCheck, ...]
    all_valid: bool
    tolerance: float

    @property
    def invalid_points(self):
        return [r.point for r in self.results if not r.valid]


def check_tolerance(tolerance):
    if isinstance(tolerance, bool) or not isinstance(tolerance, (int, float, Fraction)) or not tolerance >= 0:
        raise ValueError(f"tolerance must be a non-negative number (got {tolerance!r})")


def validate(all_points: Sequence[Point], basis_points: Sequence[Point], tolerance=DEFAULT_TOLERANCE) -> ValidationReport:
    """
    Evaluates the polynomial through basis_points at the x of every point in all_points
    and compares it with the recorded y.

    A mismatch is not an error: it shows up as valid=False in the report and the caller decides what to do with it.
    """
    check_tolerance(tolerance)
    poly = polynomial_through(basis_points)

    results = []
    for point in all_points:
        predicted = poly(point.x)
        difference = abs(predicted - point.y)
        results.append(PointCheck(point, predicted, difference, difference <= tolerance))

    return ValidationReport(tuple(results), all(r.valid for r in results), tolerance)
