from dataclasses import dataclass
from fractions import Fraction
from math import prod
from typing import Sequence
from .errors import InsufficientPointsError, DuplicateAbscissaError, ReconstructionInconsistencyError
from .shares import Point


# formulas taken from https://en.wikipedia.org/wiki/Lagrange_polynomial
# all arithmetic is on exact rationals (Fraction keeps numerator/denominator reduced by their gcd)
class Interpolator:
    def __init__(self, xs, field=Fraction):
        if len(xs) == 0:
            raise ValueError("xs list must not be empty (need at least one point to interpolate)")

        # a repeated x makes some (x_j - x_m) zero
        seen = {}
        for i, x in enumerate(xs):
            if x in seen:
                raise DuplicateAbscissaError(seen[x], i, x)
            seen[x] = i

        self.field = field
        self.xs = [field(x) for x in xs]
        self.w = self.get_interpolation_weights(self.xs)
        self.degree = len(xs)-1


    # called w_j in the wikipedia article
    def get_interpolation_weights(self, xs):
        return [prod((self.field(1)/(x_j-x_m) for m, x_m in enumerate(xs) if m != j), start=self.field(1))
                for j, x_j in enumerate(xs)]


    def basis_values(self, x):
        """
        values of every Lagrange basis polynomial at x, i.e. L_i(x) = prod_{j != i} (x - x_j)/(x_i - x_j)
        """
        x = self.field(x)
        return [w_i * prod((x - x_j for j, x_j in enumerate(self.xs) if j != i), start=self.field(1))
                for i, w_i in enumerate(self.w)]


    def interpolate(self, ys):
        """
        returns a function, which when called with a single argument, evaluates the polynomial at that point
        """
        if len(self.xs) != len(ys):
            raise ValueError("number of x values given and y value given must match")

        ys = [self.field(y) for y in ys]

        def f(x):
            return sum((y_i * l_i for y_i, l_i in zip(ys, self.basis_values(x))), start=self.field(0))

        return f


@dataclass(frozen=True)
class ReconstructionResult:
    secret: int
    basis_points: tuple[Point, ...]
    degree: int


def polynomial_through(basis_points: Sequence[Point]):
    interpolator = Interpolator([p.x for p in basis_points])
    return interpolator.interpolate([p.y for p in basis_points])


def reconstruct(points: Sequence[Point], k: int) -> ReconstructionResult:
    """
    Recovers the secret (constant term) of the degree k-1 polynomial through the first k points.

    The basis is always the first k points in the order given, never picked by value.
    Raises InsufficientPointsError, DuplicateAbscissaError, or ReconstructionInconsistencyError
    if the polynomial does not hit an integer at x = 0.
    """
    if not isinstance(k, int) or k < 1 or len(points) < k:
        raise InsufficientPointsError(k, len(points))

    basis_points = tuple(points[:k])
    poly = polynomial_through(basis_points)

    secret = poly(0)
    if secret.denominator != 1:
        raise ReconstructionInconsistencyError(secret)

    return ReconstructionResult(int(secret), basis_points, k-1)
