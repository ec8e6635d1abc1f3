"""
Geometric Primitives for planar trigonometry.

Vector and Triangle derive their lengths and angles lazily: nothing is computed
at construction, each value is computed on first access and cached for the
lifetime of the instance. `new_initialized` builds an instance and forces every
cached value right away.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple, TYPE_CHECKING

import numpy as np

from planegeometry.config import (
    ANGLE_SUM_TOLERANCE,
    DISPLAY_DECIMALS,
    FLOAT_DTYPE,
    RIGHT_ANGLE,
    STRAIGHT_ANGLE,
)
from planegeometry.model.geometry_utils import (
    law_of_cosines_angle,
    rad2deg,
    right_triangle_angles,
    round_half_away_from_zero,
    validate_triangle_sides,
)

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _store(instance: object, **values: np.float32) -> None:
    """Write cached values onto a frozen dataclass instance."""
    for name, value in values.items():
        object.__setattr__(instance, name, value)


@dataclass(frozen=True, eq=False)
class Point:
    """
    A point in the plane. Coordinates are stored as float32.

    Equality is IEEE comparison of the coordinates without tolerance: a point
    with a NaN coordinate is unequal to every point, itself included, and
    0.0 equals -0.0.
    """
    x: float
    y: float

    def __post_init__(self) -> None:
        _store(self, x=FLOAT_DTYPE(self.x), y=FLOAT_DTYPE(self.y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y)

    def __hash__(self) -> int:
        return hash((float(self.x), float(self.y)))

    def distance_to(self, other: Point) -> np.float32:
        with np.errstate(over="ignore"):
            return np.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def angle_to(self, other: Point) -> np.float32:
        """
        Angle in degrees of the segment towards `other`, as 90 - asin(|dx| / distance).

        Vertical segments give 90 and horizontal ones 0. Coincident points give NaN.
        """
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            ratio = np.abs(self.x - other.x) / self.distance_to(other)
            return RIGHT_ANGLE - rad2deg(np.arcsin(ratio))

    def to_array(self) -> npt.NDArray[np.float32]:
        return np.array([self.x, self.y], dtype=FLOAT_DTYPE)


@dataclass(frozen=True)
class Vector:
    """
    Vector AB.

    Not every value of a vector is always needed, so length and angles are left
    unset at construction and computed when first requested or when `init` is
    called. alpha and beta are the two acute angles of the right triangle whose
    hypotenuse is AB; they always add up to 90 degrees.
    """
    point_a: Point
    point_b: Point
    _length: Optional[np.float32] = field(default=None, init=False, repr=False, compare=False)
    _alpha: Optional[np.float32] = field(default=None, init=False, repr=False, compare=False)
    _beta: Optional[np.float32] = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def new_initialized(cls, point_a: Point, point_b: Point) -> Vector:
        """Return a vector with length, alpha and beta already computed."""
        vector = cls(point_a, point_b)
        vector.init()
        return vector

    @property
    def is_initialized(self) -> bool:
        return self._length is not None and self._alpha is not None and self._beta is not None

    def init(self) -> None:
        """Compute length, alpha and beta."""
        self.length()
        self.alpha()

    def _legs(self) -> Tuple[np.float32, np.float32]:
        with np.errstate(over="ignore"):
            opposite = self.point_a.x - self.point_b.x
            adjacent = self.point_a.y - self.point_b.y
        return opposite, adjacent

    def length(self) -> np.float32:
        if self._length is None:
            opposite, adjacent = self._legs()
            with np.errstate(over="ignore"):
                _store(self, _length=np.sqrt(opposite ** 2 + adjacent ** 2))
            logger.debug("Computed length %s of %s", self._length, self)
        return self._length

    def _set_alpha_beta(self) -> None:
        alpha, beta = right_triangle_angles(*self._legs())
        _store(self, _alpha=alpha, _beta=beta)
        logger.debug("Computed angles alpha=%s, beta=%s of %s", alpha, beta, self)

    def alpha(self) -> np.float32:
        if self._alpha is None:
            self._set_alpha_beta()
        return self._alpha

    def beta(self) -> np.float32:
        if self._beta is None:
            self._set_alpha_beta()
        return self._beta


@dataclass(frozen=True)
class Triangle:
    """
    Triangle ABC, following the usual naming scheme.

    ab, bc and ca are the side lengths between the named vertices. alpha is the
    interior angle at point_a, beta at point_b and gamma at point_c.

    Side lengths are computed together, since angle calculations need all three.
    Angles are computed together as well, forcing the side lengths first.
    """
    point_a: Point
    point_b: Point
    point_c: Point
    _ab: Optional[np.float32] = field(default=None, init=False, repr=False, compare=False)
    _bc: Optional[np.float32] = field(default=None, init=False, repr=False, compare=False)
    _ca: Optional[np.float32] = field(default=None, init=False, repr=False, compare=False)
    _alpha: Optional[np.float32] = field(default=None, init=False, repr=False, compare=False)
    _beta: Optional[np.float32] = field(default=None, init=False, repr=False, compare=False)
    _gamma: Optional[np.float32] = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def new_initialized(cls, point_a: Point, point_b: Point, point_c: Point) -> Triangle:
        """Return a triangle with all side lengths and angles already computed."""
        triangle = cls(point_a, point_b, point_c)
        triangle.init()
        return triangle

    @property
    def lengths_computed(self) -> bool:
        return self._ab is not None and self._bc is not None and self._ca is not None

    @property
    def angles_computed(self) -> bool:
        return self._alpha is not None and self._beta is not None and self._gamma is not None

    def init(self) -> None:
        """Compute side lengths, then angles."""
        if not self.lengths_computed:
            self._init_lengths()
        if not self.angles_computed:
            self._init_angles()

    def validate(self) -> None:
        """
        Check that the three points span a proper triangle.

        The accessors never call this; degenerate input there yields NaN/Inf.

        Raises:
            DegenerateGeometryError: If two points coincide or all three are collinear.
        """
        validate_triangle_sides(self.ab(), self.bc(), self.ca())

    def rounded_angles(self, digits: int = DISPLAY_DECIMALS) -> Tuple[float, float, float]:
        """Return (alpha, beta, gamma) rounded half away from zero, e.g. (37.3, 50.9, 91.8)."""
        return (
            round_half_away_from_zero(self.alpha(), digits),
            round_half_away_from_zero(self.beta(), digits),
            round_half_away_from_zero(self.gamma(), digits),
        )

    def has_consistent_angle_sum(self, tolerance: float = ANGLE_SUM_TOLERANCE) -> bool:
        """
        True if alpha + beta + gamma is within `tolerance` degrees of 180.

        NaN angles, as produced by degenerate triangles, always give False.
        """
        total = float(self.alpha()) + float(self.beta()) + float(self.gamma())
        return abs(total - float(STRAIGHT_ANGLE)) <= tolerance

    def _init_lengths(self) -> None:
        _store(
            self,
            _ab=Vector(self.point_a, self.point_b).length(),
            _bc=Vector(self.point_b, self.point_c).length(),
            _ca=Vector(self.point_c, self.point_a).length(),
        )
        logger.debug(
            "Computed side lengths ab=%s, bc=%s, ca=%s of %s", self._ab, self._bc, self._ca, self
        )

    def _init_angles(self) -> None:
        ab, bc, ca = self.ab(), self.bc(), self.ca()
        _store(
            self,
            _alpha=law_of_cosines_angle(ab, ca, bc),
            _beta=law_of_cosines_angle(bc, ab, ca),
            _gamma=law_of_cosines_angle(ca, bc, ab),
        )
        logger.debug(
            "Computed angles alpha=%s, beta=%s, gamma=%s of %s",
            self._alpha, self._beta, self._gamma, self,
        )

    def ab(self) -> np.float32:
        if self._ab is None:
            self._init_lengths()
        return self._ab

    def bc(self) -> np.float32:
        if self._bc is None:
            self._init_lengths()
        return self._bc

    def ca(self) -> np.float32:
        if self._ca is None:
            self._init_lengths()
        return self._ca

    def alpha(self) -> np.float32:
        if self._alpha is None:
            self._init_angles()
        return self._alpha

    def beta(self) -> np.float32:
        if self._beta is None:
            self._init_angles()
        return self._beta

    def gamma(self) -> np.float32:
        if self._gamma is None:
            self._init_angles()
        return self._gamma
