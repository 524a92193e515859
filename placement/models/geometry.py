"""Geometric primitives used throughout the placement engine."""

from __future__ import annotations
import math
from pydantic import BaseModel


# Squared wall length below which a segment counts as zero-length
DEGENERATE_LENGTH_SQ = 1e-12


class Point2D(BaseModel):
    """Point on the floor plane (X-Z in Three.js convention)."""
    x: float
    z: float

    def distance_to(self, other: Point2D) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.z - other.z) ** 2)

    def lerp(self, other: Point2D, t: float) -> Point2D:
        return Point2D(
            x=self.x + (other.x - self.x) * t,
            z=self.z + (other.z - self.z) * t,
        )

    def midpoint(self, other: Point2D) -> Point2D:
        return self.lerp(other, 0.5)


class Point3D(BaseModel):
    """Point in 3D space."""
    x: float
    y: float
    z: float


class Vector2D(BaseModel):
    """2D vector for direction calculations on the floor plane."""
    x: float
    z: float

    def length_squared(self) -> float:
        return self.x * self.x + self.z * self.z

    def angle(self) -> float:
        """Heading in radians, measured from +X towards +Z."""
        return math.atan2(self.z, self.x)


def direction_from_points(start: Point2D, end: Point2D) -> Vector2D:
    """Get direction vector from start to end."""
    return Vector2D(x=end.x - start.x, z=end.z - start.z)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def segment_endpoints(coordinates: list[Point2D], wall_index: int) -> tuple[Point2D, Point2D]:
    """Start and end vertex of a wall, wrapping from the last vertex to the first."""
    n = len(coordinates)
    return coordinates[wall_index % n], coordinates[(wall_index + 1) % n]
