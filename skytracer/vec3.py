"""
Vector3 class for 3D math operations.

This is the fundamental building block of the ray tracer, used for:
- Points in 3D space
- Direction vectors
- RGB color values

Random sampling draws from an explicitly passed numpy Generator, so a
render seeded once is reproducible end to end.
"""

from __future__ import annotations
import math
from typing import Union
import numpy as np

# Expected attempts for the rejection sampler is 6/pi (~1.91); this cap is
# never reached in practice but bounds the loop.
MAX_SAMPLE_ATTEMPTS = 1000


class SamplingError(RuntimeError):
    """Rejection sampling gave up before finding an accepted point."""
    pass


class Vec3:
    """A 3D vector class supporting common vector operations.

    Uses numpy internally for efficient computation while providing
    a clean, Pythonic API.
    """

    __slots__ = ('_data',)

    # Make numpy scalars defer to __rmul__ instead of broadcasting over us
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec3:
        """Create Vec3 from numpy array."""
        v = cls.__new__(cls)
        v._data = np.asarray(arr, dtype=np.float64)
        return v

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    # Aliases for color operations
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __repr__(self) -> str:
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.allclose(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self._data))

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3.from_array(self._data + other._data)

    def __iadd__(self, other: Vec3) -> Vec3:
        # In-place accumulation, used when summing pixel samples
        self._data += other._data
        return self

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3.from_array(self._data - other._data)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data * other._data)
        return Vec3.from_array(self._data * other)

    def __rmul__(self, other: float) -> Vec3:
        return Vec3.from_array(other * self._data)

    def __truediv__(self, other: float) -> Vec3:
        return Vec3.from_array(self._data / other)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __iter__(self):
        return (float(c) for c in self._data)

    def length(self) -> float:
        """Return the magnitude (length) of the vector."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        """Return the squared magnitude (avoids sqrt for comparisons)."""
        x, y, z = self._data
        return float(x * x + y * y + z * z)

    def unit(self) -> Vec3:
        """Return a unit vector in the same direction.

        A zero vector has no direction; the result is NaN in every component
        and is left for the caller to avoid.
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            return Vec3.from_array(self._data / self.length())

    def dot(self, other: Vec3) -> float:
        """Compute dot product with another vector."""
        x, y, z = self._data
        ox, oy, oz = other._data
        return float(x * ox + y * oy + z * oz)

    def cross(self, other: Vec3) -> Vec3:
        """Compute cross product with another vector."""
        return Vec3.from_array(np.cross(self._data, other._data))

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()

    def clamp(self, min_val: float = 0.0, max_val: float = 1.0) -> Vec3:
        """Clamp all components to the given range."""
        return Vec3.from_array(np.clip(self._data, min_val, max_val))

    @staticmethod
    def random(rng: np.random.Generator, min_val: float = 0.0, max_val: float = 1.0) -> Vec3:
        """Generate a random vector with components in [min_val, max_val)."""
        return Vec3.from_array(rng.uniform(min_val, max_val, 3))

    @staticmethod
    def random_in_unit_sphere(
        rng: np.random.Generator,
        max_attempts: int = MAX_SAMPLE_ATTEMPTS
    ) -> Vec3:
        """Generate a random point strictly inside the unit sphere.

        Candidates are drawn uniformly from the [-1, 1) cube and rejected
        until one lands inside the ball.

        Raises:
            SamplingError: if no candidate was accepted in max_attempts draws
        """
        for _ in range(max_attempts):
            p = Vec3.random(rng, -1.0, 1.0)
            if p.length_squared() < 1.0:
                return p
        raise SamplingError(
            f"No point inside the unit sphere after {max_attempts} attempts"
        )

    @staticmethod
    def random_in_hemisphere(normal: Vec3, rng: np.random.Generator) -> Vec3:
        """Generate a random vector in the hemisphere defined by normal."""
        in_unit_sphere = Vec3.random_in_unit_sphere(rng)
        if in_unit_sphere.dot(normal) < 0.0:
            return -in_unit_sphere
        return in_unit_sphere


# Convenience type aliases
Point3 = Vec3
Color = Vec3
