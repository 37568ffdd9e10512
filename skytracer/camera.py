"""
Camera module for generating primary rays.

An axis-aligned pinhole camera: the eye sits at a fixed point looking down
-Z, and the image plane lies focal_length in front of it.
"""

from __future__ import annotations
from .vec3 import Vec3, Point3
from .ray import Ray


class Camera:
    """A fixed pinhole camera looking down the -Z axis."""

    def __init__(
        self,
        aspect_ratio: float = 16.0 / 9.0,
        viewport_height: float = 2.0,
        focal_length: float = 1.0,
        origin: Point3 = None
    ):
        """Create a camera.

        Args:
            aspect_ratio: Width / Height ratio of the viewport
            viewport_height: Height of the image plane in world units
            focal_length: Distance from the eye to the image plane
            origin: Eye position in world space (default: world origin)

        Raises:
            ValueError: if any dimension is not positive
        """
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if viewport_height <= 0:
            raise ValueError(f"viewport_height must be positive, got {viewport_height}")
        if focal_length <= 0:
            raise ValueError(f"focal_length must be positive, got {focal_length}")

        viewport_width = aspect_ratio * viewport_height

        self.aspect_ratio = aspect_ratio
        self.focal_length = focal_length
        self.origin = origin if origin is not None else Point3(0, 0, 0)
        self.horizontal = Vec3(viewport_width, 0, 0)
        self.vertical = Vec3(0, viewport_height, 0)
        self.lower_left_corner = (
            self.origin
            - self.horizontal / 2
            - self.vertical / 2
            - Vec3(0, 0, focal_length)
        )

    def get_ray(self, u: float, v: float) -> Ray:
        """Generate a ray for the given UV coordinates on the image plane.

        Args:
            u: Horizontal coordinate [0, 1] (0 = left, 1 = right)
            v: Vertical coordinate [0, 1] (0 = bottom, 1 = top)

        Returns:
            A ray from the eye through the given point (direction not normalized)
        """
        direction = (
            self.lower_left_corner
            + self.horizontal * u
            + self.vertical * v
            - self.origin
        )
        return Ray(self.origin, direction)

    def __repr__(self) -> str:
        return f"Camera(origin={self.origin}, looking_at={self.lower_left_corner + self.horizontal/2 + self.vertical/2})"
