"""
Renderer module - the heart of the ray tracer.

Implements:
- Recursive diffuse path tracing with a fixed 50% albedo
- Procedural sky gradient for rays that escape the scene
- Normal-shaded preview mode (no bounces, no randomness)
- Jittered multi-sample antialiasing
- Gamma-2 conversion to 8-bit output
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Tuple
import numpy as np

from .vec3 import Vec3, Color
from .ray import Ray
from .camera import Camera
from .shapes import Hittable

# Minimum hit distance for bounce rays; skips self-intersection ("shadow acne")
T_MIN = 0.001

SHADING_MODES = ('diffuse', 'normals')

WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    width: int = 400
    height: Optional[int] = None  # None = derived from width and aspect_ratio
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = 100
    max_depth: int = 50
    shading: str = 'diffuse'
    jitter: bool = True
    seed: Optional[int] = None

    def __post_init__(self):
        if not self.aspect_ratio > 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.height is None:
            self.height = int(self.width / self.aspect_ratio)
        if self.width < 2 or self.height < 2:
            raise ValueError(
                f"Image must be at least 2x2 pixels, got {self.width}x{self.height}"
            )
        if self.samples_per_pixel < 1:
            raise ValueError(
                f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}"
            )
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if self.shading not in SHADING_MODES:
            raise ValueError(
                f"Unknown shading mode: {self.shading} (expected one of {', '.join(SHADING_MODES)})"
            )


def sky_color(ray: Ray) -> Color:
    """Blend linearly from white (looking straight down) to sky blue (straight up).

    Args:
        ray: The ray direction to use for gradient

    Returns:
        Sky color at this direction
    """
    unit_direction = ray.direction.unit()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, world: Hittable, depth: int, rng: np.random.Generator) -> Color:
    """Compute the color seen along a ray.

    Every hit scatters into a random direction in the hemisphere around the
    surface normal and keeps half of the light coming back from it. Rays
    that escape pick up the sky gradient.

    Args:
        ray: The ray to trace
        world: The scene to trace against
        depth: Remaining bounce budget; zero or less returns black
        rng: Random source for bounce directions

    Returns:
        The computed color for this ray
    """
    if depth <= 0:
        return Color(0.0, 0.0, 0.0)

    hit_record = world.hit(ray, T_MIN, float('inf'))

    if hit_record is None:
        return sky_color(ray)

    target = hit_record.point + Vec3.random_in_hemisphere(hit_record.normal, rng)
    bounced = Ray(hit_record.point, target - hit_record.point)
    return 0.5 * ray_color(bounced, world, depth - 1, rng)


def normal_color(ray: Ray, world: Hittable) -> Color:
    """Visualize surface normals, mapping each component from [-1, 1] to [0, 1].

    Misses fall back to the sky gradient.
    """
    hit_record = world.hit(ray, 0.0, float('inf'))
    if hit_record is None:
        return sky_color(ray)
    return (hit_record.normal + WHITE) * 0.5


def to_ldr(image: np.ndarray) -> np.ndarray:
    """Convert a linear float image to 8-bit with gamma 2 correction.

    Args:
        image: Averaged linear color image (float)

    Returns:
        uint8 image of the same shape
    """
    corrected = np.sqrt(np.clip(image, 0.0, None))
    return (256 * np.clip(corrected, 0.0, 0.999)).astype(np.uint8)


def color_to_bytes(color: Color) -> Tuple[int, int, int]:
    """Convert one averaged linear color to an (r, g, b) byte triple."""
    r, g, b = to_ldr(color.to_array())
    return int(r), int(g), int(b)


class Renderer:
    """Single-threaded scanline renderer."""

    def __init__(self, settings: RenderSettings = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0),
                called once per finished scanline
        """
        self._progress_callback = callback

    def render(self, world: Hittable, camera: Camera) -> np.ndarray:
        """Render the scene and return the image as a numpy array.

        Rows run top to bottom, columns left to right.

        Args:
            world: The scene to render (any Hittable)
            camera: The camera to render from

        Returns:
            Linear image as numpy array of shape (height, width, 3)
        """
        width = self.settings.width
        height = self.settings.height
        samples = self.settings.samples_per_pixel

        rng = np.random.default_rng(self.settings.seed)
        image = np.zeros((height, width, 3), dtype=np.float64)

        for j in range(height):
            row = height - 1 - j
            for i in range(width):
                pixel_color = Color(0, 0, 0)

                for _ in range(samples):
                    if self.settings.jitter:
                        u = (i + rng.random()) / (width - 1)
                        v = (row + rng.random()) / (height - 1)
                    else:
                        u = i / (width - 1)
                        v = row / (height - 1)

                    ray = camera.get_ray(u, v)
                    pixel_color += self.trace(ray, world, rng)

                image[j, i] = pixel_color.to_array() / samples

            if self._progress_callback:
                self._progress_callback((j + 1) / height)

        return image

    def trace(self, ray: Ray, world: Hittable, rng: np.random.Generator) -> Color:
        """Resolve a single camera ray with the configured shading mode."""
        if self.settings.shading == 'normals':
            return normal_color(ray, world)
        return ray_color(ray, world, self.settings.max_depth, rng)
