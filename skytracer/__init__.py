"""
SkyTracer - A small Python Ray Tracer

Renders spheres under a procedural sky with:
- Recursive diffuse global illumination
- Monte-Carlo antialiasing
- Normal-shaded preview mode
- PPM and Pillow image output
- YAML/JSON scene files
"""

__version__ = "0.1.0"

from .vec3 import Vec3, Point3, Color, SamplingError
from .ray import Ray
from .shapes import Sphere, HittableList, Scene, HitRecord, Hittable
from .camera import Camera
from .renderer import (
    Renderer, RenderSettings, ray_color, normal_color, sky_color,
    to_ldr, color_to_bytes
)
from .output import write_ppm, save_image
from .scene_parser import (
    SceneParser, SceneParseError, load_scene, parse_scene, default_scene
)
