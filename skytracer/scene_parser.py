"""
Scene description parser.

Supports YAML (and therefore JSON) scene files with:
- Camera configuration
- Render settings
- Objects (spheres)

Example scene file:
```yaml
camera:
  aspect_ratio: 1.7778
  viewport_height: 2.0
  focal_length: 1.0
  origin: [0, 0, 0]

render:
  width: 400
  samples: 100
  max_depth: 50
  shading: diffuse
  seed: 7

objects:
  - type: sphere
    center: [0, 0, -1]
    radius: 0.5

  - type: sphere
    center: [0, -100.5, -1]
    radius: 100
```

Every section is optional; a missing section falls back to the defaults of
the matching class.
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Any, Tuple, Union
import json

import yaml

from .vec3 import Vec3, Point3
from .camera import Camera
from .shapes import Sphere, HittableList
from .renderer import RenderSettings


class SceneParseError(Exception):
    """Error during scene parsing."""
    pass


class SceneParser:
    """Parser for scene description files."""

    def __init__(self):
        self.objects: HittableList = HittableList()
        self.camera: Camera = Camera()
        self.settings: RenderSettings = RenderSettings()

    def parse_file(self, filepath: Union[str, Path]) -> Tuple[HittableList, Camera, RenderSettings]:
        """Parse a scene file.

        Args:
            filepath: Path to the scene file (YAML or JSON)

        Returns:
            Tuple of (scene, camera, settings)
        """
        path = Path(filepath)
        if not path.exists():
            raise SceneParseError(f"Scene file not found: {filepath}")

        content = path.read_text()

        try:
            if path.suffix == '.json':
                data = json.loads(content)
            else:
                data = yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SceneParseError(f"Cannot parse scene file {filepath}: {e}") from e

        return self.parse_dict(data if data is not None else {})

    def parse_dict(self, data: Dict[str, Any]) -> Tuple[HittableList, Camera, RenderSettings]:
        """Parse a scene from a dictionary.

        Args:
            data: Scene description dictionary

        Returns:
            Tuple of (scene, camera, settings)
        """
        if not isinstance(data, dict):
            raise SceneParseError(f"Scene must be a mapping, got {type(data).__name__}")

        camera_data = data.get('camera') or {}
        render_data = data.get('render') or {}
        if not isinstance(camera_data, dict):
            raise SceneParseError("'camera' must be a mapping")
        if not isinstance(render_data, dict):
            raise SceneParseError("'render' must be a mapping")

        # Camera first: its aspect ratio sizes the image
        self._parse_camera(camera_data)
        self._parse_settings(render_data)

        if 'objects' in data:
            self._parse_objects(data['objects'])

        return self.objects, self.camera, self.settings

    def _parse_float(self, data: Any, name: str) -> float:
        try:
            return float(data)
        except (TypeError, ValueError) as e:
            raise SceneParseError(f"'{name}' must be a number, got: {data!r}") from e

    def _parse_int(self, data: Any, name: str) -> int:
        if isinstance(data, bool):
            raise SceneParseError(f"'{name}' must be an integer, got: {data!r}")
        try:
            return int(data)
        except (TypeError, ValueError) as e:
            raise SceneParseError(f"'{name}' must be an integer, got: {data!r}") from e

    def _parse_bool(self, data: Any, name: str) -> bool:
        if isinstance(data, bool):
            return data
        if isinstance(data, str) and data.lower() in ('true', 'yes', 'on'):
            return True
        if isinstance(data, str) and data.lower() in ('false', 'no', 'off'):
            return False
        raise SceneParseError(f"'{name}' must be true or false, got: {data!r}")

    def _parse_vec3(self, data: Any, name: str = 'vector') -> Vec3:
        """Parse a Vec3 from various formats."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"Vec3 must have 3 components, got {len(data)}")
            return Vec3(*(self._parse_float(c, name) for c in data))
        elif isinstance(data, dict):
            return Vec3(
                self._parse_float(data.get('x', 0), name),
                self._parse_float(data.get('y', 0), name),
                self._parse_float(data.get('z', 0), name)
            )
        else:
            raise SceneParseError(f"Cannot parse Vec3 from: {data}")

    def _parse_objects(self, objects_data: Any) -> None:
        """Parse objects section."""
        if not isinstance(objects_data, list):
            raise SceneParseError("'objects' must be a list")

        for obj_data in objects_data:
            if not isinstance(obj_data, dict):
                raise SceneParseError(f"Invalid object entry: {obj_data}")
            obj_type = str(obj_data.get('type', 'sphere')).lower()

            if obj_type == 'sphere':
                if 'center' not in obj_data or 'radius' not in obj_data:
                    raise SceneParseError("Sphere needs both 'center' and 'radius'")
                self.objects.add(Sphere(
                    self._parse_vec3(obj_data['center'], 'center'),
                    self._parse_float(obj_data['radius'], 'radius')
                ))
            else:
                raise SceneParseError(f"Unknown object type: {obj_type}")

    def _parse_camera(self, camera_data: Dict[str, Any]) -> None:
        """Parse camera section."""
        origin = Point3(0, 0, 0)
        if 'origin' in camera_data:
            origin = self._parse_vec3(camera_data['origin'], 'origin')

        self.camera = Camera(
            aspect_ratio=self._parse_float(camera_data.get('aspect_ratio', 16.0 / 9.0), 'aspect_ratio'),
            viewport_height=self._parse_float(camera_data.get('viewport_height', 2.0), 'viewport_height'),
            focal_length=self._parse_float(camera_data.get('focal_length', 1.0), 'focal_length'),
            origin=origin
        )

    def _parse_settings(self, settings_data: Dict[str, Any]) -> None:
        """Parse render settings section."""
        height = settings_data.get('height')
        seed = settings_data.get('seed')
        self.settings = RenderSettings(
            width=self._parse_int(settings_data.get('width', 400), 'width'),
            height=self._parse_int(height, 'height') if height is not None else None,
            aspect_ratio=self.camera.aspect_ratio,
            samples_per_pixel=self._parse_int(settings_data.get('samples', 100), 'samples'),
            max_depth=self._parse_int(settings_data.get('max_depth', 50), 'max_depth'),
            shading=str(settings_data.get('shading', 'diffuse')),
            jitter=self._parse_bool(settings_data.get('jitter', True), 'jitter'),
            seed=self._parse_int(seed, 'seed') if seed is not None else None
        )


def default_scene() -> HittableList:
    """A small sphere resting on a huge ground sphere."""
    world = HittableList()
    world.add(Sphere(Point3(0, 0, -1), 0.5))
    world.add(Sphere(Point3(0, -100.5, -1), 100))
    return world


def load_scene(filepath: Union[str, Path]) -> Tuple[HittableList, Camera, RenderSettings]:
    """Convenience function to load a scene file.

    Args:
        filepath: Path to the scene file

    Returns:
        Tuple of (scene, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_file(filepath)


def parse_scene(data: Dict[str, Any]) -> Tuple[HittableList, Camera, RenderSettings]:
    """Convenience function to parse a scene from a dictionary.

    Args:
        data: Scene description dictionary

    Returns:
        Tuple of (scene, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_dict(data)
