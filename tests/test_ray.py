"""Tests for Ray class."""

import pytest
from skytracer.vec3 import Vec3, Point3
from skytracer.ray import Ray


class TestRayCreation:
    """Test Ray construction."""

    def test_stores_origin(self):
        origin = Point3(1, 2, 3)
        ray = Ray(origin, Vec3(1, 0, 0))
        assert ray.origin == origin

    def test_stores_direction(self):
        direction = Vec3(1, 2, 3)
        ray = Ray(Point3(0, 0, 0), direction)
        assert ray.direction == direction

    def test_direction_not_normalized(self):
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, -3))
        assert ray.direction.length() == 3.0


class TestRayAt:
    """Test Ray.at() method."""

    def test_at_zero(self):
        origin = Point3(1, 2, 3)
        ray = Ray(origin, Vec3(1, 0, 0))
        assert ray.at(0) == origin

    def test_at_positive(self):
        ray = Ray(Point3(0, 0, 0), Vec3(1, 0, 0))
        assert ray.at(5) == Point3(5, 0, 0)

    def test_at_negative(self):
        ray = Ray(Point3(0, 0, 0), Vec3(1, 0, 0))
        assert ray.at(-5).x == -5

    def test_at_with_diagonal(self):
        ray = Ray(Point3(1, 1, 1), Vec3(1, 2, 3))
        assert ray.at(2) == Point3(3, 5, 7)

    def test_at_does_not_change_ray(self):
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, -1))
        ray.at(10)
        assert ray.origin == Point3(0, 0, 0)
        assert ray.direction == Vec3(0, 0, -1)


class TestRayRepr:
    """Test Ray string representation."""

    def test_repr(self):
        s = repr(Ray(Point3(1, 2, 3), Vec3(0, 1, 0)))
        assert "Ray" in s
        assert "origin" in s
        assert "direction" in s
