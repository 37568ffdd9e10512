"""Tests for Vec3 class."""

import pytest
import math
import numpy as np

from skytracer.vec3 import Vec3, Point3, Color, SamplingError


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


class TestVec3Creation:
    """Test Vec3 construction."""

    def test_default_constructor(self):
        v = Vec3()
        assert v.x == 0.0
        assert v.y == 0.0
        assert v.z == 0.0

    def test_value_constructor(self):
        v = Vec3(1.0, 2.0, 3.0)
        assert v.x == 1.0
        assert v.y == 2.0
        assert v.z == 3.0

    def test_from_array(self):
        v = Vec3.from_array(np.array([1.0, 2.0, 3.0]))
        assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)

    def test_color_aliases(self):
        c = Color(0.5, 0.6, 0.7)
        assert c.r == 0.5
        assert c.g == 0.6
        assert c.b == 0.7

    def test_aliases_are_same_type(self):
        assert Point3 is Vec3
        assert Color is Vec3


class TestVec3Arithmetic:
    """Test Vec3 arithmetic operations."""

    def test_negation(self):
        neg = -Vec3(1, 2, 3)
        assert (neg.x, neg.y, neg.z) == (-1, -2, -3)

    def test_addition(self):
        result = Vec3(1, 2, 3) + Vec3(4, 5, 6)
        assert (result.x, result.y, result.z) == (5, 7, 9)

    def test_subtraction(self):
        result = Vec3(4, 5, 6) - Vec3(1, 2, 3)
        assert (result.x, result.y, result.z) == (3, 3, 3)

    def test_multiplication(self):
        result = Vec3(1, 2, 3) * 2
        assert (result.x, result.y, result.z) == (2, 4, 6)

    def test_left_multiplication(self):
        result = 2 * Vec3(1, 2, 3)
        assert (result.x, result.y, result.z) == (2, 4, 6)

    def test_multiplication_vector(self):
        result = Vec3(1, 2, 3) * Vec3(2, 3, 4)
        assert (result.x, result.y, result.z) == (2, 6, 12)

    def test_division(self):
        result = Vec3(2, 4, 6) / 2
        assert (result.x, result.y, result.z) == (1, 2, 3)

    def test_operators_do_not_mutate(self):
        v = Vec3(1, 2, 3)
        _ = v + Vec3(1, 1, 1)
        _ = v * 3
        assert v == Vec3(1, 2, 3)

    def test_in_place_accumulation(self):
        total = Vec3(0, 0, 0)
        same = total
        total += Vec3(1, 2, 3)
        total += Vec3(1, 2, 3)
        assert total is same
        assert total == Vec3(2, 4, 6)

    def test_divide_multiply_round_trip(self, rng):
        for _ in range(50):
            v = Vec3.random(rng, -10, 10)
            s = rng.uniform(0.1, 10) * rng.choice([-1, 1])
            assert (v / s) * s == v


class TestVec3VectorOps:
    """Test Vec3 vector operations."""

    def test_length(self):
        assert Vec3(3, 4, 0).length() == 5.0

    def test_length_squared(self):
        assert Vec3(3, 4, 0).length_squared() == 25.0

    def test_unit(self):
        n = Vec3(3, 4, 0).unit()
        assert abs(n.length() - 1.0) < 1e-9
        assert abs(n.x - 0.6) < 1e-12

    def test_unit_vectors_have_length_one(self, rng):
        for _ in range(100):
            v = Vec3.random(rng, -100, 100)
            assert abs(v.unit().length() - 1.0) < 1e-9

    def test_unit_zero_vector_is_nan(self):
        n = Vec3(0, 0, 0).unit()
        assert all(math.isnan(c) for c in n)

    def test_dot_product(self):
        assert Vec3(1, 0, 0).dot(Vec3(0, 1, 0)) == 0.0
        assert Vec3(1, 2, 3).dot(Vec3(4, 5, 6)) == 32.0  # 1*4 + 2*5 + 3*6

    def test_dot_commutative(self, rng):
        for _ in range(50):
            a = Vec3.random(rng, -5, 5)
            b = Vec3.random(rng, -5, 5)
            assert a.dot(b) == b.dot(a)

    def test_cross_product(self):
        cross = Vec3(1, 0, 0).cross(Vec3(0, 1, 0))
        assert (cross.x, cross.y, cross.z) == (0, 0, 1)


class TestVec3Utility:
    """Test Vec3 utility methods."""

    def test_clamp(self):
        clamped = Vec3(-0.5, 0.5, 1.5).clamp(0, 1)
        assert (clamped.x, clamped.y, clamped.z) == (0, 0.5, 1)

    def test_to_array_is_copy(self):
        v = Vec3(1, 2, 3)
        arr = v.to_array()
        arr[0] = 99
        assert v.x == 1

    def test_iteration(self):
        assert tuple(Vec3(1, 2, 3)) == (1.0, 2.0, 3.0)

    def test_getitem(self):
        v = Vec3(1, 2, 3)
        assert (v[0], v[1], v[2]) == (1, 2, 3)


class TestVec3Random:
    """Test Vec3 random generation."""

    def test_random_range(self, rng):
        for _ in range(100):
            v = Vec3.random(rng, 2, 3)
            for c in v:
                assert 2 <= c < 3

    def test_random_is_seeded(self):
        a = Vec3.random(np.random.default_rng(7), -1, 1)
        b = Vec3.random(np.random.default_rng(7), -1, 1)
        assert a == b

    def test_random_in_unit_sphere(self, rng):
        samples = [Vec3.random_in_unit_sphere(rng) for _ in range(10000)]
        assert all(s.length_squared() < 1 for s in samples)

        # Uniform in a ball: E[|p|] = 3/4
        mean_length = sum(s.length() for s in samples) / len(samples)
        assert 0.72 < mean_length < 0.78

    def test_random_in_unit_sphere_gives_up(self):
        class CornerRng:
            def uniform(self, low, high, size):
                return np.full(size, 0.9)

        with pytest.raises(SamplingError):
            Vec3.random_in_unit_sphere(CornerRng(), max_attempts=5)

    def test_random_in_hemisphere(self, rng):
        normal = Vec3(0, 1, 0)
        for _ in range(500):
            v = Vec3.random_in_hemisphere(normal, rng)
            assert v.dot(normal) >= 0
            assert v.length_squared() < 1

    def test_random_in_hemisphere_flips(self):
        class FixedRng:
            def uniform(self, low, high, size):
                return np.array([0.0, -0.5, 0.0])

        v = Vec3.random_in_hemisphere(Vec3(0, 1, 0), FixedRng())
        assert v == Vec3(0, 0.5, 0)


class TestVec3Comparison:
    """Test Vec3 comparison operations."""

    def test_equality(self):
        assert Vec3(1, 2, 3) == Vec3(1, 2, 3)

    def test_inequality(self):
        assert Vec3(1, 2, 3) != Vec3(1, 2, 4)

    def test_approximate_equality(self):
        assert Vec3(1, 2, 3) == Vec3(1 + 1e-12, 2, 3)
