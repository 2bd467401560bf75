"""
Tests for vector helpers and the perifocal-to-ecliptic rotation.
"""
import math
import pytest

from solar_sim.core.frames import rot1, rot3, dot, sub, norm, perifocal_to_ecliptic


class TestVectorOperations:
    def test_dot_product(self):
        a = (1.0, 2.0, 3.0)
        b = (4.0, 5.0, 6.0)
        assert dot(a, b) == 32.0

    def test_subtraction(self):
        assert sub((5.0, 7.0, 9.0), (2.0, 3.0, 4.0)) == (3.0, 4.0, 5.0)

    def test_norm(self):
        assert norm((3.0, 4.0, 0.0)) == 5.0
        assert norm((1.0, 0.0, 0.0)) == 1.0


class TestRotations:
    def test_rot3_90_degrees(self):
        result = rot3(math.pi / 2, (1.0, 0.0, 0.0))
        assert result == pytest.approx((0.0, 1.0, 0.0), abs=1e-10)

    def test_rot3_identity(self):
        v = (1.0, 2.0, 3.0)
        assert rot3(0.0, v) == v

    def test_rot1_90_degrees(self):
        result = rot1(math.pi / 2, (0.0, 1.0, 0.0))
        assert result == pytest.approx((0.0, 0.0, 1.0), abs=1e-10)

    def test_rot1_identity(self):
        v = (1.0, 2.0, 3.0)
        assert rot1(0.0, v) == v


class TestPerifocalToEcliptic:
    def test_no_orientation_keeps_in_plane_point(self):
        r = perifocal_to_ecliptic(2.0, math.pi / 3, 0.0, 0.0, 0.0)
        assert r == pytest.approx((2.0 * math.cos(math.pi / 3), 2.0 * math.sin(math.pi / 3), 0.0), abs=1e-12)

    def test_matches_closed_form(self):
        r_mag, nu = 1.7, 0.4
        raan, inc, argp = math.radians(120.0), math.radians(35.0), math.radians(250.0)
        u = argp + nu
        expected = (
            r_mag * (math.cos(raan) * math.cos(u) - math.sin(raan) * math.sin(u) * math.cos(inc)),
            r_mag * (math.sin(raan) * math.cos(u) + math.cos(raan) * math.sin(u) * math.cos(inc)),
            r_mag * (math.sin(u) * math.sin(inc)),
        )
        assert perifocal_to_ecliptic(r_mag, nu, raan, inc, argp) == pytest.approx(expected, abs=1e-12)

    def test_polar_orbit_at_ascending_node_plus_90(self):
        # i = 90 deg, u = 90 deg -> straight up out of the ecliptic
        r = perifocal_to_ecliptic(1.0, math.pi / 2, 0.0, math.pi / 2, 0.0)
        assert r == pytest.approx((0.0, 0.0, 1.0), abs=1e-12)

    def test_rotation_preserves_length(self):
        r = perifocal_to_ecliptic(5.0, 2.2, 0.3, 1.1, 4.0)
        assert norm(r) == pytest.approx(5.0, abs=1e-12)
