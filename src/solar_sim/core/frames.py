from __future__ import annotations

import math
from typing import Tuple

Vector3 = Tuple[float, float, float]

ORIGIN: Vector3 = (0.0, 0.0, 0.0)


def rot3(angle_rad: float, v: Vector3) -> Vector3:
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    x, y, z = v
    return (c * x - s * y, s * x + c * y, z)


def rot1(angle_rad: float, v: Vector3) -> Vector3:
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    x, y, z = v
    return (x, c * y - s * z, s * y + c * z)


def dot(a: Vector3, b: Vector3) -> float:
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]


def sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0]-b[0], a[1]-b[1], a[2]-b[2])


def norm(a: Vector3) -> float:
    return math.sqrt(dot(a, a))


def perifocal_to_ecliptic(r: float, nu_rad: float, raan_rad: float, inc_rad: float, argp_rad: float) -> Vector3:
    """
    Place a point of the orbit, given by radius and true anomaly in the
    orbital plane, into the ecliptic reference frame.

    Args:
        r: Distance from the central body (AU)
        nu_rad: True anomaly (radians)
        raan_rad: Longitude of the ascending node (radians)
        inc_rad: Inclination (radians)
        argp_rad: Argument of periapsis (radians)

    Returns:
        (x, y, z) in the ecliptic frame, same length unit as r
    """
    # Argument of latitude u = argp + nu, then R3(raan) * R1(inc) * (r cos u, r sin u, 0):
    #   x = r (cos raan cos u - sin raan sin u cos inc)
    #   y = r (sin raan cos u + cos raan sin u cos inc)
    #   z = r sin u sin inc
    u = argp_rad + nu_rad
    in_plane: Vector3 = (r * math.cos(u), r * math.sin(u), 0.0)
    return rot3(raan_rad, rot1(inc_rad, in_plane))
