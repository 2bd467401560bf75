# Two-body Kepler equation solvers (elliptic and hyperbolic)

from __future__ import annotations

import logging
import math
from typing import Tuple

from solar_sim.core.constants import TWO_PI

log = logging.getLogger(__name__)


def wrap_to_2pi(angle_rad: float) -> float:
    """Wrap angle to [0, 2pi)."""
    wrapped = angle_rad % TWO_PI
    # -1e-18 % 2pi rounds up to exactly 2pi
    return 0.0 if wrapped == TWO_PI else wrapped


def solve_kepler_elliptic(M_rad: float, e: float, tol: float = 1e-9, max_iter: int = 8) -> float:
    """
    Solve Kepler's equation for elliptic orbits:
        M = E - e sin(E)
    using Newton-Raphson.

    The iteration budget is a hard cap: if it runs out before |dE| < tol the
    last iterate is returned as-is (good enough for display purposes).

    Args:
        M_rad: Mean anomaly (rad), normalized by the caller
        e: eccentricity (0 <= e < 1)
        tol: convergence tolerance on the Newton step
        max_iter: iteration cap

    Returns:
        E_rad: Eccentric anomaly (rad)
    """
    if not (0.0 <= e < 1.0):
        raise ValueError(f"Elliptic Kepler solver requires 0 <= e < 1. Got: {e}")

    # For higher e, start closer to pi to avoid slow convergence near M~0
    E = math.pi if e > 0.8 else M_rad

    for _ in range(max_iter):
        f = E - e * math.sin(E) - M_rad
        fp = 1.0 - e * math.cos(E)
        dE = -f / fp
        E += dE
        if abs(dE) < tol:
            return E

    log.debug("Elliptic Kepler solver hit max_iter=%d (M=%.6g, e=%.6g)", max_iter, M_rad, e)
    return E


def solve_kepler_hyperbolic(M_rad: float, e: float, tol: float = 1e-10, max_iter: int = 20) -> float:
    """
    Solve the hyperbolic Kepler equation:
        M = e sinh(H) - H
    using Newton-Raphson.

    Args:
        M_rad: Mean anomaly (rad), signed and unbounded
        e: eccentricity (e > 1)
        tol: convergence tolerance on the Newton step
        max_iter: iteration cap

    Returns:
        H: Hyperbolic anomaly
    """
    if not e > 1.0:
        raise ValueError(f"Hyperbolic Kepler solver requires e > 1. Got: {e}")

    H = math.log(2.0 * abs(M_rad) / e + 1.0)
    if not math.isfinite(H):
        raise ValueError(f"Hyperbolic Kepler solver got a non-finite initial guess for M={M_rad}")
    if M_rad < 0.0:
        H = -H

    for _ in range(max_iter):
        f = e * math.sinh(H) - H - M_rad
        fp = e * math.cosh(H) - 1.0
        dH = -f / fp
        H += dH
        if abs(dH) < tol:
            return H

    log.debug("Hyperbolic Kepler solver hit max_iter=%d (M=%.6g, e=%.6g)", max_iter, M_rad, e)
    return H


def elliptic_radius_true_anomaly(M_rad: float, e: float, a: float) -> Tuple[float, float]:
    """
    Radius and true anomaly on an ellipse for a given mean anomaly.

    Returns:
        (r, nu_rad) with r in the unit of a
    """
    E = solve_kepler_elliptic(M_rad, e)
    cos_E = math.cos(E)
    sin_E = math.sin(E)

    nu = math.atan2(math.sqrt(1.0 - e * e) * sin_E, cos_E - e)
    r = abs(a) * (1.0 - e * cos_E)
    return r, nu


def hyperbolic_radius_true_anomaly(M_rad: float, e: float, a: float) -> Tuple[float, float]:
    """
    Radius and true anomaly on a hyperbola. The sign of a is ignored.

    Returns:
        (r, nu_rad) with r in the unit of a
    """
    H = solve_kepler_hyperbolic(M_rad, e)

    r = abs(a) * (e * math.cosh(H) - 1.0)
    nu = 2.0 * math.atan(math.sqrt((e + 1.0) / (e - 1.0)) * math.tanh(H / 2.0))
    return r, nu
