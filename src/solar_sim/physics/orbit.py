# src/solar_sim/physics/orbit.py

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Optional, Tuple

from solar_sim.core.constants import GAUSS_K_RAD_PER_DAY, TWO_PI
from solar_sim.core.epoch import days_from_julian_date
from solar_sim.core.frames import ORIGIN, Vector3, perifocal_to_ecliptic
from solar_sim.physics.kepler import (
    elliptic_radius_true_anomaly,
    hyperbolic_radius_true_anomaly,
    wrap_to_2pi,
)

log = logging.getLogger(__name__)

_OPTIONAL_NUMERIC_FIELDS = (
    "mean_motion_deg_per_day",
    "period_days",
    "mean_anomaly_at_epoch_deg",
    "mean_longitude_deg",
    "longitude_of_periapsis_deg",
    "time_of_periapsis_passage_jd",
)


@dataclass(frozen=True)
class OrbitalElementSet:
    """
    Heliocentric orbital elements of one body, as handed over by static
    configuration or by a catalog normalizer. Everything except the
    semi-major axis may be missing; see position_au for how gaps are filled.

    Units:
        semi_major_axis_au: AU, sign ignored (hyperbolic catalogs report a < 0)
        eccentricity: 0 circle, <1 ellipse, >1 hyperbola (exactly 1 unsupported)
        inclination_deg, ascending_node_deg, arg_periapsis_deg: degrees
        mean_motion_deg_per_day: deg/day
        period_days: days
        mean_anomaly_at_epoch_deg: degrees at J2000
        mean_longitude_deg, longitude_of_periapsis_deg: degrees at J2000
        time_of_periapsis_passage_jd: Julian Date
        fallback_phase_rad: radians, only used by the circular fallback
    """
    semi_major_axis_au: float
    eccentricity: float = 0.0
    inclination_deg: float = 0.0
    ascending_node_deg: float = 0.0
    arg_periapsis_deg: float = 0.0
    mean_motion_deg_per_day: Optional[float] = None
    period_days: Optional[float] = None
    mean_anomaly_at_epoch_deg: Optional[float] = None
    mean_longitude_deg: Optional[float] = None
    longitude_of_periapsis_deg: Optional[float] = None
    time_of_periapsis_passage_jd: Optional[float] = None
    fallback_phase_rad: float = 0.0

    def __post_init__(self):
        if not math.isfinite(self.semi_major_axis_au) or self.semi_major_axis_au == 0.0:
            raise ValueError(f"Semi-major axis must be finite and non-zero. Got: {self.semi_major_axis_au}")
        if not math.isfinite(self.eccentricity) or self.eccentricity < 0.0:
            raise ValueError(f"Eccentricity must be finite and non-negative. Got: {self.eccentricity}")
        if self.eccentricity == 1.0:
            raise ValueError("Parabolic orbits (e = 1) are not supported.")
        for name in ("inclination_deg", "ascending_node_deg", "arg_periapsis_deg", "fallback_phase_rad"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite. Got: {getattr(self, name)}")
        for name in _OPTIONAL_NUMERIC_FIELDS:
            value = getattr(self, name)
            if value is not None and not math.isfinite(value):
                raise ValueError(f"{name} must be finite when given. Got: {value}")
        if self.period_days is not None and self.period_days <= 0.0:
            raise ValueError(f"Period must be positive. Got: {self.period_days}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OrbitalElementSet":
        """Build from a mapping with the field names as keys; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        kwargs = {k: float(v) for k, v in data.items() if k in known and v is not None}
        if "semi_major_axis_au" not in kwargs:
            raise ValueError("semi_major_axis_au is required.")
        return cls(**kwargs)

    @property
    def is_hyperbolic(self) -> bool:
        return self.eccentricity > 1.0

    @property
    def a_abs_au(self) -> float:
        return abs(self.semi_major_axis_au)

    def hyperbolic_mean_motion_rad_per_day(self) -> float:
        """n = k / |a|^1.5 (Gaussian gravitational constant, heliocentric)."""
        return GAUSS_K_RAD_PER_DAY / self.a_abs_au ** 1.5

    def base_mean_motion_rad_per_day(self) -> float:
        if self.mean_motion_deg_per_day is not None:
            return math.radians(self.mean_motion_deg_per_day)
        if self.period_days is not None:
            return TWO_PI / self.period_days
        return self.hyperbolic_mean_motion_rad_per_day()

    def mean_anomaly_at_epoch_rad(self) -> Optional[float]:
        if self.mean_anomaly_at_epoch_deg is not None:
            return math.radians(self.mean_anomaly_at_epoch_deg)
        if self.mean_longitude_deg is not None and self.longitude_of_periapsis_deg is not None:
            return math.radians(self.mean_longitude_deg - self.longitude_of_periapsis_deg)
        return None

    def perihelion_days(self) -> Optional[float]:
        """Perihelion passage time on the days-since-J2000 axis, if known."""
        if self.time_of_periapsis_passage_jd is None:
            return None
        return days_from_julian_date(self.time_of_periapsis_passage_jd)


def mean_anomaly_rad(elements: OrbitalElementSet, t_days: float) -> Optional[float]:
    """
    Mean anomaly at t_days, or None when the element set carries no
    mean-anomaly information at all.

    Hyperbolic values are never wrapped.
    """
    t_peri = elements.perihelion_days()

    if elements.is_hyperbolic and t_peri is not None:
        # Anchored to the physical perihelion passage, whatever n was supplied
        return elements.hyperbolic_mean_motion_rad_per_day() * (t_days - t_peri)

    n = elements.base_mean_motion_rad_per_day()
    M0 = elements.mean_anomaly_at_epoch_rad()

    if M0 is not None:
        M = M0 + n * t_days
        return M if elements.is_hyperbolic else wrap_to_2pi(M)

    if t_peri is not None:
        return wrap_to_2pi(n * (t_days - t_peri))

    return None


def position_au(elements: Optional[OrbitalElementSet], t_days: float) -> Vector3:
    """
    Heliocentric ecliptic position (AU) at t_days since J2000.
    Two-body Keplerian propagation; no element set means the central body.
    """
    if elements is None:
        return ORIGIN

    a = elements.a_abs_au
    e = elements.eccentricity
    M = mean_anomaly_rad(elements, t_days)

    if M is None:
        # Uniform circular motion in the reference plane, orientation ignored
        log.debug("No mean-anomaly source, using circular fallback (a=%g AU)", a)
        theta = wrap_to_2pi(t_days * elements.base_mean_motion_rad_per_day() + elements.fallback_phase_rad)
        return (a * math.cos(theta), a * math.sin(theta), 0.0)

    if elements.is_hyperbolic:
        r, nu = hyperbolic_radius_true_anomaly(M, e, a)
    else:
        r, nu = elliptic_radius_true_anomaly(M, e, a)

    return perifocal_to_ecliptic(
        r,
        nu,
        math.radians(elements.ascending_node_deg),
        math.radians(elements.inclination_deg),
        math.radians(elements.arg_periapsis_deg),
    )


def propagate(elements: Optional[OrbitalElementSet], times_days: List[float]) -> List[Tuple[float, Vector3]]:
    """
    Evaluate position_au across a list of time stamps (days since J2000).
    Returns list of (t, r).
    """
    return [(t, position_au(elements, t)) for t in times_days]
