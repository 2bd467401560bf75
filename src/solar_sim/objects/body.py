from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from solar_sim.core.frames import ORIGIN, Vector3, norm
from solar_sim.physics.orbit import OrbitalElementSet, position_au


@dataclass(frozen=True)
class BodyState:
    """
    Where one body is at one instant. Built fresh on every query and
    never updated in place.
    """
    body_id: str
    name: str
    position_au: Vector3
    orbit_radius_au: float = 0.0  # informational (|a|)
    is_central: bool = False

    @property
    def x_au(self) -> float:
        return self.position_au[0]

    @property
    def y_au(self) -> float:
        return self.position_au[1]

    @property
    def z_au(self) -> float:
        return self.position_au[2]

    @property
    def distance_au(self) -> float:
        """Distance from the central body."""
        return norm(self.position_au)


@dataclass(frozen=True)
class Body:
    """
    A tracked body. The central mass (e.g. the Sun) has no elements and
    always sits at the origin.
    """
    body_id: str
    name: str
    elements: Optional[OrbitalElementSet] = None
    radius_km: Optional[float] = None
    is_central: bool = False

    def __post_init__(self):
        if not self.body_id.strip():
            raise ValueError("Body ID cannot be empty or whitespace.")
        if not self.name.strip():
            raise ValueError("Body name cannot be empty or whitespace.")
        if self.elements is None and not self.is_central:
            raise ValueError(f"Body '{self.body_id}' needs orbital elements unless it is the central body.")

    @classmethod
    def central(cls, body_id: str, name: str, radius_km: Optional[float] = None) -> "Body":
        return cls(body_id=body_id, name=name, elements=None, radius_km=radius_km, is_central=True)

    @property
    def orbit_radius_au(self) -> float:
        return self.elements.a_abs_au if self.elements is not None else 0.0

    def state_at(self, t_days: float) -> BodyState:
        """
        Returns the body's heliocentric state at t_days (days since J2000).
        """
        if self.is_central:
            r = ORIGIN
        else:
            r = position_au(self.elements, t_days)
        return BodyState(
            body_id=self.body_id,
            name=self.name,
            position_au=r,
            orbit_radius_au=self.orbit_radius_au,
            is_central=self.is_central,
        )


def state_for_body(body: Body, t_days: float) -> BodyState:
    return body.state_at(t_days)
