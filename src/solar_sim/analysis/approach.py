"""
Close approach analysis between two bodies.

Brute-force scan over a time window: evaluate both bodies at each step and
keep the smallest separation. Resolution is the step size, which is plenty
for planning when to look, not for ephemeris work.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from solar_sim.core.constants import KM_PER_AU
from solar_sim.core.frames import norm, sub
from solar_sim.objects.body import Body


@dataclass(frozen=True)
class Approach:
    """Closest sampled approach between two bodies."""
    t_days: float  # days since J2000
    distance_au: float

    @property
    def distance_km(self) -> float:
        return self.distance_au * KM_PER_AU


def separation_au(body_a: Body, body_b: Body, t_days: float) -> float:
    """Distance between two bodies at t_days (AU)."""
    r_a = body_a.state_at(t_days).position_au
    r_b = body_b.state_at(t_days).position_au
    return norm(sub(r_a, r_b))


def closest_approach(
    body_a: Body,
    body_b: Body,
    center_days: float,
    window_days: float = 30.0,
    step_days: float = 1.0,
) -> Approach:
    """
    Scan [center - window, center + window] in steps of step_days.

    Args:
        body_a, body_b: Bodies to compare
        center_days: Middle of the scan (days since J2000)
        window_days: Half-width of the scan (days)
        step_days: Sampling step (days)

    Returns:
        Approach at the sampled minimum (earliest sample wins ties)
    """
    if step_days <= 0:
        raise ValueError("step_days must be positive.")
    if window_days < 0:
        raise ValueError("window_days must be non-negative.")

    n_steps = int(math.floor(2.0 * window_days / step_days + 1e-9))
    start = center_days - window_days

    best = Approach(t_days=start, distance_au=math.inf)
    for k in range(n_steps + 1):
        t = start + k * step_days
        d = separation_au(body_a, body_b, t)
        if d < best.distance_au:
            best = Approach(t_days=t, distance_au=d)

    return best
