from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional, Tuple

from solar_sim.core.epoch import days_since_epoch
from solar_sim.objects.body import Body, BodyState


@dataclass(frozen=True)
class SystemSnapshot:
    """
    Every tracked body evaluated at one instant.
    """
    epoch_name: str
    t_days: float  # days since epoch
    bodies: Tuple[BodyState, ...]

    def by_id(self, body_id: str) -> BodyState:
        for state in self.bodies:
            if state.body_id == body_id:
                return state
        raise KeyError(f"Unknown body ID: {body_id}")


def snapshot_at_days(
    bodies: Iterable[Body],
    t_days: float,
    epoch_name: str = "J2000",
    max_workers: Optional[int] = None,
) -> SystemSnapshot:
    """
    Evaluate each body independently at t_days. Input order is preserved.

    Bodies share nothing, so with max_workers > 1 the work is spread over a
    thread pool; results are the same as the serial run.
    """
    body_list = list(bodies)

    if max_workers is not None and max_workers > 1 and len(body_list) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            states = tuple(pool.map(lambda b: b.state_at(t_days), body_list))
    else:
        states = tuple(b.state_at(t_days) for b in body_list)

    return SystemSnapshot(epoch_name=epoch_name, t_days=t_days, bodies=states)


def snapshot_at(
    bodies: Iterable[Body],
    instant: datetime,
    epoch_name: str = "J2000",
    max_workers: Optional[int] = None,
) -> SystemSnapshot:
    """Wall-clock convenience wrapper around snapshot_at_days."""
    return snapshot_at_days(bodies, days_since_epoch(instant), epoch_name, max_workers)
