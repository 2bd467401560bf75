from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from solar_sim.objects.body import Body
from solar_sim.physics.orbit import OrbitalElementSet

log = logging.getLogger(__name__)

DEFAULT_BODY_TABLE = Path(__file__).resolve().parent.parent / "data" / "bodies.json"


@dataclass
class SolarSystem:
    """
    Table of tracked bodies, in display order.
    Keep this pure: just data + lookup, no propagation logic.
    Loaded once and then only read; use with_overlays to derive a new table.
    """
    name: str = "Solar System"
    epoch_name: str = "J2000"
    bodies: Dict[str, Body] = field(default_factory=dict)

    def add_body(self, body: Body) -> None:
        if body.body_id in self.bodies:
            raise ValueError(f"Duplicate body ID: {body.body_id}")
        self.bodies[body.body_id] = body

    def get(self, body_id: str) -> Body:
        if body_id not in self.bodies:
            raise KeyError(f"Unknown body ID: {body_id}")
        return self.bodies[body_id]

    def body_list(self) -> List[Body]:
        return list(self.bodies.values())

    def max_orbit_au(self) -> float:
        """Largest |a| among bodies with elements (0 if none)."""
        return max((b.orbit_radius_au for b in self.bodies.values()), default=0.0)

    def with_overlays(self, overlays: Iterable[Body]) -> "SolarSystem":
        """
        New table with extra bodies (e.g. objects fetched from a catalog).
        An overlay whose ID already exists replaces that body in place.
        """
        merged = dict(self.bodies)
        for body in overlays:
            merged[body.body_id] = body
        return SolarSystem(name=self.name, epoch_name=self.epoch_name, bodies=merged)


def body_from_dict(entry: Mapping[str, Any]) -> Body:
    """
    One table row:
      {"id": "...", "name": "...", "radius_km": ..., "central": true}
      {"id": "...", "name": "...", "elements": {"semi_major_axis_au": ..., ...}}
    """
    radius = entry.get("radius_km")
    radius_km = float(radius) if radius is not None else None
    if entry.get("central", False):
        return Body.central(str(entry["id"]), str(entry["name"]), radius_km=radius_km)

    if "elements" not in entry:
        raise ValueError(f"Body '{entry.get('id')}' has no 'elements' block.")
    return Body(
        body_id=str(entry["id"]),
        name=str(entry["name"]),
        elements=OrbitalElementSet.from_dict(entry["elements"]),
        radius_km=radius_km,
    )


def load_body_table(path: Optional[Union[str, Path]] = None) -> SolarSystem:
    """
    Load a body table from JSON. Defaults to the planetary table shipped
    with the package.

    JSON shape:
    {
      "epoch_name": "J2000",
      "bodies": [ {...}, {...} ]
    }
    """
    table_path = Path(path) if path is not None else DEFAULT_BODY_TABLE
    with open(table_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    system = SolarSystem(name=data.get("name", "Solar System"), epoch_name=data.get("epoch_name", "J2000"))
    for entry in data.get("bodies", []):
        system.add_body(body_from_dict(entry))

    log.info("Loaded %d bodies from %s", len(system.bodies), table_path)
    return system
