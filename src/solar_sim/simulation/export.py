from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from solar_sim.simulation.snapshot import SystemSnapshot


def snapshot_to_dict(snapshot: SystemSnapshot) -> Dict[str, Any]:
    """
    JSON-ready form of a snapshot, as served by a query-by-time endpoint:
      {
        "epoch_name": "J2000",
        "t_days": 9000.5,
        "bodies": [
          {"id": "earth", "name": "Earth", "x_au": ..., "y_au": ..., "z_au": ...,
           "orbit_radius_au": 1.0, "is_central": false},
          ...
        ]
      }
    """
    return {
        "epoch_name": snapshot.epoch_name,
        "t_days": snapshot.t_days,
        "bodies": [
            {
                "id": s.body_id,
                "name": s.name,
                "x_au": s.x_au,
                "y_au": s.y_au,
                "z_au": s.z_au,
                "orbit_radius_au": s.orbit_radius_au,
                "is_central": s.is_central,
            }
            for s in snapshot.bodies
        ],
    }


def export_snapshot_to_json(snapshot: SystemSnapshot, out_path: str = "out/snapshot.json") -> str:
    data = snapshot_to_dict(snapshot)

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return out_path
