import logging
from datetime import datetime, timezone

from solar_sim.core.epoch import days_since_epoch
from solar_sim.simulation.export import export_snapshot_to_json
from solar_sim.simulation.snapshot import snapshot_at_days
from solar_sim.simulation.solar_system import load_body_table

logging.basicConfig(level=logging.INFO)

system = load_body_table()

when = datetime(2025, 10, 3, 12, 0, 0, tzinfo=timezone.utc)
t_days = days_since_epoch(when)

snap = snapshot_at_days(system.body_list(), t_days, epoch_name=system.epoch_name, max_workers=4)

print(f"{when.isoformat()}  (t = {t_days:.3f} days since {snap.epoch_name})")
for s in snap.bodies:
    print(f"  {s.name:<8} x={s.x_au:+9.4f}  y={s.y_au:+9.4f}  z={s.z_au:+8.4f}  r={s.distance_au:8.4f} AU")

path = export_snapshot_to_json(snap, out_path="out/snapshot.json")
print("Exported:", path)
