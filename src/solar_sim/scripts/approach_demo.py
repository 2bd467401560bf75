import logging
from datetime import datetime, timezone

from solar_sim.analysis.approach import closest_approach, separation_au
from solar_sim.core.epoch import days_since_epoch, instant_from_days
from solar_sim.objects.body import Body
from solar_sim.physics.orbit import OrbitalElementSet
from solar_sim.simulation.solar_system import load_body_table

logging.basicConfig(level=logging.INFO)

system = load_body_table()
mars = system.get("mars")

# Approximate heliocentric elements for 3I/ATLAS (interstellar, hyperbolic)
visitor = Body(
    body_id="3I",
    name="3I/ATLAS",
    elements=OrbitalElementSet(
        semi_major_axis_au=-0.2639,
        eccentricity=6.139,
        inclination_deg=175.11,
        ascending_node_deg=322.16,
        arg_periapsis_deg=128.01,
        time_of_periapsis_passage_jd=2460977.98,
    ),
)

center = days_since_epoch(datetime(2025, 10, 3, 12, 0, 0, tzinfo=timezone.utc))

for dt in (-10, -5, 0, 5, 10):
    t = center + dt
    d = separation_au(mars, visitor, t)
    print(f"{instant_from_days(t).isoformat()} => {d:.6f} AU")

best = closest_approach(mars, visitor, center, window_days=30.0, step_days=0.25)
print(f"Closest in +/-30d window: {instant_from_days(best.t_days).isoformat()}  "
      f"{best.distance_au:.6f} AU ({best.distance_km / 1e6:.2f} Mkm)")
