from __future__ import annotations

import math
from datetime import datetime, timezone

# Reference epoch J2000.0 (2000-01-01 12:00:00 UTC)
J2000_EPOCH: datetime = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

# Julian Date of the reference epoch
JD_J2000: float = 2451545.0

MS_PER_DAY: int = 86_400_000

# Gaussian gravitational constant in rad/day (heliocentric, AU units)
GAUSS_K_RAD_PER_DAY: float = 0.01720209895

KM_PER_AU: float = 149_597_870.7

TWO_PI: float = 2.0 * math.pi
