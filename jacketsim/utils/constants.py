# jacketsim/utils/constants.py
from __future__ import annotations

__all__ = [
    "EPS", "R_TH_MIN", "T_S", "T_EXT", "DELTA_T", "Q_MAX", "Q_MID_TOL",
    "MOISTURE_RATE", "N_LAYERS", "FOAM_INDEX", "OUTER_INDEX",
    "FLUX_SENTINEL", "D0_UPPER", "D0_INFEASIBLE", "PROBE_D0_LO", "PROBE_D0_HI",
]

# Tolerances
EPS      = 1e-9       # thickness / flux comparison tolerance
R_TH_MIN = 1e-12      # total resistance below this is treated as zero [m^2·K/W]
Q_MID_TOL = 1e-10     # acceptance slack for bisection midpoints [W/m^2]

# Environment (fixed)
T_S   = 37.0          # skin temperature [°C]
T_EXT = -13.0         # ambient temperature [°C]
DELTA_T = T_S - T_EXT # 50 K
Q_MAX = 20.0          # maximum allowed heat flux [W/m^2]
MOISTURE_RATE = 0.01  # moisture per hour of exposure

# Stack layout (conceptual indices)
N_LAYERS    = 7
FOAM_INDEX  = -1      # innermost, adjustable thickness
OUTER_INDEX = 5       # outermost, exposed to environment

# Sentinels kept for output compatibility
FLUX_SENTINEL = 1e18  # heat flux when R_th ~ 0
D0_UPPER      = 1e9   # "effectively unbounded" foam thickness [m]
D0_INFEASIBLE = 1e18  # reported thickness when no finite d0 works [m]
PROBE_D0_LO   = 1e6   # trend probes for the feasibility check [m]
PROBE_D0_HI   = 1e7
