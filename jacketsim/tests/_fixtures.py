# jacketsim/tests/_fixtures.py
from __future__ import annotations

# conceptual order -1..5
SAMPLE_LAYERS = [
    (0.02, 0.04, 0.1, 0.2),
    (0.05, 0.03, 0.15, 0.25),
    (0.0, 0.035, 0.12, 0.22),
    (0.0, 0.038, 0.11, 0.21),
    (0.015, 0.045, 0.13, 0.23),
    (0.018, 0.042, 0.14, 0.24),
    (0.001, 0.25, 0.05, 0.1),
]
SAMPLE_BETA = 0.5

SAMPLE_STREAM = """\
0.02 0.04 0.1 0.2
0.05 0.03 0.15 0.25
0.0 0.035 0.12 0.22
0.0 0.038 0.11 0.21
0.015 0.045 0.13 0.23
0.018 0.042 0.14 0.24
0.001 0.25 0.05 0.1
0.5
5
4
1 10
4
2 3 5.0
4
"""

# R_th of layers 0..5 with W = C = 0
R_REST_FRESH = 0.05 / 0.03 + 0.015 / 0.045 + 0.018 / 0.042 + 0.001 / 0.25
# d0 with 50 / (R_rest + d0 / 0.04) == 20
D0_FRESH = 0.04 * (50.0 / 20.0 - R_REST_FRESH)
