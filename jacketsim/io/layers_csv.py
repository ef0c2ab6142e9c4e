# -*- coding: utf-8 -*-
"""
Layer table CSV ingest → LayerParams list for JacketStack.

CSV columns (header, case-sensitive):
  d, k, mu, c        (one row per layer, conceptual order -1..5)

Example:
  d,k,mu,c
  0.02,0.04,0.1,0.2
  0.05,0.03,0.15,0.25
  ...

Units:
  d [m], k [W/m·K], mu and c dimensionless
"""
from __future__ import annotations
from pathlib import Path
from typing import List

import pandas as pd

from jacketsim.models.layer import LayerParams
from jacketsim.utils.constants import N_LAYERS

def load_layers_csv(csv_path: Path) -> List[LayerParams]:
    df = pd.read_csv(csv_path)
    assert set(LayerParams._fields).issubset(df.columns), "Layer CSV must have d,k,mu,c columns"
    if len(df) != N_LAYERS:
        raise ValueError(f"Layer CSV must contain {N_LAYERS} rows, got {len(df)}")
    return [
        LayerParams(float(r.d), float(r.k), float(r.mu), float(r.c))
        for r in df.itertuples(index=False)
    ]
