# -*- coding: utf-8 -*-
"""
JacketStack: index mapping, resistance sums and the heat-flux function.
"""
import math

import numpy as np
import pytest

from jacketsim.models.stack import JacketStack, to_storage_index
from jacketsim.utils.constants import FLUX_SENTINEL
from jacketsim.tests._fixtures import SAMPLE_LAYERS, SAMPLE_BETA, R_REST_FRESH

def _mk_stack():
    return JacketStack.from_params(SAMPLE_LAYERS, SAMPLE_BETA)

def test_index_mapping():
    assert to_storage_index(-1) == 0
    assert to_storage_index(5) == 6
    st = _mk_stack()
    assert st.layer(-1) is st.layers[0]
    assert st.layer(5).d == 0.001

def test_wrong_layer_count_rejected():
    with pytest.raises(ValueError):
        JacketStack.from_params(SAMPLE_LAYERS[:6], SAMPLE_BETA)

def test_total_resistance_and_excluding():
    st = _mk_stack()
    assert math.isclose(st.total_resistance(), 0.5 + R_REST_FRESH, rel_tol=1e-12)
    assert math.isclose(st.total_resistance_excluding(0), R_REST_FRESH, rel_tol=1e-12)
    assert math.isclose(st.total_resistance_excluding(1), 0.5 + R_REST_FRESH - 0.05 / 0.03, rel_tol=1e-12)

def test_heat_flux_substitutes_foam_thickness():
    st = _mk_stack()
    assert math.isclose(st.heat_flux(0.0), 50.0 / R_REST_FRESH, rel_tol=1e-12)
    assert math.isclose(st.heat_flux(0.1), 50.0 / (R_REST_FRESH + 0.1 / 0.04), rel_tol=1e-12)
    assert math.isclose(st.heat_flux_current(), 50.0 / (R_REST_FRESH + 0.5), rel_tol=1e-12)
    # stored state untouched
    assert st.layer(-1).d == 0.02

def test_heat_flux_non_increasing_in_d0():
    st = _mk_stack()
    st.layer(2).W = 0.3
    st.layer(0).C = -0.5
    q = np.array([st.heat_flux(x) for x in np.linspace(0.0, 2.0, 401)])
    assert np.all(np.diff(q) <= 0.0)

def test_zero_resistance_gives_sentinel():
    st = JacketStack.from_params([(0.0, 0.04, 0.1, 0.2)] * 7, 0.5)
    assert st.heat_flux(0.0) == FLUX_SENTINEL
    assert st.heat_flux(1e-10) == FLUX_SENTINEL
    assert st.heat_flux(0.01) < FLUX_SENTINEL

def test_beta_is_read_only():
    st = _mk_stack()
    with pytest.raises(AttributeError):
        st.beta = 1.0
