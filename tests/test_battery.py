import pytest

from satsim.battery import Battery, find_ocv


def _trapezoid(value, before, after, dt):
    return value + 0.5 * (before + after) * dt


def test_find_ocv_linear_in_soc():
    assert find_ocv(0.0) == pytest.approx(10.7)
    assert find_ocv(0.5) == pytest.approx(10.9)


def test_default_state():
    bat = Battery()
    assert bat.soc == pytest.approx(0.8)
    assert bat.v1 == 0.0 and bat.v2 == 0.0
    assert bat.capacity == 36000.0


def test_update_soc_discharges():
    bat = Battery()
    bat.current = 3600.0
    assert bat.update_soc(1.0) == pytest.approx(0.7)
    assert bat.ocv == pytest.approx(10.98)
    assert bat.current == 3600.0


def test_update_soc_clamps_low_and_stops_current():
    bat = Battery()
    bat.current = 1e9
    assert bat.update_soc(1.0) == pytest.approx(0.2)
    assert bat.current == 0.0


def test_update_soc_clamps_high_and_stops_current():
    bat = Battery()
    bat.current = -1e9
    assert bat.update_soc(1.0) == pytest.approx(0.9)
    assert bat.current == 0.0


def test_voltage_derivatives():
    bat = Battery()
    bat.current = 10.0
    dv1, dv2 = bat.voltage_derivatives()
    assert dv1 == pytest.approx(0.01)
    assert dv2 == pytest.approx(0.005)
    bat.v1 = 0.2
    dv1, _ = bat.voltage_derivatives()
    assert dv1 == pytest.approx(0.0)


def test_update_vt():
    bat = Battery()
    bat.current = 100.0
    bat.update_soc(0.0)
    bat.v1 = 0.5
    bat.v2 = 0.25
    assert bat.update_vt() == pytest.approx(10.7 + 0.4 * 0.8 - 0.1 - 0.75)
    assert bat.vt == pytest.approx(bat.update_vt())


def test_initialize_resets_branch_voltages():
    bat = Battery()
    bat.v1 = 3.0
    bat.v2 = 4.0
    bat.initialize(1000, 0.1, 0.2, 0.3, 10, 20)
    assert (bat.v1, bat.v2) == (0.0, 0.0)
    assert (bat.capacity, bat.c2) == (1000.0, 20.0)


def test_charge_discharge_profile_stays_in_bounds():
    bat = Battery()
    bat.current = 50.0
    v1, v2 = bat.v1, bat.v2
    dv1 = dv2 = 0.0
    t, dt = 0.0, 0.1
    socs = []
    while t < 120:
        if t > 20.0:
            bat.current = -20.0
        if t > 40.0:
            bat.current = -50.0
        if t > 90.0:
            bat.current = 200.0
        dv1_prev, dv2_prev = dv1, dv2
        socs.append(bat.update_soc(dt))
        dv1, dv2 = bat.voltage_derivatives()
        v1 = _trapezoid(v1, dv1_prev, dv1, dt)
        v2 = _trapezoid(v2, dv2_prev, dv2, dt)
        bat.v1, bat.v2 = v1, v2
        bat.update_vt()
        t += dt
    assert all(0.2 <= s <= 0.9 for s in socs)
    assert socs[-1] < 0.8
    assert bat.vt < bat.ocv