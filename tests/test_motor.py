import warnings

import numpy as np
import pytest

from satsim.motor import Motor, MotorWarning

IDENTITY = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
ROT_Z_90 = [[0, -1, 0], [1, 0, 0], [0, 0, 1]]


@pytest.fixture
def driven_motor():
    motor = Motor(1.0, 0.05, 0.1, 0.1, 1.0, 0.1)
    motor.voltage = -200
    motor.set_reference_pos([0, 0, 0])
    motor.set_reference_ori([1, 0, 0])
    motor.update_pos_ori([0, 0, 0], IDENTITY)
    motor.update_inertia(0.01)
    return motor


def test_constructor_argument_order():
    motor = Motor(1.0, 0.05, 0.1, 0.2, 3.0, 0.4)
    assert motor.resistance == 1.0
    assert motor.inductance == 0.05
    assert motor.k_back == 0.1
    assert motor.k1 == 0.2
    assert motor.field == 3.0
    assert motor.damping == 0.4


def test_initialize_argument_order():
    motor = Motor()
    motor.initialize(2.0, 0.2, 0.5, 0.3, 1.5, 0.7)
    assert motor.resistance == 2.0
    assert motor.k_back == 0.2
    assert motor.inductance == 0.5
    assert motor.k1 == 0.3
    assert motor.field == 1.5
    assert motor.damping == 0.7


def test_defaults():
    motor = Motor()
    assert motor.inductance == 0.5
    assert motor.inertia == 0.1
    assert motor.voltage == 0.0
    assert motor.current == 0.0


def test_first_euler_steps(driven_motor):
    dt = 0.1
    current, omega = 0.0, 0.0
    driven_motor.current = current
    driven_motor.omega = omega
    d_current = driven_motor.current_derivative()
    alpha = driven_motor.angular_acceleration()
    assert d_current == pytest.approx(-4000.0)
    assert alpha == pytest.approx(0.0)

    current += dt * d_current
    omega += dt * alpha
    driven_motor.current = current
    driven_motor.omega = omega
    assert driven_motor.current_derivative() == pytest.approx(4000.0)
    assert driven_motor.angular_acceleration() == pytest.approx(-4000.0)


def test_zero_voltage_at_rest_stays_at_rest(driven_motor):
    driven_motor.voltage = 0
    driven_motor.current = 0
    driven_motor.omega = 0
    assert driven_motor.current_derivative() == 0.0
    assert driven_motor.angular_acceleration() == 0.0


def test_update_pos_ori_identity(driven_motor):
    assert np.allclose(driven_motor.position, [0, 0, 0])
    assert np.allclose(driven_motor.orientation, [1, 0, 0])
    assert driven_motor.pos_set and driven_motor.ori_set and driven_motor.r_matrix_set


def test_update_pos_with_rotation():
    motor = Motor()
    motor.set_reference_pos([1, 0, 0])
    pos = motor.update_pos([10, 0, 0], ROT_Z_90)
    assert np.allclose(pos, [10, 1, 0])
    assert motor.pos_set


def test_update_ori_uses_inverse_rotation():
    motor = Motor()
    motor.set_reference_ori([1, 0, 0])
    ori = motor.update_ori(ROT_Z_90)
    assert np.allclose(ori, [0, -1, 0])


def test_update_ori_without_matrix_keeps_orientation():
    motor = Motor()
    motor.set_reference_ori([0, 0, 1])
    motor.update_r_matrix(ROT_Z_90)
    ori = motor.update_ori()
    assert np.allclose(ori, [0, 0, 1])
    assert motor.ori_set


def test_warns_when_matrix_set_twice():
    motor = Motor()
    motor.update_r_matrix(IDENTITY)
    with pytest.warns(MotorWarning, match="already set"):
        motor.update_ori(IDENTITY)


def test_warns_when_matrix_missing():
    motor = Motor()
    with pytest.warns(MotorWarning, match="not updated"):
        motor.update_pos([0, 0, 0])


def test_no_warning_after_reset():
    motor = Motor()
    motor.update_r_matrix(IDENTITY)
    motor.reset_flags()
    assert not motor.r_matrix_set
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        motor.update_ori(IDENTITY)
    assert len(caught) == 0


def test_torque_magnitude():
    motor = Motor()
    motor.current = 2.0
    motor.omega = 1.0
    assert motor.torque() == pytest.approx(0.01 * 2.0 - 0.1 * 1.0)
    assert motor.motor_torque == pytest.approx(0.02)
    assert motor.load_torque == pytest.approx(0.1)


def test_torque_vector_along_orientation(driven_motor):
    driven_motor.current = 10.0
    driven_motor.omega = 0.0
    vec = driven_motor.torque_vector()
    assert np.allclose(vec, [1.0, 0.0, 0.0])


def test_torque_vector_warns_without_orientation_update():
    motor = Motor()
    motor.set_reference_ori([0, 2, 0])
    motor.current = 2.0
    motor.omega = 1.0
    with pytest.warns(MotorWarning, match="orientation"):
        vec = motor.torque_vector()
    assert np.allclose(vec, [0.0, -0.08, 0.0])


def test_update_inertia_from_wheel():
    motor = Motor()
    motor.set_reference_ori([1, 0, 0])
    assert motor.update_inertia() == pytest.approx(12 * 64 / 2)


def test_set_wheel_values_changes_inertia():
    motor = Motor()
    motor.set_wheel_values(120, 8, 4)
    motor.set_reference_ori([1, 0, 0])
    assert motor.update_inertia() == pytest.approx(120 * 64 / 2)


def test_update_inertia_direct():
    motor = Motor()
    assert motor.update_inertia(0.25) == 0.25
    motor.current = 1.0
    assert motor.angular_acceleration() == pytest.approx(0.01 / 0.25)