"""Attitude control system built from three reaction-wheel motors."""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from satsim.motor import Motor

DEFAULT_POWER = 10.0
"""Power rating given to each motor when none is specified."""

_MOTOR_COUNT = 3


def _three(values: Sequence[float], what: str) -> list[float]:
    items = [float(v) for v in values]
    if len(items) != _MOTOR_COUNT:
        raise ValueError(f"expected {_MOTOR_COUNT} {what}, got {len(items)}")
    return items


class AttitudeControlSystem:
    """Three motors spinning wheels about the body's x, y and z axes.

    Without a ``power`` the motors get their standard circuit constants and
    wheel dimensions and a power rating of 10. With a ``power`` the motors
    keep their plain defaults and each is rated at that power.
    """

    def __init__(self, power: Optional[float] = None) -> None:
        self.motors: tuple[Motor, ...] = tuple(Motor() for _ in range(_MOTOR_COUNT))
        if power is None:
            for motor in self.motors:
                motor.initialize(1.0, 0.05, 0.1, 0.1, 1.0, 0.1)
                motor.set_wheel_values(120, 8, 4)
            power = DEFAULT_POWER
        self.motor_power = [float(power)] * _MOTOR_COUNT
        self.motor_on = [False] * _MOTOR_COUNT
        self.polarity = [1.0] * _MOTOR_COUNT
        self.voltages = [0.0] * _MOTOR_COUNT
        self.motor_currents = [0.0] * _MOTOR_COUNT

        for motor, axis in zip(self.motors, np.eye(_MOTOR_COUNT)):
            motor.set_reference_pos((0.0, 0.0, 0.0))
            motor.set_reference_ori(axis)

    @staticmethod
    def _valid(index: int) -> bool:
        return 0 <= index < _MOTOR_COUNT

    def _check(self, index: int) -> int:
        if not self._valid(index):
            raise IndexError(f"motor index {index} out of range")
        return index

    def initialize_power(self, power: float) -> None:
        """Set the power rating of every motor."""
        self.motor_power = [float(power)] * _MOTOR_COUNT

    def update_voltage(self, index: int, voltage: float) -> None:
        """Apply ``voltage`` to a motor, respecting its polarity.

        An index outside the three motors is ignored.
        """
        if self._valid(index):
            self.motors[index].voltage = self.polarity[index] * float(voltage)

    def update_current(self, index: int, current: float) -> None:
        """Set a motor's current, respecting its polarity.

        An index outside the three motors is ignored.
        """
        if self._valid(index):
            self.motors[index].current = self.polarity[index] * float(current)

    def motor_off(self, index: int) -> None:
        """Switch a motor off and remove its supply voltage.

        An index outside the three motors is ignored.
        """
        if self._valid(index):
            self.motor_on[index] = False
            self.motors[index].voltage = 0.0

    def all_current_derivatives(self) -> np.ndarray:
        """Rate of change of current in each motor."""
        return np.array([motor.current_derivative() for motor in self.motors])

    def all_angular_accelerations(self) -> np.ndarray:
        """Angular acceleration of each motor's wheel."""
        return np.array([motor.angular_acceleration() for motor in self.motors])

    def _drive(self, index: int, polarity: float, voltage: float) -> None:
        self._check(index)
        self.polarity[index] = polarity
        self.motor_on[index] = True
        self.motors[index].voltage = polarity * float(voltage)

    def motor_clock(self, index: int, current: float, voltage: float) -> None:
        """Switch a motor on turning clockwise (positive polarity)."""
        self._drive(index, 1.0, voltage)

    def motor_contclock(self, index: int, current: float, voltage: float) -> None:
        """Switch a motor on turning counter-clockwise (negative polarity)."""
        self._drive(index, -1.0, voltage)

    def update_all_ori(self, r: Sequence[Sequence[float]]) -> None:
        """Orient every motor from the body's rotation matrix ``r``."""
        for motor in self.motors:
            motor.update_ori(r)

    def update_all_current(self, currents: Sequence[float]) -> None:
        """Set the current of each motor, in motor order."""
        for motor, current in zip(self.motors, _three(currents, "currents")):
            motor.current = current

    def update_all_omega(self, omegas: Sequence[float]) -> None:
        """Set the wheel angular velocity of each motor, in motor order."""
        for motor, omega in zip(self.motors, _three(omegas, "angular velocities")):
            motor.omega = omega

    def total_torque(self) -> np.ndarray:
        """Sum of the torque vectors produced by all motors."""
        return sum((motor.torque_vector() for motor in self.motors), np.zeros(3))

    def drawn_current(self) -> float:
        """Current drawn by the motors that are switched on.

        A running motor with no recorded supply voltage draws without limit.
        """
        total = 0.0
        for on, power, volts in zip(self.motor_on, self.motor_power, self.voltages):
            if on:
                total += math.inf if volts == 0 else power / volts
        return total

    def is_motor_on(self, index: int) -> bool:
        """Whether the motor at ``index`` is switched on."""
        return self.motor_on[self._check(index)]