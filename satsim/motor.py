"""DC motor driving a reaction wheel, with its placement on a body."""

from __future__ import annotations

import logging
import warnings
from typing import Optional, Sequence

import numpy as np

from satsim.control_wheel import ControlWheel
from satsim.gravity import unit_vector

logger = logging.getLogger(__name__)

_MATRIX_ALREADY_SET = (
    "Rotation matrix was already set during this cycle. "
    "Ensure the values are not being set twice."
)


class MotorWarning(UserWarning):
    """Raised as a warning when motor state is used out of order in a cycle."""


def _matrix_not_set(function: str) -> str:
    return (
        "Rotation matrix was not updated in this cycle. The function "
        f"({function}) requires the most recent rotation matrix values for proper use."
    )


class Motor:
    """DC motor modelled by its electrical and mechanical equations.

    The electrical side gives the rate of change of current, the mechanical
    side the angular acceleration of the attached wheel; both are meant to be
    fed to an integrator, whose results go back into ``current`` and ``omega``.
    """

    def __init__(
        self,
        resistance: float = 1.0,
        inductance: float = 0.5,
        k_back: float = 0.01,
        k1_const: float = 0.01,
        field: float = 1.0,
        damping: float = 0.1,
    ) -> None:
        self.resistance = float(resistance)
        self.inductance = float(inductance)
        self.k_back = float(k_back)
        self.k1 = float(k1_const)
        self.field = float(field)
        self.damping = float(damping)

        self.voltage = 0.0
        self.current = 0.0
        self.omega = 0.0
        self.inertia = 0.1
        self.motor_torque = 0.0
        self.load_torque = 0.0

        self.wheel = ControlWheel(12.0, 8.0, 6.0)
        self.wheel.calc_inertia()

        self.reference_pos = np.zeros(3)
        self.reference_ori = np.zeros(3)
        self.position = np.zeros(3)
        self.orientation = np.zeros(3)
        self.r_matrix = np.eye(3)

        self.ref_pos_set = True
        self.ref_ori_set = False
        self.r_matrix_set = False
        self.pos_set = False
        self.ori_set = False

    def initialize(
        self,
        resistance: float,
        k_back: float,
        inductance: float,
        k1_const: float,
        field: float,
        damping: float,
    ) -> None:
        """Set the circuit and damping constants."""
        self.resistance = float(resistance)
        self.inductance = float(inductance)
        self.k_back = float(k_back)
        self.k1 = float(k1_const)
        self.field = float(field)
        self.damping = float(damping)

    def set_wheel_values(self, mass: float, length: float, height: float) -> None:
        """Resize the attached wheel and recompute its inertia."""
        self.wheel.initialize(mass, length, height)
        self.wheel.calc_inertia()

    def update_inertia(self, inertia: Optional[float] = None) -> float:
        """Set the moment of inertia and return it.

        Without an argument the inertia comes from the wheel spinning along
        the motor's current orientation.
        """
        if inertia is None:
            x, y, z = self.orientation
            self.inertia = self.wheel.inertia_along(x, y, z)
            logger.debug("Inertia is: %s", self.inertia)
        else:
            self.inertia = float(inertia)
        return self.inertia

    def current_derivative(self) -> float:
        """Rate of change of the armature current."""
        return (
            self.voltage
            - self.resistance * self.current
            - self.k1 * self.field * self.omega
        ) / self.inductance

    def angular_acceleration(self) -> float:
        """Rate of change of the wheel's angular velocity."""
        return (
            self.k1 * self.field * self.current - self.damping * self.omega
        ) / self.inertia

    def set_reference_pos(self, position: Sequence[float]) -> None:
        """Set the motor's position relative to the body it is mounted on."""
        self.reference_pos = np.array(position, dtype=float)
        self.position = self.reference_pos.copy()
        self.ref_pos_set = True

    def set_reference_ori(self, orientation: Sequence[float]) -> None:
        """Set the motor's spin axis relative to the body it is mounted on."""
        self.reference_ori = np.array(orientation, dtype=float)
        self.orientation = self.reference_ori.copy()
        self.ref_ori_set = True

    def update_r_matrix(self, r: Sequence[Sequence[float]]) -> None:
        """Store the body's rotation matrix for this cycle."""
        self.r_matrix = np.array(r, dtype=float).reshape(3, 3)
        self.r_matrix_set = True

    def _take_matrix(self, r: Optional[Sequence[Sequence[float]]], function: str) -> None:
        if r is None:
            if not self.r_matrix_set:
                warnings.warn(_matrix_not_set(function), MotorWarning, stacklevel=3)
        else:
            if self.r_matrix_set:
                warnings.warn(_MATRIX_ALREADY_SET, MotorWarning, stacklevel=3)
            self.r_matrix = np.array(r, dtype=float).reshape(3, 3)

    def update_pos(
        self,
        reference: Sequence[float],
        r: Optional[Sequence[Sequence[float]]] = None,
    ) -> np.ndarray:
        """Update and return the global position from the body's position.

        Without ``r`` the rotation matrix stored this cycle is used.
        """
        self._take_matrix(r, "update_pos")
        self.position = np.asarray(reference, dtype=float) + self.r_matrix @ self.reference_pos
        self.pos_set = True
        return self.position.copy()

    def update_ori(self, r: Optional[Sequence[Sequence[float]]] = None) -> np.ndarray:
        """Update the global orientation from the rotation matrix ``r``.

        Without ``r`` the orientation is only marked as current and is
        left unchanged.
        """
        self._take_matrix(r, "update_ori")
        if r is not None:
            self.orientation = np.linalg.inv(self.r_matrix) @ self.reference_ori
        self.ori_set = True
        return self.orientation.copy()

    def update_pos_ori(
        self,
        reference: Sequence[float],
        r: Optional[Sequence[Sequence[float]]] = None,
    ) -> tuple[np.ndarray, np.ndarray]:
        """Update global position and orientation together and return both."""
        self._take_matrix(r, "update_ori")
        if r is not None:
            self.r_matrix_set = True
        self.position = np.asarray(reference, dtype=float) + self.r_matrix @ self.reference_pos
        self.orientation = np.linalg.inv(self.r_matrix) @ self.reference_ori
        self.pos_set = True
        self.ori_set = True
        return self.position.copy(), self.orientation.copy()

    def torque(self) -> float:
        """Net torque magnitude: motor torque minus damping torque."""
        self.motor_torque = self.k1 * self.field * self.current
        self.load_torque = self.damping * self.omega
        return self.motor_torque - self.load_torque

    def torque_vector(self) -> np.ndarray:
        """Net torque directed along the motor's orientation."""
        if not self.ori_set:
            warnings.warn(
                "orientation was not updated in this cycle. The function "
                "(torque_vector) requires the most recent rotation matrix "
                "values for proper use.",
                MotorWarning,
                stacklevel=2,
            )
        return self.torque() * unit_vector(self.orientation)

    def reset_flags(self) -> None:
        """Clear the per-cycle update flags."""
        self.r_matrix_set = False
        self.pos_set = False
        self.ori_set = False