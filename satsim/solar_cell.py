"""Solar cell whose short-circuit current depends on the incident light."""

from __future__ import annotations

import enum
import math
from typing import Optional, Sequence

import numpy as np

from satsim.gravity import unit_vector


class LockAxis(enum.IntEnum):
    """Axis that the cell's normal vector is held perpendicular to."""

    X = 1
    Y = 2
    Z = 3


class SolarCell:
    """A flat solar cell mounted on a body, with a position and a normal vector.

    The reference normal vector lies in the plane perpendicular to the
    locked axis; orientations are given as two components in that plane.
    """

    def __init__(self, max_current: float = 0.0) -> None:
        self.max_current = float(max_current)
        self.current = 0.0
        self.lock_axis = LockAxis.Y
        self.reference_pos = np.zeros(3)
        self.reference_normal = np.array([1.0, 0.0, 0.0])
        self.position = np.zeros(3)
        self.normal = self.reference_normal.copy()
        self.r_matrix = np.eye(3)

    def lock_axis_x(self) -> None:
        """Hold the normal vector in the y-z plane."""
        self.lock_axis = LockAxis.X

    def lock_axis_y(self) -> None:
        """Hold the normal vector in the x-z plane."""
        self.lock_axis = LockAxis.Y

    def lock_axis_z(self) -> None:
        """Hold the normal vector in the x-y plane."""
        self.lock_axis = LockAxis.Z

    def _in_plane(self, a: float, b: float) -> np.ndarray:
        if self.lock_axis == LockAxis.X:
            return np.array([0.0, a, b])
        if self.lock_axis == LockAxis.Y:
            return np.array([a, 0.0, b])
        return np.array([a, b, 0.0])

    def set_reference_pos(self, position: Sequence[float]) -> None:
        """Set the cell's position relative to the body it is mounted on."""
        self.reference_pos = np.array(position, dtype=float)

    def set_reference_ori(self, orientation: Sequence[float]) -> None:
        """Set the reference normal from two components in the unlocked plane."""
        a, b = (float(v) for v in orientation)
        self.reference_normal = self._in_plane(a, b)

    def update_r_matrix(self, r: Sequence[Sequence[float]]) -> None:
        """Set the body's rotation matrix."""
        self.r_matrix = np.array(r, dtype=float).reshape(3, 3)

    def update_pos_ori(
        self,
        reference: Sequence[float],
        r: Optional[Sequence[Sequence[float]]] = None,
    ) -> None:
        """Update the global position and normal from the body's position.

        If ``r`` is given it replaces the stored rotation matrix first.
        """
        if r is not None:
            self.update_r_matrix(r)
        self.position = np.asarray(reference, dtype=float) + self.r_matrix @ self.reference_pos
        self.normal = np.linalg.inv(self.r_matrix) @ self.reference_normal

    def _rotate(self, rad: float) -> None:
        rotation = np.array(
            [[math.cos(rad), math.sin(rad)], [-math.sin(rad), math.cos(rad)]]
        )
        components = rotation @ np.array(
            [self.reference_normal[0], self.reference_normal[2]]
        )
        self.reference_normal = self._in_plane(components[0], components[1])

    def rotate_dir_clock(self, theta: float) -> None:
        """Rotate the reference normal clockwise by ``theta`` degrees."""
        self._rotate(math.radians(theta))

    def rotate_dir_contclock(self, theta: float) -> None:
        """Rotate the reference normal counter-clockwise by ``theta`` degrees."""
        self._rotate(-math.radians(theta))

    def short_circuit_current(self, light_ray: Sequence[float]) -> float:
        """Return the short-circuit current produced by light along ``light_ray``."""
        amount_hit = float(unit_vector(light_ray) @ unit_vector(self.reference_normal))
        self.current = self.max_current * amount_hit
        return self.current