"""Reaction wheel modelled as a solid cylinder."""

from __future__ import annotations

import numpy as np

_PI = 3.142

# Maps a wheel's spin direction onto the axes of its inertia matrix.
_R_Z = np.array([[0.0, 0.0, 1.0], [0.0, 1.0, 0.0], [1.0, 0.0, 0.0]])


class ControlWheel:
    """Cylindrical wheel giving inertia about a chosen spin direction."""

    def __init__(
        self, mass: float = 0.0, radius: float = 0.0, height: float = 0.0
    ) -> None:
        self.inertia = np.zeros((3, 3))
        self.inverse_inertia = np.zeros((3, 3))
        self.initialize(mass, radius, height)

    def initialize(self, mass: float, radius: float, height: float) -> None:
        """Set the wheel's mass and cylinder dimensions."""
        self.mass = float(mass)
        self.radius = float(radius)
        self.height = float(height)
        self.volume = _PI * self.radius * self.radius * self.height

    @property
    def density(self) -> float:
        """Mass per unit volume."""
        return self.mass / self.volume

    def calc_inertia(self) -> np.ndarray:
        """Recompute the inertia matrix and its inverse; return the matrix."""
        m, r, h = self.mass, self.radius, self.height
        transverse = m * h * h / 12 + m * r * r / 4
        axial = m * r * r / 2
        self.inertia = np.diag([transverse, transverse, axial])
        self.inverse_inertia = np.linalg.inv(self.inertia)
        return self.inertia.copy()

    def inertia_along(self, x: float, y: float, z: float) -> float:
        """Scalar inertia for a wheel spinning along direction (x, y, z)."""
        direction = _R_Z @ np.array([x, y, z], dtype=float)
        return float(direction @ np.diag(self.inertia))

    def inverse_inertia_along(self, x: float, y: float, z: float) -> float:
        """Scalar inverse inertia for direction (x, y, z)."""
        return float(np.array([x, y, z], dtype=float) @ np.diag(self.inverse_inertia))