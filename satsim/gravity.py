"""Newtonian gravitational attraction between two point masses."""

from __future__ import annotations

from typing import Sequence

import numpy as np

G = 6.67430e-11
"""Gravitational constant in m^3 kg^-1 s^-2."""


def unit_vector(vec: Sequence[float]) -> np.ndarray:
    """Return ``vec`` scaled to unit length, or the zero vector if it has none."""
    arr = np.asarray(vec, dtype=float)
    magnitude = float(np.linalg.norm(arr))
    if magnitude == 0:
        return np.zeros(3)
    return arr / magnitude


class GravitationalForce:
    """Mutual gravitational force acting between two masses."""

    def __init__(self, mass1: float = 0.0, mass2: float = 0.0) -> None:
        self.mass1 = float(mass1)
        self.mass2 = float(mass2)
        self.pos1 = np.zeros(3)
        self.pos2 = np.zeros(3)
        self.magnitude = 0.0
        self._force1 = np.zeros(3)
        self._force2 = np.zeros(3)

    def update_pos(self, pos1: Sequence[float], pos2: Sequence[float]) -> None:
        """Set the positions of both masses."""
        self.pos1 = np.array(pos1, dtype=float)
        self.pos2 = np.array(pos2, dtype=float)

    def update_mass(self, mass1: float, mass2: float) -> None:
        """Set both masses."""
        self.mass1 = float(mass1)
        self.mass2 = float(mass2)

    def calculate_force(self) -> float:
        """Recompute the force on each mass and return its magnitude.

        Coincident masses exert no force on each other.
        """
        separation = self.pos2 - self.pos1
        dist_squared = float(separation @ separation)
        if dist_squared == 0:
            self.magnitude = 0.0
            self._force1 = np.zeros(3)
            self._force2 = np.zeros(3)
        else:
            self.magnitude = G * (self.mass1 * self.mass2) / dist_squared
            self._force1 = self.magnitude * unit_vector(separation)
            self._force2 = self.magnitude * unit_vector(-separation)
        return self.magnitude

    def force_at_mass1(self) -> tuple[np.ndarray, np.ndarray]:
        """Return the force on the first mass and the point it acts at."""
        return self._force1.copy(), self.pos1.copy()

    def force_at_mass2(self) -> tuple[np.ndarray, np.ndarray]:
        """Return the force on the second mass and the point it acts at."""
        return self._force2.copy(), self.pos2.copy()