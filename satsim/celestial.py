"""A celestial body with mass, radius and translational state."""

from __future__ import annotations

from typing import Sequence

import numpy as np


class CelestialBody:
    """A massive spherical body moving in three-dimensional space."""

    def __init__(self, mass: float = 1.0, radius: float = 0.0) -> None:
        self.mass = float(mass)
        self.radius = float(radius)
        self.position = np.zeros(3)
        self.velocity = np.zeros(3)
        self.last_acceleration = np.zeros(3)

    def initialize(self, mass: float, radius: float) -> None:
        """Reset the mass and radius."""
        self.mass = float(mass)
        self.radius = float(radius)

    def set_position(self, position: Sequence[float]) -> None:
        """Place the body at an absolute position."""
        self.position = np.array(position, dtype=float)

    def set_relative_pos(
        self, reference: Sequence[float], position: Sequence[float]
    ) -> None:
        """Place the body at ``position`` measured from ``reference``."""
        self.position = np.asarray(reference, dtype=float) + np.asarray(
            position, dtype=float
        )

    def acceleration(self, force: Sequence[float]) -> np.ndarray:
        """Return the acceleration the applied ``force`` produces (a = F / m)."""
        self.last_acceleration = np.asarray(force, dtype=float) / self.mass
        return self.last_acceleration.copy()

    def update_v(self, velocity: Sequence[float]) -> None:
        """Set the velocity."""
        self.velocity = np.array(velocity, dtype=float)

    def update_pos(self, position: Sequence[float]) -> None:
        """Set the position."""
        self.position = np.array(position, dtype=float)