"""Equivalent-circuit model of a battery with two RC branches."""

from __future__ import annotations

SOC_MIN = 0.2
SOC_MAX = 0.9


def find_ocv(soc: float) -> float:
    """Open-circuit voltage as a linear function of state of charge."""
    return 10.7 + 0.4 * soc


class Battery:
    """Battery tracking state of charge and internal branch voltages.

    A positive ``current`` discharges the battery. The state of charge is
    held between 0.2 and 0.9; reaching either limit stops the current.
    """

    def __init__(
        self,
        capacity: float = 36000.0,
        r0: float = 0.001,
        r1: float = 0.02,
        r2: float = 0.01,
        c1: float = 1000.0,
        c2: float = 2000.0,
        soc: float = 0.8,
    ) -> None:
        self.initialize(capacity, r0, r1, r2, c1, c2)
        self.soc = float(soc)
        self.current = 0.0
        self.ocv = find_ocv(self.soc)
        self.vt = 0.0

    def initialize(
        self,
        capacity: float,
        r0: float,
        r1: float,
        r2: float,
        c1: float,
        c2: float,
    ) -> None:
        """Set the circuit parameters and reset the branch voltages."""
        self.capacity = float(capacity)
        self.r0 = float(r0)
        self.r1 = float(r1)
        self.r2 = float(r2)
        self.c1 = float(c1)
        self.c2 = float(c2)
        self.v1 = 0.0
        self.v2 = 0.0

    def voltage_derivatives(self) -> tuple[float, float]:
        """Return the time derivatives of the two branch voltages."""
        dv1 = self.current / self.c1 - self.v1 / (self.r1 * self.c1)
        dv2 = self.current / self.c2 - self.v2 / (self.r2 * self.c2)
        return dv1, dv2

    def update_soc(self, dt: float) -> float:
        """Advance the state of charge by ``dt`` seconds and return it."""
        self.soc -= self.current * dt / self.capacity
        if self.soc < SOC_MIN:
            self.soc = SOC_MIN
            self.current = 0.0
        elif self.soc > SOC_MAX:
            self.soc = SOC_MAX
            self.current = 0.0
        self.ocv = find_ocv(self.soc)
        return self.soc

    def update_vt(self) -> float:
        """Recompute and return the terminal voltage."""
        self.vt = self.ocv - self.current * self.r0 - self.v1 - self.v2
        return self.vt