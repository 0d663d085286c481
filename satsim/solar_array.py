"""Solar array output current following a diode IV curve."""

from __future__ import annotations

import math

_E = 2.7183


def _power(base: float, exponent: float) -> float:
    try:
        return base**exponent
    except OverflowError:
        return math.inf


class SolarArray:
    """Solar array whose current depends on the voltage of the bus it feeds.

    The series and shunt resistances are derived on each initialisation; the
    shunt resistance uses the short-circuit current held before that call.
    """

    def __init__(
        self,
        oc_voltage: float = 40.71,
        sc_current: float = 8.947,
        max_voltage: float = 37.23,
        max_current: float = 8.06,
        thermal_voltage: float = 0.2586,
    ) -> None:
        self.sc_current = 8.947
        self.saturation_current = 1e-10
        self.initialize(
            oc_voltage, sc_current, max_voltage, max_current, thermal_voltage
        )

    def initialize(
        self,
        oc_voltage: float,
        sc_current: float,
        max_voltage: float,
        max_current: float,
        thermal_voltage: float,
    ) -> None:
        """Set the array's characteristic values and reset its output."""
        self.mp_voltage = float(max_voltage)
        self.mp_current = float(max_current)
        self.oc_voltage = float(oc_voltage)
        self.sc_current_max = float(sc_current)
        self.thermal_voltage = float(thermal_voltage)

        self.series_resistance = (self.oc_voltage - self.mp_voltage) / (
            16 * self.mp_current
        )
        self.shunt_resistance = (5 * self.mp_voltage) / (
            self.sc_current - self.mp_current
        )
        self.sc_current = float(sc_current)
        self.current = self.sc_current
        self.secondary_current = self.sc_current
        self.ideality = 2.0
        self.voltage = 0.0
        self.time = 0.0

    def update_current(self) -> float:
        """Recompute the output current at the present voltage and return it.

        The current never goes below zero.
        """
        count = 1
        while True:
            previous = self.current
            exponent = (
                (self.voltage - self.mp_voltage)
                + (self.current - self.sc_current) * self.series_resistance
            ) / (self.ideality * self.thermal_voltage)
            self.current = (
                self.sc_current
                - _power(_E, exponent)
                + (self.voltage + self.current * self.series_resistance)
                / self.shunt_resistance
            )
            count += 1
            if not (abs(self.current - previous) < 0.001 and count < 5):
                break

        if self.current < 0:
            self.current = 0.0
        if self.secondary_current < 0:
            self.secondary_current = 0.0
        return self.current