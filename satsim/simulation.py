"""Fixed-step real-time simulation loop and a sample satellite simulation."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional, Sequence, TextIO


class SimObject:
    """Fixed-step simulation run in real time.

    Subclasses override :meth:`initialize` and :meth:`update`. A negative
    ``max_time`` runs without end.
    """

    def __init__(
        self,
        timestep: float,
        max_time: float = -1.0,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.dt = float(timestep)
        self.max_time = float(max_time)
        self.time = 0.0
        self.stream = stream

    def _emit(self, text: str) -> None:
        out = self.stream if self.stream is not None else sys.stdout
        out.write(text)

    def run(self) -> None:
        """Initialise, then step until the end time, sleeping one step each."""
        self.initialize()
        if self.max_time > 0:
            self._emit(f"Starting Sim for {self.max_time:g} seconds\n")
        else:
            self._emit("Starting Sim indefinitely\n")

        sleep_seconds = int(self.dt * 1000) / 1000
        while self.max_time < 0 or self.time < self.max_time:
            self.update(self.dt)
            self.time += self.dt
            self._emit(f"Time: {self.time:g}\n")
            time.sleep(sleep_seconds)

        self._emit("Simulation complete.\n")

    def initialize(self) -> None:
        """Prepare the simulation state; does nothing by default."""

    def update(self, dt: float) -> None:
        """Advance the simulation state by ``dt``; does nothing by default."""


class SatelliteSim(SimObject):
    """Simulation of a single value growing at ten units per second."""

    def __init__(
        self,
        timestep: float,
        max_time: float = -1.0,
        stream: Optional[TextIO] = None,
    ) -> None:
        super().__init__(timestep, max_time, stream)
        self.value = 0.0

    def initialize(self) -> None:
        """Start the value at 100."""
        self.value = 100.0
        self._emit(f"Current Sim Value: {self.value:g}\n")

    def update(self, dt: float) -> None:
        """Grow the value by ten per second of ``dt``."""
        self.value += 10.0 * dt
        self._emit(f"Custom update value: {self.value:g}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the satellite simulation."""
    parser = argparse.ArgumentParser(description="Run the satellite simulation.")
    parser.add_argument("--timestep", type=float, default=0.0025)
    parser.add_argument("--max-time", type=float, default=2.0)
    args = parser.parse_args(argv)
    SatelliteSim(args.timestep, args.max_time).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())