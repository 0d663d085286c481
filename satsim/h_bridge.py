"""H-bridge circuit that sets the polarity of a motor's supply voltage."""

from __future__ import annotations


class HBridge:
    """Two-switch H-bridge; starts switched off."""

    def __init__(self) -> None:
        self.switches: tuple[float, float] = (0.0, 0.0)
        self.v_left = 0.0
        self.v_right = 0.0
        self.v_bridge = 0.0

    def forward(self) -> None:
        """Pass current forwards (positive polarity)."""
        self.switches = (1.0, 0.0)

    def backwards(self) -> None:
        """Pass current backwards (negative polarity)."""
        self.switches = (0.0, 1.0)

    def off(self) -> None:
        """Open both switches."""
        self.switches = (0.0, 0.0)

    def update_bridge_voltage(self, v_input: float) -> float:
        """Apply ``v_input`` across the bridge and return the bridge voltage."""
        left, right = self.switches
        self.v_left = left * v_input
        self.v_right = right * v_input
        self.v_bridge = self.v_left - self.v_right
        return self.v_bridge