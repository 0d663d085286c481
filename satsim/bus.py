"""Electrical bus feeding a chain of power-drawing nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

MAX_SIZE = 10
"""Largest number of nodes a bus can hold."""


@dataclass
class Node:
    """One load attached to the bus."""

    voltage: float = 0.0
    current: float = 0.0
    power: float = 0.0
    drawn_power: float = 0.0
    drawn_current: float = 0.0
    resistance: float = 0.0
    current_out: float = 0.0
    on: bool = False
    prev_node: Optional[int] = None


class Bus:
    """A bus distributing incoming current along its active nodes in order.

    Each active node takes what it needs from the current left over by the
    active node before it; when the supply falls short, later nodes get less.
    """

    def __init__(self, voltage: float = 0.0, num_nodes: int = 0) -> None:
        self.nodes = [Node() for _ in range(MAX_SIZE)]
        self.initialize(voltage, num_nodes)

    def initialize(self, voltage: float, num_nodes: int) -> None:
        """Set the bus voltage and the number of nodes in use."""
        num_nodes = int(num_nodes)
        if not 0 <= num_nodes <= MAX_SIZE:
            raise ValueError(f"number of nodes must be between 0 and {MAX_SIZE}")
        self.voltage = float(voltage)
        self.current = 0.0
        self.power = 0.0
        self.num_nodes = num_nodes
        self.drawn_current = 0.0
        self.drawn_power = 0.0
        for node in self._active_range():
            node.voltage = self.voltage
            node.current = 0.0
            node.power = 0.0

    def _active_range(self) -> Iterator[Node]:
        return iter(self.nodes[: self.num_nodes])

    def _node(self, index: int) -> Node:
        if not 0 <= index < MAX_SIZE:
            raise IndexError(f"node index {index} out of range")
        return self.nodes[index]

    def _recompute_totals(self) -> None:
        active = [node for node in self._active_range() if node.on]
        self.drawn_current = sum(node.drawn_current for node in active)
        self.drawn_power = sum(node.drawn_power for node in active)

    def _next_active_after(self, index: int) -> Optional[Node]:
        return next(
            (node for node in self.nodes[index + 1 : self.num_nodes] if node.on),
            None,
        )

    def turn_node_on(self, index: int, power: float) -> None:
        """Switch a node on with the power it requires."""
        node = self._node(index)
        node.on = True
        node.drawn_power = float(power)
        node.drawn_current = node.drawn_power / self.voltage
        node.resistance = self.voltage * self.voltage / node.drawn_power
        node.prev_node = next(
            (i for i in range(index - 1, -1, -1) if self.nodes[i].on), None
        )
        following = self._next_active_after(index)
        if following is not None:
            following.prev_node = index
        self._recompute_totals()

    def turn_node_off(self, index: int) -> None:
        """Switch a node off, clearing what it draws."""
        node = self._node(index)
        node.on = False
        node.drawn_power = 0.0
        node.drawn_current = 0.0
        node.current = 0.0
        node.power = 0.0
        following = self._next_active_after(index)
        if following is not None:
            following.prev_node = node.prev_node
        self._recompute_totals()

    def state_update(self, current: float) -> None:
        """Share the incoming ``current`` among the active nodes."""
        self.current = float(current)
        self.power = self.current * self.voltage
        supply_suffices = self.current >= self.drawn_current
        for node in self._active_range():
            if not node.on:
                continue
            if supply_suffices:
                upstream = (
                    self.drawn_current
                    if node.prev_node is None
                    else self.nodes[node.prev_node].current_out
                )
                node.current = node.drawn_power / self.voltage
                node.current_out = upstream - node.current
            else:
                upstream = (
                    self.current
                    if node.prev_node is None
                    else self.nodes[node.prev_node].current_out
                )
                if self.voltage / node.resistance <= upstream:
                    node.current = node.drawn_power / self.voltage
                else:
                    node.current = upstream
                node.current_out = max(upstream - node.current, 0.0)
            node.power = node.current * self.voltage

    def update_node_drawn_p(self, index: int, power: float) -> None:
        """Set the power a node draws without switching it."""
        self._node(index).drawn_power = float(power)

    def node_voltage(self, index: int) -> float:
        """Voltage at a node."""
        return self._node(index).voltage

    def node_power(self, index: int) -> float:
        """Power delivered to a node."""
        return self._node(index).power

    def node_current(self, index: int) -> float:
        """Current delivered to a node."""
        return self._node(index).current