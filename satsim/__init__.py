"""Component models for a small satellite simulation: gravity, bodies, power and attitude control."""

__version__ = "0.1.0"