"""Discrete-event simulation of packages routed through stack-based warehouses."""

__version__ = "0.1.0"
__all__ = [
    "event",
    "graph",
    "package",
    "registry",
    "scheduler",
    "simulation",
    "transport",
    "warehouse",
]