"""Lattices, aggregators and in-memory relation indices for Datalog-style logic programs."""

__version__ = "0.1.0"
__all__ = [
    "lattice",
    "constant_propagation",
    "product",
    "sets",
    "aggregators",
    "indices",
    "combined",
]