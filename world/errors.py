"""Simulation errors. Out-of-bounds access is not an error: reads give None, writes are ignored."""


class SimulationError(Exception):
    """Base for configuration and programmer errors raised by the world package."""


class UnsupportedMaterial(SimulationError):
    """A material has no density/phase/colour mapping, or its phase has no update rule."""


class InvalidOperation(SimulationError):
    """Flow bias requested on a material that is not a liquid."""
