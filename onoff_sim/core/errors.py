"""Exceptions raised by the simulation core.

Invalid construction arguments raise the built-in ValueError or TypeError.
The classes below cover runtime state problems and export failures.
"""


class SimulationError(Exception):
    """Base class for simulation state errors."""


class EmptyQueueError(SimulationError, IndexError):
    """Raised when removing an event from an empty event queue."""


class NoDataError(SimulationError, ValueError):
    """Raised when statistics are requested before any snapshot exists."""


class ExportError(SimulationError, OSError):
    """Raised when writing simulation results to disk fails.

    The underlying OSError is attached as ``__cause__``.
    """
