"""Enumerations for ON/OFF traffic simulation.

This module defines enumerations used throughout the simulator.
"""

from enum import Enum


class EventType(Enum):
    """Enum for the transitions a traffic source can undergo.

    Attributes:
        SOURCE_TURNS_ON: The source leaves its OFF dwell and becomes active.
        SOURCE_TURNS_OFF: The source leaves its ON dwell and becomes idle.
    """

    SOURCE_TURNS_ON = "on"
    SOURCE_TURNS_OFF = "off"

    @property
    def label(self) -> str:
        """Short label used in the event log ("ON" or "OFF")."""
        return self.value.upper()


class SourceState(Enum):
    """Enum for the two states of a traffic source."""

    ON = "on"
    OFF = "off"


class InitialState(Enum):
    """Enum for how sources pick their starting state.

    Attributes:
        OFF: Every source starts idle.
        ON: Every source starts active.
        RANDOM: Each source starts ON or OFF with equal probability.
    """

    OFF = "off"
    ON = "on"
    RANDOM = "random"
