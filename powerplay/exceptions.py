"""
Errors raised by the simulation engines
"""


class SimulationError(Exception):
    """Base class for every error raised by the engines"""


class ConfigurationError(SimulationError, ValueError):
    """Bad lineup, unknown player name or inconsistent match format.

    Always raised before the first ball is bowled.
    """


class InningsCompleteError(SimulationError, RuntimeError):
    """A ball was requested from an innings that has already finished"""


class ScriptExhaustedError(SimulationError, RuntimeError):
    """A scripted outcome source has no outcomes left"""


class FixtureAlreadyPlayedError(SimulationError, RuntimeError):
    """A fixture was played a second time"""
