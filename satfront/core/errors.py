class SatFrontError(Exception):
    """Base exception for all satfront related errors."""
    pass

class ConfigError(SatFrontError, ValueError):
    """Raised when solver construction options are invalid."""
    pass

class EngineError(SatFrontError):
    """Raised when a solving engine cannot be created or fails."""
    pass

class IllegalStateError(SatFrontError):
    """
    Raised when the engine leaves its contract, e.g. a solve result outside
    of sat/unsat/unknown. Never recoverable.
    """
    pass

class EnumerationAbortedError(IllegalStateError):
    """Raised when multi-solution search hits an undefined solve result."""

    def __init__(self, message: str, solutions=None):
        super().__init__(message)
        self.solutions = list(solutions or [])
