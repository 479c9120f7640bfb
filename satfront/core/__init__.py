"""
Core module for satfront.
Provides error handling, logging and the shared literal/result types.
"""
from satfront.core.errors import (
    SatFrontError, ConfigError, EngineError, IllegalStateError, EnumerationAbortedError
)
from satfront.core.logging import get_logger
from satfront.core.types import (
    Lit, Lbool, SolveStatus, Clause, DenseSolution, RawSolution, Solution,
    MAX_LITERAL
)

__all__ = [
    "SatFrontError", "ConfigError", "EngineError", "IllegalStateError", "EnumerationAbortedError",
    "get_logger",
    "Lit", "Lbool", "SolveStatus", "Clause", "DenseSolution", "RawSolution", "Solution",
    "MAX_LITERAL"
]
