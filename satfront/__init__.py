"""
satfront: incremental SAT solving front-end.

Clauses are built from DIMACS style signed integer literals and handed to
an external solving engine (pysat by default) that decides satisfiability,
produces models, enumerates distinct solutions and streams learnt clauses.
"""

__version__ = "0.1.0"

from satfront.solver import Solver
from satfront.config import SolverConfig
from satfront.core.errors import (
    SatFrontError, ConfigError, EngineError, IllegalStateError, EnumerationAbortedError
)
from satfront.engine import Engine, EngineRegistry, PySATEngine

__all__ = [
    "Solver",
    "SolverConfig",
    "SatFrontError",
    "ConfigError",
    "EngineError",
    "IllegalStateError",
    "EnumerationAbortedError",
    "Engine",
    "EngineRegistry",
    "PySATEngine",
]
