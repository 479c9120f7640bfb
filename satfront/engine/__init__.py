from satfront.engine.base import Engine
from satfront.engine.pysat_engine import PySATEngine, DEFAULT_SOLVER_NAME
from satfront.engine.registry import EngineRegistry, default_registry
from satfront.engine.xor_encoding import xor_to_cnf

__all__ = [
    "Engine", "PySATEngine", "DEFAULT_SOLVER_NAME",
    "EngineRegistry", "default_registry",
    "xor_to_cnf"
]
