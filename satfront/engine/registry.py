from typing import Any, Callable, Dict, List

from satfront.core.errors import EngineError
from satfront.engine.base import Engine
from satfront.engine.pysat_engine import PySATEngine

EngineFactory = Callable[..., Engine]


class EngineRegistry:
    def __init__(self):
        self._factories: Dict[str, EngineFactory] = {}
        self.register("pysat", PySATEngine)

    def register(self, name: str, factory: EngineFactory):
        self._factories[name] = factory

    def create(self, name: str, **options: Any) -> Engine:
        if name not in self._factories:
            raise EngineError(f"Engine '{name}' not found.")
        try:
            return self._factories[name](**options)
        except TypeError as e:
            raise EngineError(f"Invalid options for engine '{name}': {e}") from e

    def list_engines(self) -> List[str]:
        return list(self._factories.keys())


default_registry = EngineRegistry()
