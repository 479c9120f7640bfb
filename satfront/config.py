import json
import os
from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError, field_validator

from satfront.core.errors import ConfigError

ENV_PREFIX = "SATFRONT_"


class SolverConfig(BaseModel):
    """Construction options of a Solver."""
    verbose: int = 0
    time_limit: float = 0.0  # seconds, 0 disables the limit
    confl_limit: int = 0  # conflicts, 0 disables the limit
    threads: int = 1
    engine: str = "pysat"
    engine_options: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("verbose")
    @classmethod
    def check_verbose(cls, v: int) -> int:
        if v < 0:
            raise ValueError("verbosity must be at least 0")
        return v

    @field_validator("time_limit")
    @classmethod
    def check_time_limit(cls, v: float) -> float:
        if v < 0:
            raise ValueError("time_limit must be at least 0")
        return v

    @field_validator("confl_limit")
    @classmethod
    def check_confl_limit(cls, v: int) -> int:
        if v < 0:
            raise ValueError("conflict limit must be at least 0")
        return v

    @field_validator("threads")
    @classmethod
    def check_threads(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("number of threads must be at least 1")
        return v

    @classmethod
    def create(cls, **kwargs: Any) -> "SolverConfig":
        """Validates options, reporting failures as ConfigError."""
        try:
            return cls(**kwargs)
        except ValidationError as e:
            messages = "; ".join(err["msg"].removeprefix("Value error, ") for err in e.errors())
            raise ConfigError(messages) from e

    @staticmethod
    def from_env_or_file() -> "SolverConfig":
        data: Dict[str, Any] = {}

        # 1. Config file
        config_path = os.environ.get(f"{ENV_PREFIX}CONFIG_PATH")
        if config_path:
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data.update(json.load(f))
            except (OSError, json.JSONDecodeError) as e:
                raise ConfigError(f"Could not read solver config '{config_path}': {e}") from e

        # 2. Env vars override the file
        for field in ("verbose", "time_limit", "confl_limit", "threads", "engine"):
            value = os.environ.get(f"{ENV_PREFIX}{field.upper()}")
            if value is not None:
                data[field] = value

        return SolverConfig.create(**data)
