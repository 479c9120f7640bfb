from enum import Enum
from typing import List, Optional

from satfront.cnf.literals import encode_literal
from satfront.core.logging import get_logger
from satfront.engine.base import Engine

logger = get_logger("satfront.learnt")


class StreamState(str, Enum):
    IDLE = "IDLE"
    ACTIVE = "ACTIVE"
    EXHAUSTED = "EXHAUSTED"


class LearntClauseStream:
    """
    Start/next/end protocol over the engine's cursor of short learnt
    clauses. Misuse (next without start, double start) is passed through
    to the engine unchanged.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.state = StreamState.IDLE

    def start(self, max_len: int, max_glue: int = 1000) -> None:
        for name, value in (("max_len", max_len), ("max_glue", max_glue)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an integer")
            if value < 0:
                raise ValueError(f"{name} must be at least 0")
        self.engine.start_getting_small_clauses(max_len, max_glue)
        self.state = StreamState.ACTIVE
        logger.debug(f"streaming learnt clauses with max_len={max_len} max_glue={max_glue}")

    def next(self) -> Optional[List[int]]:
        lits = self.engine.get_next_small_clause()
        if lits is None:
            if self.state is StreamState.ACTIVE:
                self.state = StreamState.EXHAUSTED
            return None
        return [encode_literal(lit) for lit in lits]

    def end(self) -> None:
        self.engine.end_getting_small_clauses()
        self.state = StreamState.IDLE

    def __iter__(self):
        while True:
            clause = self.next()
            if clause is None:
                return
            yield clause
