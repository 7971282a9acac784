"""
Shared test fixtures.

The engine runs entirely in memory, so the only fixture most tests need is
a started engine. The factory form lets a test build several engines with
different policies and still have every one of them shut down at teardown.
"""

import pytest

from models.enums import SchedulingPolicy
from scheduler.engine import SchedulerEngine


@pytest.fixture
def make_engine():
    """Factory: make_engine(cores, policy) → started SchedulerEngine."""
    engines: list[SchedulerEngine] = []

    def _make(cores: int = 1, policy: SchedulingPolicy | str = SchedulingPolicy.FCFS) -> SchedulerEngine:
        engine = SchedulerEngine()
        engine.start_up(cores, policy)
        engines.append(engine)
        return engine

    yield _make

    for engine in engines:
        if engine.is_running:
            engine.shutdown()
