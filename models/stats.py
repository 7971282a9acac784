"""
Pydantic schema for the engine's statistics snapshot.

Returned by SchedulerEngine.stats(). Unlike the average_* methods, the
snapshot never raises: averages stay None until at least one job completes,
so it is safe to call at any point during a run.
"""

from typing import Optional

from pydantic import BaseModel, Field

from models.enums import SchedulingPolicy


class SchedulerStats(BaseModel):
    """Aggregate scheduler state, returned by SchedulerEngine.stats()."""

    policy: SchedulingPolicy
    core_count: int = Field(ge=1)
    submitted: int = Field(ge=0)    # every job passed to new_job()
    waiting: int = Field(ge=0)      # jobs in the ordered queue
    running: int = Field(ge=0)      # busy cores
    completed: int = Field(ge=0)
    avg_wait_time: Optional[float] = None
    avg_turnaround_time: Optional[float] = None
    avg_response_time: Optional[float] = None
