"""
JobRecord: per-job bookkeeping for the scheduler engine.

The engine keeps one JobRecord per submitted job in an arena keyed by
job_id. Records are never deleted while the engine runs, so a job id is a
stable handle from arrival until shutdown.

Lifecycle:
    WAITING ──dispatch──> RUNNING ──finish──> COMPLETED
       ^                     │
       └────preempt──────────┘   (preemptive / time-sliced policies only)

Time fields:
- arrival_time: when new_job() was called
- first_dispatch_time: the first time the job got a core (drives response time)
- last_update_time: when remaining_service_time was last charged for running
- completion_time: when job_finished() was called
"""

from dataclasses import dataclass
from typing import Optional

from models.enums import JobStatus


@dataclass
class JobRecord:
    job_id: int
    arrival_time: int
    original_service_time: int
    remaining_service_time: int
    priority: int              # lower number = higher priority
    status: JobStatus = JobStatus.WAITING
    core_id: Optional[int] = None
    first_dispatch_time: Optional[int] = None
    last_update_time: Optional[int] = None
    completion_time: Optional[int] = None

    @classmethod
    def arrive(cls, job_id: int, time: int, service_time: int, priority: int) -> "JobRecord":
        return cls(
            job_id=job_id,
            arrival_time=time,
            original_service_time=service_time,
            remaining_service_time=service_time,
            priority=priority,
        )

    @property
    def response_time(self) -> Optional[int]:
        if self.first_dispatch_time is None:
            return None
        return self.first_dispatch_time - self.arrival_time

    @property
    def turnaround_time(self) -> Optional[int]:
        if self.completion_time is None:
            return None
        return self.completion_time - self.arrival_time

    @property
    def wait_time(self) -> Optional[int]:
        if self.completion_time is None:
            return None
        return self.completion_time - self.arrival_time - self.original_service_time

    def mark_dispatched(self, core_id: int, time: int) -> None:
        """Move the job onto a core. Response time is only fixed on the first dispatch."""
        self.status = JobStatus.RUNNING
        self.core_id = core_id
        self.last_update_time = time
        if self.first_dispatch_time is None:
            self.first_dispatch_time = time

    def refresh_remaining(self, time: int) -> int:
        """
        Charge the time run since the last refresh against remaining_service_time.

        Only meaningful while RUNNING. Reaching zero does not complete the job;
        completion only happens through job_finished().
        """
        if self.status is JobStatus.RUNNING and self.last_update_time is not None:
            self.remaining_service_time -= time - self.last_update_time
            self.last_update_time = time
        return self.remaining_service_time

    def mark_preempted(self, time: int) -> None:
        """
        Return a running job to WAITING.

        A job preempted at the same instant it was first dispatched never ran,
        so its first dispatch is forgotten and response time is measured again
        at the next dispatch.
        """
        self.refresh_remaining(time)
        if self.first_dispatch_time == time:
            self.first_dispatch_time = None
        self.status = JobStatus.WAITING
        self.core_id = None
        self.last_update_time = None

    def mark_completed(self, time: int) -> None:
        self.status = JobStatus.COMPLETED
        self.core_id = None
        self.remaining_service_time = 0
        self.last_update_time = None
        self.completion_time = time

    def __repr__(self) -> str:
        return f"<JobRecord {self.job_id} {self.status.value} core={self.core_id}>"
