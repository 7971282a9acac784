"""
Scheduler Engine: the core orchestrator.

The engine does not run anything and keeps no clock. An external driver
replays a trace and tells it what happened; the engine answers with a
scheduling decision:

    driver event                    engine answer
    ───────────────────────────     ─────────────────────────────────────
    new_job(id, t, service, pri) →  core id the job starts on, or None
    job_finished(core, id, t)    →  job id that takes over the core, or None
    quantum_expired(core, t)     →  job id that takes over the core, or None

"Now" is always the `time` argument of the current call, and calls must come
in non-decreasing time order.

Internally it wires together three pieces:

         CoreTable                 OrderedQueue               Policy
    ┌──────────────────┐      ┌──────────────────┐    ┌──────────────────┐
    │ core 0: job 4    │      │ job 2, job 7,... │    │ compare()        │
    │ core 1: idle     │      │ (waiting only)   │    │ select_victim()  │
    └──────────────────┘      └──────────────────┘    │ should_preempt() │
                                                      └──────────────────┘

Running jobs are NEVER in the queue; a job is in exactly one of
WAITING / RUNNING / COMPLETED. Every JobRecord lives in an arena keyed by
job_id for the whole run.

The engine is an ordinary object, so a driver can run several of them side by
side. It is not thread-safe: one call at a time.
"""

import logging
from typing import Optional

from config.settings import settings
from models.core_table import CoreTable
from models.enums import SchedulingPolicy
from models.job import JobRecord
from models.stats import SchedulerStats
from scheduler.base import AbstractPolicy
from scheduler.errors import (
    EngineStateError,
    InvalidCallError,
    NoCompletedJobsError,
    PolicyMismatchError,
)
from scheduler.ordered_queue import OrderedQueue
from scheduler.registry import create_policy

logger = logging.getLogger(__name__)


class SchedulerEngine:
    """
    Event-driven CPU scheduling engine.

    Usage:
        engine = SchedulerEngine()
        engine.start_up(2, SchedulingPolicy.PSJF)
        engine.new_job(0, time=0, service_time=10, priority=1)   # → 0
        ...
        engine.average_wait_time()
        engine.shutdown()
    """

    # Engine lifecycle
    _NEW = "new"
    _STARTED = "started"
    _SHUT_DOWN = "shut_down"

    def __init__(self):
        self._state = self._NEW
        self._policy: Optional[AbstractPolicy] = None
        self._cores: Optional[CoreTable] = None
        self._queue: Optional[OrderedQueue[JobRecord]] = None
        self._jobs: dict[int, JobRecord] = {}
        self._clock: Optional[int] = None

        # ── Aggregate accumulators (fed on completion) ──────────
        self._completed = 0
        self._total_wait = 0
        self._total_turnaround = 0
        self._total_response = 0

    # ── Lifecycle ───────────────────────────────────────────────

    def start_up(
        self,
        cores: Optional[int] = None,
        policy: SchedulingPolicy | str | None = None,
    ) -> None:
        """
        Allocate `cores` idle cores and an ordered queue for `policy`.

        Must be called exactly once, before anything else. Missing arguments
        fall back to DEFAULT_CORE_COUNT / DEFAULT_SCHEDULING_POLICY.
        """
        if self._state != self._NEW:
            raise EngineStateError("start_up() may only be called once")

        core_count = settings.DEFAULT_CORE_COUNT if cores is None else cores
        if core_count <= 0:
            raise InvalidCallError(f"Core count must be positive, got {core_count}")

        self._policy = create_policy(
            settings.DEFAULT_SCHEDULING_POLICY if policy is None else policy
        )
        self._cores = CoreTable(core_count)
        self._queue = OrderedQueue(self._policy.compare)
        self._state = self._STARTED

        logger.info(
            f"Scheduler engine started: {core_count} core(s), "
            f"policy={self._policy.policy_name}"
        )

    def shutdown(self) -> None:
        """Release the queue, core table and job arena. The engine is unusable afterwards."""
        self._require_started()
        logger.info(
            f"Scheduler engine shutting down after {self._completed} "
            f"completed job(s) out of {len(self._jobs)}"
        )
        self._queue.clear()
        self._cores.clear()
        self._jobs.clear()
        self._state = self._SHUT_DOWN

    @property
    def is_running(self) -> bool:
        return self._state == self._STARTED

    @property
    def policy(self) -> SchedulingPolicy:
        self._require_started()
        return self._policy.policy

    @property
    def core_count(self) -> int:
        self._require_started()
        return self._cores.core_count

    # ── Events ──────────────────────────────────────────────────

    def new_job(self, job_id: int, time: int, service_time: int, priority: int) -> Optional[int]:
        """
        A job arrives. Returns the core it should start on, or None if it waits.

        1. Any idle core → lowest-indexed idle core.
        2. Preemptive policy, all busy → refresh every running job's remaining
           time, find the weakest incumbent, and evict it if the arrival wins.
        3. Otherwise the job joins the waiting queue.
        """
        self._require_started()
        if job_id in self._jobs:
            raise InvalidCallError(f"Job {job_id} has already been submitted")
        if service_time <= 0:
            raise InvalidCallError(
                f"Job {job_id}: service_time must be positive, got {service_time}"
            )

        self._advance_clock(time)

        job = JobRecord.arrive(job_id, time, service_time, priority)
        self._jobs[job_id] = job

        core_id = self._cores.first_idle()
        if core_id is None and self._policy.preemptive:
            core_id = self._try_preempt(job, time)

        if core_id is not None:
            self._dispatch(job, core_id, time)
        else:
            position = self._queue.insert(job)
            logger.debug(f"t={time}: job {job_id} waiting at position {position}")

        self._log_snapshot()
        return core_id

    def job_finished(self, core_id: int, job_id: int, time: int) -> Optional[int]:
        """
        The job on `core_id` completed. Returns the job that takes over the core, or None.
        """
        self._require_started()
        self._require_core(core_id)

        occupant = self._cores.occupant(core_id)
        if occupant is None:
            raise InvalidCallError(f"Core {core_id} is idle; no job to finish")
        if occupant != job_id:
            raise InvalidCallError(
                f"Core {core_id} is running job {occupant}, not job {job_id}"
            )
        self._advance_clock(time)

        job = self._jobs[job_id]
        job.mark_completed(time)
        self._cores.release(core_id)

        self._completed += 1
        self._total_wait += job.wait_time
        self._total_turnaround += job.turnaround_time
        self._total_response += job.response_time
        logger.debug(
            f"t={time}: job {job_id} finished on core {core_id} "
            f"(wait={job.wait_time}, turnaround={job.turnaround_time}, "
            f"response={job.response_time})"
        )

        next_id = self._dispatch_next(core_id, time)
        self._log_snapshot()
        return next_id

    def quantum_expired(self, core_id: int, time: int) -> Optional[int]:
        """
        Round Robin time slice ran out on `core_id`.

        The occupant goes to the back of the queue with its remaining time
        reduced, then the queue front takes the core. If nothing else is
        waiting, that front is the same job, so it simply keeps running.
        """
        self._require_started()
        if not self._policy.time_sliced:
            raise PolicyMismatchError(
                f"quantum_expired() is only valid under round robin, "
                f"not {self._policy.policy_name}"
            )
        self._require_core(core_id)
        self._advance_clock(time)

        occupant = self._cores.occupant(core_id)
        if occupant is not None:
            job = self._jobs[occupant]
            self._preempt(job, time)
            logger.debug(
                f"t={time}: quantum expired for job {occupant} on core {core_id} "
                f"(remaining={job.remaining_service_time})"
            )

        next_id = self._dispatch_next(core_id, time)
        self._log_snapshot()
        return next_id

    # ── Statistics ──────────────────────────────────────────────

    def average_wait_time(self) -> float:
        return self._average(self._total_wait, "wait")

    def average_turnaround_time(self) -> float:
        return self._average(self._total_turnaround, "turnaround")

    def average_response_time(self) -> float:
        return self._average(self._total_response, "response")

    def stats(self) -> SchedulerStats:
        """Snapshot of the engine; averages are None until something completes."""
        self._require_started()
        done = self._completed
        return SchedulerStats(
            policy=self._policy.policy,
            core_count=self._cores.core_count,
            submitted=len(self._jobs),
            waiting=self._queue.size(),
            running=self._cores.busy_count(),
            completed=done,
            avg_wait_time=self._total_wait / done if done else None,
            avg_turnaround_time=self._total_turnaround / done if done else None,
            avg_response_time=self._total_response / done if done else None,
        )

    # ── Inspection ──────────────────────────────────────────────

    def job(self, job_id: int) -> Optional[JobRecord]:
        self._require_started()
        return self._jobs.get(job_id)

    def core_occupant(self, core_id: int) -> Optional[int]:
        self._require_started()
        self._require_core(core_id)
        return self._cores.occupant(core_id)

    def show_queue(self) -> str:
        """
        One-line picture of the scheduler: running jobs as id(core) in core
        order, then waiting jobs as id(-1) in queue order.

            "4(0) 2(-1) 1(-1)"
        """
        self._require_started()
        running = [f"{job_id}({core_id})" for core_id, job_id in self._cores.running()]
        waiting = [f"{job.job_id}(-1)" for job in self._queue]
        return " ".join(running + waiting)

    # ── Internals ───────────────────────────────────────────────

    def _try_preempt(self, incoming: JobRecord, time: int) -> Optional[int]:
        """
        Evict the weakest running job if `incoming` beats it. Returns the freed core or None.

        Every running job's remaining time is refreshed BEFORE the victim is
        chosen, so the comparison never sees a stale value.
        """
        running = [self._jobs[job_id] for _, job_id in self._cores.running()]
        for job in running:
            job.refresh_remaining(time)

        victim = self._policy.select_victim(running)
        if victim is None or not self._policy.should_preempt(incoming, victim):
            return None

        core_id = victim.core_id
        self._preempt(victim, time)
        logger.debug(
            f"t={time}: job {incoming.job_id} preempts job {victim.job_id} "
            f"on core {core_id} (victim remaining={victim.remaining_service_time})"
        )
        return core_id

    def _preempt(self, job: JobRecord, time: int) -> None:
        """Running → Waiting: free the core and re-insert at the job's current order."""
        self._cores.release(job.core_id)
        job.mark_preempted(time)
        self._queue.insert(job)

    def _dispatch(self, job: JobRecord, core_id: int, time: int) -> None:
        self._cores.assign(core_id, job.job_id)
        job.mark_dispatched(core_id, time)
        logger.debug(
            f"t={time}: job {job.job_id} dispatched to core {core_id} "
            f"(remaining={job.remaining_service_time})"
        )

    def _dispatch_next(self, core_id: int, time: int) -> Optional[int]:
        """Poll the queue front onto the freed core. None leaves the core idle."""
        job = self._queue.poll()
        if job is None:
            logger.debug(f"t={time}: core {core_id} idle")
            return None
        self._dispatch(job, core_id, time)
        return job.job_id

    def _average(self, total: int, label: str) -> float:
        self._require_started()
        if self._completed == 0:
            raise NoCompletedJobsError(f"No completed jobs; average {label} time is undefined")
        unfinished = len(self._jobs) - self._completed
        if unfinished:
            logger.warning(
                f"Average {label} time requested with {unfinished} job(s) still unfinished"
            )
        return total / self._completed

    def _advance_clock(self, time: int) -> None:
        if self._clock is not None and time < self._clock:
            raise InvalidCallError(
                f"Time went backwards: got t={time} after t={self._clock}"
            )
        self._clock = time

    def _require_started(self) -> None:
        if self._state == self._NEW:
            raise EngineStateError("Scheduler engine has not been started; call start_up() first")
        if self._state == self._SHUT_DOWN:
            raise EngineStateError("Scheduler engine has been shut down")

    def _require_core(self, core_id: int) -> None:
        if not self._cores.is_valid(core_id):
            raise InvalidCallError(
                f"Core id {core_id} out of range [0, {self._cores.core_count})"
            )

    def _log_snapshot(self) -> None:
        if settings.LOG_QUEUE_SNAPSHOTS:
            logger.debug(f"queue: {self.show_queue()}")
