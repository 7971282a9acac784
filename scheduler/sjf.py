"""
Shortest Job First (SJF) and its preemptive variant (PSJF).

Jobs with the smallest remaining_service_time go to the front of the waiting
queue. Equal remaining times keep their insertion order.

SJF is non-preemptive: a short arrival waits for a free core.

PSJF (a.k.a. Shortest Remaining Time First) lets a short arrival take a core.
The engine refreshes every running job's remaining time first, then asks for
the single weakest incumbent: the running job with the LONGEST remaining
time (lowest core id on ties). If that remaining time is strictly greater
than the new job's service time, the incumbent is evicted back to the queue.

Downside is starvation: a long job might never run if short jobs keep arriving.
"""

from typing import Optional, Sequence

from models.enums import SchedulingPolicy
from models.job import JobRecord
from scheduler.base import AbstractPolicy


def shortest_remaining(a: JobRecord, b: JobRecord) -> int:
    return a.remaining_service_time - b.remaining_service_time


class SJFPolicy(AbstractPolicy):

    def compare(self, a: JobRecord, b: JobRecord) -> int:
        return shortest_remaining(a, b)

    @property
    def policy(self) -> SchedulingPolicy:
        return SchedulingPolicy.SJF


class PreemptiveSJFPolicy(AbstractPolicy):

    preemptive = True

    def compare(self, a: JobRecord, b: JobRecord) -> int:
        return shortest_remaining(a, b)

    def select_victim(self, running: Sequence[JobRecord]) -> Optional[JobRecord]:
        victim = None
        for job in running:
            # strict > keeps the lowest core id among equal remaining times
            if victim is None or job.remaining_service_time > victim.remaining_service_time:
                victim = job
        return victim

    def should_preempt(self, incoming: JobRecord, victim: JobRecord) -> bool:
        return incoming.remaining_service_time < victim.remaining_service_time

    @property
    def policy(self) -> SchedulingPolicy:
        return SchedulingPolicy.PSJF
