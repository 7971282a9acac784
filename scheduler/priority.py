"""
Priority (PRI) and Preemptive Priority (PPRI) policies.

Jobs with the lowest priority NUMBER run first (0 beats 1 beats 2...).
Equal priorities are broken by arrival time, earlier first.

PRI is non-preemptive: an urgent arrival waits for a free core.

PPRI compares the arrival against the single weakest running job: the one
with the highest priority number, and among those the LATEST arrival. The
arrival takes that core only if its priority is strictly better; an equal
priority never evicts anyone.

Downside is the same starvation problem as SJF: low-priority jobs might wait
forever if high-priority jobs keep arriving. Aging would fix it; it is not
part of this policy.
"""

from typing import Optional, Sequence

from models.enums import SchedulingPolicy
from models.job import JobRecord
from scheduler.base import AbstractPolicy


def highest_priority(a: JobRecord, b: JobRecord) -> int:
    diff = a.priority - b.priority
    if diff == 0:
        return a.arrival_time - b.arrival_time
    return diff


class PriorityPolicy(AbstractPolicy):

    def compare(self, a: JobRecord, b: JobRecord) -> int:
        return highest_priority(a, b)

    @property
    def policy(self) -> SchedulingPolicy:
        return SchedulingPolicy.PRI


class PreemptivePriorityPolicy(AbstractPolicy):

    preemptive = True

    def compare(self, a: JobRecord, b: JobRecord) -> int:
        return highest_priority(a, b)

    def select_victim(self, running: Sequence[JobRecord]) -> Optional[JobRecord]:
        victim = None
        for job in running:
            if victim is None or highest_priority(job, victim) > 0:
                victim = job
        return victim

    def should_preempt(self, incoming: JobRecord, victim: JobRecord) -> bool:
        return incoming.priority < victim.priority

    @property
    def policy(self) -> SchedulingPolicy:
        return SchedulingPolicy.PPRI
