"""
First Come First Served (FCFS) policy.

The simplest scheduling policy: jobs run in the order they arrive.
The comparator calls every pair equal, and OrderedQueue keeps equal items
in insertion order, so the waiting queue is just a FIFO.

Non-preemptive: once a job has a core it keeps it until job_finished().

Downside: a long-running job blocks everything behind it.
This is called the "convoy effect".
"""

from models.enums import SchedulingPolicy
from models.job import JobRecord
from scheduler.base import AbstractPolicy


def arrival_order(a: JobRecord, b: JobRecord) -> int:
    """Every pair ties, so insertion (arrival) order wins."""
    return 0


class FCFSPolicy(AbstractPolicy):

    def compare(self, a: JobRecord, b: JobRecord) -> int:
        return arrival_order(a, b)

    @property
    def policy(self) -> SchedulingPolicy:
        return SchedulingPolicy.FCFS
