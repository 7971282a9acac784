"""
Abstract base class for all scheduling policies (Strategy pattern).

The Strategy pattern lets you swap algorithms without changing the code that
uses them. The SchedulerEngine only knows about AbstractPolicy; it asks the
policy how to order the waiting queue and whether a new arrival may kick a
running job off its core, without caring whether it's FCFS, PSJF, etc.

A policy answers three questions:
1. compare(a, b): where does a job go in the waiting queue?
2. select_victim(running): which running job is the weakest incumbent?
3. should_preempt(incoming, victim): does the new arrival beat it?

Non-preemptive policies never name a victim. Round Robin is not preemptive in
this sense either; it only gives up a core on an explicit quantum expiry,
which is what the `time_sliced` flag advertises.

To add a new scheduling policy:
1. Create a new class that inherits AbstractPolicy
2. Implement compare() and policy (plus the victim methods if preemptive)
3. Register it in scheduler/registry.py
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from models.enums import SchedulingPolicy
from models.job import JobRecord


class AbstractPolicy(ABC):

    preemptive: bool = False    # may a new arrival evict a running job?
    time_sliced: bool = False   # does quantum_expired() apply?

    @abstractmethod
    def compare(self, a: JobRecord, b: JobRecord) -> int:
        """Comparator for the waiting queue: < 0 means `a` runs before `b`."""
        ...

    def select_victim(self, running: Sequence[JobRecord]) -> Optional[JobRecord]:
        """
        Pick the single running job a new arrival would have to beat.

        `running` is in core order with remaining times already refreshed.
        Non-preemptive policies return None.
        """
        return None

    def should_preempt(self, incoming: JobRecord, victim: JobRecord) -> bool:
        """True if `incoming` should take `victim`'s core."""
        return False

    @property
    @abstractmethod
    def policy(self) -> SchedulingPolicy:
        """The enum member this class implements."""
        ...

    @property
    def policy_name(self) -> str:
        return self.policy.value
