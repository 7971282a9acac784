"""
Policy factory: maps SchedulingPolicy members to policy classes.

One place knows how to build every policy; the engine calls create_policy()
once in start_up() and never switches on the enum again.
"""

from models.enums import SchedulingPolicy
from scheduler.base import AbstractPolicy
from scheduler.fcfs import FCFSPolicy
from scheduler.round_robin import RoundRobinPolicy
from scheduler.sjf import SJFPolicy, PreemptiveSJFPolicy
from scheduler.priority import PriorityPolicy, PreemptivePriorityPolicy


_REGISTRY: dict[SchedulingPolicy, type[AbstractPolicy]] = {
    SchedulingPolicy.FCFS: FCFSPolicy,
    SchedulingPolicy.RR: RoundRobinPolicy,
    SchedulingPolicy.SJF: SJFPolicy,
    SchedulingPolicy.PSJF: PreemptiveSJFPolicy,
    SchedulingPolicy.PRI: PriorityPolicy,
    SchedulingPolicy.PPRI: PreemptivePriorityPolicy,
}


def create_policy(policy: SchedulingPolicy | str) -> AbstractPolicy:
    """
    Create a policy instance from an enum member or its string value.

        create_policy(SchedulingPolicy.PSJF)
        create_policy("RR")   # names are case-insensitive

    Raises ValueError for an unknown name.
    """
    if isinstance(policy, str):
        policy = policy.lower()
    try:
        key = SchedulingPolicy(policy)
    except ValueError:
        raise ValueError(
            f"Unknown scheduling policy: {policy!r}. "
            f"Available: {[p.value for p in SchedulingPolicy]}"
        ) from None

    cls = _REGISTRY.get(key)
    if cls is None:
        raise ValueError(f"Unknown scheduling policy: {policy!r}")
    return cls()
