"""
Round Robin policy.

Each job gets a fixed time quantum. If the job finishes within the quantum,
great. If not, the driver calls quantum_expired() and the job is moved to the
back of the waiting queue while the next job runs.

The ordering is the same FIFO as FCFS. What makes Round Robin special is the
`time_sliced` flag: it is the only policy for which the engine accepts
quantum_expired(). The quantum length itself lives in the driver; the engine
never keeps a clock, it only reacts to the expiry event.

Tradeoff: more context switching, but better responsiveness. Two jobs of
equal length alternate on a single core and neither starves.
"""

from models.enums import SchedulingPolicy
from models.job import JobRecord
from scheduler.base import AbstractPolicy
from scheduler.fcfs import arrival_order


class RoundRobinPolicy(AbstractPolicy):

    time_sliced = True

    def compare(self, a: JobRecord, b: JobRecord) -> int:
        return arrival_order(a, b)

    @property
    def policy(self) -> SchedulingPolicy:
        return SchedulingPolicy.RR
