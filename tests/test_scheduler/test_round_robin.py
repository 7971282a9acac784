"""
Tests for Round Robin.

Round Robin is FCFS plus quantum expiry: when the driver reports that a
job's slice ran out, the job goes to the back of the line and the next one
takes the core.
"""

import pytest

from models.enums import JobStatus, SchedulingPolicy
from scheduler.errors import PolicyMismatchError
from scheduler.round_robin import RoundRobinPolicy


def test_policy_flags():
    policy = RoundRobinPolicy()
    assert policy.time_sliced is True
    assert policy.preemptive is False
    assert policy.policy_name == "rr"


def test_quantum_expiry_alternates_equal_jobs(make_engine):
    """Two equal jobs on one core take turns; neither starves."""
    engine = make_engine(1, SchedulingPolicy.RR)
    assert engine.new_job(0, 0, 4, 1) == 0
    assert engine.new_job(1, 1, 4, 1) is None

    assert engine.quantum_expired(0, 2) == 1
    assert engine.quantum_expired(0, 4) == 0
    assert engine.quantum_expired(0, 6) == 1

    # job0 has run 0-2 and 4-6, job1 has run 2-4
    assert engine.job(0).remaining_service_time == 0
    assert engine.job(1).remaining_service_time == 2


def test_requeue_sends_to_back(make_engine):
    engine = make_engine(1, SchedulingPolicy.RR)
    engine.new_job(0, 0, 10, 1)
    engine.new_job(1, 1, 10, 1)
    engine.new_job(2, 2, 10, 1)

    assert engine.quantum_expired(0, 3) == 1
    assert engine.show_queue() == "1(0) 2(-1) 0(-1)"

    assert engine.quantum_expired(0, 6) == 2
    assert engine.show_queue() == "2(0) 0(-1) 1(-1)"


def test_quantum_expiry_reduces_remaining_time(make_engine):
    engine = make_engine(1, SchedulingPolicy.RR)
    engine.new_job(0, 0, 10, 1)
    engine.new_job(1, 1, 10, 1)

    engine.quantum_expired(0, 3)

    job0 = engine.job(0)
    assert job0.status is JobStatus.WAITING
    assert job0.remaining_service_time == 7
    assert job0.original_service_time == 10


def test_lone_job_keeps_core_after_quantum(make_engine):
    engine = make_engine(1, SchedulingPolicy.RR)
    engine.new_job(0, 0, 10, 1)

    assert engine.quantum_expired(0, 3) == 0
    assert engine.core_occupant(0) == 0
    assert engine.job(0).remaining_service_time == 7
    assert engine.job(0).response_time == 0


def test_quantum_on_idle_core_with_empty_queue(make_engine):
    engine = make_engine(2, SchedulingPolicy.RR)
    engine.new_job(0, 0, 10, 1)

    assert engine.quantum_expired(1, 3) is None
    assert engine.core_occupant(1) is None


def test_response_time_set_on_first_dispatch_only(make_engine):
    engine = make_engine(1, SchedulingPolicy.RR)
    engine.new_job(0, 0, 4, 1)
    engine.new_job(1, 1, 4, 1)

    engine.quantum_expired(0, 2)   # job1 first runs at t=2
    engine.quantum_expired(0, 4)   # job0 back
    engine.quantum_expired(0, 6)   # job1 again

    assert engine.job(0).response_time == 0
    assert engine.job(1).response_time == 1


def test_full_run_statistics(make_engine):
    engine = make_engine(1, SchedulingPolicy.RR)
    engine.new_job(0, 0, 4, 1)
    engine.new_job(1, 1, 4, 1)
    engine.quantum_expired(0, 2)        # 1 runs
    engine.quantum_expired(0, 4)        # 0 runs
    assert engine.job_finished(0, 0, 6) == 1
    assert engine.job_finished(0, 1, 8) is None

    # job0: turnaround 6, wait 2, response 0
    # job1: turnaround 7, wait 3, response 1
    assert engine.average_turnaround_time() == 6.5
    assert engine.average_wait_time() == 2.5
    assert engine.average_response_time() == 0.5


@pytest.mark.parametrize("policy", ["fcfs", "sjf", "psjf", "pri", "ppri"])
def test_quantum_expired_rejected_outside_round_robin(make_engine, policy):
    engine = make_engine(1, policy)
    engine.new_job(0, 0, 4, 1)

    with pytest.raises(PolicyMismatchError):
        engine.quantum_expired(0, 2)
    assert engine.core_occupant(0) == 0
