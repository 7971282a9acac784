"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("psjf", not "SchedulingPolicy.PSJF")
- They can be built straight from a config string: SchedulingPolicy("rr")
- Typos become immediate errors instead of silent bugs
"""

import enum


class JobStatus(str, enum.Enum):
    WAITING = "WAITING"        # arrived, sitting in the ordered queue
    RUNNING = "RUNNING"        # occupying a core
    COMPLETED = "COMPLETED"    # finished via job_finished(), stats accumulated


class SchedulingPolicy(str, enum.Enum):
    FCFS = "fcfs"    # First Come First Served: arrival order, no preemption
    RR = "rr"        # Round Robin: arrival order, preempted on quantum expiry
    SJF = "sjf"      # Shortest Job First: ascending service time, no preemption
    PSJF = "psjf"    # Preemptive SJF: shortest remaining time wins a core
    PRI = "pri"      # Priority: lower number runs first, no preemption
    PPRI = "ppri"    # Preemptive Priority: higher priority arrival evicts
