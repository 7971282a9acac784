"""
Exceptions raised by the scheduler engine.

Every one of these means the CALLER broke the engine's contract: called
things out of order, passed an impossible argument, or asked for an average
before anything finished. The engine is deterministic, so none of them are
worth retrying; they exist to fail loudly instead of returning a wrong number.

"Nothing there" results (an empty queue, an idle core) are NOT errors;
those come back as None.
"""


class SchedulerError(Exception):
    """Base class for all scheduler contract violations."""


class EngineStateError(SchedulerError, RuntimeError):
    """Engine used before start_up(), started twice, or used after shutdown()."""


class InvalidCallError(SchedulerError, ValueError):
    """An argument the engine cannot act on (bad core id, duplicate job id, time going backwards...)."""


class PolicyMismatchError(SchedulerError):
    """An event that the active policy does not support, e.g. quantum expiry outside Round Robin."""


class NoCompletedJobsError(SchedulerError, RuntimeError):
    """An average was requested before any job completed."""
