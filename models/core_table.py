"""
CoreTable: fixed array of core-occupancy slots.

Each slot holds the job_id of the running job, or None when the core is idle.
The number of slots is fixed when the table is created and never changes.
"""

from typing import Iterator, Optional


class CoreTable:

    def __init__(self, core_count: int):
        if core_count <= 0:
            raise ValueError(f"core_count must be positive, got {core_count}")
        self._slots: list[Optional[int]] = [None] * core_count

    @property
    def core_count(self) -> int:
        return len(self._slots)

    def is_valid(self, core_id: int) -> bool:
        return 0 <= core_id < len(self._slots)

    def occupant(self, core_id: int) -> Optional[int]:
        """job_id running on core_id, or None if idle or the index is out of range."""
        if not self.is_valid(core_id):
            return None
        return self._slots[core_id]

    def first_idle(self) -> Optional[int]:
        """Lowest-indexed idle core, or None if every core is busy."""
        for core_id, job_id in enumerate(self._slots):
            if job_id is None:
                return core_id
        return None

    def assign(self, core_id: int, job_id: int) -> None:
        if self._slots[core_id] is not None:
            raise ValueError(
                f"Core {core_id} is already running job {self._slots[core_id]}"
            )
        self._slots[core_id] = job_id

    def release(self, core_id: int) -> Optional[int]:
        """Mark core_id idle and return the job_id that was on it."""
        job_id = self._slots[core_id]
        self._slots[core_id] = None
        return job_id

    def running(self) -> Iterator[tuple[int, int]]:
        """(core_id, job_id) pairs for busy cores, in core order."""
        for core_id, job_id in enumerate(self._slots):
            if job_id is not None:
                yield core_id, job_id

    def busy_count(self) -> int:
        return sum(1 for job_id in self._slots if job_id is not None)

    def clear(self) -> None:
        self._slots = [None] * len(self._slots)
