"""Tests for CoreTable occupancy tracking."""

import pytest

from models.core_table import CoreTable


def test_starts_all_idle():
    table = CoreTable(3)
    assert table.core_count == 3
    assert table.first_idle() == 0
    assert table.busy_count() == 0
    assert list(table.running()) == []


def test_first_idle_is_lowest_index():
    table = CoreTable(3)
    table.assign(0, 10)
    table.assign(2, 12)
    assert table.first_idle() == 1

    table.assign(1, 11)
    assert table.first_idle() is None


def test_release_returns_occupant():
    table = CoreTable(2)
    table.assign(1, 7)

    assert table.release(1) == 7
    assert table.occupant(1) is None
    assert table.release(1) is None


def test_assign_busy_core_raises():
    table = CoreTable(1)
    table.assign(0, 1)
    with pytest.raises(ValueError, match="already running"):
        table.assign(0, 2)


def test_occupant_out_of_range_is_none():
    table = CoreTable(2)
    assert table.occupant(5) is None
    assert table.occupant(-1) is None
    assert table.is_valid(1) is True
    assert table.is_valid(2) is False


def test_running_in_core_order():
    table = CoreTable(3)
    table.assign(2, 20)
    table.assign(0, 5)
    assert list(table.running()) == [(0, 5), (2, 20)]


def test_clear_keeps_size():
    table = CoreTable(2)
    table.assign(0, 1)
    table.clear()
    assert table.core_count == 2
    assert table.busy_count() == 0


@pytest.mark.parametrize("count", [0, -1])
def test_non_positive_size_rejected(count):
    with pytest.raises(ValueError):
        CoreTable(count)
