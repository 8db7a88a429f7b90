################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for rolling list resizing and backing capacity."""

from __future__ import annotations

import pytest

from oasis_collections.errors import ArgumentBelowRangeError
from oasis_collections.rolling_list import RollingList


def test_grow_after_wrap_keeps_order() -> None:
    """Growing a wrapped list keeps every element in order."""
    items: RollingList[int] = RollingList(3, items=[1, 2, 3, 4, 5])
    assert items.head == 2
    items.resize(5)
    assert items.head == 0
    assert items.size == 5
    assert list(items) == [3, 4, 5]
    items.add_range([6, 7, 8])
    assert list(items) == [4, 5, 6, 7, 8]


def test_grow_unwrapped_keeps_order() -> None:
    """Growing a list that never wrapped leaves its contents alone."""
    items: RollingList[int] = RollingList(3, items=[1, 2])
    items.size = 6
    assert list(items) == [1, 2]
    items.add_range([3, 4, 5, 6, 7])
    assert list(items) == [2, 3, 4, 5, 6, 7]


def test_grow_full_unwrapped() -> None:
    """A full list with head at zero grows without reflow."""
    items: RollingList[int] = RollingList(2, items=[1, 2])
    items.resize(3)
    items.add(3)
    assert list(items) == [1, 2, 3]
    items.add(4)
    assert list(items) == [2, 3, 4]


def test_shrink_discards_oldest() -> None:
    """Shrinking below the count keeps the newest elements."""
    items: RollingList[int] = RollingList(5, items=range(1, 8))
    assert list(items) == [3, 4, 5, 6, 7]
    items.resize(2)
    assert items.head == 0
    assert len(items) == 2
    assert list(items) == [6, 7]
    items.add(8)
    assert list(items) == [7, 8]


def test_shrink_without_truncation() -> None:
    """Shrinking to at least the count leaves contents alone."""
    items: RollingList[int] = RollingList(4)
    items.add(1)
    items.add(2)
    items.resize(2)
    assert list(items) == [1, 2]
    assert items.is_full
    items.add(3)
    assert list(items) == [2, 3]


def test_shrink_to_zero() -> None:
    """Shrinking to zero drops everything and ignores later adds."""
    items: RollingList[int] = RollingList(3, items=[1, 2, 3, 4])
    items.resize(0)
    assert len(items) == 0
    assert items.head == 0
    items.add(5)
    assert list(items) == []


def test_resize_to_same_size_is_noop() -> None:
    """Resizing to the current size changes nothing."""
    items: RollingList[int] = RollingList(3, items=[1, 2, 3, 4])
    head: int = items.head
    items.resize(3)
    assert items.head == head
    assert list(items) == [2, 3, 4]


def test_negative_resize_rejected() -> None:
    """Resizing to a negative size is rejected."""
    items: RollingList[int] = RollingList(3, items=[1])
    with pytest.raises(ArgumentBelowRangeError) as excinfo:
        items.resize(-1)
    assert excinfo.value.param_name == "new_size"
    assert items.size == 3
    assert list(items) == [1]


def test_capacity_grows_by_doubling() -> None:
    """Backing capacity doubles as elements are added."""
    items: RollingList[int] = RollingList(10)
    capacities: list[int] = []
    for value in range(10):
        items.add(value)
        capacities.append(items.capacity)
    assert capacities == [1, 2, 4, 4, 8, 8, 8, 8, 10, 10]


def test_capacity_never_exceeds_size() -> None:
    """Capacity stays at size once the list wraps."""
    items: RollingList[int] = RollingList(3, items=range(100))
    assert items.capacity == 3


def test_initial_capacity_clamped_to_size() -> None:
    """Requested capacity is clamped to size."""
    assert RollingList(4, capacity=100).capacity == 4
    assert RollingList(4, capacity=2).capacity == 2
    assert RollingList(4).capacity == 0


def test_seed_length_reserves_capacity() -> None:
    """A sized seed reserves room for all of its elements up to size."""
    assert RollingList(10, items=[1, 2, 3]).capacity == 3
    assert RollingList(2, items=[1, 2, 3]).capacity == 2


def test_capacity_setter() -> None:
    """Capacity can be raised up to size but not below the count."""
    items: RollingList[int] = RollingList(8, items=[1, 2, 3])
    items.capacity = 6
    assert items.capacity == 6
    items.capacity = 50
    assert items.capacity == 8
    items.capacity = 3
    assert items.capacity == 3
    with pytest.raises(ArgumentBelowRangeError):
        items.capacity = 2
    assert list(items) == [1, 2, 3]


def test_shrink_trims_capacity_to_size() -> None:
    """Shrinking without discarding keeps capacity within the new size."""
    items: RollingList[int] = RollingList(4, capacity=4, items=[1, 2])
    assert items.capacity == 4
    items.resize(2)
    assert items.capacity == 2
    assert list(items) == [1, 2]
    items.add(3)
    items.add(4)
    assert items.capacity == 2
    assert list(items) == [3, 4]


def test_shrink_empty_list_trims_capacity() -> None:
    """An empty list shrinks its reserved capacity along with its size."""
    items: RollingList[int] = RollingList(6, capacity=6)
    items.resize(3)
    assert items.capacity == 3
    assert len(items) == 0
