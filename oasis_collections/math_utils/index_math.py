################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Circular index arithmetic for fixed-size rolling storage.

A rolling list stores its elements in a linear backing array. Once the
array holds ``size`` elements, new elements overwrite the slot at ``head``
and ``head`` advances, so logical index 0 (the oldest element) lives at
physical slot ``head``.
"""

from __future__ import annotations


def to_physical(index: int, head: int, size: int) -> int:
    """Map a logical index to its slot in the backing array.

    Args:
        index: Logical index, 0 for the oldest retained element
        head: Backing slot holding the oldest element
        size: Maximum number of retained elements

    Returns:
        The backing slot, or 0 for a zero-size list
    """
    if size <= 0:
        return 0
    return (index + head) % size


def to_logical(physical: int, head: int, size: int) -> int:
    """Map a backing slot to its logical index.

    Inverse of :func:`to_physical` for slots inside the occupied range.
    """
    if size <= 0:
        return 0
    return (size + physical - head) % size


def grow_capacity(capacity: int, size: int) -> int:
    """Return the next backing capacity for a list that ran out of slots.

    Capacity doubles (or grows by one from empty) but never exceeds
    ``size``, since a rolling list never holds more than ``size`` elements.
    A capacity already at or above ``size`` is returned unchanged.
    """
    if capacity >= size:
        return capacity
    return min(max(capacity * 2, capacity + 1), size)
