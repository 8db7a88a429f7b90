################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-size list that rolls over once full.

A rolling list keeps the ``size`` most recently added elements. Adding to a
full list overwrites the oldest element in place instead of shifting the
others, so appends stay O(1) amortized. Elements live in a NumPy backing
array that grows on demand but never past ``size`` slots.

Interior insertion and removal are not supported. Rolling lists are not
thread-safe: callers that share one across threads must serialize every
mutating call.
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Iterable
from typing import Iterator
from typing import MutableSequence
from typing import Sized
from typing import TypeVar

import numpy as np
from numpy.typing import DTypeLike

from oasis_collections.config.rolling_list_params import RollingListParams
from oasis_collections.errors import InvalidArgumentError
from oasis_collections.errors import NotSupportedError
from oasis_collections.math_utils.index_math import grow_capacity
from oasis_collections.math_utils.index_math import to_logical
from oasis_collections.math_utils.index_math import to_physical
from oasis_collections.math_utils.validation import require_at_least
from oasis_collections.math_utils.validation import require_element_index
from oasis_collections.math_utils.validation import require_index


T = TypeVar("T")

_LOG: logging.Logger = logging.getLogger(__name__)

# Placeholder for count() called without a value
_MISSING: Any = object()


class RollingList(MutableSequence[T]):
    """List with a fixed maximum size that overwrites its oldest element.

    Indexing, iteration and search all use logical order: index 0 is the
    oldest retained element and index ``len(self) - 1`` the newest.
    Negative indices are out of range.
    """

    def __init__(
        self,
        size: int,
        capacity: int | None = None,
        items: Iterable[T] | None = None,
        dtype: DTypeLike = None,
    ) -> None:
        """Initialize the rolling list.

        Args:
            size: Maximum number of retained elements, non-negative
            capacity: Initial backing capacity, clamped to size
            items: Elements to add in order; only the last size survive
            dtype: NumPy dtype of the backing store, object when None
        """
        size = require_index("size", size)
        require_at_least("size", size, 0)

        if capacity is None:
            capacity = 0
        else:
            capacity = require_index("capacity", capacity)
            require_at_least("capacity", capacity, 0)
        if isinstance(items, Sized):
            capacity = max(capacity, len(items))

        self._size: int = size
        self._head: int = 0
        self._count: int = 0
        self._dtype: np.dtype = np.dtype(object if dtype is None else dtype)
        self._slots: np.ndarray = self._allocate(min(capacity, size))

        if items is not None:
            self.add_range(items)

    @classmethod
    def from_params(
        cls, params: RollingListParams, items: Iterable[T] | None = None
    ) -> RollingList[T]:
        """Create a rolling list from validated parameters."""
        params.validate()
        return cls(
            params.size,
            capacity=params.capacity,
            items=items,
            dtype=params.numpy_dtype(),
        )

    @property
    def size(self) -> int:
        """Maximum number of retained elements."""
        return self._size

    @size.setter
    def size(self, value: int) -> None:
        self.resize(value)

    @property
    def capacity(self) -> int:
        """Number of slots reserved in the backing store."""
        return len(self._slots)

    @capacity.setter
    def capacity(self, value: int) -> None:
        value = require_index("capacity", value)
        require_at_least("capacity", value, self._count)
        value = min(value, self._size)
        if value != len(self._slots):
            self._reserve(value)

    @property
    def head(self) -> int:
        """Backing slot holding the oldest element."""
        return self._head

    @property
    def dtype(self) -> np.dtype:
        """Dtype of the backing store."""
        return self._dtype

    @property
    def is_full(self) -> bool:
        """Return True if the next add overwrites the oldest element."""
        return self._count >= self._size

    @property
    def is_read_only(self) -> bool:
        """Return False, since elements can be replaced and added."""
        return False

    def __len__(self) -> int:
        """Return the number of elements stored."""
        return self._count

    def count(self, value: Any = _MISSING) -> int:
        """Return the number of elements stored.

        When a value is given, return the number of elements equal to it
        instead, as for any sequence.
        """
        if value is _MISSING:
            return self._count
        occupied: list[Any] = self._slots[: self._count].tolist()
        return occupied.count(value)

    def get(self, index: int) -> T:
        """Return the element at a logical index."""
        index = require_index("index", index)
        require_element_index("index", index, self._count)
        return self._slots[to_physical(index, self._head, self._size)]

    def set(self, index: int, value: T) -> None:
        """Replace the element at a logical index."""
        index = require_index("index", index)
        require_element_index("index", index, self._count)
        self._slots[to_physical(index, self._head, self._size)] = value

    def __getitem__(self, index: int) -> T:  # type: ignore[override]
        """Return the element at a logical index."""
        return self.get(index)

    def __setitem__(self, index: int, value: T) -> None:  # type: ignore[override]
        """Replace the element at a logical index."""
        self.set(index, value)

    def add(self, item: T) -> None:
        """Add an element, overwriting the oldest one if the list is full."""
        if self._size == 0:
            _LOG.debug("Dropping element added to a zero-size rolling list")
            return

        if self._count >= self._size:
            self._slots[self._head] = item
            self._head = (self._head + 1) % self._size
        else:
            if self._count == len(self._slots):
                self._reserve(grow_capacity(len(self._slots), self._size))
            self._slots[self._count] = item
            self._count += 1

    def add_range(self, items: Iterable[T]) -> None:
        """Add elements in order."""
        if self._size == 0:
            _LOG.debug("Dropping elements added to a zero-size rolling list")
            return
        for item in items:
            self.add(item)

    def append(self, value: T) -> None:
        """Add an element, overwriting the oldest one if the list is full."""
        self.add(value)

    def extend(self, values: Iterable[T]) -> None:
        """Add elements in order."""
        self.add_range(values)

    def resize(self, new_size: int) -> None:
        """Change the maximum number of retained elements.

        Growing keeps every element. Shrinking below the current count keeps
        only the newest new_size elements.
        """
        new_size = require_index("new_size", new_size)
        require_at_least("new_size", new_size, 0)
        if new_size == self._size:
            return

        if new_size > self._size:
            # Wrapped slots are only valid modulo the old size
            if self._head > 0:
                _LOG.debug(
                    "Unwrapping %d elements to grow size %d -> %d",
                    self._count,
                    self._size,
                    new_size,
                )
                self._reflow(self.to_array())
        elif new_size < self._count:
            _LOG.debug(
                "Discarding %d oldest elements to shrink size %d -> %d",
                self._count - new_size,
                self._size,
                new_size,
            )
            self._reflow(self.to_array()[self._count - new_size :].copy())
        elif len(self._slots) > new_size:
            _LOG.debug(
                "Trimming capacity %d -> %d to shrink size %d -> %d",
                len(self._slots),
                new_size,
                self._size,
                new_size,
            )
            self._reserve(new_size)

        self._size = new_size

    def clear(self) -> None:
        """Remove all elements, keeping size and capacity.

        The backing store is kept. Object slots are reset to None so the
        removed elements can be released, which costs O(count).
        """
        _LOG.debug("Clearing %d elements", self._count)
        if self._dtype == np.dtype(object):
            self._slots[: self._count] = None
        self._count = 0
        self._head = 0

    def __contains__(self, value: object) -> bool:
        """Return True if an element equals value."""
        return self._find_physical(value) >= 0

    def contains(self, value: object) -> bool:
        """Return True if an element equals value."""
        return value in self

    def index_of(self, value: object) -> int:
        """Return the logical index of the oldest element equal to value.

        Returns:
            The logical index, or -1 if no element equals value
        """
        physical: int = self._find_physical(value)
        if physical < 0:
            return -1
        return to_logical(physical, self._head, self._size)

    def copy_to(
        self, destination: MutableSequence[Any] | np.ndarray, offset: int = 0
    ) -> None:
        """Copy the elements, oldest first, into destination at offset."""
        offset = require_index("offset", offset)
        require_at_least("offset", offset, 0)
        if len(destination) - offset < self._count:
            raise InvalidArgumentError(
                f"Not enough space in destination: {self._count} elements from "
                f"offset {offset} need length {offset + self._count}, "
                f"got {len(destination)}"
            )
        for index, item in enumerate(self):
            destination[offset + index] = item

    def to_array(self) -> np.ndarray:
        """Return a new array of the elements, oldest first."""
        return np.roll(self._slots[: self._count], -self._head)

    def to_list(self) -> list[T]:
        """Return a new list of the elements, oldest first."""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        """Yield the elements, oldest first."""
        for index in range(self._count):
            yield self._slots[to_physical(index, self._head, self._size)]

    def insert(self, index: int, value: T) -> None:
        """Reject insertion at an index."""
        raise NotSupportedError("Rolling lists do not support insertion at an index")

    def __delitem__(self, index: int) -> None:  # type: ignore[override]
        """Reject removal at an index."""
        raise NotSupportedError("Rolling lists do not support removal at an index")

    def remove(self, value: T) -> None:
        """Reject removal of a value."""
        raise NotSupportedError("Rolling lists do not support removal")

    def pop(self, index: int = -1) -> T:
        """Reject removal at an index."""
        raise NotSupportedError("Rolling lists do not support removal")

    def __eq__(self, other: object) -> bool:
        """Return True if other has the same size and elements in order."""
        if not isinstance(other, RollingList):
            return NotImplemented
        return self._size == other._size and self.to_list() == other.to_list()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Return a debug representation listing the elements."""
        return f"RollingList(size={self._size}, items={self.to_list()!r})"

    def _allocate(self, capacity: int) -> np.ndarray:
        """Return an uninitialized backing store."""
        return np.empty(capacity, dtype=self._dtype)

    def _reserve(self, capacity: int) -> None:
        """Move the occupied slots into a backing store of a new capacity."""
        if capacity > len(self._slots):
            _LOG.debug("Growing capacity %d -> %d", len(self._slots), capacity)
        slots: np.ndarray = self._allocate(capacity)
        slots[: self._count] = self._slots[: self._count]
        self._slots = slots

    def _reflow(self, items: np.ndarray) -> None:
        """Replace the backing store with items in logical order."""
        self._slots = items
        self._count = len(items)
        self._head = 0

    def _find_physical(self, value: object) -> int:
        """Return the backing slot of the oldest element equal to value."""
        # Scan from the oldest element so the first match is the oldest
        for index in range(self._count):
            physical: int = to_physical(index, self._head, self._size)
            item: Any = self._slots[physical]
            if item is value or item == value:
                return physical
        return -1
