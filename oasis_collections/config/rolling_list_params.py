################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for rolling lists."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any

import numpy as np


# Maximum number of retained elements
ROLLING_LIST_SIZE: int = 16
# Initial backing capacity (None to grow on demand)
ROLLING_LIST_CAPACITY: int | None = None
# NumPy dtype name for the backing store (None for arbitrary objects)
ROLLING_LIST_DTYPE: str | None = None


class RollingListParamsError(Exception):
    """Raised when rolling list parameter validation fails."""


def _require_non_negative_int(value: Any, name: str) -> None:
    """Require a non-negative integer value."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise RollingListParamsError(f"{name} must be an int")
    if value < 0:
        raise RollingListParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class RollingListParams:
    """Construction parameters for a rolling list."""

    # Maximum number of retained elements
    size: int = ROLLING_LIST_SIZE
    # Initial backing capacity, clamped to size
    capacity: int | None = ROLLING_LIST_CAPACITY
    # NumPy dtype name for the backing store
    dtype: str | None = ROLLING_LIST_DTYPE

    @classmethod
    def defaults(cls) -> RollingListParams:
        """Return the default rolling list parameters."""
        return cls()

    def validate(self) -> None:
        """Validate parameter invariants."""
        _require_non_negative_int(self.size, "size")
        if self.capacity is not None:
            _require_non_negative_int(self.capacity, "capacity")

        if self.dtype is not None:
            try:
                np.dtype(self.dtype)
            except TypeError as exc:
                raise RollingListParamsError(
                    f"dtype {self.dtype!r} is not a numpy dtype"
                ) from exc

    def numpy_dtype(self) -> np.dtype:
        """Return the backing store dtype."""
        if self.dtype is None:
            return np.dtype(object)
        return np.dtype(self.dtype)

    def replace(self, **overrides: Any) -> RollingListParams:
        """Return a modified copy of the parameters."""
        return replace(self, **overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a dict representation for debugging."""
        return {field.name: getattr(self, field.name) for field in fields(self)}
