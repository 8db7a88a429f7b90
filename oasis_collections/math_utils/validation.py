################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Argument validation helpers for OASIS collections."""

from __future__ import annotations

import operator
from typing import Any

from oasis_collections.errors import ArgumentBelowRangeError
from oasis_collections.errors import IndexAboveRangeError
from oasis_collections.errors import IndexBelowRangeError


def require_index(name: str, value: Any) -> int:
    """Return value as a plain int, rejecting non-integral types."""
    try:
        return operator.index(value)
    except TypeError as exc:
        raise TypeError(
            f"{name} must be an integer, not {type(value).__name__}"
        ) from exc


def require_at_least(name: str, value: int, bound: int) -> None:
    """Require value >= bound."""
    if value < bound:
        raise ArgumentBelowRangeError(name, value, bound)


def require_element_index(name: str, value: int, count: int) -> None:
    """Require 0 <= value < count, reporting which bound was violated."""
    if value >= count:
        raise IndexAboveRangeError(name, value, count)
    if value < 0:
        raise IndexBelowRangeError(name, value, 0)
