################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exception hierarchy for OASIS collections."""

from __future__ import annotations

from typing import Any


class RollingListError(Exception):
    """Base class for rolling list failures."""


class ArgumentOutOfRangeError(RollingListError, ValueError):
    """Raised when an argument falls outside its permitted range.

    Attributes:
        param_name: Name of the offending parameter
        value: Value that was rejected
        bound: Bound that the value violated
    """

    def __init__(self, param_name: str, value: Any, bound: Any, message: str) -> None:
        super().__init__(f"{param_name}: {message} (got {value!r})")
        self.param_name: str = param_name
        self.value: Any = value
        self.bound: Any = bound


class ArgumentBelowRangeError(ArgumentOutOfRangeError):
    """Raised when an argument is less than its lower bound."""

    def __init__(self, param_name: str, value: Any, bound: Any) -> None:
        super().__init__(
            param_name,
            value,
            bound,
            f"must be greater than or equal to {bound!r}",
        )


class ArgumentAboveRangeError(ArgumentOutOfRangeError):
    """Raised when an argument is not less than its upper bound."""

    def __init__(self, param_name: str, value: Any, bound: Any) -> None:
        super().__init__(param_name, value, bound, f"must be less than {bound!r}")


class IndexOutOfRangeError(ArgumentOutOfRangeError, IndexError):
    """Raised when an element index falls outside the occupied range."""


class IndexBelowRangeError(IndexOutOfRangeError, ArgumentBelowRangeError):
    """Raised when an element index is negative."""


class IndexAboveRangeError(IndexOutOfRangeError, ArgumentAboveRangeError):
    """Raised when an element index is at or past the element count."""


class InvalidArgumentError(RollingListError, ValueError):
    """Raised when an argument is well-formed but unusable."""


class NotSupportedError(RollingListError):
    """Raised for sequence operations a rolling list does not provide."""
