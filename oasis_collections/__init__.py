################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Bounded collections for OASIS."""

from __future__ import annotations

from oasis_collections.config.rolling_list_params import RollingListParams
from oasis_collections.config.rolling_list_params import RollingListParamsError
from oasis_collections.errors import ArgumentAboveRangeError
from oasis_collections.errors import ArgumentBelowRangeError
from oasis_collections.errors import ArgumentOutOfRangeError
from oasis_collections.errors import IndexAboveRangeError
from oasis_collections.errors import IndexBelowRangeError
from oasis_collections.errors import IndexOutOfRangeError
from oasis_collections.errors import InvalidArgumentError
from oasis_collections.errors import NotSupportedError
from oasis_collections.errors import RollingListError
from oasis_collections.rolling_list import RollingList


__all__ = [
    "ArgumentAboveRangeError",
    "ArgumentBelowRangeError",
    "ArgumentOutOfRangeError",
    "IndexAboveRangeError",
    "IndexBelowRangeError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "NotSupportedError",
    "RollingList",
    "RollingListError",
    "RollingListParams",
    "RollingListParamsError",
]
