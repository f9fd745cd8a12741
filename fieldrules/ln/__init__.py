# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from ._utils import (
    ensure_at_least,
    ensure_not_empty,
    ensure_not_none,
    ensure_type,
    to_items,
)
from .types import (
    MaybeUnset,
    Undefined,
    UndefinedType,
    Unset,
    UnsetType,
    is_absent,
    is_sentinel,
    not_sentinel,
)

__all__ = (
    "MaybeUnset",
    "Undefined",
    "UndefinedType",
    "Unset",
    "UnsetType",
    "ensure_at_least",
    "ensure_not_empty",
    "ensure_not_none",
    "ensure_type",
    "is_absent",
    "is_sentinel",
    "not_sentinel",
    "to_items",
)
