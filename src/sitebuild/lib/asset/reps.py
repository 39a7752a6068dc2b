#
# Copyright 2025 The Superpower Institute Ltd.
#
# This file is part of sitebuild.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
"""Work out which representations an asset should be compiled into."""
from __future__ import annotations

from collections.abc import Mapping
import enum
from typing import Any

import attrs

DEFAULT_REP = "default"
"""Name of the representation every asset has unless it is suppressed"""


class OverrideKind(enum.Enum):
    NOT_OVERRIDDEN = "not_overridden"
    """The asset says nothing about this representation"""
    OVERRIDDEN = "overridden"
    """The asset provides attributes for this representation"""
    SUPPRESSED = "suppressed"
    """The asset opts out of this representation by mapping it to none"""


@attrs.frozen
class RepOverride:
    """
    The asset's say on a single representation. Asset front matter expresses
    suppression as a key mapped to `none`, which is cleaned to None, so the
    three cases are told apart here rather than by checking for None later.
    """

    kind: OverrideKind

    attributes: Mapping[str, Any] = attrs.field(factory=dict)
    """Attributes overriding the asset's for this representation. Always
    empty unless kind is OVERRIDDEN."""

    @property
    def suppressed(self) -> bool:
        return self.kind is OverrideKind.SUPPRESSED

    @classmethod
    def lookup(cls, asset_reps: Mapping[str, Any], name: str) -> RepOverride:
        """Classify the entry for `name` in an asset's `reps` attribute"""
        if name not in asset_reps:
            return cls(kind=OverrideKind.NOT_OVERRIDDEN)

        value = asset_reps[name]
        if value is None:
            return cls(kind=OverrideKind.SUPPRESSED)
        if not isinstance(value, Mapping):
            raise ValueError(
                f"representation '{name}' must map to attributes or none, got {type(value).__name__}"
            )
        return cls(kind=OverrideKind.OVERRIDDEN, attributes=dict(value))


def reps_mapping(value: Any, owner: str) -> Mapping[str, Any]:
    """Validate a `reps` attribute value. A missing or empty `reps` attribute
    is treated as an empty mapping."""
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"{owner} 'reps' attribute must be a mapping, got {type(value).__name__}")
    return value


def rep_definitions(
    default_reps: Mapping[str, Any],
    asset_reps: Mapping[str, Any],
) -> list[tuple[str, dict[str, Any]]]:
    """
    Return (name, attributes) for each representation an asset must produce.

    Names come from the site default reps, the asset's own reps, and
    `default`. Site defaults only contribute names: the attributes for each
    representation come from the asset alone. Names the asset maps to None
    are dropped, including `default`.

    Names are returned in the order they are first seen, site defaults
    first, so builds are reproducible.
    """
    names = list(dict.fromkeys([*default_reps.keys(), *asset_reps.keys(), DEFAULT_REP]))

    definitions = []
    for name in names:
        override = RepOverride.lookup(asset_reps, name)
        if override.suppressed:
            continue
        definitions.append((name, dict(override.attributes)))

    return definitions
