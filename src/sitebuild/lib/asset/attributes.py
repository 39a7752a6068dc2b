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
"""Layered lookup of asset attributes."""
from collections.abc import Mapping
import enum
from typing import Any


class _NoValue(enum.Enum):
    NO_VALUE = "NO_VALUE"

    def __repr__(self):
        return "NO_VALUE"

    def __bool__(self):
        return False


NO_VALUE = _NoValue.NO_VALUE
"""Returned when an attribute is not defined anywhere. None is a legitimate
attribute value, so it can't be used to signal absence."""

DEFAULTS: Mapping[str, Any] = {
    "extension": "dat",
    "binary": True,
    "filters": [],
}
"""Built-in attribute values used when neither the asset nor the site
defaults define an attribute."""


def resolve_attribute(
    name: str,
    asset_attributes: Mapping[str, Any],
    site_attributes: Mapping[str, Any],
    defaults: Mapping[str, Any] = DEFAULTS,
) -> Any:
    """
    Find the value of an attribute, looking first in the asset's own
    attributes, then the site defaults, then the built-in defaults.

    Presence of the key decides which layer wins, so an asset attribute set
    to an empty or falsy value still hides the site default.

    Returns NO_VALUE if no layer defines the attribute.
    """
    for layer in (asset_attributes, site_attributes, defaults):
        if name in layer:
            return layer[name]
    return NO_VALUE
