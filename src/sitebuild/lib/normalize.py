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
"""Canonical forms for asset attributes and paths.

Attributes usually arrive from front matter or metadata files, where every
key and most values are strings. They are cleaned once, when an asset or
site defaults are created, so the rest of the build can rely on a single
representation.
"""
from collections.abc import Mapping
import re
from typing import Any

# string values which have a more specific meaning once cleaned
_CLEAN_VALUES = {
    "true": True,
    "false": False,
    "none": None,
}

_REPEATED_SEPARATORS = re.compile(r"/+")


def clean_value(value: Any) -> Any:
    """Clean a single attribute value, recursing into mappings and lists."""
    if isinstance(value, Mapping):
        return clean_attributes(value)
    if isinstance(value, (list, tuple)):
        return [clean_value(item) for item in value]
    if isinstance(value, str) and value in _CLEAN_VALUES:
        return _CLEAN_VALUES[value]
    return value


def clean_attributes(raw_attributes: Mapping | None) -> dict[str, Any]:
    """
    Return a cleaned copy of raw_attributes. The input is never modified.

    - keys are converted to stripped strings
    - nested mappings are cleaned recursively
    - the strings "true", "false" and "none" become True, False and None
    """
    if raw_attributes is None:
        return {}
    if not isinstance(raw_attributes, Mapping):
        raise ValueError(f"attributes must be a mapping, got {type(raw_attributes).__name__}")

    return {
        str(key).strip(): clean_value(value)
        for key, value in raw_attributes.items()
    }


def cleaned_path(raw_path: str) -> str:
    """
    Canonicalise an asset path so it has exactly one leading and one trailing
    slash, ie `images//logo` and `/images/logo/` both become `/images/logo/`.
    """
    path = str(raw_path).replace("\\", "/")
    return _REPEATED_SEPARATORS.sub("/", f"/{path}/")
