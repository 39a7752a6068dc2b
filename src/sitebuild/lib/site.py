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
from __future__ import annotations

from collections.abc import Callable
import pathlib
from typing import Any

import attrs

from sitebuild.lib.asset.rep import AssetRep, copy_source
from sitebuild.lib.config import SiteConfig
from sitebuild.lib.normalize import clean_attributes


@attrs.define
class AssetDefaults:
    """Attributes shared by every asset in a site. A `reps` entry declares
    representations every asset is compiled into unless it opts out."""

    attributes: dict[str, Any] = attrs.field(factory=dict, converter=clean_attributes)


@attrs.define
class Site:
    """A site is the set of assets being compiled together, and the
    configuration they share."""

    config: SiteConfig
    """Configuration for the current build"""

    asset_defaults: AssetDefaults = attrs.field(factory=AssetDefaults)
    """Attribute defaults for all assets in the site"""

    compile_rep: Callable[[AssetRep], pathlib.Path] = attrs.field(default=copy_source)
    """A method which takes an AssetRep, writes its compiled output to
    rep.disk_path and returns the path written. By default the asset source
    is copied unchanged."""
