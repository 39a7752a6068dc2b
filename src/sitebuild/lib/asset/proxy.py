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
"""Read-only views of assets for use in templates and layouts."""
from __future__ import annotations

from typing import Any, TYPE_CHECKING

import attrs

from sitebuild.lib.asset.attributes import NO_VALUE

if TYPE_CHECKING:
    from sitebuild.lib.asset.asset import Asset
    from sitebuild.lib.asset.rep import AssetRep


@attrs.define(eq=False)
class AssetRepProxy:
    rep: AssetRep

    def __getitem__(self, key: str) -> Any:
        if key == "name":
            return self.rep.name
        if key == "web_path":
            return self.rep.web_path
        if key == "disk_path":
            return self.rep.disk_path

        value = self.rep.attribute_named(key)
        return None if value is NO_VALUE else value


@attrs.define(eq=False)
class AssetProxy:
    """
    AssetProxy exposes an asset's identity and resolved attributes by key,
    ie `asset["extension"]`. Undefined attributes are returned as None.
    """

    asset: Asset

    def __getitem__(self, key: str) -> Any:
        if key == "path":
            return self.asset.path
        if key == "mtime":
            return self.asset.mtime
        if key == "source":
            return self.asset.source
        if key == "reps":
            return {rep.name: AssetRepProxy(rep=rep) for rep in self.asset.reps or []}

        value = self.asset.attribute_named(key)
        return None if value is NO_VALUE else value
