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

import datetime
from typing import Any, TYPE_CHECKING

import attrs

from sitebuild.lib.asset.attributes import resolve_attribute
from sitebuild.lib.asset.proxy import AssetProxy
from sitebuild.lib.asset.rep import AssetRep
from sitebuild.lib.asset.reps import rep_definitions, reps_mapping
from sitebuild.lib.normalize import clean_attributes, cleaned_path
import sitebuild.lib.logger as logger

if TYPE_CHECKING:
    from sitebuild.lib.site import Site

logger = logger.get_logger(__name__)


@attrs.define(eq=False)
class Asset:
    """
    Asset is a single piece of source content in a site, like an image or a
    stylesheet. Each asset is compiled into one or more representations
    (AssetRep), which are built by calling build_reps.
    """

    source: Any
    """The uncompiled content, usually a pathlib.Path. The asset never reads
    or modifies it, it is handed to the site's compile_rep."""

    attributes: dict[str, Any] = attrs.field(converter=clean_attributes)
    """Attributes specific to this asset, cleaned when the asset is created"""

    path: str = attrs.field(converter=cleaned_path)
    """Path of the asset within the site, like `/images/logo/`"""

    mtime: datetime.datetime | None = None
    """When the source was last modified, or None if unknown"""

    site: Site | None = attrs.field(default=None, kw_only=True, repr=False)
    """The Site this asset belongs to"""

    reps: list[AssetRep] | None = attrs.field(default=None, init=False, repr=False)
    """Representations of this asset, None until build_reps is called"""

    # build state, managed by whatever drives the build
    modified: bool = attrs.field(default=False, init=False)
    created: bool = attrs.field(default=False, init=False)
    filtered: bool = attrs.field(default=False, init=False)
    written: bool = attrs.field(default=False, init=False)

    _proxy: AssetProxy | None = attrs.field(default=None, init=False, repr=False)

    @property
    def site_attributes(self) -> dict[str, Any]:
        if self.site is None:
            return {}
        return self.site.asset_defaults.attributes

    def attribute_named(self, name: str) -> Any:
        """Return the attribute with the given name, falling back to site
        defaults and then built-in defaults. Returns NO_VALUE if the attribute
        isn't defined anywhere."""
        return resolve_attribute(name, self.attributes, self.site_attributes)

    def build_reps(self):
        """Build the representations of this asset, replacing any that were
        built previously."""
        default_reps = reps_mapping(self.site_attributes.get("reps"), owner="asset defaults")
        asset_reps = reps_mapping(self.attributes.get("reps"), owner=f"asset '{self.path}'")

        self.reps = [
            AssetRep(asset=self, attributes=attributes, name=name)
            for name, attributes in rep_definitions(default_reps, asset_reps)
        ]
        logger.debug(f"Built reps for '{self.path}': {', '.join(rep.name for rep in self.reps)}")

    def to_proxy(self) -> AssetProxy:
        """Return the AssetProxy for this asset, which is created once and
        reused for the life of the asset."""
        if self._proxy is None:
            self._proxy = AssetProxy(asset=self)
        return self._proxy

    def is_outdated(self) -> bool:
        """
        Returns True if the asset must be recompiled, either because its
        modification time is unknown or because one of its representations
        is outdated.
        """
        self._require_reps("check whether it is outdated")

        if self.mtime is None:
            return True

        return any(rep.is_outdated() for rep in self.reps)

    def compile(self):
        """Compile each representation of this asset in turn. An exception
        raised by one representation stops the remaining ones compiling."""
        self._require_reps("compile it")

        for rep in self.reps:
            rep.compile()

    def _require_reps(self, action: str):
        if self.reps is None:
            raise RuntimeError(f"build_reps must be called on asset '{self.path}' before trying to {action}")
