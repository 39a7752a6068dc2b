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

from collections.abc import Mapping
import pathlib
from typing import Any, TYPE_CHECKING

import attrs

from sitebuild.lib.asset.attributes import NO_VALUE
from sitebuild.lib.asset.reps import DEFAULT_REP
import sitebuild.lib.logger as logger

if TYPE_CHECKING:
    from sitebuild.lib.asset.asset import Asset
    from sitebuild.lib.site import Site

logger = logger.get_logger(__name__)


@attrs.define(eq=False)
class AssetRep:
    """
    AssetRep is one compiled variant of an Asset, like a full size image and
    its thumbnail. Each rep is written to its own file.
    """

    asset: Asset = attrs.field(repr=False)
    """The asset this is a representation of"""

    attributes: Mapping[str, Any]
    """Attributes which override the asset attributes for this rep only"""

    name: str
    """Name of the rep, unique within the asset"""

    @property
    def site(self) -> Site:
        if self.asset.site is None:
            raise RuntimeError(f"asset '{self.asset.path}' does not belong to a site")
        return self.asset.site

    def attribute_named(self, name: str) -> Any:
        """Return the attribute with the given name, checking this rep's own
        attributes before the asset's."""
        if name in self.attributes:
            return self.attributes[name]
        return self.asset.attribute_named(name)

    @property
    def web_path(self) -> str:
        """
        Path of the compiled rep relative to the site root. The asset
        `/images/logo/` with extension `png` is written to `/images/logo.png`
        by the default rep and `/images/logo-thumb.png` by a rep named `thumb`.

        The root asset `/` is written as `/index.<extension>`. A `custom_path`
        attribute replaces the generated path.
        """
        custom_path = self.attribute_named("custom_path")
        if custom_path not in (NO_VALUE, None):
            return "/" + str(custom_path).lstrip("/")

        base = "/index" if self.asset.path == "/" else self.asset.path[:-1]
        suffix = "" if self.name == DEFAULT_REP else f"-{self.name}"
        extension = self.attribute_named("extension")
        if extension in (NO_VALUE, None, ""):
            return f"{base}{suffix}"
        return f"{base}{suffix}.{extension}"

    @property
    def disk_path(self) -> pathlib.Path:
        """Location the compiled rep is written to"""
        return self.site.config.as_output_file(self.web_path)

    def is_outdated(self) -> bool:
        """
        Returns True if the compiled rep must be rewritten: it hasn't been
        written yet, the asset modification time is unknown, or the asset
        was modified after the rep was written.
        """
        if not self.disk_path.exists():
            return True

        if self.asset.mtime is None:
            return True

        return self.asset.mtime.timestamp() > self.disk_path.stat().st_mtime

    def compile(self) -> pathlib.Path:
        """Compile this rep using the site's compile_rep"""
        logger.info(f"Compiling '{self.web_path}' ({self.name})")
        return self.site.compile_rep(self)


def copy_source(rep: AssetRep) -> pathlib.Path:
    """Writes the asset source unchanged to the rep's disk_path. The source
    can be a pathlib.Path, bytes, or a file-like object with a read method."""
    source = rep.asset.source

    if isinstance(source, pathlib.Path):
        content = source.read_bytes()
    elif isinstance(source, (bytes, bytearray)):
        content = bytes(source)
    elif hasattr(source, "read"):
        content = source.read()
        if isinstance(content, str):
            content = content.encode("utf-8")
    else:
        raise TypeError(f"asset '{rep.asset.path}' source of type {type(source).__name__} can't be copied")

    rep.disk_path.parent.mkdir(parents=True, exist_ok=True)
    rep.disk_path.write_bytes(content)

    return rep.disk_path
