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
from collections.abc import Iterable

import attrs

from sitebuild.lib.asset.asset import Asset
from sitebuild.lib.site import Site
import sitebuild.lib.logger as logger

logger = logger.get_logger(__name__)


@attrs.define
class AssetCompiler:
    """Compiles the assets of a site one at a time, skipping any which are
    already up to date."""

    site: Site
    """The site the compiled assets belong to"""

    def run(self, assets: Iterable[Asset]) -> list[Asset]:
        """
        Build the reps of each asset and compile the outdated ones.

        Parameters
        ----------
        assets
            Assets to compile, in the order they should be compiled

        Returns
        -------
            The assets which were compiled
        """
        compiled = []
        for asset in assets:
            if asset.site is not None and asset.site is not self.site:
                logger.warning(f"asset '{asset.path}' belonged to a different site and will be moved")
            asset.site = self.site

            asset.build_reps()

            if not self.site.config.force and not asset.is_outdated():
                logger.debug(f"Skipping '{asset.path}', not outdated")
                continue

            asset.compile()
            compiled.append(asset)

        logger.info(f"Compiled {len(compiled)} asset(s)")
        return compiled
