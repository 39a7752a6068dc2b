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

from .asset.asset import Asset
from .asset.attributes import DEFAULTS, NO_VALUE, resolve_attribute
from .asset.proxy import AssetProxy, AssetRepProxy
from .asset.rep import AssetRep, copy_source
from .asset.reps import DEFAULT_REP, OverrideKind, RepOverride, rep_definitions
from .compiler import AssetCompiler
from .config import SiteConfig
from .normalize import clean_attributes, cleaned_path
from .site import AssetDefaults, Site
