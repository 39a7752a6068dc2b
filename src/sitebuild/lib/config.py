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
from attrs import field, frozen
from attrs.converters import default_if_none, pipe
from environs import Env
import pathlib
from typing import Self


@frozen
class SiteConfig:
    """Configuration describing where compiled assets are written and how
    eagerly they are rebuilt."""

    # from_env passes None for unset variables, default_if_none restores
    # the field default in that case
    output_path: pathlib.Path = field(
        default=None, converter=pipe(default_if_none("output"), pathlib.Path),
    )
    """Filesystem path where compiled asset representations are written."""

    force: bool = field(
        default=None, converter=default_if_none(False),
    )
    """Compile every asset, even those which are not outdated."""

    @force.validator
    def check_force(self, attribute, value):
        if not isinstance(value, bool):
            raise ValueError(f"force must be True or False, got {value!r}")

    def as_output_file(self, name: str | pathlib.Path) -> pathlib.Path:
        """Return the full path to an output file"""
        return self.output_path / str(name).lstrip("/")

    @classmethod
    def from_env(cls) -> Self:
        """Load config from environment variables, or an `.env` file."""
        env = Env(expand_vars=True)
        env.read_env()

        return cls(
            output_path=env.path("OUTPUT_PATH", None),
            force=env.bool("FORCE_COMPILE", None),
        )
