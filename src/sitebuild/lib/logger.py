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
"""Build logging, configured from the environment when first imported.

LOG_LEVEL
    Level name or number for every logger returned by get_logger. Invalid
    values are reported and INFO is used instead.
LOG_FILE
    Path of a build log written alongside terminal output. The log from the
    previous build is kept by renaming it `000.<name>`, `001.<name>`, etc.
"""
import logging
import pathlib

from environs import Env, EnvValidationError


def rotate_log_file(log_file: pathlib.Path) -> pathlib.Path:
    """Rename an existing log file to the first free `NNN.<name>` alongside
    it, and return the new path."""
    rotation = 0
    rotated = log_file.with_name(f"{rotation:03d}.{log_file.name}")
    while rotated.exists():
        rotation += 1
        rotated = log_file.with_name(f"{rotation:03d}.{log_file.name}")
    return log_file.rename(rotated)


def _parse_logger_env() -> tuple[int, pathlib.Path | None]:
    env = Env(expand_vars=True)

    try:
        log_level = env.log_level("LOG_LEVEL", logging.INFO)
    except EnvValidationError:
        logging.warning(f"LOG_LEVEL={env.str('LOG_LEVEL')} is not a valid log level, using INFO")
        log_level = logging.INFO

    log_file = env.path("LOG_FILE", None)
    if log_file is not None and log_file.is_file():
        rotate_log_file(log_file)

    return log_level, log_file

log_level, log_file = _parse_logger_env()
logging.basicConfig(level=log_level)

# one handler shared by every logger so the build log is opened once
_file_handler = logging.FileHandler(log_file) if log_file is not None else None

def get_logger(package_name: str) -> logging.Logger:
    logger = logging.getLogger(package_name)
    logger.setLevel(log_level)

    if _file_handler is not None and _file_handler not in logger.handlers:
        logger.addHandler(_file_handler)

    return logger
