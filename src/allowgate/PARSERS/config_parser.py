# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
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

"""
Parser for allowlist configuration YAML files.
"""
import os
from typing import Dict, Optional

import yaml
from dotenv import dotenv_values
from pydantic import ValidationError

from ..errors import ConfigError
from ..MODELS.allowlist_config import AllowlistConfig
from ..UTILS.string_interpolation import EnvironmentInterpolator


class ConfigParser:
    """
    Parser for allowlist configuration files.

    Example::

        globalAllowlist:
          - gcr.io/kritis-project/kritis-server
        policies:
          - name: default
            admissionAllowlistPatterns:
              - namePattern: ${REGISTRY:-gcr.io}/my-project/*
    """
    def __init__(self, context: Optional[Dict[str, str]] = None, env_file: Optional[str] = None):
        """
        Initializes the parser with an optional environment context for interpolation.

        :param context: A dictionary of environment variables. Defaults to os.environ.
        :param env_file: Optional .env file whose values fill in variables missing from the context.
        """
        self.context = dict(os.environ) if context is None else dict(context)
        if env_file:
            for key, value in dotenv_values(env_file).items():
                if value is not None:
                    self.context.setdefault(key, value)

    def parse(self, config_path: str) -> AllowlistConfig:
        """
        Parses a configuration file from a path.

        :param config_path: Path to the configuration file.
        :return: Parsed configuration.
        :raises ConfigError: If the file cannot be read or is invalid.
        """
        try:
            with open(config_path, 'r') as f:
                content = f.read()
        except OSError as e:
            raise ConfigError(str(e), path=config_path) from e
        try:
            return self.parse_from_string(content)
        except ConfigError as e:
            raise ConfigError(str(e), path=config_path, variable=e.variable) from e

    def parse_from_string(self, content: str) -> AllowlistConfig:
        """
        Parses a configuration from a string.

        :param content: YAML content of the configuration.
        :return: Parsed configuration.
        :raises ConfigError: If interpolation, YAML parsing or validation fails.
        """
        content = EnvironmentInterpolator.interpolate(content, self.context)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML: {e}") from e
        if not data:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"expected a mapping, got {type(data).__name__}")

        try:
            return AllowlistConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"invalid configuration: {e}") from e
