"""
${VAR} substitution for allowlist configuration files.
"""
import re
from typing import Dict

from ..errors import ConfigError

# ${VAR}, ${VAR:-default} or ${VAR:+value}
_VARIABLE_RE = re.compile(r'\$\{([^}:]+)(?::(-|\+)([^}]*))?\}')


class EnvironmentInterpolator:
    """
    Fills ${VAR} placeholders in allowlist config text, so registries and
    projects in name patterns can come from the deployment environment.
    """
    @staticmethod
    def interpolate(template: str, context: Dict[str, str]) -> str:
        """
        Interpolates variables in the config text using the provided context.

        :param template: Config text containing ${VAR} placeholders.
        :param context: Variable values, usually the process environment.
        :return: The interpolated text.
        :raises ConfigError: If a bare ${VAR} is not set. Its name is in ``variable``.
        """
        def replace(match):
            var_name = match.group(1)
            modifier = match.group(2)
            alt_value = match.group(3)

            value = context.get(var_name)

            if modifier == '-':
                return value if value else alt_value
            if modifier == '+':
                return alt_value if value else ''
            if value is None:
                raise ConfigError(
                    f"variable {var_name} is not set and has no default", variable=var_name
                )
            return value

        return _VARIABLE_RE.sub(replace, template)
