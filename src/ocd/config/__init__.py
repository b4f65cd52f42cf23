"""Configuration loading and resolution."""

from ocd.config.environment import CREDENTIAL_VARS, Environment
from ocd.config.resolved import IMAGE_NAME, TOOL_NAME, ResolvedConfig, resolve_config

__all__ = [
    "CREDENTIAL_VARS",
    "Environment",
    "IMAGE_NAME",
    "TOOL_NAME",
    "ResolvedConfig",
    "resolve_config",
]
