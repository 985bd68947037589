"""Centralized configuration management for compdoc.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from compdoc.config import EnvVar, get_environment
    >>>
    >>> width = get_environment(EnvVar.PANEL_WIDTH)  # Returns int: 480
    >>> port = get_environment(EnvVar.MCP_PORT, override=9000)
    >>>
    >>> for var in list_environment_variables("panel"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    panel: Documentation panel sizing
    service: MCP server bind address, port and verbosity
"""

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Introspection
    "list_environment_variables",
]
