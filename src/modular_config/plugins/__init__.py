"""Extension layer — verifier plugins via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
"""

from modular_config.plugins.hookspecs import hookimpl
from modular_config.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
