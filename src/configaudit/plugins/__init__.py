"""Scanner plugins for config audits.

Provides:
- Plugin protocol shared by all scanners
- ConftestPlugin for Open Policy Agent Conftest
"""

from .base import Plugin
from .conftest import ConftestPlugin

__all__ = [
    "Plugin",
    "ConftestPlugin",
]
