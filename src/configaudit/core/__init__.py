"""Core config audit functionality.

Provides:
- Configuration and image reference versioning
- Result schema and severity classification
- Error hierarchy and injectable collaborators
"""

from .config import Config, get_version_from_image_ref, load_config
from .errors import ConfigAuditError, ConfigError, ParseError, SerializationError
from .ext import Clock, IDGenerator, SystemClock, UUIDGenerator
from .output import Check, ConfigAuditResult, ConfigAuditSummary, Scanner, format_output
from .severity import DEFAULT_CATEGORY, Severity

__all__ = [
    "Config",
    "get_version_from_image_ref",
    "load_config",
    "ConfigAuditError",
    "ConfigError",
    "ParseError",
    "SerializationError",
    "Clock",
    "IDGenerator",
    "SystemClock",
    "UUIDGenerator",
    "Check",
    "ConfigAuditResult",
    "ConfigAuditSummary",
    "Scanner",
    "format_output",
    "DEFAULT_CATEGORY",
    "Severity",
]
