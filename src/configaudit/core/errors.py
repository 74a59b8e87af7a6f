"""Exception hierarchy for config audit plugins.

All errors are raised to the caller (the scan job orchestrator). Nothing in
this package retries.
"""


class ConfigAuditError(Exception):
    """Base class for all config audit errors."""


class ConfigError(ConfigAuditError):
    """Evaluator image reference is unset or cannot be interpreted."""


class SerializationError(ConfigAuditError):
    """Workload object cannot be converted to a YAML snapshot."""


class ParseError(ConfigAuditError):
    """Evaluator output does not match the expected JSON schema."""
