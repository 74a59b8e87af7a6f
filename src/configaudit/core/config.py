"""Configuration management for config audit plugins.

Loads configuration from environment variables using Pydantic models.
Provides sensible defaults for all settings while allowing override via
environment.

Provides:
- Config: Pydantic model with plugin settings
- load_config: Factory function to create Config instance
- get_version_from_image_ref: Scanner version from a container image reference
"""

import os
import re

import structlog
from pydantic import BaseModel, Field

from configaudit.core.errors import ConfigError

logger = structlog.get_logger()

DEFAULT_CONFTEST_IMAGE_REF = "openpolicyagent/conftest:v0.25.0"

_TAG_RE = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.-]{0,127}$")
_DIGEST_RE = re.compile(r"^[A-Za-z][A-Za-z0-9]*(?:[-_+.][A-Za-z][A-Za-z0-9]*)*:[0-9a-fA-F]{32,}$")


class Config(BaseModel):
    """Plugin configuration loaded from environment.

    Attributes:
        conftest_image_ref: Conftest container image (CONFIGAUDIT_CONFTEST_IMAGE_REF)
        service_account_name: Service account for scan pods (CONFIGAUDIT_SERVICE_ACCOUNT)
    """

    conftest_image_ref: str = Field(
        default_factory=lambda: os.getenv(
            "CONFIGAUDIT_CONFTEST_IMAGE_REF", DEFAULT_CONFTEST_IMAGE_REF
        )
    )
    service_account_name: str = Field(
        default_factory=lambda: os.getenv("CONFIGAUDIT_SERVICE_ACCOUNT", "configaudit")
    )

    def get_conftest_image_ref(self) -> str:
        """Return the Conftest image reference.

        Raises:
            ConfigError: If the reference is unset or blank
        """
        image_ref = (self.conftest_image_ref or "").strip()
        if not image_ref:
            logger.error("conftest_image_ref_not_set")
            raise ConfigError("property conftest_image_ref not set")
        return image_ref


def load_config() -> Config:
    """Load configuration from environment.

    Returns:
        Populated Config instance
    """
    return Config()


def get_version_from_image_ref(image_ref: str) -> str:
    """Derive a scanner version from a container image reference.

    Digest references yield the digest, tagged references yield the tag and
    untagged references yield "latest".

    Args:
        image_ref: Image reference (e.g., "example.com/conftest:v1.2.3")

    Returns:
        Version string (e.g., "v1.2.3")

    Raises:
        ConfigError: If the reference is empty or its tag/digest is malformed

    Example:
        >>> get_version_from_image_ref("example.com/conftest:v1.2.3")
        'v1.2.3'
        >>> get_version_from_image_ref("localhost:5000/conftest")
        'latest'
    """
    image_ref = (image_ref or "").strip()
    if not image_ref:
        raise ConfigError("parsing reference: empty image reference")

    if "@" in image_ref:
        repository, digest = image_ref.split("@", 1)
        if not repository or not _DIGEST_RE.match(digest):
            raise ConfigError(f"parsing reference: invalid digest in {image_ref!r}")
        return digest

    # A colon before the last slash belongs to a registry host:port
    last_segment = image_ref.rsplit("/", 1)[-1]
    if ":" not in last_segment:
        if not last_segment:
            raise ConfigError(f"parsing reference: missing repository in {image_ref!r}")
        return "latest"

    repository, tag = last_segment.rsplit(":", 1)
    if not repository or not _TAG_RE.match(tag):
        raise ConfigError(f"parsing reference: invalid tag in {image_ref!r}")
    return tag
