"""Kubernetes object helpers."""

from .object import (
    GroupVersionKind,
    linux_node_affinity,
    set_group_version_kind,
    to_serializable,
    to_yaml,
)

__all__ = [
    "GroupVersionKind",
    "linux_node_affinity",
    "set_group_version_kind",
    "to_serializable",
    "to_yaml",
]
