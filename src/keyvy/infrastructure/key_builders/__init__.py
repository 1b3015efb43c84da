"""Key builder implementations."""

from keyvy.infrastructure.key_builders.namespace import (
    DEFAULT_NAMESPACE,
    SEPARATOR,
    NamespaceKeyBuilder,
)

__all__ = ["NamespaceKeyBuilder", "DEFAULT_NAMESPACE", "SEPARATOR"]
