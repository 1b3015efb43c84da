"""Namespace key builder implementation."""

DEFAULT_NAMESPACE = "keyv"

SEPARATOR = ":"


class NamespaceKeyBuilder:
    """Key builder that prefixes logical keys with a namespace.

    The physical key is ``namespace + ":" + key``. Nothing is escaped:
    a namespace containing ``:`` can collide with another namespace,
    so callers should keep the separator out of namespaces.
    """

    def __init__(self, namespace: str = DEFAULT_NAMESPACE) -> None:
        """Initialize the key builder.

        Args:
            namespace: Prefix for all keys built by this instance.
        """
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        """Return the namespace."""
        return self._namespace

    def build(self, key: str) -> str:
        """Build the physical key for a logical key.

        Args:
            key: The logical key.

        Returns:
            The namespaced key.
        """
        return f"{self._namespace}{SEPARATOR}{key}"

    def prefix(self) -> str:
        """Return the prefix shared by every key in this namespace."""
        return f"{self._namespace}{SEPARATOR}"
