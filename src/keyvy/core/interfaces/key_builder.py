"""Key builder interface."""

from typing import Protocol


class IKeyBuilder(Protocol):
    """Contract for deriving physical storage keys from logical keys."""

    @property
    def namespace(self) -> str:
        """The namespace this builder prefixes keys with."""
        ...

    def build(self, key: str) -> str:
        """Build the physical key for a logical key.

        Args:
            key: The logical key supplied by the caller.

        Returns:
            The key under which the adapter stores the value.
        """
        ...
