"""Exceptions raised by keyvy."""


class KeyvError(Exception):
    """Base class for all keyvy errors."""

    pass


class ConfigurationError(KeyvError, ValueError):
    """Raised when facade options are invalid."""

    pass


class AdapterNotFoundError(KeyvError, LookupError):
    """Raised when no factory is registered for an adapter identifier."""

    def __init__(self, adapter: str, known: list[str] | None = None) -> None:
        self.adapter = adapter
        self.known = sorted(known or [])
        message = f"No storage adapter registered for {adapter!r}"
        if self.known:
            message += f" (known: {', '.join(self.known)})"
        super().__init__(message)


class SerializationError(KeyvError):
    """Raised when serialization or deserialization fails."""

    pass
