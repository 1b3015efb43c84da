"""Facade configuration entity."""

from dataclasses import dataclass, field, fields, replace
from typing import Any

from keyvy.core.interfaces.serializer import ISerializer
from keyvy.core.interfaces.storage_adapter import IStorageAdapter
from keyvy.exceptions import ConfigurationError
from keyvy.infrastructure.key_builders.namespace import DEFAULT_NAMESPACE
from keyvy.infrastructure.serializers.json import JsonSerializer


@dataclass
class KeyvOptions:
    """Keyv configuration.

    Attributes:
        uri: Connection URI; its scheme selects the adapter when
            ``adapter`` is not given.
        adapter: Registered adapter identifier (e.g. "memory", "redis").
        namespace: Logical keyspace prefix for this facade.
        ttl: Default time-to-live in milliseconds. None disables expiry.
        serializer: Codec used to encode and decode stored envelopes.
        store: Explicit storage adapter instance. Skips the registry.
        concurrency: Default bound on in-flight operations per batch call.
    """

    uri: str | None = None
    adapter: str | None = None
    namespace: str = DEFAULT_NAMESPACE
    ttl: int | None = None
    serializer: ISerializer = field(default_factory=JsonSerializer)
    store: IStorageAdapter | None = None
    concurrency: int | None = None

    def __post_init__(self) -> None:
        """Validate option values."""
        if not isinstance(self.namespace, str):
            raise ConfigurationError(
                f"namespace must be a string, got {type(self.namespace).__name__}"
            )
        if self.ttl is not None:
            if isinstance(self.ttl, bool) or not isinstance(self.ttl, (int, float)):
                raise ConfigurationError(
                    f"ttl must be a number of milliseconds, got {self.ttl!r}"
                )
            if self.ttl < 0:
                raise ConfigurationError(f"ttl must not be negative, got {self.ttl!r}")
        if self.concurrency is not None and (
            isinstance(self.concurrency, bool) or not isinstance(self.concurrency, int)
        ):
            raise ConfigurationError(
                f"concurrency must be an integer, got {self.concurrency!r}"
            )

    @property
    def adapter_name(self) -> str | None:
        """Adapter identifier, falling back to the URI scheme."""
        if self.adapter:
            return self.adapter
        if self.uri:
            return self.uri.split(":", 1)[0]
        return None

    @classmethod
    def merge(
        cls,
        uri: str | None = None,
        options: "KeyvOptions | None" = None,
        **overrides: Any,
    ) -> "KeyvOptions":
        """Merge construction arguments into a single options record.

        Precedence, lowest first: defaults, ``options``, ``uri``, then
        keyword ``overrides``. The given ``options`` is never mutated.

        Raises:
            ConfigurationError: If an override names an unknown option.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigurationError(f"Unknown option(s): {', '.join(sorted(unknown))}")

        changes: dict[str, Any] = {}
        if uri is not None:
            changes["uri"] = uri
        changes.update(overrides)
        return replace(options or cls(), **changes)
