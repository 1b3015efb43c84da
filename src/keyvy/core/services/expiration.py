"""Lazy expiration policy."""

from collections.abc import Callable

from keyvy.core.entities.entry import Entry, EntryState
from keyvy.utils.clock import current_time_millis


class ExpirationPolicy:
    """Decides at read time whether a decoded entry is still live.

    Expiry is only enforced when an entry is read; nothing sweeps the
    store in the background.
    """

    def __init__(self, clock: Callable[[], int] = current_time_millis) -> None:
        self._clock = clock

    def classify(self, entry: Entry | None, now: int | None = None) -> EntryState:
        """Classify a read.

        Args:
            entry: The decoded entry, or None if nothing was stored.
            now: Current epoch milliseconds. Defaults to the policy's clock.

        Returns:
            MISS for no entry, EXPIRED for a stale one, HIT otherwise.
        """
        if entry is None:
            return EntryState.MISS
        if entry.is_expired(self._clock() if now is None else now):
            return EntryState.EXPIRED
        return EntryState.HIT
