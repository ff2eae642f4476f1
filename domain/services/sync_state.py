"""Reentrancy guard between description parsing and generation.

Pushing a generated description to the host makes the host hand the same
text back; the guard keeps that echo from being parsed again (and the
parse from regenerating) until the next event loop tick.
"""

from enum import Enum

from domain.exceptions import SyncStateError


class SyncState(Enum):
    IDLE = "idle"
    SYNCING = "syncing"


class DescriptionSyncGuard:
    """Two-state machine: IDLE -> SYNCING on begin(), back to IDLE on release()."""

    def __init__(self) -> None:
        self._state = SyncState.IDLE

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def is_syncing(self) -> bool:
        return self._state is SyncState.SYNCING

    def begin(self) -> None:
        """Enter SYNCING.

        Raises:
            SyncStateError: If a sync is already in progress
        """
        if self._state is SyncState.SYNCING:
            raise SyncStateError("Description sync already in progress")
        self._state = SyncState.SYNCING

    def release(self) -> None:
        """Return to IDLE (no-op when already idle)."""
        self._state = SyncState.IDLE
