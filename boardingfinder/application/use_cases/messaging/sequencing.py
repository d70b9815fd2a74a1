"""Request sequencing so a slow, older response never overwrites a newer one."""

from __future__ import annotations


class RequestSequencer:
    """Hand out monotonically increasing tickets and accept only fresh ones.

    A response is applied when its ticket is newer than the last applied
    ticket; anything older is stale and must be discarded by the caller.
    """

    def __init__(self) -> None:
        self._issued = 0
        self._applied = 0

    def issue(self) -> int:
        self._issued += 1
        return self._issued

    def accept(self, ticket: int) -> bool:
        if ticket <= self._applied:
            return False
        self._applied = ticket
        return True

    @property
    def last_applied(self) -> int:
        return self._applied


__all__ = ["RequestSequencer"]
