"""
Process-local holder of the current InputRecord.

Each edit swaps in a new snapshot and notifies subscribers, which is how
the calculator window re-derives the ROI after every slider move.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from roi import InputRecord

log = logging.getLogger(__name__)


class InputStore:
    def __init__(self, initial: Optional[InputRecord] = None) -> None:
        self._record = initial if initial is not None else InputRecord.defaults()
        self._listeners: List[Callable[[InputRecord], None]] = []

    def get(self) -> InputRecord:
        return self._record

    def set(self, **partial: float) -> InputRecord:
        """Replace the given fields and return the new snapshot."""
        self._record = self._record.replace(**partial)
        log.debug("inputs updated: %s", partial)
        self._notify()
        return self._record

    def reset(self) -> InputRecord:
        self._record = InputRecord.defaults()
        log.debug("inputs reset to defaults")
        self._notify()
        return self._record

    def subscribe(self, listener: Callable[[InputRecord], None]) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self._record)
