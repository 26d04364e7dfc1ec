from __future__ import annotations

import threading
from typing import Callable, Optional

from ..common.app_logger import get_logger

log = get_logger(__name__)


class StorageMode:
    """Shared degraded-mode flag for every mirrored repository.

    `health_check` pings the primary store; it is only called from
    `try_recover`, never on the request path.
    """

    def __init__(self, *, health_check: Optional[Callable[[], bool]] = None):
        self._health_check = health_check
        self._degraded = False
        self._reason: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def degraded(self) -> bool:
        return self._degraded

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def enter_degraded(self, reason: str) -> None:
        with self._lock:
            if not self._degraded:
                log.warning("primary storage unavailable, using local mirror: %s", reason)
            self._degraded = True
            self._reason = reason

    def try_recover(self) -> bool:
        """Return True when running against the primary store after the health check."""
        if not self._degraded:
            return True
        if self._health_check is None or not self._health_check():
            return False
        with self._lock:
            self._degraded = False
            self._reason = None
        log.info("primary storage reachable again, leaving degraded mode")
        return True
