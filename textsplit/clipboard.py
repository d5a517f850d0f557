import logging
import threading
from typing import Callable, Dict, Optional

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardService:
    """Copies chunks to the system clipboard and tracks transient "copied" flags.

    A successful copy flags the chunk index as copied; the flag clears itself
    after ``reset_after`` seconds. Clipboard failures are logged and reported
    through the return value, never raised.
    """

    def __init__(self, reset_after: float = 2.0, copy_func: Optional[Callable[[str], None]] = None):
        self.reset_after = reset_after
        self._copy = copy_func or pyperclip.copy
        self._lock = threading.Lock()
        self._timers: Dict[int, threading.Timer] = {}

    def copy(self, index: int, text: str) -> bool:
        try:
            self._copy(text)
        except pyperclip.PyperclipException as e:
            logger.warning("Clipboard write failed for chunk %d: %s", index, e)
            return False

        timer = threading.Timer(self.reset_after, lambda: self._expire(index, timer))
        timer.daemon = True
        with self._lock:
            previous = self._timers.pop(index, None)
            if previous is not None:
                previous.cancel()
            self._timers[index] = timer
        timer.start()
        logger.debug("Copied chunk %d (%d chars)", index, len(text))
        return True

    def is_copied(self, index: int) -> bool:
        with self._lock:
            return index in self._timers

    def _expire(self, index: int, timer: threading.Timer) -> None:
        # A replaced timer may still fire; only the current one clears the flag
        with self._lock:
            if self._timers.get(index) is timer:
                del self._timers[index]

    def reset(self, index: int) -> None:
        with self._lock:
            timer = self._timers.pop(index, None)
        if timer is not None:
            timer.cancel()

    def clear(self) -> None:
        with self._lock:
            timers = list(self._timers.values())
            self._timers.clear()
        for timer in timers:
            timer.cancel()
