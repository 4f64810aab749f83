"""
Periodic driver for the countdown.

The engine itself has no notion of real time: `tick()` is a plain transition. The MatchClock wakes up every
`interval` seconds on a background thread and calls the supplied callback, which is expected to apply `tick()` to
the match (inside whatever lock guards that match). The callback returns False once the match is over, which
stops the clock.
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

TickCallback = Callable[[], bool]


class MatchClock:
    def __init__(self, on_tick: TickCallback, interval: float = 1.0, name: str = "match") -> None:
        if interval <= 0:
            raise ValueError(f"Clock interval must be positive, got {interval}")
        self.on_tick = on_tick
        self.interval = interval
        self.name = name
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stopped.clear()
        self._thread = threading.Thread(
            target=self._run, name=f"sos-clock-{self.name}", daemon=True
        )
        self._thread.start()
        logger.debug("[clock-start] match=%s interval=%ss", self.name, self.interval)

    def cancel(self, wait: bool = True) -> None:
        """Tear down: no tick fires after this returns (when waiting)."""
        self._stopped.set()
        thread = self._thread
        if wait and thread is not None and thread is not threading.current_thread():
            thread.join()
        logger.debug("[clock-cancel] match=%s", self.name)

    def _run(self) -> None:
        # Event.wait returns True as soon as cancel() is called
        while not self._stopped.wait(self.interval):
            if not self.on_tick():
                logger.debug("[clock-stop] match=%s is over", self.name)
                self._stopped.set()
                return
