import logging
import time
from typing import Callable, Optional

from kioskmap.config import get_config

logger = logging.getLogger(__name__)


class InactivityTimer:
    """Calls `on_inactive` once after `timeout` seconds without activity.

    The timer is polled: the caller invokes `check()` from its own loop and
    `touch()` on every user interaction.
    """

    def __init__(
        self,
        on_inactive: Callable[[], None],
        timeout: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if timeout is None:
            timeout = get_config("inactivity.timeout")

        self.on_inactive = on_inactive
        self.timeout = timeout
        self.clock = clock

        self._last_activity = clock()
        self._fired = False

    @property
    def idle_for(self) -> float:
        return self.clock() - self._last_activity

    @property
    def is_inactive(self) -> bool:
        return self._fired

    def touch(self):
        self._last_activity = self.clock()
        self._fired = False

    def check(self) -> bool:
        if self._fired or self.idle_for < self.timeout:
            return False

        logger.info(f"No activity for {self.idle_for:.1f}s, resetting")
        self._fired = True
        self.on_inactive()
        return True
