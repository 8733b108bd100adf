"""Process-wide online/offline switch."""

import logging
import threading
from enum import StrEnum

from newsfeed.errors import InvalidModeError

logger = logging.getLogger(__name__)


class Mode(StrEnum):
    """Where search results come from."""

    ONLINE = "online"
    OFFLINE = "offline"


def parse_mode(value: "Mode | str") -> Mode:
    """Convert user input to a Mode, ignoring case.

    Raises:
        InvalidModeError: If the value is not "online" or "offline".
    """
    if isinstance(value, Mode):
        return value
    try:
        return Mode(str(value).lower())
    except ValueError:
        raise InvalidModeError("Invalid mode. Use 'online' or 'offline'.") from None


class ModeSwitch:
    """Holds the current mode behind a lock.

    A ``set`` that returns before a ``get`` starts is always observed by it.

    Args:
        initial: Mode to start in (default: online).
    """

    def __init__(self, initial: Mode | str = Mode.ONLINE) -> None:
        self._mode = parse_mode(initial)
        self._lock = threading.Lock()

    def get(self) -> Mode:
        with self._lock:
            return self._mode

    def set(self, value: Mode | str) -> Mode:
        """Switch mode. The stored value is unchanged if ``value`` is invalid."""
        mode = parse_mode(value)
        with self._lock:
            previous = self._mode
            self._mode = mode
        if previous is not mode:
            logger.info("Mode changed from %s to %s", previous, mode)
        return mode
