"""Fault barrier around rendering calls."""
import logging
import os
import sys
from dataclasses import dataclass
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

FALLBACK_TITLE = "Something went wrong"
FALLBACK_DETAIL = "We encountered an unexpected error while loading this content."


@dataclass
class Fallback:
    title: str
    detail: str
    message: str


def restart_process() -> None:
    os.execv(sys.executable, [sys.executable, *sys.argv])


class FaultBarrier:
    """Runs render calls and turns any exception into a Fallback.

    Once a call fails, every render returns the fallback without calling the
    child until reset() is invoked.
    """

    def __init__(
        self,
        on_reset: Optional[Callable[[], None]] = None,
        reload: Callable[[], None] = restart_process,
    ):
        self.on_reset = on_reset
        self._reload = reload
        self.error: Optional[Exception] = None

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def fallback(self) -> Fallback:
        message = str(self.error) if self.error is not None else ""
        return Fallback(FALLBACK_TITLE, FALLBACK_DETAIL, message or "Unknown Error")

    def render(self, child: Callable[..., Any], *args, **kwargs) -> Any:
        if self.has_error:
            return self.fallback()
        try:
            return child(*args, **kwargs)
        except Exception as exc:
            name = getattr(child, "__qualname__", repr(child))
            logger.error("Uncaught error while rendering %s", name, exc_info=exc)
            self.error = exc
            return self.fallback()

    def reset(self) -> None:
        self.error = None
        if self.on_reset:
            self.on_reset()

    def reload(self) -> None:
        logger.info("Reloading application")
        self._reload()
