from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict

from egg.application.ports import ErrorLogPort
from egg.application.runtime import ERROR_EVENT

if TYPE_CHECKING:
    from egg.application.runtime import Runtime

logger = logging.getLogger(__name__)


def attach_error_log(runtime: "Runtime", log: ErrorLogPort) -> Callable[[], None]:
    """
    Subscribe ``log`` to the runtime's ``'error'`` notifications.

    Returns a callable that detaches the log again. A failing backend is
    logged and skipped so it cannot break the notification chain.
    """

    def on_error(payload: Dict[str, Any]) -> None:
        try:
            log.append(payload)
        except Exception as e:
            logger.debug(f"error log backend append failed: {e}")

    runtime.event.listen(ERROR_EVENT, on_error)

    def detach() -> None:
        runtime.event.unlisten(ERROR_EVENT, on_error)

    return detach
