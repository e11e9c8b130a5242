from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, Optional

from egg.application.ports import ErrorLogPort


class LoggingErrorLog(ErrorLogPort):
    """
    Emit each ``'error'`` payload as one JSON line on a Python logger.

    Gives immediate observability of contained module failures without a
    store behind it.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.WARNING):
        self._logger = logger or logging.getLogger("egg.errorlog")
        self._level = level

    @staticmethod
    def to_record(payload: Dict[str, Any]) -> Dict[str, Any]:
        exc = payload.get("exception")
        error = payload.get("error")
        return {
            "module": payload.get("module"),
            "method": payload.get("method"),
            "exception_type": type(exc).__name__ if exc is not None else None,
            "message": str(exc) if exc is not None else None,
            "code": getattr(error, "code", None),
            "severity": getattr(getattr(error, "severity", None), "value", None),
        }

    def append(self, payload: Dict[str, Any]) -> None:
        self._logger.log(self._level, json.dumps(self.to_record(payload), ensure_ascii=False))

    def entries(self) -> Iterable[Dict[str, Any]]:
        # Logging backend cannot replay.
        return iter(())

    def close(self) -> None:
        return None
