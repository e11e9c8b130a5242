from __future__ import annotations

import logging
from typing import Optional

from egg.config.settings import LoggingConfig

_HANDLER_NAME = "egg-console"


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Attach one console handler to the ``egg`` logger.

    Calling it again only updates level and format.
    """
    config = config or LoggingConfig()
    root = logging.getLogger("egg")
    root.setLevel(config.level.upper())

    handler = next((h for h in root.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        root.addHandler(handler)
    handler.setFormatter(logging.Formatter(config.format))
    return root
