from __future__ import annotations

import logging


def configure_hvengine_logging(*, level: int | str = logging.INFO) -> None:
    """
    Configure a minimal console logger for hvengine.

    Notes:
        - This is opt-in (library code must not call logging.basicConfig()).
        - The handler is only attached if neither the root logger nor the "hvengine" logger has handlers.
        - ``level`` may be a number or a level name such as "DEBUG".
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.INFO
    root = logging.getLogger()
    hv_logger = logging.getLogger("hvengine")

    # If the user already configured logging, don't interfere.
    if root.handlers or hv_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    hv_logger.addHandler(handler)
    hv_logger.setLevel(level)
    hv_logger.propagate = False


__all__ = ["configure_hvengine_logging"]
