from __future__ import annotations

from .logging import BUILD_LOGGER_NAME, configure_logging

__all__ = ["BUILD_LOGGER_NAME", "configure_logging"]
