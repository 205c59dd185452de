"""Observability utilities: logging setup.

Logging is configured once at application start. The level comes from the
caller or, when omitted, from ``CRYPTOFEED_LOG_LEVEL`` via
:class:`~cryptofeed.config.models.EnvSettings`. `structlog` is integrated when
installed but is not required.
"""

from __future__ import annotations

import importlib
import logging
from typing import Optional

from ..config.models import EnvSettings

_PACKAGE_LOGGER = "cryptofeed"


def resolve_log_level(
    level: Optional[str] = None, settings: Optional[EnvSettings] = None
) -> int:
    """Return the numeric logging level to use.

    An explicit `level` wins over `settings`; settings are read from the
    environment when not given. Unknown level names map to INFO.
    """
    if level is None:
        settings = settings or EnvSettings()  # type: ignore[call-arg]
        level = settings.log_level
    return getattr(logging, level.upper(), logging.INFO)


def setup_logging(
    level: Optional[str] = None, settings: Optional[EnvSettings] = None
) -> None:
    """Configure logging for the ``cryptofeed`` logger hierarchy.

    Parameters
    ----------
    level: Optional[str]
        Logging level name (e.g., "DEBUG", "INFO"). Overrides settings.
    settings: Optional[EnvSettings]
        Settings providing ``log_level`` when `level` is omitted.
    """
    numeric_level = resolve_log_level(level, settings)
    logging.basicConfig(
        level=numeric_level,
        format=("%(asctime)s %(levelname)s %(name)s - %(message)s"),
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    logging.getLogger(_PACKAGE_LOGGER).setLevel(numeric_level)

    try:  # optional structlog
        structlog = importlib.import_module("structlog")
        structlog.configure(
            wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        )
    except ModuleNotFoundError:  # pragma: no cover
        pass

    logging.getLogger(__name__).debug(
        "observability.logging.configured",
        extra={"level": logging.getLevelName(numeric_level)},
    )
