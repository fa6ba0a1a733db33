"""
Handles configuration for the flight control frame monitor.

This module is responsible for:
- Configuring logging for the application.
- Determining the path of the frame definition file, considering the
  FCS_FRAME_SPEC_PATH environment override and the bundled default.
"""

import logging
import os

import coloredlogs

# ── Logging Configuration ──────────────────────────────────────────────────
module_logger = logging.getLogger(__name__)

# Resolved path of the frame definition, populated by get_actual_spec_path().
ACTUAL_SPEC_PATH: str | None = None


def configure_logger(level: str | None = None):
    """
    Install coloredlogs on the root logger.

    Args:
        level: Log level name. When omitted, LOG_LEVEL is read from the
            environment (default INFO). Unknown names fall back to INFO.

    Returns:
        logging.Logger: The configured root logger.
    """
    root_logger = logging.getLogger()
    log_level_str = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    log_level_int = getattr(logging, log_level_str, None)
    if not isinstance(log_level_int, int):
        module_logger.warning(f"Invalid LOG_LEVEL '{log_level_str}'. Defaulting to INFO.")
        log_level_int = logging.INFO

    log_format = "%(asctime)s %(name)s[%(process)d] %(levelname)s %(message)s"

    # Handlers filter by their own level; the root logger passes everything.
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    coloredlogs.install(
        level=log_level_int,
        fmt=log_format,
        logger=root_logger,
        reconfigure=True,
    )

    return root_logger


# ── Frame definition path ──────────────────────────────────────────────────
def get_actual_spec_path() -> str:
    """
    Determines the path of the frame definition file to load.

    FCS_FRAME_SPEC_PATH overrides the bundled definition when it points at a
    readable file; otherwise the bundled default is used and a warning logged.
    The result is stored in ACTUAL_SPEC_PATH to avoid re-computation.

    Returns:
        str: Path to the frame definition YAML file.
    """
    global ACTUAL_SPEC_PATH

    if ACTUAL_SPEC_PATH is not None:
        return ACTUAL_SPEC_PATH

    from fcs_decoder.definition import _default_path

    default_spec_path = _default_path()
    spec_override_env = os.getenv("FCS_FRAME_SPEC_PATH")

    actual_spec_path = default_spec_path
    if spec_override_env:
        if os.path.exists(spec_override_env) and os.access(spec_override_env, os.R_OK):
            actual_spec_path = spec_override_env
        else:
            module_logger.warning(
                f"Override frame definition path '{spec_override_env}' is missing or "
                f"unreadable. Using bundled default: '{default_spec_path}'"
            )

    ACTUAL_SPEC_PATH = actual_spec_path
    module_logger.info(f"Frame definition in use: {ACTUAL_SPEC_PATH}")
    return ACTUAL_SPEC_PATH
