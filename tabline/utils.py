# Tabline Line Editor — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def setup_logging(
    mode: str | None = None,
    log_filename: str = "tabline.log",
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
    logger_name: str = "tabline",
    propagate: bool = False,
) -> logging.Logger:
    """
    Attach console and file handlers to the Tabline logger.

    Tabline is embedded in host applications, so only the `tabline` logger (or
    `logger_name`) is configured. Handlers previously installed by this
    function are replaced; the root logger and any other handlers are left
    alone. With `propagate=True` records also reach the host's handlers.

    Console output is kept at WARNING by default: while a prompt is reading,
    the terminal is in raw mode and chatty console logs would garble the line
    being edited. Key decoding, completion and history debug records go to the
    log file.

    Args:
        mode (str | None): "cli" for Rich console logs or "json" for JSON
            lines. Defaults to `TABLINE_LOG_MODE`, then to "json" inside
            containers and "cli" elsewhere.
        log_filename (str): Path to the log file.
        json_log_to_file (bool): Format file logs as JSON instead of plain text.
        file_log_level (int): Level for the file handler.
        console_log_level (int): Level for the console handler.
        logger_name (str): Logger to configure.
        propagate (bool): Whether records are also passed to parent loggers.

    Returns:
        logging.Logger: The configured logger.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("TABLINE_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    else:
        raise ValueError(f"Invalid log mode: {mode}")
    console_handler.setLevel(console_log_level)

    file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
    file_handler.setLevel(file_log_level)
    if json_log_to_file:
        file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    else:
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        if getattr(handler, "_tabline_managed", False):
            logger.removeHandler(handler)
            handler.close()
    for handler in (console_handler, file_handler):
        handler._tabline_managed = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(min(file_log_level, console_log_level))
    logger.propagate = propagate
    logger.debug("Logging initialized in '%s' mode.", mode)
    return logger
