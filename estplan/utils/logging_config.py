# Copyright 2025-2026 Dimensional Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from collections.abc import Mapping
from datetime import datetime
import inspect
import logging
import logging.handlers
import os
from pathlib import Path
import sys
import tempfile
from typing import Any

import structlog
from structlog.processors import CallsiteParameter, CallsiteParameterAdder

from estplan.constants import ESTPLAN_LOG_DIR, ESTPLAN_PROJECT_ROOT

_LOG_FILE_PATH = None


def _get_log_directory() -> Path:
    # Source checkouts log next to the code, installed packages under XDG_STATE_HOME
    if (ESTPLAN_PROJECT_ROOT / ".git").exists():
        log_dir = ESTPLAN_LOG_DIR
    else:
        xdg_state_home = os.getenv("XDG_STATE_HOME")
        if xdg_state_home:
            log_dir = Path(xdg_state_home) / "estplan" / "logs"
        else:
            log_dir = Path.home() / ".local" / "state" / "estplan" / "logs"

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except (PermissionError, OSError):
        log_dir = Path(tempfile.gettempdir()) / "estplan" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)

    return log_dir


def _get_log_file_path() -> Path:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return _get_log_directory() / f"estplan_{timestamp}_{os.getpid()}.jsonl"


def _configure_structlog() -> Path:
    global _LOG_FILE_PATH

    if _LOG_FILE_PATH:
        return _LOG_FILE_PATH

    _LOG_FILE_PATH = _get_log_file_path()

    shared_processors: list[Any] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        CallsiteParameterAdder(
            parameters=[
                CallsiteParameter.FUNC_NAME,
                CallsiteParameter.LINENO,
            ]
        ),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return _LOG_FILE_PATH


_CONSOLE_PATH_WIDTH = 30
_CONSOLE_USE_COLORS = hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

_CONSOLE_LEVEL_COLORS = {
    "dbg": "\033[1;36;40m",
    "inf": "\033[1;32;40m",
    "war": "\033[1;33;40m",
    "err": "\033[1;31;40m",
    "cri": "\033[1;31;40m",
}
_CONSOLE_RESET = "\033[0m"
_CONSOLE_FIXED = "\033[1;30;40m"
_CONSOLE_KEY = "\033[0;36m"
_CONSOLE_VAL = "\033[0;35m"


def _compact_console_processor(logger: Any, method_name: str, event_dict: Mapping[str, Any]) -> str:
    """Render one line as ``HH:MM:SS.mmm [lvl][source] event key=value ...``."""
    event_dict = dict(event_dict)

    timestamp = event_dict.pop("timestamp", "")
    try:
        dt = datetime.fromisoformat(timestamp.replace("Z", "+00:00")) if timestamp else datetime.now()
        time_str = dt.strftime("%H:%M:%S") + f".{dt.microsecond // 1000:03d}"
    except (ValueError, AttributeError):
        time_str = str(timestamp)[:12]

    level_short = event_dict.pop("level", "???")[:3].lower()

    source = event_dict.pop("logger", "")
    if len(source) > _CONSOLE_PATH_WIDTH:
        source = source[-_CONSOLE_PATH_WIDTH:]
    source = f"{source:<{_CONSOLE_PATH_WIDTH}s}"

    event = event_dict.pop("event", "")

    for key in ("func_name", "lineno", "exception", "exc_info", "_record", "_from_structlog"):
        event_dict.pop(key, None)

    if _CONSOLE_USE_COLORS:
        reset = _CONSOLE_RESET
        color = _CONSOLE_LEVEL_COLORS.get(level_short, "")
        line = f"{_CONSOLE_FIXED}{time_str}{reset}{color}[{level_short}]{reset}[{source}] {event}"
        if event_dict:
            line += " " + " ".join(
                f"{_CONSOLE_KEY}{k}{reset}={_CONSOLE_VAL}{v}{reset}"
                for k, v in sorted(event_dict.items())
            )
    else:
        line = f"{time_str} [{level_short}][{source}] {event}"
        if event_dict:
            line += " " + " ".join(f"{k}={v}" for k, v in sorted(event_dict.items()))

    return line


def setup_logger(*, level: int | None = None) -> Any:
    """Set up a structured logger named after the calling module.

    Args:
        level: The logging level. Defaults to ``ESTPLAN_LOG_LEVEL`` or INFO.

    Returns:
        A configured structlog logger instance.
    """
    name = inspect.stack()[1].filename
    try:
        name = str(Path(name).relative_to(ESTPLAN_PROJECT_ROOT))
    except (ValueError, TypeError):
        pass

    log_file_path = _configure_structlog()

    if level is None:
        level = getattr(logging, os.getenv("ESTPLAN_LOG_LEVEL", "INFO").upper())

    stdlib_logger = logging.getLogger(name)
    if stdlib_logger.hasHandlers():
        stdlib_logger.handlers.clear()
    stdlib_logger.setLevel(level)
    stdlib_logger.propagate = False

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=_compact_console_processor)
    )
    stdlib_logger.addHandler(console_handler)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        mode="a",
        maxBytes=10 * 1024 * 1024,
        backupCount=20,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=structlog.processors.JSONRenderer())
    )
    stdlib_logger.addHandler(file_handler)

    return structlog.get_logger(name)
