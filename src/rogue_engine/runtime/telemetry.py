"""Telemetry services built on the standard ``logging`` package.

This module exposes a narrow surface area for the rest of the engine:

``configure(...)`` -- set the level, preset, and handlers for the engine logger
``get_logger(name)`` -- fetch a logger nested under the engine namespace
``record_event(name, ...)`` -- emit structured events at a chosen level
``span(name, ...)`` -- context manager that times a block and reports failures
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .settings import ENV_PREFIX, env, env_flag

DEFAULT_LOGGER_NAME = env("LOGGER", "rogue_engine") or "rogue_engine"
DEFAULT_LOG_FILE = env("LOG_FILE", "") or ""

_TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_INSTALLED_HANDLERS: List[logging.Handler] = []


class JsonFormatter(logging.Formatter):
    """One JSON object per record, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> str:
    return " ".join(f"{key}={_stringify(value)}" for key, value in data.items())


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    if level:
        name = level.upper()
        resolved = logging.getLevelName(name)
        if not isinstance(resolved, int):
            raise ValueError(f"Unsupported log level '{name}'.")
        return resolved

    # A bad environment value must not break importing the package.
    name = (env("LOG_LEVEL") or "INFO").upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        logging.getLogger(DEFAULT_LOGGER_NAME).warning(
            "Unsupported %sLOG_LEVEL '%s'; falling back to INFO.", ENV_PREFIX, name
        )
        return logging.INFO
    return resolved


def _make_formatter(json_format: bool) -> logging.Formatter:
    return JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT)


def _preset_options(preset: str) -> Dict[str, Any]:
    key = preset.lower()
    if key == "development":
        return {"level": "DEBUG", "console": True, "json_format": False, "log_file": ""}
    if key == "production":
        log_path = env("LOG_FILE", DEFAULT_LOG_FILE) or "rogue_engine.log"
        return {"level": "INFO", "console": False, "json_format": False, "log_file": log_path}
    if key in {"performance", "performance_analysis"}:
        log_path = env("LOG_FILE", DEFAULT_LOG_FILE) or "rogue_engine-performance.log"
        return {"level": "DEBUG", "console": False, "json_format": True, "log_file": log_path}
    raise ValueError(f"Unknown preset '{preset}'.")


def _default_options() -> Dict[str, Any]:
    return {
        "level": None,
        "console": not env_flag("DISABLE_CONSOLE", False),
        "json_format": env_flag("LOG_JSON", False),
        "log_file": env("LOG_FILE") or DEFAULT_LOG_FILE,
    }


def configure(
    *, level: str | int | None = None, preset: Optional[str] = None
) -> logging.Logger:
    """(Re)install handlers on the engine logger.

    Parameters
    ----------
    level:
        Explicit level name or number. Overrides the preset/environment level.
    preset:
        ``"development"``, ``"production"``, or ``"performance"``. Without a
        preset the ``ROGUE_ENGINE_*`` environment variables decide.
    """

    options = _preset_options(preset) if preset else _default_options()
    root = logging.getLogger(DEFAULT_LOGGER_NAME)
    resolved_level = _resolve_level(level if level is not None else options["level"])

    for handler in _INSTALLED_HANDLERS:
        root.removeHandler(handler)
        handler.close()
    _INSTALLED_HANDLERS.clear()

    root.setLevel(resolved_level)
    formatter = _make_formatter(options["json_format"])

    if options["console"]:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        _INSTALLED_HANDLERS.append(console)
    if options["log_file"]:
        file_handler = logging.FileHandler(options["log_file"], encoding="utf-8")
        file_handler.setFormatter(formatter)
        _INSTALLED_HANDLERS.append(file_handler)

    for handler in _INSTALLED_HANDLERS:
        root.addHandler(handler)
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger nested under the engine namespace."""

    if not name or name == DEFAULT_LOGGER_NAME:
        return logging.getLogger(DEFAULT_LOGGER_NAME)
    if name.startswith(f"{DEFAULT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{DEFAULT_LOGGER_NAME}.{name}")


def record_event(
    name: str,
    *,
    level: str | int = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit a structured ``event::<name>`` line with key/value pairs."""

    log = get_logger(logger_name)
    payload = {"event": name, **(data or {})}
    log.log(_resolve_level(level), "event::%s %s", name, _format_pairs(payload))


@dataclass
class SpanHandle:
    """Handle returned from ``span`` for optional metadata updates."""

    logger: logging.Logger
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _emit(
        self, level: int, message: str, extra: Optional[Dict[str, Any]] = None
    ) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        if extra:
            payload.update({key: _stringify(val) for key, val in extra.items()})
        self.logger.log(level, "%s %s", message, _format_pairs(payload))

    def fail(self, reason: str) -> None:
        self._emit(logging.ERROR, "span::fail", {"reason": reason})


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a code block and report exceptions raised inside it.

    Parameters
    ----------
    name:
        Operation name written with every span line.
    logger_name:
        Target logger; defaults to the engine logger.
    component:
        If ``True`` use the span name as the component; if a string, use it as
        the component identifier.
    metadata:
        Key/value pairs attached to the closing debug line.
    """

    log = get_logger(logger_name)
    component_name = None
    if component is True:
        component_name = name
    elif isinstance(component, str):
        component_name = component

    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata={key: _stringify(value) for key, value in (metadata or {}).items()},
    )
    started = time.perf_counter()
    try:
        yield handle
    except Exception as exc:
        handle.fail(str(exc))
        raise
    finally:
        if log.isEnabledFor(logging.DEBUG):
            elapsed_ms = (time.perf_counter() - started) * 1000.0
            handle._emit(logging.DEBUG, "span::end", {"elapsed_ms": f"{elapsed_ms:.3f}"})


# Initialize the engine logger once the environment has been read.
configure()
logger = get_logger()

__all__ = [
    "JsonFormatter",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
