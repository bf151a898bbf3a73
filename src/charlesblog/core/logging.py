from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

LOGGER_NAME = "charlesblog"

# Fields stamped onto every event of the current run (run_id, command).
_RUN_CONTEXT: Dict[str, Any] = {}
_HANDLERS: List[logging.Handler] = []

_SEVERITY_LEVELS = {
    "log": logging.INFO,
    "warn": logging.WARNING,
    "throw": logging.ERROR,
}


def setup_logging(
    run_id: str, log_dir: str = "logs", level: str = "INFO", **context: Any
) -> Path:
    """Console (stderr) + `run_<id>.jsonl`, which CI keeps next to the build output."""
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    log_path = Path(log_dir) / f"run_{run_id}.jsonl"

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    while _HANDLERS:
        _HANDLERS.pop().close()
    root.handlers.clear()

    formatter = logging.Formatter("%(message)s")
    for handler in (logging.StreamHandler(), logging.FileHandler(log_path, encoding="utf-8")):
        handler.setLevel(root.level)
        handler.setFormatter(formatter)
        root.addHandler(handler)
        _HANDLERS.append(handler)

    _RUN_CONTEXT.clear()
    _RUN_CONTEXT.update({"run_id": run_id, **context})
    log_event("logging_initialized", log_path=str(log_path))
    return log_path


def _ts() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def _emit(level: int, event: str, fields: Dict[str, Any]) -> None:
    payload: Dict[str, Any] = {
        "ts": _ts(),
        "level": logging.getLevelName(level),
        "event": event,
        **_RUN_CONTEXT,
        **fields,
    }
    logging.getLogger(LOGGER_NAME).log(level, json.dumps(payload, ensure_ascii=False, default=str))


def log_event(event: str, **fields: Any) -> None:
    _emit(logging.INFO, event, fields)


def log_warning(event: str, **fields: Any) -> None:
    _emit(logging.WARNING, event, fields)


def log_error(event: str, **fields: Any) -> None:
    _emit(logging.ERROR, event, fields)


def log_at_severity(severity: str, event: str, **fields: Any) -> None:
    """Log at the level matching a link-check severity (`log`, `warn`, `throw`)."""
    _emit(_SEVERITY_LEVELS.get(severity, logging.INFO), event, fields)
