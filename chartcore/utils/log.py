from __future__ import annotations
import json, logging, sys
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:  # pragma: no cover
    from chartcore.config_model.model import LoggingCfg

# LogRecord attributes that never belong in the structured payload
_RECORD_KEYS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}

class JsonFormatter(logging.Formatter):
    """One JSON object per record; request context passed via `extra=` becomes top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for k, v in record.__dict__.items():
            if k in _RECORD_KEYS or k.startswith("_") or k in payload:
                continue
            payload[k] = v
        # tuples, numpy scalars and the like fall back to str()
        return json.dumps(payload, separators=(",", ":"), default=str)

def get_logger(name: str = "chartcore", level: str = "INFO", structured_json: bool = True) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler(sys.stdout)
    if structured_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger

def logger_from_cfg(cfg: "LoggingCfg", name: str = "chartcore") -> logging.Logger:
    """get_logger driven by the [logging] config section."""
    return get_logger(name, level=cfg.level, structured_json=cfg.structured_json)
