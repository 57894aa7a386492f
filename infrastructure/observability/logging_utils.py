import logging
import re
from typing import Any

from infrastructure.observability.context import current_run_id


LOG_FORMAT = "%(asctime)s %(levelname)s [run=%(run_id)s] %(name)s - %(message)s"

# Formas em que uma credencial do GitHub pode vazar para mensagens de erro ou URLs.
_SECRET_PATTERNS = (
    (re.compile(r"(Bearer\s+)\S+", re.IGNORECASE), r"\1[REDACTED]"),
    (re.compile(r"([?&]access_token=)[^&\s\"]+", re.IGNORECASE), r"\1[REDACTED]"),
    (re.compile(r"\b(?:gh[pousr]_|github_pat_)[A-Za-z0-9_]+\b"), "[REDACTED]"),
)
_registered_secrets: set[str] = set()


def register_sensitive_values(*values: str) -> None:
    _registered_secrets.update(value for value in values if value)


def safe_message(text: str) -> str:
    for secret in _registered_secrets:
        text = text.replace(secret, "[REDACTED]")
    for pattern, replacement in _SECRET_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


class RunIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = current_run_id()
        return True


def configure_logging(level: int = logging.INFO) -> None:
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)
        root_logger.setLevel(level)

    for handler in root_logger.handlers:
        if not any(isinstance(f, RunIdFilter) for f in handler.filters):
            handler.addFilter(RunIdFilter())


def _format_field_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return safe_message(str(value)).replace('"', '\\"')


def structured_message(event: str, **fields: Any) -> str:
    parts = [f"event={event}"]
    parts.extend(
        f'{key}="{_format_field_value(value)}"'
        for key, value in fields.items()
        if value is not None
    )
    return " ".join(parts)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    logger.log(level, structured_message(event, **fields))
